"""
LinkParser for Obsidian-style wiki links.

This module parses ``[[pageName#heading|alias]]`` references into their parts,
computes the label shown for a link and maps page names to file names using
a configurable slug strategy.
"""

import logging
import re
from collections.abc import Callable
from typing import Literal

from ..models import LinkReference
from .exceptions import InvalidLinkSyntaxError

SlugStrategy = Literal["passthrough", "kebab-case", "snake_case"]

_SEPARATOR_RUN = re.compile(r"[\s_-]+")


def get_link_label(raw: str) -> str:
    """
    Return the label displayed for a wiki link.

    The text after the first ``|`` wins; when it is empty the text before the
    ``|`` is used, and without a ``|`` the whole link text is the label.

    Args:
        raw: Link text between the double brackets

    Returns:
        Trimmed display label
    """
    trimmed = raw.strip()
    pipe_index = trimmed.find("|")
    if pipe_index == -1:
        return trimmed

    label = trimmed[pipe_index + 1 :].strip()
    if label:
        return label

    return trimmed[:pipe_index].strip()


def _slugify(page_name: str, separator: str) -> str:
    slug = _SEPARATOR_RUN.sub(separator, page_name.strip().lower())
    return slug.strip(separator)


SLUG_STRATEGIES: dict[str, Callable[[str], str]] = {
    "passthrough": lambda name: name.strip(),
    "kebab-case": lambda name: _slugify(name, "-"),
    "snake_case": lambda name: _slugify(name, "_"),
}


class LinkParser:
    """
    Parses wiki link syntax and converts page names into file names.

    Heading fragments are parsed but never used to pick a file.
    """

    def __init__(self, slug_strategy: SlugStrategy = "passthrough"):
        if slug_strategy not in SLUG_STRATEGIES:
            raise ValueError(f"Unknown slug strategy: {slug_strategy}")

        self.slug_strategy = slug_strategy
        self.logger = logging.getLogger(__name__)

    def parse(self, raw: str) -> LinkReference:
        """
        Parse a wiki link into page name, heading fragment and alias.

        Args:
            raw: Link text, with or without the surrounding ``[[`` ``]]``

        Returns:
            LinkReference with a computed display label

        Raises:
            InvalidLinkSyntaxError: If the page name is empty
        """
        text = raw.strip()
        if text.startswith("[[") and text.endswith("]]"):
            text = text[2:-2].strip()

        target, pipe, alias = text.partition("|")
        page_name, hash_sign, heading = target.partition("#")
        page_name = page_name.strip()

        if not page_name:
            raise InvalidLinkSyntaxError(f"Link has no page name: {raw!r}")

        return LinkReference(
            raw_text=text,
            page_name=page_name,
            alias=(alias.strip() or None) if pipe else None,
            heading_fragment=(heading.strip() or None) if hash_sign else None,
            display_label=get_link_label(text),
        )

    def transform_file_name(self, page_name: str) -> str:
        """Apply the configured slug strategy to a page name."""
        file_name = SLUG_STRATEGIES[self.slug_strategy](page_name)
        self.logger.debug(
            f"Transformed page name {page_name!r} to {file_name!r} "
            f"({self.slug_strategy})"
        )
        return file_name
