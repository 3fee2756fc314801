"""
MarkdownRenderer for note previews with wiki link support.

This module renders Markdown to HTML using marko. ``[[Page]]`` and
``[[Page|Alias]]`` links are recognized by an inline extension and rendered
as anchors carrying the raw link text, so a preview panel can follow them.
"""

import html
import re

from marko import Markdown, inline
from marko.helpers import MarkoExtension
from marko.html_renderer import HTMLRenderer

from .link_parser import get_link_label

WIKI_LINK_CLASS = "mdlg-wikilink"
WIKI_LINK_ATTRIBUTE = "data-mdlg-wikilink"


class WikiLink(inline.InlineElement):
    """Inline ``[[raw]]`` element; blank link text is not a wiki link."""

    pattern = re.compile(r"\[\[(?!\s*\]\])(.+?)\]\]")
    parse_children = False
    priority = 7

    def __init__(self, match: re.Match):
        self.raw = match.group(1).strip()
        self.label = get_link_label(self.raw)


class WikiLinkRendererMixin:
    def render_wiki_link(self, element: WikiLink) -> str:
        return (
            f'<a href="#" class="{WIKI_LINK_CLASS}" '
            f'{WIKI_LINK_ATTRIBUTE}="{html.escape(element.raw, quote=True)}">'
            f"{html.escape(element.label, quote=False)}</a>"
        )


WIKI_LINK_EXTENSION = MarkoExtension(
    elements=[WikiLink], renderer_mixins=[WikiLinkRendererMixin]
)


class EscapingHTMLRenderer(HTMLRenderer):
    """HTML renderer that shows raw HTML in notes as text instead of markup."""

    def render_html_block(self, element) -> str:
        return html.escape(element.body)

    def render_inline_html(self, element) -> str:
        return html.escape(element.children)


class MarkdownRenderer:
    """Renders note Markdown to HTML for previews."""

    def __init__(self):
        self.markdown = Markdown(
            renderer=EscapingHTMLRenderer, extensions=[WIKI_LINK_EXTENSION]
        )

    def render(self, markdown: str | None) -> str:
        return self.markdown.convert(markdown or "")
