"""
Grouping of open tasks across files by their literal text.
"""

from collections.abc import Iterable

from ..models import SourceFile, TaskGroup
from .task_extractor import extract_tasks


def collect_open_tasks_from_files(files: Iterable[SourceFile]) -> list[TaskGroup]:
    """
    Collect open tasks from several files and group them by exact text.

    Groups come out in the order their text was first seen. Each group lists
    the distinct file ids it occurs in and every single occurrence, in file
    order then line order.

    Args:
        files: Files with an identifier and their content

    Returns:
        List of TaskGroup objects
    """
    groups: dict[str, TaskGroup] = {}

    for source in files:
        for task in extract_tasks(source.content, source.id, source.location):
            group = groups.get(task.text)
            if group is None:
                group = groups[task.text] = TaskGroup(text=task.text)

            if source.id not in group.files:
                group.files.append(source.id)
            group.items.append(task)

    return list(groups.values())
