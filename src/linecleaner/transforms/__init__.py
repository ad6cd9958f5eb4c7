"""Built-in cleaning transforms: auto-registered on import."""

from linecleaner.transforms.comment_cleaning import clean_comments
from linecleaner.transforms.empty_lines import limit_empty_lines
from linecleaner.transforms.line_filters import (
    remove_empty_list_items,
    remove_finished_tasks,
    remove_marked_lines,
)
from linecleaner.transforms.link_cleaning import clean_links, convert_links
from linecleaner.transforms.range_removal import remove_ranges

__all__ = [
    "remove_ranges",
    "clean_comments",
    "clean_links",
    "convert_links",
    "remove_marked_lines",
    "remove_empty_list_items",
    "remove_finished_tasks",
    "limit_empty_lines",
]
