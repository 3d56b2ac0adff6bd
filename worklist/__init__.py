"""Build a dated work list from a directory and inject it into HTML."""

from .models import DEFAULT_HEADING, WORK_LIST_ID, ParsedEntry
from .parser import parse_entries, parse_file_name
from .renderer import attach_work_list, render_work_list

__all__ = [
    "DEFAULT_HEADING",
    "WORK_LIST_ID",
    "ParsedEntry",
    "attach_work_list",
    "parse_entries",
    "parse_file_name",
    "render_work_list",
]
