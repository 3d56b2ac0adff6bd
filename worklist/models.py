"""Shared records and constants for the work list generator."""

from __future__ import annotations

from dataclasses import dataclass

WORK_LIST_ID = "work-list"
DEFAULT_HEADING = "작업 목록"
NAME_SEPARATOR = "_"


@dataclass(slots=True, frozen=True)
class ParsedEntry:
    """One ``yymmdd_label`` source file as it appears in the list."""

    source_name: str
    sort_key: int
    display_name: str
