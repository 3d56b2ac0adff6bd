"""Parse ``yymmdd_label`` file names into work list entries."""

from __future__ import annotations

import os
import re
from typing import Iterable, List, Optional

from .models import NAME_SEPARATOR, ParsedEntry

# Leading-integer parse: the digits may be followed by arbitrary junk.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def base_name(file_name: str) -> str:
    """Return ``file_name`` without its directory and final extension."""

    stem, _ext = os.path.splitext(os.path.basename(file_name))
    return stem


def leading_int(text: str) -> Optional[int]:
    """Return the base-10 integer prefix of ``text`` or None."""

    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_file_name(file_name: str) -> Optional[ParsedEntry]:
    """Return a ParsedEntry for ``file_name`` or None when it does not match."""

    name = base_name(file_name)
    tokens = name.split(NAME_SEPARATOR)
    if len(tokens) != 2:
        return None

    date_token, label = tokens
    sort_key = leading_int(date_token)
    if sort_key is None:
        return None

    display_name = f"[{date_token}] {label.replace('-', '', 1)}"
    return ParsedEntry(
        source_name=name,
        sort_key=sort_key,
        display_name=display_name,
    )


def parse_entries(file_names: Iterable[str]) -> List[ParsedEntry]:
    """Parse every candidate and return the matches, newest first.

    Names that do not follow the convention are dropped silently. Entries
    sharing a sort key keep the order in which ``file_names`` yielded them.
    """

    entries: List[ParsedEntry] = []
    for file_name in file_names:
        entry = parse_file_name(file_name)
        if entry is not None:
            entries.append(entry)
    return sorted(entries, key=lambda entry: entry.sort_key, reverse=True)
