"""Read, list and write the files the work list generator touches."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, List

try:
    from bs4 import BeautifulSoup  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4"
    ) from exc

HTML_PARSER = "lxml"


def list_candidates(source_dir: Path | str) -> List[str]:
    """Return every entry name inside ``source_dir`` in name order."""

    return sorted(os.listdir(source_dir))


def load_document(path: Path | str) -> BeautifulSoup:
    """Parse the HTML file at ``path`` into a mutable tree."""

    raw = Path(path).read_bytes()
    text = raw.decode("utf-8", errors="replace")
    return BeautifulSoup(text, HTML_PARSER)


def serialize_body(soup: BeautifulSoup) -> str:
    """Return the inner markup of ``<body>``; head and html wrapper are dropped."""

    body: Any = soup.body
    if body is None:
        return ""
    return str(body.decode_contents())


def write_document(path: Path | str, soup: BeautifulSoup) -> str:
    """Overwrite ``path`` with the serialized body and return the payload."""

    payload = serialize_body(soup)
    Path(path).write_text(payload, encoding="utf-8")
    return payload
