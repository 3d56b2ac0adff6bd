"""Render parsed entries into the work list container of an HTML tree."""

from __future__ import annotations

from typing import Any, Sequence

try:
    from bs4 import BeautifulSoup, Tag  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4"
    ) from exc

from .models import DEFAULT_HEADING, WORK_LIST_ID, ParsedEntry


def render_work_list(
    soup: BeautifulSoup,
    entries: Sequence[ParsedEntry],
    *,
    container_id: str = WORK_LIST_ID,
    heading: str = DEFAULT_HEADING,
) -> Tag:
    """Rebuild the container for ``entries`` and return it.

    An existing element with ``container_id`` is reused and emptied; otherwise
    a detached ``div`` is created. Attaching a new container is left to
    :func:`attach_work_list`.
    """

    container: Any = soup.find(id=container_id)
    if container is None:
        container = soup.new_tag("div", attrs={"id": container_id})
    container.clear()

    header = soup.new_tag("h2")
    header.string = heading
    container.append(header)

    listing = soup.new_tag("ul")
    container.append(listing)

    for entry in entries:
        item = soup.new_tag("li")
        link = soup.new_tag("a", attrs={"href": entry.source_name})
        link.string = entry.display_name
        item.append(link)
        listing.append(item)

    return container


def attach_work_list(
    soup: BeautifulSoup,
    container: Tag,
    *,
    container_id: str = WORK_LIST_ID,
) -> None:
    """Put ``container`` where the previous list was, or at the end of body."""

    previous: Any = soup.find(id=container_id)
    if previous is container:
        return
    if previous is not None:
        previous.replace_with(container)
        return

    body: Any = soup.body
    if body is None:
        body = soup.new_tag("body")
        parent: Any = soup.html or soup
        parent.append(body)
    body.append(container)
