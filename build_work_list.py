"""Inject a dated work list built from a directory into an HTML file."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from config_loader import ConfigError, resolve_runtime_paths
from worklist.document import list_candidates, load_document, write_document
from worklist.models import DEFAULT_HEADING, WORK_LIST_ID
from worklist.parser import parse_entries
from worklist.renderer import attach_work_list, render_work_list


@dataclass(slots=True)
class BuildSummary:
    """Counts and destination for a single generator run."""

    source_count: int
    entry_count: int
    dest_html: Path


def build_work_list(
    source_dir: Path | str,
    dest_html: Path | str,
    *,
    container_id: str = WORK_LIST_ID,
    heading: str = DEFAULT_HEADING,
) -> BuildSummary:
    """Rebuild the work list inside ``dest_html`` from ``source_dir``."""

    dest_path = Path(dest_html)
    print("Starting work list generation.")

    candidates = list_candidates(source_dir)
    print(f" - [1/4] Read source directory: {len(candidates)} entries found")

    entries = parse_entries(candidates)
    print(
        f" - [2/4] Parsed work items: {len(entries)} of"
        f" {len(candidates)} processed"
    )

    soup = load_document(dest_path)
    container = render_work_list(
        soup,
        entries,
        container_id=container_id,
        heading=heading,
    )
    print(" - [3/4] Rendered work list: done")

    attach_work_list(soup, container, container_id=container_id)
    write_document(dest_path, soup)
    print(f" - [4/4] Wrote HTML file: {dest_path}")

    print(" - [!] All steps completed.")
    return BuildSummary(
        source_count=len(candidates),
        entry_count=len(entries),
        dest_html=dest_path,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Return CLI arguments for the work list generator."""

    parser = argparse.ArgumentParser(
        description=(
            "Scan a directory of yymmdd_label files and write a linked list"
            " of them into an HTML file."
        ),
    )
    parser.add_argument(
        "source_dir",
        nargs="?",
        help="Directory whose entries become list items.",
    )
    parser.add_argument(
        "dest_html",
        nargs="?",
        help="Existing HTML file to rewrite in place.",
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    parser.add_argument(
        "--container-id",
        help=f"Id of the element holding the list (default {WORK_LIST_ID}).",
    )
    parser.add_argument("--heading", help="Override the list heading text.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the ``build-work-list`` CLI."""

    args = parse_args(argv)
    try:
        runtime = resolve_runtime_paths(
            config_path=args.config,
            source_dir=args.source_dir,
            dest_html=args.dest_html,
            container_id=args.container_id,
            heading=args.heading,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    build_work_list(
        runtime["source_dir"],
        runtime["dest_html"],
        container_id=runtime["container_id"],
        heading=runtime["heading"],
    )


if __name__ == "__main__":
    main()
