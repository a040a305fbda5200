"""Locating replay files on disk and printing JSON records."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)

REPLAY_EXTENSION = "SC2Replay"


def get_matching_files(source: str | Path, max_files: int, max_depth: int) -> list[Path]:
    """List the replay files under ``source``.

    A path that is not a directory is returned as the only entry.  Directories
    are walked down to ``max_depth`` levels, collecting at most ``max_files``
    files with the ``.SC2Replay`` extension.
    """
    source = Path(source)
    if max_depth == 0:
        log.info("Reached max depth")
        return []
    if not source.is_dir():
        return [source]
    sources: list[Path] = []
    for path in sorted(source.iterdir()):
        if path.is_dir():
            sub_dir = get_matching_files(path, max_files, max_depth - 1)
            remaining = max_files - len(sources)
            sources.extend(sub_dir[:remaining])
        elif path.suffix == f".{REPLAY_EXTENSION}" and path.is_file():
            if len(sources) >= max_files:
                break
            sources.append(path)
    return sources


def json_line(json_str: str) -> str:
    """Format one JSON record as an element of a printed JSON list."""
    return f"{json_str},"