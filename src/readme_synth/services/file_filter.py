"""File admission: decide which tree entries are worth downloading."""

from __future__ import annotations

from typing import Iterable

from readme_synth.domain.entities import TreeEntry

MAX_FILE_BYTES = 100_000
MAX_FILES = 50


def is_admissible(entry: TreeEntry, max_file_bytes: int = MAX_FILE_BYTES) -> bool:
    """Return *True* for blobs whose declared size is unknown or within the limit."""
    if entry.type != "blob":
        return False
    return not entry.size or entry.size <= max_file_bytes


def admit_entries(
    entries: Iterable[TreeEntry],
    max_file_bytes: int = MAX_FILE_BYTES,
    max_files: int = MAX_FILES,
) -> list[TreeEntry]:
    """Return the first *max_files* admissible entries, in host order."""
    admitted: list[TreeEntry] = []
    for entry in entries:
        if len(admitted) >= max_files:
            break
        if is_admissible(entry, max_file_bytes):
            admitted.append(entry)
    return admitted
