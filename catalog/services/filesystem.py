from __future__ import annotations

"""Directory access used by the scanner and the product assembler."""

from pathlib import Path
from typing import List, NamedTuple


class DirEntry(NamedTuple):
    name: str
    is_directory: bool


class LocalFileSystem:
    """Read-only view of the local disk.

    Listings are sorted by name so the first image of a folder and the order of
    categories do not depend on the platform.
    """

    def list_directory(self, path: str | Path) -> List[DirEntry]:
        entries = [DirEntry(child.name, child.is_dir()) for child in Path(path).iterdir()]
        return sorted(entries, key=lambda entry: entry.name)

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    @staticmethod
    def extension_of(name: str) -> str:
        return Path(name).suffix.lower()
