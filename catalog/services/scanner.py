from __future__ import annotations

"""Recursive walk over the catalog folder tree."""

import logging
from pathlib import Path
from typing import AbstractSet, List, Optional

from catalog.schemas import CatalogConfig, CatalogRecord
from catalog.services import name_parser
from catalog.services.assembler import ProductAssembler
from catalog.services.filesystem import LocalFileSystem
from catalog.services.name_parser import EntryKind
from catalog.settings import CATEGORY_SEPARATOR, IGNORE_ITEMS

logger = logging.getLogger(__name__)


class TreeScanner:
    """Walks a folder tree and collects the records of every product folder.

    Folder names drive everything: product folders are handed to the
    ``ProductAssembler``, any other folder adds a segment to the category path.
    The ignore list only applies to the root level.
    """

    def __init__(
        self,
        config: CatalogConfig,
        fs: Optional[LocalFileSystem] = None,
        assembler: Optional[ProductAssembler] = None,
        ignore: AbstractSet[str] = IGNORE_ITEMS,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.assembler = assembler or ProductAssembler(config, fs=self.fs)
        self.ignore = frozenset(ignore)

    def scan(self, root: str | Path) -> List[CatalogRecord]:
        """Scan ``root``; a missing root yields an empty catalog."""

        root = Path(root)
        if not self.fs.exists(root):
            logger.warning("Catalog root not found: %s", root)
            return []

        logger.info("Scanning catalog root %s", root)
        records: List[CatalogRecord] = []
        for entry in self.fs.list_directory(root):
            if not entry.is_directory:
                continue

            kind = name_parser.classify_entry(entry.name, self.ignore)
            if kind is EntryKind.IGNORED:
                logger.debug("Ignoring %s", entry.name)
                continue

            records.extend(self._visit(root / entry.name, entry.name, "", entry.name, kind))

        logger.info("Found %d products", len(records))
        return _unique_ids(records)

    def _visit(
        self,
        path: Path,
        name: str,
        category_path: str,
        relative_path: str,
        kind: EntryKind,
    ) -> List[CatalogRecord]:
        if kind is EntryKind.PRODUCT:
            return self.assembler.assemble(path, name, category_path, relative_path)

        child_category = f"{category_path}{CATEGORY_SEPARATOR}{name}" if category_path else name
        logger.debug("Processing category: %s", child_category)
        return self._scan_directory(path, child_category, relative_path)

    def _scan_directory(
        self, path: Path, category_path: str, relative_path: str
    ) -> List[CatalogRecord]:
        try:
            entries = self.fs.list_directory(path)
        except OSError as exc:
            logger.warning("Skipping unreadable folder %s: %s", relative_path, exc)
            return []

        records: List[CatalogRecord] = []
        for entry in entries:
            if not entry.is_directory:
                continue
            kind = name_parser.classify_entry(entry.name)
            records.extend(
                self._visit(
                    path / entry.name,
                    entry.name,
                    category_path,
                    f"{relative_path}/{entry.name}",
                    kind,
                )
            )
        return records


def _unique_ids(records: List[CatalogRecord]) -> List[CatalogRecord]:
    """Suffix repeated ids with ``-2``, ``-3`` ... in scan order."""

    seen: set[str] = set()
    unique: List[CatalogRecord] = []
    for record in records:
        candidate = record.id
        suffix = 2
        while candidate in seen:
            candidate = f"{record.id}-{suffix}"
            suffix += 1
        if candidate != record.id:
            logger.debug("Duplicate id %s renamed to %s", record.id, candidate)
            record = record.model_copy(update={"id": candidate})
        seen.add(candidate)
        unique.append(record)
    return unique
