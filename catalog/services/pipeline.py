from __future__ import annotations

"""Pipeline helpers for producing the catalog and its static JSON export."""

import json
import logging
from collections import OrderedDict
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from catalog.schemas import CatalogConfig, CatalogRecord
from catalog.services.scanner import TreeScanner

logger = logging.getLogger(__name__)

PRODUCTS_FILE = "products.json"
CONFIG_FILE = "config.json"


def distinct_categories(records: Iterable[CatalogRecord]) -> List[str]:
    return list(OrderedDict.fromkeys(record.category for record in records))


def group_by_category(records: Iterable[CatalogRecord]) -> Dict[str, List[CatalogRecord]]:
    grouped: Dict[str, List[CatalogRecord]] = {}
    for record in records:
        grouped.setdefault(record.category, []).append(record)
    return grouped


class CatalogPipeline:
    """Glue object that scans a catalog root and serializes the result."""

    def __init__(
        self,
        root: str | Path,
        config: CatalogConfig,
        scanner: Optional[TreeScanner] = None,
    ) -> None:
        self.root = Path(root)
        self.config = config
        self.scanner = scanner or TreeScanner(config)

    def products(self) -> List[CatalogRecord]:
        return self.scanner.scan(self.root)

    def products_payload(self) -> List[dict]:
        return [record.to_payload() for record in self.products()]

    def categories(self) -> List[str]:
        return distinct_categories(self.products())

    def export(self, output_dir: str | Path) -> List[CatalogRecord]:
        """Write products.json and config.json into ``output_dir``."""

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        records = self.products()
        self._write_json(output_dir / PRODUCTS_FILE, [record.to_payload() for record in records])
        self._write_json(output_dir / CONFIG_FILE, self.config.to_payload())
        logger.info("Wrote %d products to %s", len(records), output_dir / PRODUCTS_FILE)
        return records

    @staticmethod
    def _write_json(path: Path, payload: object) -> None:
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def log_summary(records: List[CatalogRecord]) -> None:
    """Log the products grouped by category, one line per record."""

    if not records:
        logger.info("No products found.")
        return

    for category, items in sorted(group_by_category(records).items()):
        logger.info("%s:", category)
        for record in items:
            variant = f" [{record.variable_name}]" if record.is_variable else ""
            logger.info(
                "  - %s: $%s (%d pieces, %dh)%s",
                record.name,
                record.price,
                record.pieces,
                record.build_hours,
                variant,
            )
