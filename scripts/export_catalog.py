from __future__ import annotations

"""CLI entry point for exporting the catalog as static JSON files."""

import argparse
import logging
import sys
from pathlib import Path

from catalog.logging_config import setup_logging
from catalog.services import CatalogPipeline, load_config
from catalog.services.pipeline import log_summary
from catalog.settings import CATALOG_ROOT, CONFIG_FILE, EXPORT_DIR

logger = logging.getLogger("catalog.export")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export products.json and config.json.")
    parser.add_argument(
        "--root",
        type=Path,
        default=CATALOG_ROOT,
        help="Folder tree to scan (defaults to CATALOG_ROOT).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Type configuration file (defaults to <root>/config.json).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination directory (defaults to <root>/docs).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every visited folder.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config_path = args.config or (args.root / "config.json" if args.root != CATALOG_ROOT else CONFIG_FILE)
    output_dir = args.output or (args.root / "docs" if args.root != CATALOG_ROOT else EXPORT_DIR)

    pipeline = CatalogPipeline(args.root, load_config(config_path))
    try:
        records = pipeline.export(output_dir)
    except OSError as exc:
        logger.error("Export failed: %s", exc)
        return 1

    log_summary(records)
    logger.info("Exported %d products to %s", len(records), output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
