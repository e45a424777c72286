"""Configuration and constants for the folder catalog."""

import os
from pathlib import Path

__all__ = [
    "PROJECT_ROOT",
    "CATALOG_ROOT",
    "CONFIG_FILE",
    "EXPORT_DIR",
    "IGNORE_ITEMS",
    "IMAGE_EXTENSIONS",
    "MODEL_EXTENSION",
    "PIECES_PER_BUILD_HOUR",
    "DEFAULT_TEMPLATE_ONLY_PRICE",
    "ROOT_CATEGORY",
    "CATEGORY_SEPARATOR",
]

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Folder tree that gets scanned; defaults to the project checkout itself
CATALOG_ROOT = Path(os.getenv("CATALOG_ROOT", PROJECT_ROOT))
CONFIG_FILE = Path(os.getenv("CATALOG_CONFIG", CATALOG_ROOT / "config.json"))

# Static export target (also on the ignore list below)
EXPORT_DIR = CATALOG_ROOT / "docs"

# Root-level names that are never treated as categories or products
IGNORE_ITEMS = frozenset(
    {
        ".git",
        ".github",
        ".idea",
        ".vscode",
        ".venv",
        "venv",
        "__pycache__",
        ".pytest_cache",
        "node_modules",
        "catalog",
        "scripts",
        "tests",
        "docs",
        "logs",
        "pyproject.toml",
        "config.json",
        "config.example.json",
        "index.html",
        "styles.css",
        "script.js",
        "README.md",
        "DESIGN.md",
        "LICENSE",
        ".gitignore",
    }
)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".svg", ".webp"})
MODEL_EXTENSION = ".glb"

PIECES_PER_BUILD_HOUR = 300

# Base price for the "digital template only" add-on when type 1 has none configured
DEFAULT_TEMPLATE_ONLY_PRICE = 5

ROOT_CATEGORY = "General"
CATEGORY_SEPARATOR = " / "
