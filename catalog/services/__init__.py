"""Service layer exports."""

from .assembler import ProductAssembler
from .config_loader import load_config
from .filesystem import LocalFileSystem
from .pipeline import CatalogPipeline
from .scanner import TreeScanner

__all__ = [
    "CatalogPipeline",
    "LocalFileSystem",
    "ProductAssembler",
    "TreeScanner",
    "load_config",
]
