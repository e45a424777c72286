"""Shared fixtures for building catalog folder trees on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from catalog.schemas import CatalogConfig, TypeConfig


def make_tree(root: Path, layout: dict) -> Path:
    """Create ``layout`` under ``root``.

    Dict values are subfolders; any other value marks an empty file.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        target = root / name
        if isinstance(content, dict):
            make_tree(target, content)
        else:
            target.write_bytes(b"")
    return root


@pytest.fixture
def build_tree(tmp_path):
    def _build(layout: dict) -> Path:
        return make_tree(tmp_path / "catalog", layout)

    return _build


@pytest.fixture
def sample_config() -> CatalogConfig:
    return CatalogConfig(
        types={
            "1": TypeConfig(
                nombre="Kit",
                descripcion="{{name}} in {{category}} has {{pcs}} pieces",
                precio=10,
                specs=["Pieces: {{pcs}}", "Hours: {{hours}}"],
                precioPlantillaDigital=5,
            ),
            "2": TypeConfig(
                nombre="Figure",
                descripcion="{{name}} figure",
                precio=2500,
                specs=["Category: {{category}}"],
            ),
            "3": TypeConfig(nombre="Accessory", descripcion="{{name}}", precio=700),
        }
    )
