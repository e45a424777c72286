"""Folder catalog FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from catalog.logging_config import setup_logging
from catalog.schemas import CatalogConfig
from catalog.services import CatalogPipeline, load_config
from catalog.settings import CATALOG_ROOT, CONFIG_FILE

logger = logging.getLogger(__name__)


app = FastAPI(
    title="folder-catalog",
    description=(
        "Product catalog generated from a folder tree whose names encode type,"
        " piece count, price overrides and variants."
    ),
    version="0.1.0",
)


def get_config() -> CatalogConfig:
    return load_config(CONFIG_FILE)


def get_pipeline() -> CatalogPipeline:
    return CatalogPipeline(CATALOG_ROOT, get_config())


@app.on_event("startup")
def initialize_catalog() -> None:  # pragma: no cover - integration side effect
    setup_logging()
    if not CATALOG_ROOT.exists():
        logger.warning("catalog root missing: %s", CATALOG_ROOT)


def _scan(builder):
    try:
        return builder()
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Catalog scan failed: {exc}") from exc


@app.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/products")
def list_products() -> JSONResponse:
    payload = _scan(lambda: get_pipeline().products_payload())
    return JSONResponse(payload)


@app.get("/api/categories")
def list_categories() -> JSONResponse:
    return JSONResponse(_scan(lambda: get_pipeline().categories()))


@app.get("/api/config")
def read_config() -> JSONResponse:
    return JSONResponse(get_config().to_payload())
