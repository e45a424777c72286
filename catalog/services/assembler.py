from __future__ import annotations

"""Turn one product folder into catalog records."""

import logging
import re
import uuid
from pathlib import Path
from typing import Callable, List, Optional

from catalog.schemas import (
    CatalogConfig,
    CatalogRecord,
    ImageVariantGroup,
    SimpleProduct,
    VariantProduct,
)
from catalog.services import name_parser, pricing, templates
from catalog.services.filesystem import DirEntry, LocalFileSystem
from catalog.settings import IMAGE_EXTENSIONS, MODEL_EXTENSION, ROOT_CATEGORY

logger = logging.getLogger(__name__)

STANDARD_VARIANT_NAME = "Standard"
_ID_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9-]")


def _random_id() -> str:
    return uuid.uuid4().hex


class ProductAssembler:
    """Builds records for product folders found by the tree scanner.

    Type 2 folders become a single entry whose gallery holds every image.  Type 1
    and 3 folders become one entry per ``Name(price)`` subfolder, or one plain
    entry when there are none.
    """

    def __init__(
        self,
        config: CatalogConfig,
        fs: Optional[LocalFileSystem] = None,
        id_factory: Callable[[], str] = _random_id,
    ) -> None:
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.id_factory = id_factory

    def assemble(
        self, folder: Path, folder_name: str, category_path: str, relative_path: str
    ) -> List[CatalogRecord]:
        """Records for ``folder``; an unreadable folder contributes none."""

        category = category_path or ROOT_CATEGORY
        product_type = name_parser.product_type_of(folder_name)
        try:
            entries = self.fs.list_directory(folder)
        except OSError as exc:
            logger.warning("Skipping product folder %s: %s", relative_path, exc)
            return []

        if product_type.expands_images:
            return self._build_image_variant_group(folder, folder_name, category, relative_path, entries)
        return self._build_variant_or_simple(folder, folder_name, category, relative_path, entries)

    # ------------------------------------------------------------------ builders

    def _build_image_variant_group(
        self,
        folder: Path,
        folder_name: str,
        category: str,
        relative_path: str,
        entries: List[DirEntry],
    ) -> List[CatalogRecord]:
        images = self._images(entries, relative_path)
        logger.info("Type 2 product with %d image variants: %s", len(images), folder_name)
        if not images:
            return []

        info = self._product_info(folder_name, category)
        record = ImageVariantGroup(
            id=_ID_UNSAFE_RE.sub("", f"{folder_name}-0"),
            images=[images[0]],
            main_image=images[0],
            variable_name=STANDARD_VARIANT_NAME,
            parent_product=folder_name,
            all_variants=images,
            total_variants=len(images),
            glb_file=self._glb(entries, relative_path),
            **info,
        )
        return [record]

    def _build_variant_or_simple(
        self,
        folder: Path,
        folder_name: str,
        category: str,
        relative_path: str,
        entries: List[DirEntry],
    ) -> List[CatalogRecord]:
        glb_file = self._glb(entries, relative_path)
        variable_folders = [
            entry.name
            for entry in entries
            if entry.is_directory and name_parser.is_variable_folder(entry.name)
        ]

        if not variable_folders:
            images = self._images(entries, relative_path)
            return [
                SimpleProduct(
                    id=self.id_factory(),
                    images=images,
                    main_image=images[0] if images else None,
                    glb_file=glb_file,
                    **self._product_info(folder_name, category),
                )
            ]

        logger.info("Product with %d variables: %s", len(variable_folders), folder_name)
        records: List[CatalogRecord] = []
        for variable_name in variable_folders:
            variant = name_parser.parse_variable_info(variable_name)
            variant_relative = f"{relative_path}/{variable_name}"
            images = self._images(self._safe_listing(folder / variable_name), variant_relative)
            info = self._product_info(
                folder_name,
                category,
                custom_price=variant.custom_price,
                variant_name=variant.variant_name,
            )
            records.append(
                VariantProduct(
                    id=self.id_factory(),
                    images=images,
                    main_image=images[0] if images else None,
                    variable_name=variant.variant_name,
                    custom_price=variant.custom_price,
                    parent_product=folder_name,
                    glb_file=glb_file,
                    **info,
                )
            )
        return records

    # ------------------------------------------------------------------- helpers

    def _product_info(
        self,
        folder_name: str,
        category: str,
        custom_price: Optional[int] = None,
        variant_name: Optional[str] = None,
    ) -> dict:
        """Name, price and rendered texts shared by every record of a folder."""

        product_type = name_parser.product_type_of(folder_name)
        parsed = name_parser.parse_product_name(folder_name)
        type_config = self.config.type_config(product_type)

        pieces = parsed.piece_multiplier
        build_hours = pricing.compute_build_hours(pieces)
        display_name = parsed.display_name
        if variant_name:
            display_name = f"{display_name} - {variant_name}"

        return {
            "name": display_name,
            "type": product_type,
            "type_name": type_config.display_type_name,
            "category": category,
            "price": pricing.compute_price(product_type, type_config, pieces, custom_price),
            "description": templates.render(
                type_config.description_template, display_name, category, pieces, build_hours
            ),
            "specs": templates.render_all(
                type_config.spec_templates, display_name, category, pieces, build_hours
            ),
            "pieces": pieces,
            "build_hours": build_hours,
        }

    def _safe_listing(self, folder: Path) -> List[DirEntry]:
        try:
            return self.fs.list_directory(folder)
        except OSError as exc:
            logger.warning("Could not read %s, assuming no images: %s", folder, exc)
            return []

    def _images(self, entries: List[DirEntry], relative_path: str) -> List[str]:
        return [
            f"{relative_path}/{entry.name}"
            for entry in entries
            if not entry.is_directory and self.fs.extension_of(entry.name) in IMAGE_EXTENSIONS
        ]

    def _glb(self, entries: List[DirEntry], relative_path: str) -> Optional[str]:
        for entry in entries:
            if not entry.is_directory and self.fs.extension_of(entry.name) == MODEL_EXTENSION:
                return f"{relative_path}/{entry.name}"
        return None
