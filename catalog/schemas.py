from __future__ import annotations

"""Shared pydantic schemas for the folder catalog service."""

import copy
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class ProductType(str, Enum):
    """Leading digit of a product folder name."""

    KIT = "1"
    IMAGE_VARIANTS = "2"
    STANDARD = "3"

    @property
    def rounds_to_90(self) -> bool:
        return self is ProductType.KIT

    @property
    def expands_images(self) -> bool:
        return self is ProductType.IMAGE_VARIANTS


class TypeConfig(BaseModel):
    """Pricing and text templates for one product type, as stored in config.json."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    display_type_name: str = Field("Producto", alias="nombre")
    description_template: str = Field("{{name}}", alias="descripcion")
    unit_price: Union[int, float] = Field(0, alias="precio")
    spec_templates: List[str] = Field(default_factory=list, alias="specs")
    template_only_price: Optional[Union[int, float]] = Field(default=None, alias="precioPlantillaDigital")

    @field_validator(
        "display_type_name", "description_template", "unit_price", "spec_templates", mode="before"
    )
    @classmethod
    def _null_means_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ContactConfig(BaseModel):
    """Checkout contact channel. Only echoed back to consumers."""

    model_config = ConfigDict(extra="allow")

    numero: Optional[Union[int, str]] = None


class CatalogConfig(BaseModel):
    """Type-configuration table plus the contact setting."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    types: Dict[str, TypeConfig] = Field(default_factory=dict, alias="tipos")
    whatsapp: Optional[ContactConfig] = None

    _source: Optional[dict] = PrivateAttr(default=None)

    def type_config(self, product_type: ProductType) -> TypeConfig:
        """Configured entry for ``product_type`` or the documented defaults."""

        configured = self.types.get(product_type.value)
        return configured if configured is not None else TypeConfig()

    def keep_source(self, document: dict) -> "CatalogConfig":
        """Remember the decoded file so consumers get it back verbatim."""

        self._source = copy.deepcopy(document)
        return self

    def to_payload(self) -> dict:
        if self._source is not None:
            return copy.deepcopy(self._source)
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ParsedFolderName(BaseModel):
    display_name: str
    piece_multiplier: int = Field(1, ge=1)


class VariantInfo(BaseModel):
    variant_name: str
    custom_price: Optional[int] = None


class ProductRecord(BaseModel):
    """Fields shared by every record handed to the API and the exporter."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    type: ProductType
    type_name: str
    category: str
    price: Union[int, float]
    description: str
    specs: List[str] = Field(default_factory=list)
    pieces: int = Field(..., ge=1)
    build_hours: int = Field(..., ge=0)
    images: List[str] = Field(default_factory=list)
    main_image: Optional[str] = None
    is_variable: bool = False
    variable_name: Optional[str] = None
    custom_price: Optional[int] = None
    glb_file: Optional[str] = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SimpleProduct(ProductRecord):
    """A product folder without variant subfolders."""


class VariantProduct(ProductRecord):
    """One priced variant subfolder, e.g. ``Rojo(15)`` inside a product folder."""

    is_variable: bool = True
    parent_product: str


class ImageVariantGroup(ProductRecord):
    """Type 2 product: the first image is the listed entry, the rest form a gallery."""

    is_variable: bool = True
    parent_product: str
    all_variants: List[str] = Field(default_factory=list)
    total_variants: int = 0


CatalogRecord = Union[SimpleProduct, VariantProduct, ImageVariantGroup]
