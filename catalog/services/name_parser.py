from __future__ import annotations

"""Interpretation of the folder naming convention.

A product folder starts with its type digit, optionally followed by a hyphen,
and may end with a ``(N)`` piece multiplier: ``2-Red-Mug(12)``.  Inside a
product folder, ``Azul-Cielo(20)`` declares a variant priced at 20.
"""

import re
from enum import Enum
from typing import AbstractSet

from catalog.schemas import ParsedFolderName, ProductType, VariantInfo


class EntryKind(str, Enum):
    CATEGORY = "category"
    PRODUCT = "product"
    VARIABLE = "variable"
    IGNORED = "ignored"


TYPE_DIGITS = tuple(member.value for member in ProductType)

TYPE_PREFIX_RE = re.compile(r"^[123]-?")
MULTIPLIER_RE = re.compile(r"\(([0-9]+)\)\Z")
VARIABLE_RE = re.compile(r"^(.+)\(([0-9]+)\)\Z")
SEPARATOR = "-"


def is_product_folder(name: str) -> bool:
    return name[:1] in TYPE_DIGITS if name else False


def is_variable_folder(name: str) -> bool:
    return not is_product_folder(name) and MULTIPLIER_RE.search(name) is not None


def classify_entry(name: str, ignore: AbstractSet[str] = frozenset()) -> EntryKind:
    """Classify a directory name.

    ``ignore`` is only meaningful at the scan root; nested callers leave it empty.
    """
    if is_product_folder(name):
        return EntryKind.PRODUCT
    if is_variable_folder(name):
        return EntryKind.VARIABLE
    if name in ignore:
        return EntryKind.IGNORED
    return EntryKind.CATEGORY


def product_type_of(folder_name: str) -> ProductType:
    if is_product_folder(folder_name):
        return ProductType(folder_name[0])
    return ProductType.KIT


def _parse_int(digits: str, fallback: int) -> int:
    try:
        return int(digits) or fallback
    except ValueError:
        return fallback


def parse_product_name(folder_name: str) -> ParsedFolderName:
    name = TYPE_PREFIX_RE.sub("", folder_name, count=1)
    multiplier = 1

    match = MULTIPLIER_RE.search(name)
    if match:
        multiplier = _parse_int(match.group(1), 1)
        name = name[: match.start()].strip()

    return ParsedFolderName(
        display_name=name.replace(SEPARATOR, " "),
        piece_multiplier=multiplier,
    )


def parse_variable_info(folder_name: str) -> VariantInfo:
    match = VARIABLE_RE.match(folder_name)
    if not match:
        return VariantInfo(variant_name=folder_name.replace(SEPARATOR, " ").strip())

    try:
        custom_price = int(match.group(2))
    except ValueError:
        custom_price = 0
    return VariantInfo(
        variant_name=match.group(1).replace(SEPARATOR, " ").strip(),
        custom_price=custom_price,
    )
