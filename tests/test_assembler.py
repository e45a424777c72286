from __future__ import annotations

from itertools import count

from catalog.schemas import (
    CatalogConfig,
    ImageVariantGroup,
    ProductType,
    SimpleProduct,
    VariantProduct,
)
from catalog.services.assembler import ProductAssembler
from catalog.services.filesystem import LocalFileSystem


def _sequential_ids():
    counter = count(1)
    return lambda: f"id-{next(counter)}"


def test_image_variant_product_yields_single_record(build_tree, sample_config) -> None:
    root = build_tree({"2-Mug": {"a.jpg": "", "b.jpg": "", "c.jpg": "", "notes.txt": ""}})
    assembler = ProductAssembler(sample_config)

    records = assembler.assemble(root / "2-Mug", "2-Mug", "", "2-Mug")

    assert len(records) == 1
    record = records[0]
    assert isinstance(record, ImageVariantGroup)
    assert record.id == "2-Mug-0"
    assert record.name == "Mug"
    assert record.type is ProductType.IMAGE_VARIANTS
    assert record.category == "General"
    assert record.main_image == "2-Mug/a.jpg"
    assert record.images == ["2-Mug/a.jpg"]
    assert record.all_variants == ["2-Mug/a.jpg", "2-Mug/b.jpg", "2-Mug/c.jpg"]
    assert record.total_variants == 3
    assert record.variable_name == "Standard"
    assert record.is_variable is True
    assert record.parent_product == "2-Mug"
    assert record.price == 2500
    assert record.description == "Mug figure"
    assert record.specs == ["Category: General"]


def test_image_variant_product_without_images_is_skipped(build_tree, sample_config) -> None:
    root = build_tree({"2-Mug": {"Rojo(10)": {"a.jpg": ""}, "readme.txt": ""}})

    assert ProductAssembler(sample_config).assemble(root / "2-Mug", "2-Mug", "", "2-Mug") == []


def test_image_variant_id_strips_unsafe_characters(build_tree, sample_config) -> None:
    root = build_tree({"2-Mug Grande(3)": {"a.png": ""}})

    (record,) = ProductAssembler(sample_config).assemble(
        root / "2-Mug Grande(3)", "2-Mug Grande(3)", "Cups", "Cups/2-Mug Grande(3)"
    )

    assert record.id == "2-MugGrande3-0"
    assert record.pieces == 3
    assert record.price == 7500
    assert record.category == "Cups"
    assert record.main_image == "Cups/2-Mug Grande(3)/a.png"


def test_variable_subfolders_expand_into_records(build_tree, sample_config) -> None:
    root = build_tree(
        {
            "1-Shirt": {
                "cover.jpg": "",
                "Red(15)": {"red.jpg": ""},
                "Blue(20)": {"blue-1.png": "", "blue-2.png": ""},
                "extras": {"x.jpg": ""},
            }
        }
    )
    assembler = ProductAssembler(sample_config, id_factory=_sequential_ids())

    records = assembler.assemble(root / "1-Shirt", "1-Shirt", "", "1-Shirt")

    assert [type(record) for record in records] == [VariantProduct, VariantProduct]
    blue, red = records
    assert (blue.name, red.name) == ("Shirt - Blue", "Shirt - Red")
    assert (blue.custom_price, red.custom_price) == (20, 15)
    assert (blue.price, red.price) == (90, 90)
    assert blue.variable_name == "Blue"
    assert blue.parent_product == "1-Shirt"
    assert blue.images == ["1-Shirt/Blue(20)/blue-1.png", "1-Shirt/Blue(20)/blue-2.png"]
    assert blue.main_image == "1-Shirt/Blue(20)/blue-1.png"
    assert red.description == "Shirt - Red in General has 1 pieces"
    assert (blue.id, red.id) == ("id-1", "id-2")


def test_variant_without_images_has_no_main_image(build_tree, sample_config) -> None:
    root = build_tree({"3-Stand": {"Negro(700)": {}}})

    (record,) = ProductAssembler(sample_config).assemble(root / "3-Stand", "3-Stand", "", "3-Stand")

    assert record.images == []
    assert record.main_image is None
    assert record.price == 700


def test_plain_product_yields_simple_record(build_tree, sample_config) -> None:
    root = build_tree({"1-Castle(450)": {"front.jpg": "", "back.webp": "", "model.glb": ""}})

    (record,) = ProductAssembler(sample_config).assemble(
        root / "1-Castle(450)", "1-Castle(450)", "Sets / Medieval", "Sets/Medieval/1-Castle(450)"
    )

    assert isinstance(record, SimpleProduct)
    assert record.name == "Castle"
    assert record.pieces == 450
    assert record.build_hours == 2
    assert record.price == 4590
    assert record.is_variable is False
    assert record.variable_name is None
    assert record.custom_price is None
    assert record.images == ["Sets/Medieval/1-Castle(450)/back.webp", "Sets/Medieval/1-Castle(450)/front.jpg"]
    assert record.glb_file == "Sets/Medieval/1-Castle(450)/model.glb"
    assert record.description == "Castle in Sets / Medieval has 450 pieces"
    assert record.specs == ["Pieces: 450", "Hours: 2"]


def test_missing_type_config_uses_defaults(build_tree) -> None:
    root = build_tree({"3-Stand": {}})

    (record,) = ProductAssembler(CatalogConfig(types={})).assemble(root / "3-Stand", "3-Stand", "", "3-Stand")

    assert record.type_name == "Producto"
    assert record.description == "Stand"
    assert record.price == 0
    assert record.specs == []


def test_vanished_folder_contributes_nothing(tmp_path, sample_config) -> None:
    assembler = ProductAssembler(sample_config)

    assert assembler.assemble(tmp_path / "1-Gone", "1-Gone", "", "1-Gone") == []


def test_record_payload_uses_camel_case(build_tree, sample_config) -> None:
    root = build_tree({"2-Mug": {"a.jpg": ""}})

    (record,) = ProductAssembler(sample_config).assemble(root / "2-Mug", "2-Mug", "", "2-Mug")
    payload = record.to_payload()

    assert payload["type"] == "2"
    assert payload["typeName"] == "Figure"
    assert payload["mainImage"] == "2-Mug/a.jpg"
    assert payload["allVariants"] == ["2-Mug/a.jpg"]
    assert payload["totalVariants"] == 1
    assert payload["buildHours"] == 0
    assert payload["parentProduct"] == "2-Mug"
    assert "parent_product" not in payload


class _LockedVariantFileSystem(LocalFileSystem):
    def list_directory(self, path):
        if path.name == "Red(15)":
            raise PermissionError(f"permission denied: {path}")
        return super().list_directory(path)


def test_unreadable_variant_folder_has_no_images(build_tree, sample_config) -> None:
    root = build_tree({"1-Shirt": {"Red(15)": {"r.jpg": ""}}})
    assembler = ProductAssembler(sample_config, fs=_LockedVariantFileSystem())

    (record,) = assembler.assemble(root / "1-Shirt", "1-Shirt", "", "1-Shirt")

    assert isinstance(record, VariantProduct)
    assert record.variable_name == "Red"
    assert record.images == []
    assert record.main_image is None
    assert record.price == 90
