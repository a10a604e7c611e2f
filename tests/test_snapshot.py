"""Order snapshot helpers"""

import pytest

from seller_portal.models import Product, ProductColor
from seller_portal.services.snapshot import freeze_delivery_address, freeze_order_item

ADDRESS = {
    "id": "addr-1",
    "name": "Asha Rao",
    "phone": "9999999999",
    "address_line_1": "12 Lake Road ",
    "address_line_2": "Near City Park",
    "city": "Pune",
    "state": "MH",
    "pincode": "411001",
}

def _product(**extra):
    data = {
        "id": "p-1",
        "name": "Cotton Kurta",
        "price": 1299.0,
        "brand_name": "Weave",
        "images": ["https://cdn/1.jpg", "https://cdn/2.jpg"],
        "image_url": "https://cdn/legacy.jpg",
    }
    data.update(extra)
    return Product(**data)

def test_delivery_address_copies_columns():
    frozen = freeze_delivery_address(ADDRESS)

    assert frozen == {
        "delivery_name": "Asha Rao",
        "delivery_phone": "9999999999",
        "delivery_address": "12 Lake Road, Near City Park",
        "delivery_city": "Pune",
        "delivery_state": "MH",
        "delivery_pincode": "411001",
    }

def test_delivery_address_skips_blank_second_line():
    address = dict(ADDRESS, address_line_2="  ")
    assert freeze_delivery_address(address)["delivery_address"] == "12 Lake Road"

def test_frozen_address_is_detached_from_source():
    address = dict(ADDRESS)
    frozen = freeze_delivery_address(address)
    address["city"] = "Mumbai"
    assert frozen["delivery_city"] == "Pune"

def test_order_item_snapshot():
    item = freeze_order_item(
        _product(),
        quantity=3,
        size_label="M",
        color=ProductColor(name="Indigo", hex="#3F51B5"),
    )

    assert item["product_id"] == "p-1"
    assert item["product_name"] == "Cotton Kurta"
    assert item["product_brand"] == "Weave"
    assert item["product_image"] == "https://cdn/1.jpg"
    assert item["size_label"] == "M"
    assert item["color_name"] == "Indigo"
    assert item["color_hex"] == "#3F51B5"
    assert item["unit_price"] == 1299.0
    assert item["total_price"] == 3897.0

def test_order_item_falls_back_to_image_url():
    item = freeze_order_item(_product(images=None), quantity=1)
    assert item["product_image"] == "https://cdn/legacy.jpg"
    assert item["color_name"] is None

def test_order_item_requires_positive_quantity():
    with pytest.raises(ValueError):
        freeze_order_item(_product(), quantity=0)
