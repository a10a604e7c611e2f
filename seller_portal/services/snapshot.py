"""
Freeze helpers for order records

Orders and order items keep by-value copies of the address and product data
they were created from. These helpers perform that copy; nothing they return
references the live rows.
"""

from typing import Any, Dict, Mapping, Optional

from seller_portal.models import Product, ProductColor

def _join_address_lines(address: Mapping[str, Any]) -> str:
    lines = [address.get("address_line_1"), address.get("address_line_2")]
    return ", ".join(line.strip() for line in lines if line and line.strip())

def freeze_delivery_address(address: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy an addresses row into the order's delivery columns

    Args:
        address: Row from the addresses collection

    Returns:
        delivery_* column values for the orders collection
    """
    return {
        "delivery_name": address["name"],
        "delivery_phone": address["phone"],
        "delivery_address": _join_address_lines(address),
        "delivery_city": address["city"],
        "delivery_state": address["state"],
        "delivery_pincode": address["pincode"],
    }

def freeze_order_item(
    product: Product,
    quantity: int,
    size_label: Optional[str] = None,
    color: Optional[ProductColor] = None
) -> Dict[str, Any]:
    """
    Copy product fields into order_items snapshot columns

    Args:
        product: Product as it is at purchase time
        quantity: Units bought
        size_label: Selected size, if any
        color: Selected color, if any

    Returns:
        Snapshot columns for the order_items collection (without order_id)
    """
    if quantity < 1:
        raise ValueError("quantity must be at least 1")

    return {
        "product_id": product.id,
        "product_name": product.name,
        "product_brand": product.brand_name,
        "product_image": product.primary_image,
        "size_label": size_label,
        "color_name": color.name if color else None,
        "color_hex": color.hex if color else None,
        "unit_price": product.price,
        "quantity": quantity,
        "total_price": product.price * quantity,
    }
