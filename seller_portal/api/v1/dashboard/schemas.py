"""Seller dashboard schemas"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

class TopProduct(BaseModel):
    """Best seller by revenue"""
    product_id: str
    product_name: str
    units_sold: int
    revenue: float

class DashboardSummary(BaseModel):
    """Headline numbers for the seller's home screen"""
    total_products: int = 0
    active_products: int = 0
    total_orders: int = 0
    pending_orders: int = 0
    total_revenue: float = 0.0
    monthly_revenue: float = 0.0
    month_start: Optional[datetime] = None
    top_products: List[TopProduct] = []
