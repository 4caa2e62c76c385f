"""Transfer records for the order endpoints.

Records are frozen: once built they cannot be reassigned, and two records
built from the same values compare equal. Keys go over the wire in
camelCase (``customerName``, ``orderDate``...); snake_case is accepted on
input too.
"""
from datetime import date
from typing import List

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class OrderItemRequest(BaseModel):
    product_id: int
    quantity: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

class OrderRequest(BaseModel):
    customer_name: str
    email: str
    items: List[OrderItemRequest]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

class OrderItemResponse(BaseModel):
    product_name: str
    quantity: int
    total_price: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

class OrderResponse(BaseModel):
    order_id: str
    customer_name: str
    email: str
    status: str
    order_date: date
    items: List[OrderItemResponse]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
