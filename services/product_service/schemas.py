from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

class ProductCreate(BaseModel):
    name: str
    description: Optional[str] = None
    brand: Optional[str] = None
    price: float = Field(ge=0)
    category: Optional[str] = None
    stock_quantity: int = Field(default=0, ge=0)
    product_available: bool = True

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class ProductUpdate(BaseModel):
    """Only the fields present in the body are written."""
    name: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    category: Optional[str] = None
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    product_available: Optional[bool] = None

    @field_validator("name", "price", "stock_quantity", "product_available")
    @classmethod
    def not_null(cls, value):
        # Omit a field to leave it alone; these columns cannot be cleared
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class ProductResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    brand: Optional[str]
    price: float
    category: Optional[str]
    stock_quantity: int
    product_available: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
