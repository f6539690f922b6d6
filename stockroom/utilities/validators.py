"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List

from stockroom.domain.Product import Product, parse_expiry_date


class ProductInput(BaseModel):
    """Schema for product input validation (console and HTTP)."""
    id: int = Field(..., ge=0)
    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    quantity: int = Field(..., ge=0)
    expiry_date: str = Field(..., min_length=1)

    @field_validator('name', 'expiry_date')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('Product name cannot be empty')
        if ',' in v:
            raise ValueError('Product name cannot contain commas')
        return v

    def to_product(self) -> Product:
        """Build the domain Product; raises InvalidDateError for a bad expiry date."""
        return Product(self.id, self.name, self.price, self.quantity, parse_expiry_date(self.expiry_date))


class SaleItemInput(BaseModel):
    """Schema for one line of a sale."""
    product_id: int
    quantity: int = Field(..., ge=1)


class SaleInput(BaseModel):
    """Schema for a sale session submitted in one request."""
    items: List[SaleItemInput] = Field(default_factory=list)
