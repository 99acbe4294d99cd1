"""
Pydantic models for product data.

``ProductBase`` holds the fields shared by requests and responses;
``ProductCreate`` is the body of ``POST`` and ``PUT``, ``ProductRead``
adds the ``id`` for responses.  ``ProductPatch`` is the body of
``PATCH``: every field is optional and only the fields the client
actually sent are applied, so ``{"description": null}`` clears the
description while ``{}`` changes nothing.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from product_catalog_api.app.services.product_store import ProductPatch as StorePatch


def reject_bool(v, info):
    # JSON true/false would otherwise be read as 1 and 0.
    if isinstance(v, bool):
        raise ValueError(f"{info.field_name} must be a number")
    return v


class ProductBase(BaseModel):
    name: str = Field(..., description="Product name", examples=["Widget"])
    description: Optional[str] = Field(None, max_length=1000, examples=["A very useful widget"])
    price: float = Field(..., gt=0, description="Price must be positive", examples=[9.99])
    stock_quantity: int = Field(0, ge=0, examples=[25])

    @field_validator("price", "stock_quantity", mode="before")
    @classmethod
    def numbers_not_bool(cls, v, info):
        return reject_bool(v, info)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required")
        return v


class ProductCreate(ProductBase):
    """Schema for creating or fully replacing a product."""
    pass


class ProductRead(ProductBase):
    """Schema for reading a product from the API."""

    id: int
    category_id: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }


class ProductPatch(BaseModel):
    """Schema for partially updating a product.

    Keys other than the ones below are ignored.  ``name``, ``price``
    and ``stock_quantity`` may be omitted but not sent as ``null``.
    """

    name: Optional[str] = None
    description: Optional[str] = Field(None, max_length=1000)
    price: Optional[float] = Field(None, gt=0)
    stock_quantity: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None

    @field_validator("price", "stock_quantity", mode="before")
    @classmethod
    def numbers_not_bool(cls, v, info):
        return reject_bool(v, info)

    @field_validator("name", "price", "stock_quantity")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} may not be null")
        return v

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required")
        return v

    def to_store_patch(self) -> StorePatch:
        return StorePatch.from_mapping(self.model_dump(exclude_unset=True))


class ProductPageRead(BaseModel):
    """A page of products as returned by ``GET /products/page``."""

    content: List[ProductRead]
    page: int
    size: int
    total_elements: int
    total_pages: int
    sort_by: str
    direction: str

    model_config = {
        "from_attributes": True,
    }
