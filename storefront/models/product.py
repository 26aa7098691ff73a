"""Product models for the storefront catalog"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, PlainSerializer, field_validator

# Exact decimal amounts, written as JSON numbers
Price = Annotated[
    Decimal,
    Field(ge=0),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductCategory(str, Enum):
    SEEDS = "seeds"
    FERTILIZERS = "fertilizers"
    PESTICIDES = "pesticides"


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str = Field(min_length=1)
    price: Price
    image: str = ""
    category: ProductCategory
    description: str = ""
    rating: float = Field(default=0, ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    in_stock: bool = Field(default=True, alias="inStock")
    # Owner and stock attributes, present on retailer-listed products
    quantity: Optional[int] = Field(default=None, ge=0)
    retailer_id: Optional[str] = Field(default=None, alias="retailerId")
    retailer_name: Optional[str] = Field(default=None, alias="retailerName")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    class Config:
        populate_by_name = True
        from_attributes = True

    @classmethod
    def from_document(cls, document_id: str, data: dict[str, Any]) -> "Product":
        """Build a product from a stored document and its id"""
        return cls.model_validate({**data, "id": document_id})

    def snapshot(self) -> "Product":
        """Detached copy, unaffected by later catalog changes"""
        return self.model_copy(deep=True)


class NewProduct(BaseModel):
    """Product submitted by a retailer, before the store assigns an id"""
    name: str = Field(min_length=1)
    price: Price
    image: str = ""
    category: ProductCategory
    description: str = ""
    quantity: int = Field(default=0, ge=0)
    in_stock: Optional[bool] = Field(default=None, alias="inStock")

    class Config:
        populate_by_name = True

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        return value.strip()

    def to_document(self, owner_id: str, owner_name: str) -> dict[str, Any]:
        """Document fields for a remote create, stamped with the owner"""
        in_stock = self.in_stock if self.in_stock is not None else self.quantity > 0
        return {
            "name": self.name,
            "price": float(self.price),
            "image": self.image,
            "category": self.category.value,
            "description": self.description,
            "rating": 0,
            "reviews": 0,
            "inStock": in_stock,
            "quantity": self.quantity,
            "retailerId": owner_id,
            "retailerName": owner_name,
        }


class CatalogView(BaseModel):
    """Catalog state as read by the rendering layer"""
    products: list[Product]
    filtered_products: list[Product] = Field(alias="filteredProducts")
    loading: bool
    selected_category: Optional[ProductCategory] = Field(alias="selectedCategory")
    search_query: str = Field(alias="searchQuery")

    class Config:
        populate_by_name = True


class CategoryRequest(BaseModel):
    """Request to select a category facet (None clears it)"""
    category: Optional[ProductCategory] = None


class SearchRequest(BaseModel):
    """Request to set the free-text search facet"""
    query: str = ""


class LoadRequest(BaseModel):
    """Request to (re)load the catalog, optionally for one category"""
    category: Optional[ProductCategory] = None


class StockUpdateRequest(BaseModel):
    """Request to set a product's stock flag"""
    in_stock: bool = Field(alias="inStock")

    class Config:
        populate_by_name = True
