from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt, confloat, conint
from typing import Any, Optional, Union

# Numbers keep their JSON form: integral prices stay ints, fractional ones floats.
Price = Union[NonNegativeInt, NonNegativeFloat]
Rating = Union[conint(ge=0, le=5), confloat(ge=0, le=5)]


class Product(BaseModel):
    id: str = Field(..., min_length=1, description="Short unique product id")
    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    description: str = Field(..., description="Product description")
    price: Price = Field(0, description="Price in roubles")
    stock: int = Field(0, ge=0, description="Units in stock")
    rating: Rating = Field(0, description="Rating from 0 to 5")


class ProductInput(BaseModel):
    """Create/update payload.

    Values are accepted as sent; trimming, coercion and range checks are
    the store's job, so a stray ``"89990"`` string for price still works.
    """

    name: Optional[Any] = Field(None, json_schema_extra={"type": "string"}, description="Product name")
    category: Optional[Any] = Field(None, json_schema_extra={"type": "string"}, description="Product category")
    description: Optional[Any] = Field(None, json_schema_extra={"type": "string"}, description="Product description")
    price: Optional[Any] = Field(None, json_schema_extra={"type": "number", "minimum": 0}, description="Price in roubles")
    stock: Optional[Any] = Field(None, json_schema_extra={"type": "integer", "minimum": 0}, description="Units in stock")
    rating: Optional[Any] = Field(None, json_schema_extra={"type": "number", "minimum": 0, "maximum": 5}, description="Rating from 0 to 5")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Wireless mouse",
                "category": "Peripherals",
                "description": "Optical, 16000 DPI, 2.4 GHz",
                "price": 4990,
                "stock": 10,
                "rating": 4.5,
            }
        },
    )


class Error(BaseModel):
    error: str
