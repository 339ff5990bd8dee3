from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class AddRestaurantRequest(CamelBaseModel):
    name: str = Field(min_length=1)
    location: str
    rating: str | float
    image: str | None = None


class AddMenuItemRequest(CamelBaseModel):
    restaurant_id: int
    name: str = Field(min_length=1)
    price: str | float


class PlaceOrderRequest(CamelBaseModel):
    restaurant_id: int
    menu_item_id: int
    user_id: str = Field(min_length=1)
