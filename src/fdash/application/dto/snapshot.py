from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class PersistedMenuItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int = Field(gt=0)
    name: str
    price: float = Field(ge=0)


class PersistedRestaurant(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int = Field(gt=0)
    name: str
    location: str
    rating: float
    image: str | None = None
    menu: list[PersistedMenuItem] = Field(default_factory=list)


RESTAURANT_LIST_ADAPTER = TypeAdapter(list[PersistedRestaurant])
