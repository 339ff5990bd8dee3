from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class MenuItemResponse(BaseModel):
    itemId: int
    restaurantId: int
    name: str
    price: float


class RestaurantResponse(BaseModel):
    restaurantId: int
    name: str
    location: str
    rating: float
    image: str | None = None
    menuItemCount: int
    menu: list[MenuItemResponse] = Field(default_factory=list)


class RestaurantListResponse(BaseModel):
    restaurants: list[RestaurantResponse] = Field(default_factory=list)


class OrderResponse(BaseModel):
    orderId: int
    displayId: str
    restaurantId: int
    restaurantName: str
    menuItemId: int
    menuItemName: str
    price: float
    userId: str
    status: str
    createdAt: datetime
    estimatedDelivery: str | None = None
    deliveredAt: datetime | None = None


class OrderQueueResponse(BaseModel):
    pending: list[OrderResponse] = Field(default_factory=list)
    history: list[OrderResponse] = Field(default_factory=list)


class UserOrdersResponse(BaseModel):
    userId: str
    orders: list[OrderResponse] = Field(default_factory=list)
    totalOrders: int
    pendingOrders: int


class StatisticsResponse(BaseModel):
    totalRestaurants: int
    totalMenuItems: int
    pendingOrders: int
    completedOrders: int
    totalRevenue: float


class PopularMenuItemResponse(BaseModel):
    menuItem: MenuItemResponse
    orderCount: int


class PopularMenuItemsResponse(BaseModel):
    items: list[PopularMenuItemResponse] = Field(default_factory=list)
