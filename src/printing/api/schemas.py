"""Pydantic request/response schemas for the Printz API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from printing.shared.options import Orientation

# --- Order Request Schemas ---


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "student_username": "asha",
                    "shop_username": "campus-prints",
                    "copies": 2,
                    "page_size": "A4",
                    "total_pages": 12,
                    "specific_pages": "1-3,7",
                    "orientation": "Portrait",
                    "binding": True,
                    "documents": ["uploads/thesis-draft.pdf"],
                    "comments": "Please staple the cover separately.",
                    "color_mode": "Grayscale",
                    "front_page_special": False,
                    "front_and_back": True,
                    "total": 50.0,
                    "payment_id": "pay_123",
                }
            ]
        }
    }

    student_username: str = Field(..., max_length=50)
    shop_username: str = Field(..., max_length=50)
    copies: int = Field(..., ge=1)
    page_size: str
    total_pages: int = Field(..., ge=1)
    specific_pages: str | None = Field(None, max_length=255)
    orientation: Orientation = Orientation.PORTRAIT
    binding: bool = False
    documents: list[str] = Field(..., min_length=1)
    comments: str | None = None
    color_mode: str
    front_page_special: bool = False
    front_and_back: bool = False
    total: float = Field(..., ge=0)
    payment_id: str = Field(..., min_length=1, max_length=255)


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Completed"}]}}

    status: str


# --- Shop Request Schemas ---


class RegisterShopRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "campus-prints",
                    "email": "owner@campusprints.example",
                    "phone": "+91-98450-00000",
                    "description": "Printing and binding next to the library.",
                    "details": "Open 9am to 8pm, closed Sundays.",
                }
            ]
        }
    }

    username: str = Field(..., max_length=50)
    email: str = Field(..., max_length=254)
    phone: str | None = Field(None, max_length=20)
    description: str | None = None
    details: str | None = None


class PriceSheet(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "a1_grayscale": 40.0,
                    "a1_color": 80.0,
                    "a2_grayscale": 30.0,
                    "a2_color": 60.0,
                    "a3_grayscale": 10.0,
                    "a3_color": 20.0,
                    "a4_grayscale": 2.0,
                    "a4_color": 10.0,
                    "a5_grayscale": 1.5,
                    "a5_color": 8.0,
                    "a6_grayscale": 1.0,
                    "a6_color": 5.0,
                    "binding_cost": 25.0,
                }
            ]
        }
    }

    a1_grayscale: float = Field(..., ge=0)
    a1_color: float = Field(..., ge=0)
    a2_grayscale: float = Field(..., ge=0)
    a2_color: float = Field(..., ge=0)
    a3_grayscale: float = Field(..., ge=0)
    a3_color: float = Field(..., ge=0)
    a4_grayscale: float = Field(..., ge=0)
    a4_color: float = Field(..., ge=0)
    a5_grayscale: float = Field(..., ge=0)
    a5_color: float = Field(..., ge=0)
    a6_grayscale: float = Field(..., ge=0)
    a6_color: float = Field(..., ge=0)
    binding_cost: float = Field(..., ge=0)


class ShopActivity(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"active": False}]}}

    active: bool


# --- Student Request Schemas ---


class RegisterStudentRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "asha",
                    "email": "asha@college.example",
                    "phone": "+91-90000-00001",
                    "role": "Student",
                }
            ]
        }
    }

    username: str = Field(..., max_length=50)
    email: str = Field(..., max_length=254)
    phone: str | None = Field(None, max_length=20)
    role: str | None = None


# --- Response Schemas ---


class OrderIdResponse(BaseModel):
    order_id: int


class ShopIdResponse(BaseModel):
    shop_username: str


class StudentIdResponse(BaseModel):
    username: str


class StatusResponse(BaseModel):
    status: str = "ok"


class OrderResponse(BaseModel):
    id: int
    student_username: str
    shop_username: str
    copies: int
    page_size: str
    total_pages: int
    specific_pages: str | None = None
    orientation: str | None = None
    binding: bool
    documents: list[str]
    comments: str | None = None
    color_mode: str
    front_page_special: bool
    front_and_back: bool
    total: float
    payment_id: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ShopSummary(BaseModel):
    username: str
    description: str | None = None
    details: str | None = None


class InsightStatsResponse(BaseModel):
    total_orders: int = 0
    total_earnings: float = 0.0
    completed: int = 0
    processing: int = 0
    failed: int = 0


class InsightBucketResponse(InsightStatsResponse):
    bucket: datetime


class InsightsResponse(BaseModel):
    shop_username: str
    range: str
    granularity: str
    window_start: datetime
    window_end: datetime
    stats: InsightStatsResponse
    buckets: list[InsightBucketResponse] = []
