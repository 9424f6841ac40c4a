"""FastAPI endpoints for the printing domain."""

import json

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from printing.api.schemas import (
    InsightsResponse,
    OrderIdResponse,
    OrderResponse,
    PlaceOrderRequest,
    PriceSheet,
    RegisterShopRequest,
    RegisterStudentRequest,
    ShopActivity,
    ShopIdResponse,
    ShopSummary,
    StatusResponse,
    StudentIdResponse,
    UpdateOrderStatusRequest,
)
from printing.insights.insights import shop_insights
from printing.order.lifecycle import OrderLifecycle
from printing.order.placement import PlaceOrder
from printing.order.queue import get_order, list_orders_for_shop, list_orders_for_student
from printing.order.status import UpdateOrderStatus
from printing.shop.activity import SetShopActivity, get_activity
from printing.shop.discovery import list_active_shops
from printing.shop.pricing import SetShopPrices, get_prices
from printing.shop.registration import RegisterShop
from printing.student.registration import RegisterStudent

order_router = APIRouter(prefix="/orders", tags=["orders"])
shop_router = APIRouter(prefix="/shops", tags=["shops"])
student_router = APIRouter(prefix="/students", tags=["students"])


def get_lifecycle() -> OrderLifecycle:
    """Order lifecycle with the process-wide notifier; override in tests."""
    return OrderLifecycle()


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        id=order.number,
        student_username=order.student_username,
        shop_username=order.shop_username,
        copies=order.copies,
        page_size=order.page_size,
        total_pages=order.total_pages,
        specific_pages=order.specific_pages,
        orientation=order.orientation,
        binding=bool(order.binding),
        documents=order.document_list(),
        comments=order.comments,
        color_mode=order.color_mode,
        front_page_special=bool(order.front_page_special),
        front_and_back=bool(order.front_and_back),
        total=order.total,
        payment_id=order.payment_id,
        status=order.status,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


# --- Order endpoints ---


# Order writes send mail synchronously; plain `def` keeps them off the event loop.
@order_router.post("", status_code=201, response_model=OrderIdResponse)
def place_order(
    body: PlaceOrderRequest,
    lifecycle: OrderLifecycle = Depends(get_lifecycle),
) -> OrderIdResponse:
    command = PlaceOrder(
        student_username=body.student_username,
        shop_username=body.shop_username,
        copies=body.copies,
        page_size=body.page_size,
        total_pages=body.total_pages,
        specific_pages=body.specific_pages,
        orientation=body.orientation.value,
        binding=body.binding,
        documents=json.dumps(body.documents),
        comments=body.comments,
        color_mode=body.color_mode,
        front_page_special=body.front_page_special,
        front_and_back=body.front_and_back,
        total=body.total,
        payment_id=body.payment_id,
    )
    order_number = lifecycle.place_order(command)
    return OrderIdResponse(order_id=order_number)


@order_router.get("", response_model=list[OrderResponse])
async def student_orders(student: str) -> list[OrderResponse]:
    return [_order_response(order) for order in list_orders_for_student(student)]


@order_router.get("/{payment_id}", response_model=OrderResponse)
async def order_detail(payment_id: str) -> OrderResponse:
    return _order_response(get_order(payment_id))


# --- Shop endpoints ---


@shop_router.get("", response_model=list[ShopSummary])
async def active_shops() -> list[ShopSummary]:
    return [
        ShopSummary(username=shop.username, description=shop.description, details=shop.details)
        for shop in list_active_shops()
    ]


@shop_router.post("", status_code=201, response_model=ShopIdResponse)
async def register_shop(body: RegisterShopRequest) -> ShopIdResponse:
    command = RegisterShop(
        username=body.username,
        email=body.email,
        phone=body.phone,
        description=body.description,
        details=body.details,
    )
    current_domain.process(command, asynchronous=False)
    return ShopIdResponse(shop_username=body.username)


@shop_router.get("/{shop}/orders", response_model=list[OrderResponse])
async def shop_queue(shop: str) -> list[OrderResponse]:
    return [_order_response(order) for order in list_orders_for_shop(shop)]


@shop_router.put("/{shop}/orders/{payment_id}/status", response_model=OrderResponse)
def update_order_status(
    shop: str,
    payment_id: str,
    body: UpdateOrderStatusRequest,
    lifecycle: OrderLifecycle = Depends(get_lifecycle),
) -> OrderResponse:
    command = UpdateOrderStatus(payment_id=payment_id, status=body.status, shop_username=shop)
    return _order_response(lifecycle.update_status(command))


@shop_router.get("/{shop}/prices", response_model=PriceSheet)
async def shop_prices(shop: str) -> PriceSheet:
    return PriceSheet(**get_prices(shop))


@shop_router.put("/{shop}/prices", response_model=StatusResponse)
async def set_shop_prices(shop: str, body: PriceSheet) -> StatusResponse:
    command = SetShopPrices(shop_username=shop, **body.model_dump())
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@shop_router.get("/{shop}/activity", response_model=ShopActivity)
async def shop_activity(shop: str) -> ShopActivity:
    return ShopActivity(active=get_activity(shop))


@shop_router.put("/{shop}/activity", response_model=ShopActivity)
async def set_shop_activity(shop: str, body: ShopActivity) -> ShopActivity:
    command = SetShopActivity(shop_username=shop, active=body.active)
    current_domain.process(command, asynchronous=False)
    return ShopActivity(active=get_activity(shop))


@shop_router.get("/{shop}/insights", response_model=InsightsResponse)
async def insights(shop: str, range_token: str = Query("1d", alias="range")) -> InsightsResponse:
    return InsightsResponse(**shop_insights(shop, range_token).to_dict())


# --- Student endpoints ---


@student_router.post("", status_code=201, response_model=StudentIdResponse)
async def register_student(body: RegisterStudentRequest) -> StudentIdResponse:
    command = RegisterStudent(
        username=body.username,
        email=body.email,
        phone=body.phone,
        role=body.role,
    )
    current_domain.process(command, asynchronous=False)
    return StudentIdResponse(username=body.username)
