import uuid
from datetime import date
from typing import List, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from services.product_service.repository import ProductRepository
from shared.exceptions import EntityNotFoundError, ValidationError
from shared.observability import ecomm_order_items_total, ecomm_orders_placed_total
from .models import Order, OrderItem
from .repository import OrderRepository
from .schemas import OrderItemResponse, OrderRequest, OrderResponse

logger = structlog.get_logger(__name__)

ORDER_ID_PREFIX = "ORD"
STATUS_PLACED = "PLACED"
MAX_ORDER_ID_ATTEMPTS = 5


def new_order_id() -> str:
    return ORDER_ID_PREFIX + uuid.uuid4().hex[:8].upper()


async def unused_order_id(db: AsyncSession) -> str:
    """Draws business ids until one is free. Concurrent placements can still race."""
    for _ in range(MAX_ORDER_ID_ATTEMPTS):
        order_id = new_order_id()
        if not await OrderRepository.get_order_by_order_id(db, order_id):
            return order_id
    raise RuntimeError("Could not generate an unused order id")


def to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        order_id=order.order_id,
        customer_name=order.customer_name,
        email=order.email,
        status=order.status,
        order_date=order.order_date,
        items=[
            OrderItemResponse(
                product_name=item.product.name,
                quantity=item.quantity,
                total_price=item.total_price,
            )
            for item in order.items
        ],
    )


class OrderService:
    @staticmethod
    async def place_order(db: AsyncSession, data: OrderRequest) -> OrderResponse:
        if not data.items:
            ecomm_orders_placed_total.labels(status="rejected").inc()
            raise ValidationError("Order must contain at least one item.")

        order = Order(
            order_id=await unused_order_id(db),
            customer_name=data.customer_name,
            email=data.email,
            status=STATUS_PLACED,
            order_date=date.today(),
        )

        for line in data.items:
            if line.quantity <= 0:
                ecomm_orders_placed_total.labels(status="rejected").inc()
                raise ValidationError("Invalid Quantity.")

            product = await ProductRepository.get_product_by_id(db, line.product_id)
            if not product:
                ecomm_orders_placed_total.labels(status="rejected").inc()
                raise EntityNotFoundError("Product", line.product_id)

            order.items.append(
                OrderItem(
                    product=product,
                    quantity=line.quantity,
                    total_price=product.price * line.quantity,
                )
            )

        order = await OrderRepository.create_order(db, order)
        ecomm_orders_placed_total.labels(status="success").inc()
        ecomm_order_items_total.inc(len(order.items))
        logger.info(
            "order_placed",
            order_id=order.order_id,
            items=len(order.items),
            email=order.email,
        )
        return to_response(order)

    @staticmethod
    async def list_orders(db: AsyncSession) -> List[OrderResponse]:
        orders = await OrderRepository.list_orders(db)
        return [to_response(order) for order in orders]

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str) -> Optional[OrderResponse]:
        order = await OrderRepository.get_order_by_order_id(db, order_id)
        if not order:
            return None
        return to_response(order)

    @staticmethod
    async def delete_order(db: AsyncSession, order_id: str) -> bool:
        order = await OrderRepository.get_order_by_order_id(db, order_id)
        if not order:
            return False

        deleted = await OrderRepository.delete_order(db, order.id)
        logger.info("order_deleted", order_id=order_id)
        return deleted
