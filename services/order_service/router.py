from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from shared.exceptions import EntityNotFoundError, ValidationError
from .schemas import OrderRequest, OrderResponse
from .service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


async def place_order(order: OrderRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await OrderService.place_order(db, order)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def list_orders(db: AsyncSession = Depends(get_db)):
    return await OrderService.list_orders(db)


async def get_order(order_id: str, db: AsyncSession = Depends(get_db)):
    order = await OrderService.get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


async def delete_order(order_id: str, db: AsyncSession = Depends(get_db)):
    if not await OrderService.delete_order(db, order_id):
        raise HTTPException(status_code=404, detail="Order not found")
    return Response(status_code=204)


# --- ROUTE TABLE ---
router.add_api_route("/place", place_order, methods=["POST"],
                     response_model=OrderResponse, status_code=201)
router.add_api_route("", list_orders, methods=["GET"],
                     response_model=list[OrderResponse])
router.add_api_route("/{order_id}", get_order, methods=["GET"],
                     response_model=OrderResponse)
router.add_api_route("/{order_id}", delete_order, methods=["DELETE"],
                     status_code=204)
