from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .models import Order

class OrderRepository:
    """Storage interface for orders. Every call commits its own unit of work."""

    @staticmethod
    async def create_order(db: AsyncSession, order: Order) -> Order:
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def get_order(db: AsyncSession, id: int) -> Optional[Order]:
        result = await db.execute(select(Order).where(Order.id == id))
        return result.scalars().first()

    @staticmethod
    async def get_order_by_order_id(db: AsyncSession, order_id: str) -> Optional[Order]:
        """Looks an order up by its business id. Returns None when absent."""
        result = await db.execute(select(Order).where(Order.order_id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_orders(db: AsyncSession) -> List[Order]:
        result = await db.execute(select(Order).order_by(Order.id))
        return list(result.scalars().all())

    @staticmethod
    async def update_order(db: AsyncSession, order: Order) -> Order:
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def delete_order(db: AsyncSession, id: int) -> bool:
        order = await OrderRepository.get_order(db, id)
        if not order:
            return False

        # ORM delete so the items cascade on every backend
        await db.delete(order)
        await db.commit()
        return True
