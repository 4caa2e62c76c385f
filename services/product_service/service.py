import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from shared.exceptions import ValidationError
from .models import Product
from .repository import ProductRepository
from .schemas import ProductCreate, ProductUpdate

logger = structlog.get_logger(__name__)

class ProductService:

    @staticmethod
    async def create_product(db: AsyncSession, data: ProductCreate):
        product = Product(**data.model_dump())
        product = await ProductRepository.create_product(db, product)
        logger.info("product_created", product_id=product.id, name=product.name)
        return product

    @staticmethod
    async def list_products(db: AsyncSession):
        return await ProductRepository.get_all_products(db)

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        return await ProductRepository.get_product_by_id(db, product_id)

    @staticmethod
    async def update_product(db: AsyncSession, product_id: int, data: ProductUpdate):
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            return None

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(product, field, value)

        product = await ProductRepository.update_product(db, product)
        logger.info("product_updated", product_id=product_id, fields=sorted(changes))
        return product

    @staticmethod
    async def delete_product(db: AsyncSession, product_id: int) -> bool:
        try:
            deleted = await ProductRepository.delete_product(db, product_id)
        except IntegrityError:
            await db.rollback()
            raise ValidationError(f"Product {product_id} is referenced by existing orders")
        if deleted:
            logger.info("product_deleted", product_id=product_id)
        return deleted
