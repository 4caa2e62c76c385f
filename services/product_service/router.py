from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from shared.exceptions import ValidationError
from .schemas import ProductCreate, ProductResponse, ProductUpdate
from .service import ProductService

router = APIRouter(prefix="/api", tags=["products"])


async def list_products(db: AsyncSession = Depends(get_db)):
    return await ProductService.list_products(db)


async def create_product(product: ProductCreate, db: AsyncSession = Depends(get_db)):
    return await ProductService.create_product(db, product)


async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    product = await ProductService.get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


async def update_product(
    product_id: int,
    payload: ProductUpdate,
    db: AsyncSession = Depends(get_db)
):
    product = await ProductService.update_product(db, product_id, payload)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


async def delete_product(product_id: int, db: AsyncSession = Depends(get_db)):
    try:
        deleted = await ProductService.delete_product(db, product_id)
    except ValidationError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=204)


# --- ROUTE TABLE ---
router.add_api_route("/products", list_products, methods=["GET"],
                     response_model=list[ProductResponse])
router.add_api_route("/products", create_product, methods=["POST"],
                     response_model=ProductResponse, status_code=201)
router.add_api_route("/product/{product_id}", get_product, methods=["GET"],
                     response_model=ProductResponse)
router.add_api_route("/product/{product_id}", update_product, methods=["PUT"],
                     response_model=ProductResponse)
router.add_api_route("/product/{product_id}", delete_product, methods=["DELETE"],
                     status_code=204)
