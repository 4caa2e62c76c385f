from fastapi import FastAPI
from shared.config.database import create_tables
from shared.config.settings import SERVICE_NAME
from shared.observability import setup_observability

# IMPORTANT: import models so they register with Base
from services.product_service import models as product_models
from services.order_service import models as order_models

from services.home_service.router import router as home_router
from services.product_service.router import router as product_router
from services.order_service.router import router as order_router

app = FastAPI(title="Ecommerce Backend", version="1.0.0")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, SERVICE_NAME)

app.include_router(home_router)
app.include_router(product_router)
app.include_router(order_router)

@app.on_event("startup")
async def startup_event():
    await create_tables()
