from .setup import setup_observability
from .metrics import (
    ecomm_orders_placed_total,
    ecomm_order_items_total,
)
