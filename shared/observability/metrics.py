from prometheus_client import Counter

# Business Metrics
ecomm_orders_placed_total = Counter(
    "ecomm_orders_placed_total",
    "Total order placement attempts",
    ["status"] # Labels: 'success', 'rejected'
)

ecomm_order_items_total = Counter(
    "ecomm_order_items_total",
    "Total order lines written by successful placements"
)
