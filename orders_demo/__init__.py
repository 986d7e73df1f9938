from orders_demo.errors import OrderDecodeError, OrdersDemoError, OrderStoreError
from orders_demo.models import Order
from orders_demo.store import OrderStore

__all__ = ["Order", "OrderStore", "OrdersDemoError", "OrderStoreError", "OrderDecodeError"]
