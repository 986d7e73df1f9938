#!/usr/bin/env python3
import os

from orders_demo import Order, OrderStore, OrderStoreError
from orders_demo.config import Settings, make_client

settings = Settings.from_env()
ORDER_ID = os.environ.get("ORDER_ID", "O-tmp")

store = OrderStore(make_client(settings), settings.table, settings.customer_index)
store.batch_insert([Order(ORDER_ID, "C-tmp", 1, "Pending")])

try:
    # Second delete hits a missing key; DynamoDB treats that as success
    store.delete(ORDER_ID)
    store.delete(ORDER_ID)
    print("✅ Deleting", ORDER_ID, "twice left the table unchanged")
    print("Remaining with that id:", [o for o in store.scan_all() if o.order_id == ORDER_ID])
    print("Total for C-tmp ->", store.aggregate_by_customer("C-tmp"))
except OrderStoreError as e:
    print("🚨 Delete failed ->", e.code, e)
