#!/usr/bin/env python3
from orders_demo.config import Settings, make_client
from orders_demo.runner import run_demo
from orders_demo.store import OrderStore

settings = Settings.from_env()
store = OrderStore(make_client(settings), settings.table, settings.customer_index)

# Fails fast: any store error ends the script with a traceback
run_demo(store)
