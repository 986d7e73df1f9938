#!/usr/bin/env python3
from orders_demo.config import Settings, make_client
from orders_demo.table import ensure_orders_table

settings = Settings.from_env()
client = make_client(settings)

if ensure_orders_table(client, settings.table, settings.customer_index):
    print("Created", settings.table, "with index", settings.customer_index)
else:
    print(settings.table, "already has", settings.customer_index)

desc = client.describe_table(TableName=settings.table)["Table"]
print("Status:", desc["TableStatus"], "| items:", desc.get("ItemCount", 0))
