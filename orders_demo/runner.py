import argparse
import sys

from botocore.exceptions import BotoCoreError

from orders_demo.config import Settings, make_client
from orders_demo.errors import OrdersDemoError
from orders_demo.models import Order
from orders_demo.store import OrderStore
from orders_demo.table import ensure_orders_table

SAMPLE_ORDERS = [
    Order("O1", "C1", 100, "Completed"),
    Order("O2", "C1", 200, "Pending"),
    Order("O3", "C2", 150, "Completed"),
    Order("O4", "C3", 300, "Shipped"),
]


def print_orders(store, out=print):
    out("📌 All Orders:")
    for order in store.scan_all():
        out(str(order))


def run_demo(store, out=print):
    """Insert, read, update, aggregate, delete, read. Errors propagate to the caller."""
    unprocessed = store.batch_insert(SAMPLE_ORDERS)
    if unprocessed:
        ids = ", ".join(o.order_id for o in unprocessed)
        out(f"⚠️  {len(unprocessed)} orders left unprocessed by batch write: {ids}")
    else:
        out("✅ Orders inserted successfully!")
    print_orders(store, out)

    store.update_status("O2", "Shipped")
    out("✅ Order O2 updated to Shipped")

    total = store.aggregate_by_customer("C1")
    out(f"📊 Total amount spent by Customer C1: {total}")

    store.delete("O4")
    out("✅ Order O4 deleted successfully!")
    print_orders(store, out)


def main(argv=None):
    parser = argparse.ArgumentParser(description="CRUD and aggregation demo against a DynamoDB Orders table")
    parser.add_argument("--create-table", action="store_true", help="create the Orders table and CustomerIndex if missing")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    try:
        client = make_client(settings)
        if args.create_table and ensure_orders_table(client, settings.table, settings.customer_index):
            print(f"✅ Created table {settings.table} with index {settings.customer_index}")
        run_demo(OrderStore(client, settings.table, settings.customer_index))
    except (OrdersDemoError, BotoCoreError) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
