import time

from botocore.exceptions import ClientError

from orders_demo.config import DEFAULT_INDEX, DEFAULT_TABLE
from orders_demo.errors import OrderStoreError
from orders_demo.models import CUSTOMER_ID, ORDER_ID

THROUGHPUT = {"ReadCapacityUnits": 5, "WriteCapacityUnits": 5}


def customer_index(index):
    return {
        "IndexName": index,
        "KeySchema": [{"AttributeName": CUSTOMER_ID, "KeyType": "HASH"}],
        "Projection": {"ProjectionType": "ALL"},
        "ProvisionedThroughput": THROUGHPUT,
    }


def describe(client, table):
    """Return the table description, or None when the table does not exist."""
    try:
        return client.describe_table(TableName=table)["Table"]
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceNotFoundException":
            return None
        raise OrderStoreError("DescribeTable", e) from e


def index_names(desc):
    return {i["IndexName"] for i in desc.get("GlobalSecondaryIndexes", []) or []}


def is_active(desc, index):
    if desc is None or desc["TableStatus"] != "ACTIVE":
        return False
    gsi = desc.get("GlobalSecondaryIndexes", []) or []
    return any(i["IndexName"] == index and i["IndexStatus"] == "ACTIVE" for i in gsi)


def ensure_orders_table(client, table=DEFAULT_TABLE, index=DEFAULT_INDEX, poll=3, max_attempts=100):
    """Create the orders table and its customer index if either is missing.

    Blocks until both are ACTIVE, giving up after max_attempts status checks.
    Returns True if anything was created.
    """
    desc = describe(client, table)
    try:
        if desc is None:
            client.create_table(
                TableName=table,
                AttributeDefinitions=[
                    {"AttributeName": ORDER_ID, "AttributeType": "S"},
                    {"AttributeName": CUSTOMER_ID, "AttributeType": "S"},
                ],
                KeySchema=[{"AttributeName": ORDER_ID, "KeyType": "HASH"}],
                GlobalSecondaryIndexes=[customer_index(index)],
                ProvisionedThroughput=THROUGHPUT,
            )
        elif index not in index_names(desc):
            client.update_table(
                TableName=table,
                AttributeDefinitions=[{"AttributeName": CUSTOMER_ID, "AttributeType": "S"}],
                GlobalSecondaryIndexUpdates=[{"Create": customer_index(index)}],
            )
        else:
            return False
    except ClientError as e:
        raise OrderStoreError("CreateTable" if desc is None else "UpdateTable", e) from e

    for _ in range(max_attempts):
        if is_active(describe(client, table), index):
            return True
        time.sleep(poll)
    raise OrderStoreError("DescribeTable", f"{table}/{index} not ACTIVE after {max_attempts} checks")
