from contextlib import contextmanager
from decimal import Decimal
from typing import Iterable, List

from botocore.exceptions import BotoCoreError, ClientError

from orders_demo.config import DEFAULT_INDEX, DEFAULT_TABLE
from orders_demo.errors import OrderStoreError
from orders_demo.models import AMOUNT, CUSTOMER_ID, ORDER_ID, STATUS, Order, S

# BatchWriteItem accepts at most 25 write requests per call
BATCH_SIZE = 25


@contextmanager
def _call(operation):
    try:
        yield
    except (ClientError, BotoCoreError) as e:
        raise OrderStoreError(operation, e) from e


def _amount_or_zero(item) -> int:
    try:
        # Fractional amounts keep their integer part
        return int(Decimal(item[AMOUNT]["N"]))
    except (KeyError, TypeError, ValueError, ArithmeticError):
        return 0


class OrderStore:
    """Orders table operations over a low-level boto3 DynamoDB client.

    Every call is one round trip (one per chunk for batch inserts). Nothing is
    retried and nothing is cached; failures surface as OrderStoreError.
    """

    def __init__(self, client, table: str = DEFAULT_TABLE, customer_index: str = DEFAULT_INDEX):
        self.client = client
        self.table = table
        self.customer_index = customer_index

    def _key(self, order_id: str):
        return {ORDER_ID: S(order_id)}

    def batch_insert(self, orders: Iterable[Order]) -> List[Order]:
        """Put all orders with BatchWriteItem.

        Returns the orders DynamoDB reported back as unprocessed. They are not
        retried; the caller decides what to do with them.
        """
        requests = [{"PutRequest": {"Item": o.to_item()}} for o in orders]
        unprocessed = []
        for start in range(0, len(requests), BATCH_SIZE):
            with _call("BatchWriteItem"):
                resp = self.client.batch_write_item(
                    RequestItems={self.table: requests[start : start + BATCH_SIZE]}
                )
            for req in resp.get("UnprocessedItems", {}).get(self.table, []):
                unprocessed.append(Order.from_item(req["PutRequest"]["Item"]))
        return unprocessed

    def scan_all(self) -> List[Order]:
        # Single page only; LastEvaluatedKey is not followed
        with _call("Scan"):
            resp = self.client.scan(TableName=self.table)
        return [Order.from_item(item) for item in resp["Items"]]

    def update_status(self, order_id: str, new_status: str) -> None:
        """Set Status on an existing order. A missing order is left absent."""
        try:
            self.client.update_item(
                TableName=self.table,
                Key=self._key(order_id),
                UpdateExpression="SET #s = :newStatus",
                ConditionExpression="attribute_exists(#id)",
                ExpressionAttributeNames={"#s": STATUS, "#id": ORDER_ID},
                ExpressionAttributeValues={":newStatus": S(new_status)},
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return
            raise OrderStoreError("UpdateItem", e) from e
        except BotoCoreError as e:
            raise OrderStoreError("UpdateItem", e) from e

    def delete(self, order_id: str) -> None:
        with _call("DeleteItem"):
            self.client.delete_item(TableName=self.table, Key=self._key(order_id))

    def aggregate_by_customer(self, customer_id: str) -> int:
        """Sum Amount over the customer's orders; unparseable amounts count as 0."""
        with _call("Query"):
            resp = self.client.query(
                TableName=self.table,
                IndexName=self.customer_index,
                KeyConditionExpression="#c = :cid",
                ExpressionAttributeNames={"#c": CUSTOMER_ID},
                ExpressionAttributeValues={":cid": S(customer_id)},
            )
        return sum(_amount_or_zero(item) for item in resp["Items"])
