from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from orders_demo.errors import OrderStoreError
from orders_demo.table import describe, ensure_orders_table


def not_found():
    return ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}}, "DescribeTable")


def active(indexes=("CustomerIndex",), status="ACTIVE"):
    return {
        "Table": {
            "TableStatus": "ACTIVE",
            "GlobalSecondaryIndexes": [{"IndexName": i, "IndexStatus": status} for i in indexes],
        }
    }


def test_creates_table_with_customer_index(dynamodb):
    assert ensure_orders_table(dynamodb, poll=0) is True

    desc = dynamodb.describe_table(TableName="Orders")["Table"]
    assert desc["KeySchema"] == [{"AttributeName": "OrderID", "KeyType": "HASH"}]
    gsi = {i["IndexName"]: i for i in desc["GlobalSecondaryIndexes"]}
    assert gsi["CustomerIndex"]["KeySchema"] == [{"AttributeName": "CustomerID", "KeyType": "HASH"}]


def test_existing_table_is_left_alone(dynamodb):
    ensure_orders_table(dynamodb, poll=0)
    assert ensure_orders_table(dynamodb, poll=0) is False


def test_describe_missing_table(dynamodb):
    assert describe(dynamodb, "Nope") is None


def test_describe_other_errors_are_wrapped():
    client = MagicMock()
    client.describe_table.side_effect = ClientError(
        {"Error": {"Code": "AccessDeniedException", "Message": "denied"}}, "DescribeTable"
    )
    with pytest.raises(OrderStoreError) as exc:
        describe(client, "Orders")
    assert exc.value.code == "AccessDeniedException"


def test_adds_missing_index_and_waits_until_active():
    client = MagicMock()
    client.describe_table.side_effect = [
        active(indexes=()),
        active(status="CREATING"),
        active(),
    ]

    assert ensure_orders_table(client, poll=0) is True
    client.create_table.assert_not_called()
    update = client.update_table.call_args.kwargs
    assert update["GlobalSecondaryIndexUpdates"][0]["Create"]["IndexName"] == "CustomerIndex"
    assert client.describe_table.call_count == 3


def test_create_failure_is_wrapped():
    client = MagicMock()
    client.describe_table.side_effect = not_found()
    client.create_table.side_effect = ClientError(
        {"Error": {"Code": "LimitExceededException", "Message": "too many"}}, "CreateTable"
    )
    with pytest.raises(OrderStoreError) as exc:
        ensure_orders_table(client, poll=0)
    assert exc.value.operation == "CreateTable"


def test_gives_up_when_index_never_becomes_active():
    client = MagicMock()
    client.describe_table.side_effect = [active(indexes=())] + [active(status="CREATING")] * 3

    with pytest.raises(OrderStoreError) as exc:
        ensure_orders_table(client, poll=0, max_attempts=3)
    assert exc.value.operation == "DescribeTable"
    assert "not ACTIVE after 3 checks" in str(exc.value)
    assert client.describe_table.call_count == 4
