import boto3
import pytest
from moto import mock_aws

from orders_demo.store import OrderStore
from orders_demo.table import ensure_orders_table

REGION = "us-east-1"


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture
def dynamodb(aws_credentials):
    with mock_aws():
        yield boto3.client("dynamodb", region_name=REGION)


@pytest.fixture
def store(dynamodb):
    ensure_orders_table(dynamodb, poll=0)
    return OrderStore(dynamodb)
