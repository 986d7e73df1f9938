import os
from dataclasses import dataclass
from typing import Optional

import boto3
from dotenv import load_dotenv

DEFAULT_REGION = "us-east-1"
DEFAULT_ENDPOINT = "http://localhost:8000"  # DynamoDB Local
DEFAULT_TABLE = "Orders"
DEFAULT_INDEX = "CustomerIndex"


@dataclass(frozen=True)
class Settings:
    region: str = DEFAULT_REGION
    endpoint_url: Optional[str] = DEFAULT_ENDPOINT
    table: str = DEFAULT_TABLE
    customer_index: str = DEFAULT_INDEX

    @classmethod
    def from_env(cls, environ=None):
        """Read settings from the environment, after loading any .env file."""
        if environ is None:
            load_dotenv()
            environ = os.environ
        return cls(
            region=environ.get("AWS_REGION", DEFAULT_REGION),
            # An empty endpoint falls back to the regional AWS endpoint
            endpoint_url=environ.get("DYNAMODB_ENDPOINT", DEFAULT_ENDPOINT) or None,
            table=environ.get("ORDERS_TABLE", DEFAULT_TABLE),
            customer_index=environ.get("CUSTOMER_INDEX", DEFAULT_INDEX),
        )


def make_client(settings: Settings):
    return boto3.client("dynamodb", region_name=settings.region, endpoint_url=settings.endpoint_url)
