class OrdersDemoError(Exception):
    """Base class for errors raised by the orders demo."""


class OrderStoreError(OrdersDemoError):
    """A DynamoDB call made by the order store failed."""

    def __init__(self, operation, cause):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")

    @property
    def code(self):
        # Only ClientError carries a service error code
        response = getattr(self.cause, "response", None) or {}
        return response.get("Error", {}).get("Code")


class OrderDecodeError(OrdersDemoError):
    """An item returned by DynamoDB does not have the shape of an Order."""

    def __init__(self, attribute, message):
        self.attribute = attribute
        super().__init__(f"{attribute}: {message}")
