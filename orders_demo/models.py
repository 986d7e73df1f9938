from dataclasses import dataclass
from typing import Any, Dict

from orders_demo.errors import OrderDecodeError

Item = Dict[str, Dict[str, Any]]

ORDER_ID = "OrderID"
CUSTOMER_ID = "CustomerID"
AMOUNT = "Amount"
STATUS = "Status"

S = lambda v: {"S": v}
N = lambda v: {"N": str(v)}


def attr(item: Item, name: str, kind: str) -> str:
    """Return the raw value of attribute ``name``, checking its wire kind."""
    if name not in item:
        raise OrderDecodeError(name, "missing attribute")
    value = item[name]
    if not isinstance(value, dict) or kind not in value:
        found = ", ".join(value) if isinstance(value, dict) else type(value).__name__
        raise OrderDecodeError(name, f"expected type {kind}, got {found}")
    return value[kind]


@dataclass(frozen=True)
class Order:
    order_id: str
    customer_id: str
    amount: int
    status: str

    def to_item(self) -> Item:
        return {
            ORDER_ID: S(self.order_id),
            CUSTOMER_ID: S(self.customer_id),
            AMOUNT: N(self.amount),
            STATUS: S(self.status),
        }

    @classmethod
    def from_item(cls, item: Item) -> "Order":
        raw_amount = attr(item, AMOUNT, "N")
        try:
            amount = int(raw_amount)
        except ValueError:
            raise OrderDecodeError(AMOUNT, f"not an integer: {raw_amount!r}") from None
        return cls(
            order_id=attr(item, ORDER_ID, "S"),
            customer_id=attr(item, CUSTOMER_ID, "S"),
            amount=amount,
            status=attr(item, STATUS, "S"),
        )

    def __str__(self):
        return f"OrderID: {self.order_id}, CustomerID: {self.customer_id}, Amount: {self.amount}, Status: {self.status}"
