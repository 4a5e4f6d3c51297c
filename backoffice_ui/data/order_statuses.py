"""Order statuses shipped with the demo shop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderStatus:
    id: int
    status: str
    color: str = ""


class Statuses:
    """Demo order statuses, by their label in the back office."""

    awaiting_check_payment = OrderStatus(1, "Awaiting check payment", "#34209E")
    payment_accepted = OrderStatus(2, "Payment accepted", "#3498D8")
    processing_in_progress = OrderStatus(3, "Processing in progress", "#3498D8")
    shipped = OrderStatus(4, "Shipped", "#01b887")
    delivered = OrderStatus(5, "Delivered", "#01b887")
    canceled = OrderStatus(6, "Canceled", "#2C3E50")
    refunded = OrderStatus(7, "Refunded", "#ec2e15")
    payment_error = OrderStatus(8, "Payment error", "#ec2e15")
    on_backorder_paid = OrderStatus(9, "On backorder (paid)", "#3498D8")
    awaiting_bank_wire = OrderStatus(10, "Awaiting bank wire payment", "#34209E")
    remote_payment_accepted = OrderStatus(11, "Remote payment accepted", "#3498D8")
    on_backorder_not_paid = OrderStatus(12, "On backorder (not paid)", "#ec2e15")
    awaiting_cod_validation = OrderStatus(13, "Awaiting Cash On Delivery validation", "#34209E")

    @classmethod
    def all(cls) -> list[OrderStatus]:
        return sorted(
            (value for value in vars(cls).values() if isinstance(value, OrderStatus)),
            key=lambda status: status.id,
        )
