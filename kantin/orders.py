"""Customer order queue with a bounded confirmation history."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

_QUEUE_RULE = "------------------------"
_HISTORY_RULE = "----------------"


class QueueEmptyError(Exception):
    """Raised when confirming an order while nobody is waiting."""

    def __init__(self) -> None:
        super().__init__("Antrian kosong!")


@dataclass(frozen=True)
class Order:
    """A customer's order together with its queue number."""

    name: str
    item: str
    quantity: int
    number: int


class OrderQueue:
    """First-in, first-out queue of orders; confirmed orders go to history."""

    def __init__(self, history_limit: int = 100) -> None:
        self._waiting: deque[Order] = deque()
        self._history: list[Order] = []
        self._last_number = 0
        self.history_limit = history_limit

    def __iter__(self) -> Iterator[Order]:
        return iter(self._waiting)

    def __len__(self) -> int:
        return len(self._waiting)

    @property
    def history(self) -> tuple[Order, ...]:
        """Confirmed orders, oldest first."""
        return tuple(self._history)

    @property
    def history_full(self) -> bool:
        """True once the history holds ``history_limit`` orders."""
        return len(self._history) >= self.history_limit

    def enqueue(self, name: str, item: str, quantity: int) -> Order:
        """Add an order to the back of the queue with the next number."""
        self._last_number += 1
        order = Order(name, item, quantity, self._last_number)
        self._waiting.append(order)
        return order

    def confirm(self) -> Order:
        """Take the front order off the queue and record it in history.

        When the history is full the order is still removed but not recorded.
        """
        if not self._waiting:
            raise QueueEmptyError()
        order = self._waiting.popleft()
        if not self.history_full:
            self._history.append(order)
        return order

    def render(self) -> str:
        """Text listing of the waiting customers."""
        if not self._waiting:
            return "Antrian kosong!"
        lines = ["", "Daftar Antrian Pelanggan:", _QUEUE_RULE]
        for order in self._waiting:
            lines += [
                f"Nomor Antrian: {order.number}",
                f"Nama: {order.name}",
                f"Pesanan: {order.item}",
                f"Jumlah: {order.quantity}",
                _QUEUE_RULE,
            ]
        return "\n".join(lines)

    def render_history(self) -> str:
        """Text listing of the confirmed orders."""
        if not self._history:
            return "Riwayat pesanan kosong!"
        lines = ["", "Riwayat Pesanan:", _HISTORY_RULE]
        for position, order in enumerate(self._history, start=1):
            lines += [
                f"Pesanan ke-{position}:",
                f"Nama: {order.name}",
                f"Pesanan: {order.item}",
                f"Nomor Antrian: {order.number}",
                f"Jumlah: {order.quantity}",
                _HISTORY_RULE,
            ]
        return "\n".join(lines)