"""Customer self-service ordering: catalogue, cart, payment and queue number."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass


class PaymentError(Exception):
    """The amount paid does not cover the total."""

    def __init__(self, total: float, payment: float) -> None:
        super().__init__("Pembayaran gagal, jumlah uang kurang.")
        self.total = total
        self.payment = payment


@dataclass(frozen=True)
class MenuItem:
    """A dish and its price in rupiah."""

    name: str
    price: float


CATALOGUE: tuple[MenuItem, ...] = (
    MenuItem("Rice Bowl", 15000),
    MenuItem("Yamin Pangsit", 12000),
    MenuItem("Katsu", 18000),
    MenuItem("Penyet", 10000),
    MenuItem("Sate Ika", 5000),
)


def _rupiah(amount: float) -> str:
    return f"{amount:,.0f}".replace(",", ".")


def _amount(value: float) -> str:
    return f"{value:g}"


class Cart:
    """Items a customer has picked, in the order they were added."""

    def __init__(self) -> None:
        self._lines: list[tuple[MenuItem, int]] = []

    def __iter__(self) -> Iterator[tuple[MenuItem, int]]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, item: MenuItem, quantity: int) -> None:
        """Put ``quantity`` portions of ``item`` in the cart."""
        self._lines.append((item, quantity))

    def total(self) -> float:
        """Sum of price times quantity over all lines."""
        return sum(item.price * quantity for item, quantity in self._lines)

    def render(self) -> str:
        """Text listing of the cart with the total price."""
        lines = ["", "=== Keranjang Belanja ==="]
        lines.extend(
            f"{quantity} x {item.name} - Rp {_amount(item.price * quantity)}"
            for item, quantity in self._lines
        )
        lines.append("=========================")
        lines.append(f"Total Harga: Rp {_amount(self.total())}")
        return "\n".join(lines)


class QueueNumbers:
    """Hands out consecutive queue numbers."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self.issued: list[int] = []

    def next(self) -> int:
        """Issue the next number."""
        number = self._next
        self.issued.append(number)
        self._next += 1
        return number


def render_catalogue() -> str:
    """The priced menu shown to customers."""
    lines = ["=== Menu Kantin ==="]
    lines.extend(
        f"{number}. {item.name} - Rp {_rupiah(item.price)}"
        for number, item in enumerate(CATALOGUE, start=1)
    )
    lines.append("===================")
    return "\n".join(lines)


def process_payment(total: float, payment: float) -> float:
    """Return the change for ``payment`` against ``total``."""
    if payment >= total:
        return payment - total
    raise PaymentError(total, payment)


def _ask(prompt: str) -> str | None:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    return line.strip() if line else None


def _parse_int(text: str | None) -> int | None:
    try:
        return int(text) if text is not None else None
    except ValueError:
        return None


def _parse_float(text: str | None) -> float:
    try:
        return float(text) if text is not None else 0.0
    except ValueError:
        return 0.0


def main(argv: list[str] | None = None) -> int:
    """Let one customer fill a cart, pay and receive a queue number."""
    parser = argparse.ArgumentParser(
        prog="kantin-pelanggan", description="Canteen self-service ordering."
    )
    parser.parse_args(argv)

    cart = Cart()
    while True:
        print(render_catalogue())
        text = _ask(f"\nPilih menu (1-{len(CATALOGUE)}) atau tekan 0 untuk selesai: ")
        if text is None:
            break
        choice = _parse_int(text)
        if choice == 0:
            break
        if choice is not None and 1 <= choice <= len(CATALOGUE):
            quantity = _parse_int(_ask("Masukkan jumlah: "))
            if quantity is None:
                print("Pilihan tidak valid. Silakan coba lagi.")
                continue
            cart.add(CATALOGUE[choice - 1], quantity)
            print("Pesanan ditambahkan ke keranjang.")
        else:
            print("Pilihan tidak valid. Silakan coba lagi.")

    print(cart.render())
    payment = _parse_float(_ask("\nMasukkan jumlah pembayaran: Rp "))
    try:
        change = process_payment(cart.total(), payment)
    except PaymentError as error:
        print(error)
        print("Pesanan dibatalkan karena pembayaran gagal.")
    else:
        print(f"Pembayaran berhasil. Kembalian: Rp {_amount(change)}")
        print(f"Nomor antrian Anda adalah: {QueueNumbers().next()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())