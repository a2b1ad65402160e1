"""Interactive cashier console for the canteen order queue."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from kantin.orders import Order, OrderQueue
from kantin.stock import InsufficientStockError, InvalidChoiceError, Menu, MenuNotFoundError, default_menu

_MAIN_MENU = "\n".join(
    [
        "",
        "Sistem Antrian Kantin",
        "1. Tambah Pesanan",
        "2. Confirm Antrian",
        "3. Tampilkan Antrian",
        "4. Tampilkan Daftar Menu",
        "5. Riwayat Pesanan",
        "6. Keluar",
    ]
)

_SUB_MENU = "\n".join(
    [
        "",
        "Sub-Menu Daftar Menu:",
        "1. Tambah Menu",
        "2. Hapus Menu",
        "3. Kembali ke Menu Utama",
    ]
)

_EXIT_CHOICE = 6
_INVALID = "Pilihan tidak valid!"


class Canteen:
    """Menu stock and order queue driven by a text dialogue."""

    def __init__(
        self,
        menu: Menu | None = None,
        queue: OrderQueue | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.menu = menu if menu is not None else default_menu()
        self.queue = queue if queue is not None else OrderQueue()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def place_order(self, name: str, choice: int, quantity: int) -> Order:
        """Queue an order for menu number ``choice`` and take it from stock."""
        if quantity <= 0:
            raise ValueError("Jumlah pesanan harus lebih dari 0!")
        entry = self.menu.by_number(choice)
        if not self.menu.has_stock(entry.name, quantity):
            raise InsufficientStockError(entry.name, quantity)
        order = self.queue.enqueue(name, entry.name, quantity)
        self.menu.reduce_stock(entry.name, quantity)
        return order

    def run(self) -> None:
        """Serve the main menu until the user leaves or input runs out.

        Customers still waiting at the end are confirmed in order.
        """
        actions: dict[int, Callable[[], None]] = {
            1: self._take_order,
            2: self._confirm_next,
            3: lambda: self._say(self.queue.render()),
            4: self._manage_menu,
            5: lambda: self._say(self.queue.render_history()),
        }
        try:
            while True:
                self._say(_MAIN_MENU)
                choice = self._ask_int("Pilih opsi (1-6): ")
                if choice == _EXIT_CHOICE:
                    self._say("Terima Kasih")
                    break
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._say(_INVALID)
                else:
                    action()
        except EOFError:
            pass
        while self.queue:
            self._confirm_next()

    def _say(self, text: str) -> None:
        self._stdout.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int | None:
        text = self._ask(prompt).strip()
        try:
            return int(text)
        except ValueError:
            return None

    def _take_order(self) -> None:
        name = self._ask("Masukkan nama pelanggan: ")
        self._say(self.menu.render())
        choice = self._ask_int("Pilih nomor menu: ")
        quantity = self._ask_int("Masukkan jumlah pesanan: ")
        try:
            order = self.place_order(name, choice or 0, quantity or 0)
        except ValueError as error:
            self._say(str(error))
        except InvalidChoiceError as error:
            self._say(str(error))
        except InsufficientStockError as error:
            self._say(f"Maaf, stok {error.name} tidak cukup untuk {error.quantity} pesanan!")
        else:
            self._say(
                f"Pelanggan {order.name} ditambahkan ke antrian dengan nomor {order.number} "
                f"(Pesanan: {order.item}, Jumlah: {order.quantity})"
            )
            self._say(f"Stok {order.item} berhasil dikurangi sebanyak {order.quantity}")

    def _confirm_next(self) -> None:
        if not self.queue:
            self._say("Antrian kosong!")
            return
        was_full = self.queue.history_full
        order = self.queue.confirm()
        self._say(
            f"Pelanggan {order.name} dengan nomor antrian {order.number} telah dikonfirmasi."
        )
        if was_full:
            self._say("Riwayat pesanan penuh!")

    def _manage_menu(self) -> None:
        self._say(self.menu.render())
        self._say(_SUB_MENU)
        choice = self._ask_int("Pilih opsi (1-3): ")
        if choice == 1:
            self._say("Tambah Menu")
            name = self._ask("Masukkan nama menu: ").strip()
            stock = self._ask_int("Masukkan jumlah stok: ")
            if stock is None:
                self._say(_INVALID)
                return
            self.menu.add(name, stock)
        elif choice == 2:
            self._say("Hapus Menu")
            name = self._ask("Masukkan nama menu yang ingin dihapus: ")
            try:
                self.menu.remove(name)
            except MenuNotFoundError as error:
                self._say(str(error))
            else:
                self._say(f"Menu {name} telah dihapus.")
        elif choice != 3:
            self._say(_INVALID)


def main(argv: list[str] | None = None) -> int:
    """Run the canteen queue console on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="kantin", description="Canteen order queue and menu stock console."
    )
    parser.parse_args(argv)
    Canteen().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())