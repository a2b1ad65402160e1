"""Canteen menu with per-item stock levels."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_DEFAULT_ENTRIES = (
    ("Nasi Goreng", 10),
    ("Rice Bowl", 0),
    ("Air Putih", 8),
    ("Soto", 9),
)


class StockError(Exception):
    """Base class for menu and stock errors."""


class MenuNotFoundError(StockError):
    """No menu entry carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Menu {name} tidak ditemukan.")
        self.name = name


class InsufficientStockError(StockError):
    """The entry exists but holds too little stock."""

    def __init__(self, name: str, quantity: int) -> None:
        super().__init__(f"Stok {name} tidak cukup atau menu tidak ditemukan")
        self.name = name
        self.quantity = quantity


class InvalidChoiceError(StockError):
    """A menu number does not point at any entry."""

    def __init__(self, number: int) -> None:
        super().__init__("Pilihan menu tidak valid!")
        self.number = number


@dataclass
class MenuEntry:
    """One dish on the menu and how many portions are left."""

    name: str
    stock: int


class Menu:
    """Ordered collection of menu entries."""

    def __init__(self, entries: Iterable[MenuEntry | tuple[str, int]] = ()) -> None:
        self._entries: list[MenuEntry] = []
        for entry in entries:
            if isinstance(entry, MenuEntry):
                self._entries.append(MenuEntry(entry.name, entry.stock))
            else:
                name, stock = entry
                self.add(name, stock)

    def __iter__(self) -> Iterator[MenuEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _find(self, name: str) -> MenuEntry | None:
        return next((entry for entry in self._entries if entry.name == name), None)

    def add(self, name: str, stock: int) -> MenuEntry:
        """Append a new entry at the end of the menu."""
        entry = MenuEntry(name, stock)
        self._entries.append(entry)
        return entry

    def remove(self, name: str) -> MenuEntry:
        """Remove the first entry with this name and return it."""
        entry = self._find(name)
        if entry is None:
            raise MenuNotFoundError(name)
        self._entries.remove(entry)
        return entry

    def has_stock(self, name: str, quantity: int) -> bool:
        """True if the named entry exists and holds at least ``quantity``."""
        entry = self._find(name)
        return entry is not None and entry.stock >= quantity

    def reduce_stock(self, name: str, quantity: int) -> MenuEntry:
        """Take ``quantity`` portions from the named entry."""
        entry = self._find(name)
        if entry is None:
            raise MenuNotFoundError(name)
        if entry.stock < quantity:
            raise InsufficientStockError(name, quantity)
        entry.stock -= quantity
        return entry

    def by_number(self, number: int) -> MenuEntry:
        """Return the entry shown under ``number`` (counting from 1)."""
        if 1 <= number <= len(self._entries):
            return self._entries[number - 1]
        raise InvalidChoiceError(number)

    def render(self) -> str:
        """Text listing of the menu, as shown to the cashier."""
        if not self._entries:
            return "Daftar menu kosong!"
        lines = ["", "Daftar Menu:", "------------"]
        lines.extend(
            f"{number}. {entry.name} (Stok: {entry.stock})"
            for number, entry in enumerate(self._entries, start=1)
        )
        return "\n".join(lines)


def default_menu() -> Menu:
    """The menu the canteen opens with."""
    return Menu(_DEFAULT_ENTRIES)