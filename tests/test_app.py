import io
import sys

import pytest

from kantin.app import Canteen, main
from kantin.orders import OrderQueue
from kantin.stock import InsufficientStockError, InvalidChoiceError, Menu


def _session(script, queue=None):
    out = io.StringIO()
    canteen = Canteen(queue=queue, stdin=io.StringIO(script), stdout=out)
    canteen.run()
    return canteen, out.getvalue()


def test_place_order_queues_and_reduces_stock():
    canteen = Canteen(stdin=io.StringIO(""), stdout=io.StringIO())
    before = canteen.menu.by_number(1).stock
    order = canteen.place_order("Budi", 1, 2)
    assert order.item == "Nasi Goreng"
    assert order.number == 1
    assert canteen.menu.by_number(1).stock == before - 2
    assert list(canteen.queue) == [order]


def test_place_order_numbers_increase():
    canteen = Canteen(stdin=io.StringIO(""), stdout=io.StringIO())
    first = canteen.place_order("A", 1, 1)
    second = canteen.place_order("B", 3, 1)
    assert second.number == first.number + 1


def test_place_order_rejects_non_positive_quantity():
    canteen = Canteen(stdin=io.StringIO(""), stdout=io.StringIO())
    with pytest.raises(ValueError):
        canteen.place_order("Budi", 1, 0)
    assert len(canteen.queue) == 0


def test_place_order_rejects_unknown_number():
    canteen = Canteen(stdin=io.StringIO(""), stdout=io.StringIO())
    with pytest.raises(InvalidChoiceError):
        canteen.place_order("Budi", 99, 1)


def test_place_order_insufficient_stock_leaves_state():
    canteen = Canteen(stdin=io.StringIO(""), stdout=io.StringIO())
    with pytest.raises(InsufficientStockError):
        canteen.place_order("Ani", 2, 1)
    assert len(canteen.queue) == 0
    assert canteen.menu.by_number(2).stock == 0


def test_run_takes_order_and_drains_queue_on_exit():
    canteen, output = _session("1\nBudi\n1\n2\n6\n")
    assert (
        "Pelanggan Budi ditambahkan ke antrian dengan nomor 1 "
        "(Pesanan: Nasi Goreng, Jumlah: 2)" in output
    )
    assert "Stok Nasi Goreng berhasil dikurangi sebanyak 2" in output
    assert "Terima Kasih" in output
    assert "Pelanggan Budi dengan nomor antrian 1 telah dikonfirmasi." in output
    assert len(canteen.queue) == 0
    assert [order.name for order in canteen.queue.history] == ["Budi"]


def test_run_reports_insufficient_stock():
    _, output = _session("1\nAni\n2\n1\n6\n")
    assert "Maaf, stok Rice Bowl tidak cukup untuk 1 pesanan!" in output


def test_run_empty_queue_messages():
    _, output = _session("2\n3\n5\n6\n")
    assert output.count("Antrian kosong!") == 2
    assert "Riwayat pesanan kosong!" in output


def test_run_invalid_option():
    _, output = _session("9\nabc\n6\n")
    assert output.count("Pilihan tidak valid!") == 2


def test_run_adds_menu_entry():
    canteen, _ = _session("4\n1\nBakso\n5\n6\n")
    names = [entry.name for entry in canteen.menu]
    assert names[-1] == "Bakso"
    assert canteen.menu.by_number(len(canteen.menu)).stock == 5


def test_run_removes_menu_entry():
    canteen, output = _session("4\n2\nSoto\n6\n")
    assert "Menu Soto telah dihapus." in output
    assert "Soto" not in [entry.name for entry in canteen.menu]


def test_run_remove_unknown_menu_entry():
    canteen, output = _session("4\n2\nBakso\n6\n")
    assert "Menu Bakso tidak ditemukan." in output
    assert len(canteen.menu) == 4


def test_run_stops_at_end_of_input():
    canteen, output = _session("")
    assert "Sistem Antrian Kantin" in output
    assert "Terima Kasih" not in output


def test_confirm_reports_full_history():
    canteen, output = _session("1\nBudi\n1\n1\n2\n6\n", queue=OrderQueue(history_limit=0))
    assert "Riwayat pesanan penuh!" in output
    assert canteen.queue.history == ()


def test_empty_menu_is_kept():
    canteen = Canteen(menu=Menu(), stdin=io.StringIO(""), stdout=io.StringIO())
    assert len(canteen.menu) == 0


def test_main_exits_cleanly(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n"))
    assert main([]) == 0
    assert "Terima Kasih" in capsys.readouterr().out