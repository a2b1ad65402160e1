# kantin

A small console system for a canteen counter. It installs two interactive
commands. All prompts and messages are in Indonesian.

- **`kantin`** runs the counter queue. It keeps a menu with stock levels and
  takes customer orders. Stock is checked when an order is placed and reduced
  when the order is accepted. It confirms customers from the front of the
  queue and lists the history of confirmed orders. Dishes can be added to or
  removed from the menu through the "Tampilkan Daftar Menu" sub-menu.
- **`kantin-cart`** is the customer side. The customer picks dishes from a
  fixed price list into a cart, sees the total, and pays. If the payment
  covers the total, the customer gets a queue number.

## Installing

```
pip install .
```

## `kantin`

```
kantin
```

The main menu offers:

1. Tambah Pesanan: add an order (customer name, menu number, quantity)
2. Confirm Antrian: confirm the customer at the front of the queue
3. Tampilkan Antrian: show the waiting queue
4. Tampilkan Daftar Menu: show the menu, then add a dish, remove a dish, or go back
5. Riwayat Pesanan: show the history of confirmed orders
6. Keluar: quit

The menu starts with Nasi Goreng (10), Rice Bowl (0), Air Putih (8) and
Soto (9). An order is refused in three cases:

- the quantity is not positive
- the menu number does not exist
- there is not enough stock

Queue numbers start at 1 and go up by one for each accepted order. The
history keeps at most 100 confirmed orders. Once it is full, further
confirmations still take the customer off the queue, but they are not
recorded and a notice is printed.

The program stops when you choose 6 or when input ends. Customers still
waiting at that point are confirmed in order.

## `kantin-cart`

```
kantin-cart
```

1. Choose dishes 1 to 5 and give a quantity for each. Enter 0, or end the
   input, to finish.
2. The cart and its total are shown.
3. Enter the amount paid.

If the amount covers the total, you are shown your change and a queue
number. Otherwise the order is cancelled. Each run serves a single customer
and hands out queue number 1.

## Using it from Python

```python
from kantin.stock import Menu, default_menu
from kantin.orders import OrderQueue
from kantin.app import Canteen

menu = default_menu()
menu.add("Bakso", 5)
print(menu.render())

queue = OrderQueue(100)
order = queue.enqueue("Budi", "Soto", 2)
menu.reduce_stock("Soto", 2)
confirmed = queue.confirm()
print(queue.render_history())

canteen = Canteen(menu=menu, queue=queue)
canteen.place_order("Sari", 1, 3)   # menu number 1, three portions
```

`Menu` iterates over `MenuEntry` objects, which have `name` and `stock`
attributes. `OrderQueue` iterates over the waiting `Order` objects, which
have `name`, `item`, `quantity` and `number` attributes. The confirmed
orders are available as `OrderQueue.history`.

`Canteen` takes optional `stdin` and `stdout` streams. This lets `run()` be
driven from any text source.

Failures are raised as exceptions:

- `MenuNotFoundError`, `InsufficientStockError` and `InvalidChoiceError`
  from `kantin.stock`. All three are subclasses of `StockError`.
- `QueueEmptyError` from `kantin.orders`.
- `PaymentError` from `kantin.cart`.
- `Canteen.place_order` raises `ValueError` for a quantity that is not
  positive.

The cart can also be used on its own:

```python
from kantin.cart import CATALOGUE, Cart, MenuItem, QueueNumbers, process_payment

cart = Cart()
cart.add(MenuItem("Katsu", 18000), 2)
cart.add(CATALOGUE[0], 1)
change = process_payment(cart.total(), 60000)
number = QueueNumbers(1).next()
print(cart.render())
```

## What it does not do

Everything is held in memory for one run. The menu, its stock, the queue
and the order history are not saved anywhere and start afresh each time.
The two commands are separate and do not share state:

- orders placed with `kantin-cart` do not reach the `kantin` queue
- the cart's price list is not tied to the stock-tracked menu

## Tests

```
pip install .[test]
pytest
```