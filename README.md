# pedidos

This is a small terminal program for taking restaurant orders and passing
them to the kitchen. The prompts and the menu are in Portuguese.

## Installing

    pip install .

## Running

    pedidos

The program reads choices from standard input, one per line. It stops when
you choose to quit or when input ends.

The main menu has three choices:

1. **Realizar Atendimento**: take an order. You enter the order number
   first. You then get the service menu:
   - *Adicionar prato*: prints the menu and asks for a dish name. The program
     accepts a name only if it matches a dish on the menu. It ignores ASCII
     case. It reads at most 59 characters of the name.
   - *Mostrar pedido*: lists the dishes of the current order, newest first.
   - *Finalizar pedido*: sends every dish of the current order to the
     kitchen queue and empties the order.
   - *Voltar ao menu principal*: goes back.
2. **Acessar Cozinha**: opens the kitchen menu:
   - *Exibir cozinha*: shows the dishes that are waiting.
   - *Processar pedido*: takes the dish at the front of the queue and moves
     it to the finished orders.
   - Option 3 lists the finished orders, newest first.
   - Option 4 goes back.
3. **Fechar Programa**: quits.

## Using it from Python

The package has four modules:

- `pedidos.cardapio` holds the menu (`STARTERS`, `MAIN_COURSES`, `DESSERTS`,
  `MENU`). It also has `is_on_menu(name)` and `render_menu()`.
- `pedidos.lista` holds the frozen dataclass `Dish` (`name`, `order_number`).
  It has `create_dish(order_number, name)`, which keeps at most 99 characters
  of the name. It has `OrderList`, which holds the current order, and
  `FinishedOrders`. Both keep the newest dish first, and both have `add`,
  `render`, iteration and `len`. `OrderList` also has `clear`.
- `pedidos.fila` holds `KitchenQueue`, a first-in-first-out queue. It has
  `enqueue`, `dequeue` and `is_empty`. `dequeue` raises `IndexError` when the
  queue is empty. It also has `send(orders)` to queue many dishes at once,
  `render`, iteration and `len`.
- `pedidos.interface` holds `Restaurant(stdin, stdout)`, whose `run()` drives
  the menus over any text streams. It also holds `main()`, which is the
  `pedidos` command.

```python
import io
from pedidos.cardapio import is_on_menu
from pedidos.lista import OrderList, create_dish
from pedidos.fila import KitchenQueue
from pedidos.interface import Restaurant

assert is_on_menu("tiramisu")

order = OrderList()
order.add(create_dish(7, "Tiramisu"))

kitchen = KitchenQueue()
kitchen.send(order)
print(kitchen.dequeue())   # Dish(name='Tiramisu', order_number=7)

out = io.StringIO()
Restaurant(io.StringIO("3\n"), out).run()
```

## What it does not do

- The service menu lists *Remover prato*, but choosing it does nothing. You
  cannot remove a dish from an order once you have added it.
- Orders, the kitchen queue and the finished orders are kept only in memory.
  The program does not save them, so they are lost when it ends.

## Tests

    pip install .[test]
    pytest