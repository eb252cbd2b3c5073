"""Dishes and the lists that hold them: the order being taken and finished orders."""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator

NAME_LIMIT = 99


@dataclass(frozen=True)
class Dish:
    """A dish belonging to an order."""

    name: str
    order_number: int


def create_dish(order_number: int, name: str) -> Dish:
    """Make a dish for an order, keeping at most ``NAME_LIMIT`` characters of its name."""
    return Dish(name=name[:NAME_LIMIT], order_number=order_number)


class OrderList:
    """The dishes of the order being taken, newest first."""

    def __init__(self, dishes: Iterable[Dish] = ()) -> None:
        self._dishes: deque[Dish] = deque()
        for dish in dishes:
            self.add(dish)

    def add(self, dish: Dish) -> None:
        """Put ``dish`` at the front."""
        self._dishes.appendleft(dish)

    def clear(self) -> None:
        """Drop every dish."""
        self._dishes.clear()

    def render(self) -> str:
        """Return the order as a numbered listing."""
        lines = "".join(
            f"{index}. {dish.name}\n" for index, dish in enumerate(self, start=1)
        )
        return f"\n\tPedido: \n\n{lines}\n\n"

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)


class FinishedOrders:
    """Dishes the kitchen has processed, newest first."""

    def __init__(self, dishes: Iterable[Dish] = ()) -> None:
        self._dishes: deque[Dish] = deque()
        for dish in dishes:
            self.add(dish)

    def add(self, dish: Dish) -> None:
        """Put ``dish`` at the front."""
        self._dishes.appendleft(dish)

    def render(self) -> str:
        """Return the finished dishes, or a note that there are none."""
        if not self._dishes:
            return "Nenhum pedido finalizado.\n"
        lines = "".join(
            f"Pedido {dish.order_number} - {dish.name}\n" for dish in self
        )
        return f"\n=== Pedidos Finalizados ===\n{lines}"

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)