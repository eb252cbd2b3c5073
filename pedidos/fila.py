"""The kitchen queue: dishes wait here, first in first out, to be processed."""

from collections import deque
from typing import Iterable, Iterator

from pedidos.lista import Dish


class KitchenQueue:
    """Dishes sent to the kitchen, oldest first."""

    def __init__(self) -> None:
        self._dishes: deque[Dish] = deque()

    def enqueue(self, dish: Dish) -> None:
        """Add ``dish`` at the back of the queue."""
        self._dishes.append(dish)

    def dequeue(self) -> Dish:
        """Remove and return the dish at the front; raise IndexError when empty."""
        if not self._dishes:
            raise IndexError("kitchen queue is empty")
        return self._dishes.popleft()

    def is_empty(self) -> bool:
        """Tell whether no dish is waiting."""
        return not self._dishes

    def send(self, orders: Iterable[Dish]) -> None:
        """Queue every dish of ``orders`` in the order they are iterated."""
        self._dishes.extend(orders)

    def render(self) -> str:
        """Return the waiting dishes, or a note that there are none."""
        if not self._dishes:
            return "Nenhum pedido em processamento.\n"
        return "".join(
            f"Numero do pedido: {dish.order_number}\nPrato: {dish.name}\n"
            for dish in self
        )

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)