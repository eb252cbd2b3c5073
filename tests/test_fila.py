import pytest

from pedidos.fila import KitchenQueue
from pedidos.lista import OrderList, create_dish


def test_new_queue_is_empty():
    queue = KitchenQueue()
    assert queue.is_empty() is True
    assert len(queue) == 0


def test_fifo_order():
    queue = KitchenQueue()
    first = create_dish(1, "Bruschetta")
    second = create_dish(2, "Tiramisu")
    queue.enqueue(first)
    queue.enqueue(second)
    assert queue.dequeue() == first
    assert queue.dequeue() == second
    assert queue.is_empty() is True


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        KitchenQueue().dequeue()


def test_send_keeps_list_order():
    orders = OrderList()
    orders.add(create_dish(4, "Bruschetta"))
    orders.add(create_dish(4, "Tiramisu"))
    queue = KitchenQueue()
    queue.send(orders)
    assert [d.name for d in queue] == [d.name for d in orders]
    assert len(queue) == len(orders)


def test_send_copies_so_list_can_be_cleared():
    orders = OrderList([create_dish(4, "Bruschetta")])
    queue = KitchenQueue()
    queue.send(orders)
    orders.clear()
    assert len(queue) == 1


def test_render_empty():
    assert KitchenQueue().render() == "Nenhum pedido em processamento.\n"


def test_render_dishes():
    queue = KitchenQueue()
    queue.enqueue(create_dish(8, "Tiramisu"))
    assert queue.render() == "Numero do pedido: 8\nPrato: Tiramisu\n"