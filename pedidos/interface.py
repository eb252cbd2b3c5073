"""The interactive text interface for taking orders and running the kitchen."""

import re
import sys
from typing import TextIO

from pedidos.cardapio import is_on_menu, render_menu
from pedidos.fila import KitchenQueue
from pedidos.lista import FinishedOrders, OrderList, create_dish

_NAME_INPUT_LIMIT = 59
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MAIN_MENU = (
    "\n---------- INTERFACE MENU ----------\n\n"
    "Escolha uma opcao: \n\n1. Realizar Atendimento\n2. Acessar Cozinha\n"
    "3. Fechar Programa\n\n"
)
_SERVICE_MENU = (
    "\nEscolhido: Realizar o atendimento\n"
    "\nEscolha uma opcao: \n\n1. Adicionar prato\n2. Remover prato\n"
    "3. Mostrar pedido\n4. Finalizar pedido\n5. Voltar ao menu principal\n\n"
)
_KITCHEN_MENU = (
    "\nEscolhido: Acessar Cozinha\n"
    "\nEscolha uma opcao: \n\n1. Exibir cozinha\n2. Processar pedido\n"
    "3. --------\n4. Voltar ao menu principal\n\n"
)


class Restaurant:
    """Order taking and kitchen processing driven by lines of text."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.orders = OrderList()
        self.kitchen = KitchenQueue()
        self.finished = FinishedOrders()
        self._order_number = 0

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _read_int(self) -> int | None:
        """Read the next non-blank line and return its leading integer, if any."""
        line = self._read_line()
        while not line.strip():
            line = self._read_line()
        match = _LEADING_INT.match(line)
        return int(match.group(1)) if match else None

    def run(self) -> None:
        """Run the main menu until the user quits or input ends."""
        try:
            self._main_loop()
        except EOFError:
            pass

    def _main_loop(self) -> None:
        while True:
            self._write(_MAIN_MENU)
            choice = self._read_int()
            if choice == 1:
                self._write("\nQual o numero do pedido?\n")
                number = self._read_int()
                if number is not None:
                    self._order_number = number
                self._service_loop()
            elif choice == 2:
                self._kitchen_loop()
            elif choice == 3:
                self._write("Escolhido: Sair do menu\n")
                return
            else:
                self._write("\nOpcao invalida!\n")

    def _service_loop(self) -> None:
        while True:
            self._write(_SERVICE_MENU)
            choice = self._read_int()
            if choice == 1:
                self._add_dish()
            elif choice == 2:
                pass
            elif choice == 3:
                self._write(self.orders.render())
            elif choice == 4:
                self._write("\nFinalizando pedido e enviando para a cozinha...\n")
                self.kitchen.send(self.orders)
                self.orders.clear()
                self._write("Pedido enviado com sucesso!\n")
            elif choice == 5:
                self._write("\nEscolhido opc: Voltar ao menu principal\n")
                return
            else:
                self._write("\nOpc invalida!\n")

    def _add_dish(self) -> None:
        self._write("\nAdicionar prato\n")
        self._write(f"nummero do pedido: {self._order_number}")
        self._write(render_menu())
        self._write("\nInserir nome do pedido: \n")
        name = self._read_line()[:_NAME_INPUT_LIMIT]
        if is_on_menu(name):
            self.orders.add(create_dish(self._order_number, name))
        else:
            self._write("Prato nao consta no cardapio!\n")

    def _kitchen_loop(self) -> None:
        while True:
            self._write(_KITCHEN_MENU)
            choice = self._read_int()
            if choice == 1:
                self._write("\nEscolhido opc: 1\n")
                self._write(self.kitchen.render())
            elif choice == 2:
                self._write("\nEscolhido opc: 2\n")
                self._write("\nProcessando pedido...\n")
                self._process_next()
            elif choice == 3:
                self._write(self.finished.render())
                self._write("\nEscolhido opc: 3\n")
            elif choice == 4:
                self._write("\nEscolhido opc: Voltar ao menu principal\n")
                return

    def _process_next(self) -> None:
        try:
            dish = self.kitchen.dequeue()
        except IndexError:
            self._write("Fila vazia.\n")
            return
        self._write(
            f"Pedido {dish.order_number} com prato {dish.name} foi processado.\n"
        )
        self.finished.add(dish)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive interface on the standard streams."""
    Restaurant(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())