"""Order taking, menu checking and kitchen queue for a small restaurant."""

__version__ = "0.1.0"
__all__ = ["cardapio", "lista", "fila", "interface"]