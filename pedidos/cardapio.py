"""The restaurant menu: the dishes on offer and how the menu is shown."""

import string

STARTERS = (
    "Sopa de Cebola",
    "Salada Caesar",
    "Bruschetta",
    "Carpaccio de Carne",
    "Camarao ao Alho",
)

MAIN_COURSES = (
    "Lasanha a Bolonhesa",
    "File Mignon com Fritas",
    "Frango Grelhado com Legumes",
    "Bacalhau a Gomes de Sa",
    "Risoto de Cogumelos",
)

DESSERTS = (
    "Tiramisu",
    "Cheesecake de Frutas Vermelhas",
    "Mousse de Chocolate",
    "Pudim de Leite",
    "Sorvete de Baunilha com Calda de Morango",
)

MENU = STARTERS + MAIN_COURSES + DESSERTS

_SECTIONS = (
    ("\n ======= Entradas ======= \n\n", STARTERS),
    ("\n======= Pratos Principais =======\n", MAIN_COURSES),
    ("\n======= Sobremesas =======\n", DESSERTS),
)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


_FOLDED_MENU = frozenset(_fold(dish) for dish in MENU)


def is_on_menu(name: str) -> bool:
    """Tell whether ``name`` is a dish on the menu, ignoring ASCII case."""
    return _fold(name) in _FOLDED_MENU


def render_menu() -> str:
    """Return the menu text, section by section, dishes numbered from 1."""
    parts = []
    for header, dishes in _SECTIONS:
        parts.append(header)
        parts.extend(
            f" {number}. {dish}\n" for number, dish in enumerate(dishes, start=1)
        )
    return "".join(parts)