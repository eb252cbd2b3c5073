import pytest

from pedidos.cardapio import DESSERTS, MAIN_COURSES, MENU, STARTERS, is_on_menu, render_menu


@pytest.mark.parametrize("dish", MENU)
def test_every_menu_dish_is_on_menu(dish):
    assert is_on_menu(dish) is True


@pytest.mark.parametrize("name", ["tiramisu", "SOPA DE CEBOLA", "bRuScHeTtA"])
def test_lookup_ignores_case(name):
    assert is_on_menu(name) is True


@pytest.mark.parametrize("name", ["", "Pizza", "Tiramisu ", "Sopa"])
def test_unknown_names_are_rejected(name):
    assert is_on_menu(name) is False


def test_menu_has_fifteen_dishes_in_sections():
    sections = [*STARTERS, *MAIN_COURSES, *DESSERTS]
    assert len(sections) == 15
    assert all(is_on_menu(dish) for dish in sections)
    assert all(is_on_menu(dish.upper()) for dish in sections)
    assert MENU[0] == "Sopa de Cebola"
    assert MENU[-1] == "Sorvete de Baunilha com Calda de Morango"


def test_render_menu_layout():
    text = render_menu()
    assert text.startswith("\n ======= Entradas ======= \n\n 1. Sopa de Cebola\n")
    assert "\n======= Pratos Principais =======\n 1. Lasanha a Bolonhesa\n" in text
    assert "\n======= Sobremesas =======\n 1. Tiramisu\n" in text
    assert text.endswith(" 5. Sorvete de Baunilha com Calda de Morango\n")


def test_render_menu_lists_every_dish_once():
    text = render_menu()
    for dish in MENU:
        assert text.count(f". {dish}\n") == 1