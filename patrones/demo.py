"""
Demostracion de los patrones Flyweight y Strategy.

Ejecutar con: python -m patrones
"""

from typing import Dict

from patrones.core.orders import OrderBoard
from patrones.core.factories import TextPrinterFactory
from patrones.utils import get_logger

logger = get_logger(__name__)

# Pedidos de ejemplo (sabor, mesa). La mesa 3 pide dos veces.
DEMO_ORDERS = [
    ("Cappuccino", 1),
    ("Frappe", 3),
    ("Espresso", 2),
    ("Frappe", 15),
    ("Cappuccino", 10),
    ("Frappe", 8),
    ("Espresso", 7),
    ("Cappuccino", 4),
    ("Espresso", 9),
    ("Frappe", 12),
    ("Cappuccino", 13),
    ("Espresso", 5),
    ("Cappuccino", 3),
]

DEMO_TEXT = "O tempora, o mores!"


def run_flyweight_demo() -> OrderBoard:
    """
    Registra los pedidos de ejemplo y los sirve.

    Returns:
        OrderBoard con los pedidos registrados
    """
    board = OrderBoard()
    for flavor_name, table in DEMO_ORDERS:
        board.take_order(flavor_name, table)

    board.print_orders()
    print(f"Total flavor objects made: {board.flavor_cache.size()}")
    return board


def run_strategy_demo(text: str = DEMO_TEXT) -> Dict[str, str]:
    """
    Aplica cada estrategia registrada al texto.

    Args:
        text: Texto de entrada

    Returns:
        Diccionario nombre de estrategia -> resultado
    """
    results = {}
    for name, printer in TextPrinterFactory.create_all().items():
        results[name] = printer.apply(text)
        print(results[name])
    return results


def main():
    """Ejecuta ambas demostraciones."""
    logger.info("Running Flyweight demo")
    run_flyweight_demo()

    logger.info("Running Strategy demo")
    run_strategy_demo()
