"""
Tablero de pedidos por mesa.

Cada pedido resuelve su sabor a traves de la FlavorCache, de modo que
todas las mesas que piden el mismo sabor comparten la misma instancia.
"""

from typing import Dict, Iterator, Optional

from patrones.config.settings import SERVE_MESSAGE_TEMPLATE
from patrones.core.flyweight import FlavorCache
from patrones.models import Flavor, Order
from patrones.utils import get_logger_manager


class OrderBoard:
    """
    Registro de pedidos: como maximo un sabor por mesa.

    Un nuevo pedido para una mesa existente reemplaza al anterior.
    """

    def __init__(self, flavor_cache: Optional[FlavorCache] = None):
        """
        Inicializa el tablero.

        Args:
            flavor_cache: Cache de sabores a usar (por defecto una nueva)
        """
        self._flavor_cache = flavor_cache if flavor_cache is not None else FlavorCache()
        self._orders: Dict[int, Flavor] = {}

    @property
    def flavor_cache(self) -> FlavorCache:
        """Cache de sabores propia del tablero."""
        return self._flavor_cache

    def take_order(self, flavor_name: str, table: int) -> None:
        """
        Registra el pedido de una mesa.

        Args:
            flavor_name: Nombre del sabor pedido
            table: Identificador de la mesa
        """
        flavor = self._flavor_cache.lookup(flavor_name)

        previous = self._orders.get(table)
        self._orders[table] = flavor

        get_logger_manager().log_order(
            table,
            flavor.name,
            replaced=previous.name if previous is not None else None
        )

    def serve(self) -> Iterator[Order]:
        """
        Recorre los pedidos actuales, uno por mesa.

        El orden de recorrido no esta garantizado.

        Yields:
            Order con la mesa y su sabor
        """
        for table, flavor in list(self._orders.items()):
            yield Order(table, flavor)

    def total_orders(self) -> int:
        """Numero de mesas con pedido."""
        return len(self._orders)

    def print_orders(self) -> int:
        """
        Imprime una linea por cada pedido servido.

        Returns:
            Numero de lineas impresas
        """
        served = 0
        for order in self.serve():
            print(format_serve_line(order))
            served += 1

        get_logger_manager().info(
            "Orders Served",
            context={
                'count': served,
                'distinct_flavors': self._flavor_cache.size()
            },
            logger_name='orders'
        )
        return served


def format_serve_line(order: Order) -> str:
    """
    Construye la linea legible de un pedido servido.

    Args:
        order: Pedido a formatear

    Returns:
        Linea con la mesa y el nombre del sabor
    """
    return SERVE_MESSAGE_TEMPLATE.format(table=order.table, flavor=order.flavor.name)
