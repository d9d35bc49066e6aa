"""
Modelos de datos para patrones.

Este modulo define las estructuras de datos principales usando dataclasses
inmutables: el sabor compartido (flyweight) y el pedido servido a una mesa.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass(frozen=True)
class Flavor:
    """
    Sabor de cafe compartido entre pedidos.

    Es el estado intrinseco del flyweight: inmutable e identificado
    solo por su nombre. Dos sabores con el mismo nombre son equivalentes.

    Attributes:
        name: Nombre del sabor (ej: "Cappuccino")
    """
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Order:
    """
    Pedido servido: una mesa y el sabor asociado.

    Se desempaqueta como par (mesa, sabor).

    Example:
        >>> table, flavor = Order(3, Flavor("Frappe"))
        >>> table
        3
    """
    table: int
    flavor: Flavor

    def __iter__(self) -> Iterator[Union[int, Flavor]]:
        yield self.table
        yield self.flavor

    def as_tuple(self) -> Tuple[int, Flavor]:
        """Retorna el pedido como tupla (mesa, sabor)."""
        return (self.table, self.flavor)
