"""
Cache de sabores compartidos.

Implementa el patron Flyweight: cada sabor se crea una sola vez por
nombre y se reutiliza en todos los pedidos que lo piden.

Patterns:
- Flyweight: Instancias compartidas e inmutables
- Factory: La cache es el unico punto de creacion de sabores
"""

from typing import Dict, List

from patrones.models import Flavor
from patrones.utils import get_logger, get_logger_manager


class FlavorCache:
    """
    Fabrica y registro de sabores (flyweights).

    El mapeo nombre -> sabor solo crece durante la vida de la cache.
    No es thread-safe: quien la comparta entre hilos debe serializar el acceso.
    """

    def __init__(self):
        """Inicializa la cache vacia."""
        self.logger = get_logger(self.__class__.__name__)
        self._flavors: Dict[str, Flavor] = {}

    def lookup(self, name: str) -> Flavor:
        """
        Obtiene el sabor compartido para un nombre.

        Si el sabor no existe se crea y se registra; si existe se
        retorna la misma instancia.

        Args:
            name: Nombre del sabor

        Returns:
            Flavor compartido
        """
        flavor = self._flavors.get(name)
        if flavor is not None:
            self.logger.debug(f"Cache HIT: {name}")
            return flavor

        flavor = Flavor(name)
        self._flavors[name] = flavor
        get_logger_manager().debug(
            f"Flyweight created: {name}",
            context={'total_flavors': len(self._flavors)},
            logger_name=self.__class__.__name__
        )
        return flavor

    def size(self) -> int:
        """Numero de sabores distintos creados."""
        return len(self._flavors)

    def list_flavors(self) -> List[str]:
        """
        Lista nombres de sabores registrados.

        Returns:
            Lista de nombres en orden de creacion
        """
        return list(self._flavors.keys())

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name: object) -> bool:
        return name in self._flavors
