"""
Registro y factories de estrategias de texto.

Este modulo centraliza la creacion de estrategias y printers a partir
de su nombre, de modo que el conjunto de estrategias sea abierto.

Patterns:
- Registry + Singleton: Un unico registro nombre -> clase
- Factory Method: Creacion de printers desde configuracion
"""

from typing import Dict, List, Optional, Type

from patrones.config.settings import DEFAULT_TEXT_CASE, TextCase
from patrones.core.strategies import (
    TextStrategy,
    UpperCaseStrategy,
    LowerCaseStrategy,
    TextPrinter,
    InvalidStrategyError,
    UnknownStrategyError
)
from patrones.utils import get_logger, get_logger_manager


class StrategyRegistry:
    """
    Registro centralizado de estrategias de texto.

    Permite registrar y crear estrategias por nombre.
    Pattern: Registry + Singleton
    """

    _instance: Optional['StrategyRegistry'] = None

    def __new__(cls):
        """Implementa Singleton."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Inicializa registros."""
        self.logger = get_logger(self.__class__.__name__)
        self._strategies: Dict[str, Type[TextStrategy]] = {}

        self._register_default_strategies()

    def _register_default_strategies(self):
        """Registra las estrategias incluidas."""
        self.register(TextCase.UPPER.value, UpperCaseStrategy)
        self.register(TextCase.LOWER.value, LowerCaseStrategy)

    def register(self, name: str, strategy_cls: Type[TextStrategy]):
        """
        Registra una clase de estrategia.

        Un nombre ya registrado se sobrescribe (con un warning).

        Args:
            name: Nombre unico (sin distinguir mayusculas)
            strategy_cls: Subclase de TextStrategy

        Raises:
            InvalidStrategyError: Si strategy_cls no es subclase de TextStrategy
        """
        if not (isinstance(strategy_cls, type) and issubclass(strategy_cls, TextStrategy)):
            raise InvalidStrategyError(
                f"Cannot register {strategy_cls!r}: not a TextStrategy subclass"
            )

        key = name.lower()
        previous = self._strategies.get(key)
        if previous is not None and previous is not strategy_cls:
            get_logger_manager().warning(
                f"Strategy '{key}' replaced",
                context={
                    'previous': previous.__name__,
                    'new': strategy_cls.__name__
                },
                logger_name=self.__class__.__name__
            )

        self._strategies[key] = strategy_cls
        self.logger.debug(f"Strategy registered: {key}")

    def create(self, name: str) -> TextStrategy:
        """
        Crea una instancia de la estrategia registrada.

        Args:
            name: Nombre de la estrategia

        Returns:
            Nueva instancia de la estrategia

        Raises:
            UnknownStrategyError: Si el nombre no esta registrado
        """
        strategy_cls = self._strategies.get(name.lower())
        if strategy_cls is None:
            raise UnknownStrategyError(
                f"Unknown strategy '{name}'. "
                f"Available: {', '.join(self.list_strategies())}"
            )
        return strategy_cls()

    def is_registered(self, name: str) -> bool:
        """Verifica si el nombre esta registrado."""
        return name.lower() in self._strategies

    def list_strategies(self) -> List[str]:
        """
        Lista nombres de estrategias registradas.

        Returns:
            Lista de nombres
        """
        return list(self._strategies.keys())


# Instancia singleton del registro
registry = StrategyRegistry()


class TextPrinterFactory:
    """
    Factory para crear instancias de TextPrinter.
    """

    @staticmethod
    def create(name: Optional[str] = None) -> TextPrinter:
        """
        Crea un printer con la estrategia indicada.

        Args:
            name: Nombre de la estrategia (default: DEFAULT_TEXT_CASE)

        Returns:
            TextPrinter configurado

        Example:
            >>> TextPrinterFactory.create('lower').apply('ABC')
            'abc'
        """
        return TextPrinter(registry.create(name or DEFAULT_TEXT_CASE))

    @staticmethod
    def create_all() -> Dict[str, TextPrinter]:
        """
        Crea un printer por cada estrategia registrada.

        Returns:
            Diccionario nombre -> TextPrinter
        """
        return {
            name: TextPrinter(registry.create(name))
            for name in registry.list_strategies()
        }


def create_strategy(name: str) -> TextStrategy:
    """
    Crea estrategia por nombre desde el registro global.

    Args:
        name: Nombre de la estrategia

    Returns:
        Nueva instancia de la estrategia
    """
    return registry.create(name)
