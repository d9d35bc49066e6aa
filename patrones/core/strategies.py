"""
Estrategias de transformacion de texto.

Implementa el patron Strategy para desacoplar la transformacion
aplicada al texto (mayusculas, minusculas) del objeto que la usa.

Patterns:
- Strategy: Cada estrategia es intercambiable
- Delegation: TextPrinter reenvia cada llamada a su estrategia
"""

from abc import ABC, abstractmethod

from patrones.utils import get_logger, get_logger_manager


class StrategyError(Exception):
    """Excepcion base para errores de estrategias."""
    pass


class UnknownStrategyError(StrategyError, ValueError):
    """Nombre de estrategia no registrado."""
    pass


class InvalidStrategyError(StrategyError, TypeError):
    """El objeto recibido no implementa TextStrategy."""
    pass


class TextStrategy(ABC):
    """
    Interfaz abstracta para estrategias de texto.

    Cada estrategia implementa una transformacion pura y total
    de string a string.
    """

    @abstractmethod
    def transform(self, text: str) -> str:
        """
        Transforma el texto.

        Args:
            text: Texto de entrada

        Returns:
            Texto transformado
        """

    @abstractmethod
    def get_name(self) -> str:
        """
        Obtiene el nombre de esta estrategia.

        Returns:
            Nombre legible de la estrategia
        """


class UpperCaseStrategy(TextStrategy):
    """Convierte el texto a mayusculas."""

    def transform(self, text: str) -> str:
        return text.upper()

    def get_name(self) -> str:
        """Nombre de la estrategia."""
        return "Upper Case"


class LowerCaseStrategy(TextStrategy):
    """Convierte el texto a minusculas."""

    def transform(self, text: str) -> str:
        return text.lower()

    def get_name(self) -> str:
        """Nombre de la estrategia."""
        return "Lower Case"


class TextPrinter:
    """
    Delegador que aplica una unica estrategia durante toda su vida.

    La estrategia se inyecta en el constructor y no puede cambiarse.
    """

    def __init__(self, strategy: TextStrategy):
        """
        Inicializa el printer con su estrategia.

        Args:
            strategy: Estrategia a la que se delega

        Raises:
            InvalidStrategyError: Si strategy no es un TextStrategy
        """
        if not isinstance(strategy, TextStrategy):
            raise InvalidStrategyError(
                f"Expected TextStrategy, got {type(strategy).__name__}"
            )

        self.logger = get_logger(self.__class__.__name__)
        self._strategy = strategy

        self.logger.debug(f"Printer initialized with {strategy.get_name()}")

    @property
    def strategy(self) -> TextStrategy:
        """Estrategia configurada (solo lectura)."""
        return self._strategy

    def apply(self, text: str) -> str:
        """
        Aplica la estrategia al texto.

        Args:
            text: Texto de entrada, se reenvia sin cambios

        Returns:
            Resultado de la estrategia, sin modificar
        """
        get_logger_manager().log_strategy(self._strategy.get_name(), text)
        return self._strategy.transform(text)

    def print(self, text: str) -> str:
        """Alias de apply()."""
        return self.apply(text)
