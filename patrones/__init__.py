"""
patrones: ejemplos de referencia de los patrones Flyweight y Strategy.
"""

from .models import Flavor, Order

from .core import (
    FlavorCache,
    OrderBoard,
    TextStrategy,
    UpperCaseStrategy,
    LowerCaseStrategy,
    TextPrinter,
    TextPrinterFactory,
    StrategyError,
    UnknownStrategyError,
    InvalidStrategyError
)

__version__ = "1.0.0"

__all__ = [
    'Flavor',
    'Order',
    'FlavorCache',
    'OrderBoard',
    'TextStrategy',
    'UpperCaseStrategy',
    'LowerCaseStrategy',
    'TextPrinter',
    'TextPrinterFactory',
    'StrategyError',
    'UnknownStrategyError',
    'InvalidStrategyError'
]
