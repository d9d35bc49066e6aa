"""
Paquete core con los patrones de diseño.

Este paquete contiene:
- Flyweight: Cache de sabores compartidos
- Orders: Tablero de pedidos por mesa
- Strategies: Transformaciones de texto intercambiables
- Factories: Registro y creacion de estrategias
"""

from .flyweight import FlavorCache

from .orders import (
    OrderBoard,
    format_serve_line
)

from .strategies import (
    TextStrategy,
    UpperCaseStrategy,
    LowerCaseStrategy,
    TextPrinter,
    StrategyError,
    UnknownStrategyError,
    InvalidStrategyError
)

from .factories import (
    StrategyRegistry,
    TextPrinterFactory,
    registry,
    create_strategy
)

__all__ = [
    # Flyweight
    'FlavorCache',

    # Orders
    'OrderBoard',
    'format_serve_line',

    # Strategies
    'TextStrategy',
    'UpperCaseStrategy',
    'LowerCaseStrategy',
    'TextPrinter',
    'StrategyError',
    'UnknownStrategyError',
    'InvalidStrategyError',

    # Factories
    'StrategyRegistry',
    'TextPrinterFactory',
    'registry',
    'create_strategy'
]
