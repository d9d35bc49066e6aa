"""
Utilidades de logging para patrones.

Todos los modulos obtienen sus loggers a traves de LoggerManager, un
Singleton que fija el nivel (desde LOG_LEVEL) y el formato una sola vez.
Los mensajes con contexto se escriben como "Mensaje | Context: {...}".
"""

import logging
import sys
from typing import Optional, Dict, Any

from patrones.config.settings import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level_from_name(name: str) -> int:
    """Convierte 'DEBUG', 'info', etc. a nivel numerico (INFO si no existe)."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


class LoggerManager:
    """
    Singleton que entrega loggers con nivel y formato comunes.

    Usage:
        from patrones.utils import get_logger_manager

        manager = get_logger_manager()
        manager.info("Orders Served", context={'count': 3}, logger_name='orders')
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(LoggerManager, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self._loggers: Dict[str, logging.Logger] = {}
        self._level = _level_from_name(LOG_LEVEL)
        self._install_console_handler()

    def _install_console_handler(self):
        """Agrega un handler a stdout en el logger raiz si no tiene ninguno."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self._level)

        if root_logger.handlers:
            return

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self._level)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root_logger.addHandler(handler)

    @classmethod
    def get_instance(cls) -> 'LoggerManager':
        """Retorna la instancia unica."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_logger(self, name: str) -> logging.Logger:
        """
        Obtiene un logger por nombre, creandolo con el nivel actual.

        Args:
            name: Nombre del logger (nombre de clase o de modulo)

        Returns:
            logging.Logger configurado
        """
        logger = self._loggers.get(name)
        if logger is None:
            logger = logging.getLogger(name)
            logger.setLevel(self._level)
            self._loggers[name] = logger
        return logger

    def set_level(self, level: int):
        """
        Cambia el nivel del logger raiz y de todos los loggers entregados.

        Args:
            level: logging.DEBUG, logging.INFO, ...
        """
        self._level = level
        logging.getLogger().setLevel(level)
        for logger in self._loggers.values():
            logger.setLevel(level)

    def get_level(self) -> int:
        """Nivel de logging actual."""
        return self._level

    def log(
        self,
        level: int,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        logger_name: str = 'patrones'
    ):
        """
        Registra un mensaje, agregando el contexto al final si existe.

        Args:
            level: Nivel del mensaje
            message: Texto principal
            context: Datos adicionales (opcional)
            logger_name: Logger destino
        """
        if context:
            message = f"{message} | Context: {context}"
        self.get_logger(logger_name).log(level, message)

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None, logger_name: str = 'patrones'):
        self.log(logging.DEBUG, message, context, logger_name)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None, logger_name: str = 'patrones'):
        self.log(logging.INFO, message, context, logger_name)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None, logger_name: str = 'patrones'):
        self.log(logging.WARNING, message, context, logger_name)

    def log_order(self, table: int, flavor_name: str, replaced: Optional[str] = None):
        """
        Registra un pedido tomado en el logger 'orders'.

        Args:
            table: Mesa del pedido
            flavor_name: Sabor pedido
            replaced: Sabor que tenia la mesa antes, si tenia
        """
        context = {'table': table, 'flavor': flavor_name}
        if replaced is not None:
            context['replaced'] = replaced

        self.debug("Order Taken", context=context, logger_name='orders')

    def log_strategy(self, strategy_name: str, text: str):
        """
        Registra una aplicacion de estrategia en el logger 'strategies'.

        La entrada se trunca a 30 caracteres.
        """
        self.debug(
            "Strategy Applied",
            context={
                'strategy': strategy_name,
                'input': truncate_text(text, max_length=30)
            },
            logger_name='strategies'
        )


def get_logger_manager() -> LoggerManager:
    """Atajo para LoggerManager.get_instance()."""
    return LoggerManager.get_instance()


def get_logger(name: str) -> logging.Logger:
    """
    Atajo para obtener un logger del LoggerManager.

    Usage:
        logger = get_logger(__name__)
        logger.info("Message")
    """
    return LoggerManager.get_instance().get_logger(name)


def truncate_text(text: str, max_length: int = 300, suffix: str = "...") -> str:
    """
    Trunca texto a una longitud maxima, incluyendo el sufijo.

    Args:
        text: Texto a truncar
        max_length: Longitud maxima del resultado
        suffix: Sufijo agregado cuando se trunca

    Returns:
        str: Texto original o truncado
    """
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix
