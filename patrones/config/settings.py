"""
Configuracion centralizada para patrones.

Este modulo contiene todas las configuraciones de la libreria,
incluyendo logging, estrategia de texto por defecto y formato de salida.

Las configuraciones pueden ser sobrescritas con variables de entorno.
"""

import os
from enum import Enum

from dotenv import find_dotenv, load_dotenv


class TextCase(Enum):
    """Estrategias de texto soportadas."""
    UPPER = "upper"
    LOWER = "lower"


# Cargar variables de entorno desde el .env mas cercano al directorio de
# trabajo. Las variables ya definidas en el entorno no se sobrescriben.
ENV_FILE = find_dotenv(usecwd=True)
if ENV_FILE:
    load_dotenv(dotenv_path=ENV_FILE)


# ============================================================================
# CONFIGURACION GENERAL
# ============================================================================

# Entorno de ejecucion (development, staging, production)
ENVIRONMENT = os.getenv('ENVIRONMENT', 'production')
IS_PRODUCTION = ENVIRONMENT == 'production'
IS_DEVELOPMENT = ENVIRONMENT == 'development'

# Logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


# ============================================================================
# CONFIGURACION DE ESTRATEGIAS
# ============================================================================

# Estrategia usada por TextPrinterFactory cuando no se indica ninguna
DEFAULT_TEXT_CASE = os.getenv('DEFAULT_TEXT_CASE', TextCase.UPPER.value).lower()


# ============================================================================
# CONFIGURACION DE PEDIDOS
# ============================================================================

# Linea impresa por OrderBoard.print_orders()
SERVE_MESSAGE_TEMPLATE = os.getenv(
    'SERVE_MESSAGE_TEMPLATE',
    'Serving {flavor} to table {table}'
)


# ============================================================================
# CONFIGURACION DE DESARROLLO
# ============================================================================

if IS_DEVELOPMENT:
    # En desarrollo, usar logs más verbosos
    LOG_LEVEL = 'DEBUG'


# ============================================================================
# VALIDACION DE CONFIGURACION
# ============================================================================

def validate_config() -> bool:
    """
    Valida que la configuracion sea correcta.

    Returns:
        True si la configuracion es valida
    """
    errors = []

    if DEFAULT_TEXT_CASE not in [case.value for case in TextCase]:
        errors.append(f"DEFAULT_TEXT_CASE invalido: {DEFAULT_TEXT_CASE}")

    for placeholder in ('{table}', '{flavor}'):
        if placeholder not in SERVE_MESSAGE_TEMPLATE:
            errors.append(
                f"SERVE_MESSAGE_TEMPLATE debe contener {placeholder}"
            )

    if errors:
        print("Errores de configuracion:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_config_summary() -> dict:
    """
    Obtiene resumen de configuracion (para debugging).

    Returns:
        Diccionario con configuracion actual
    """
    return {
        'env_file': ENV_FILE or None,
        'environment': ENVIRONMENT,
        'log_level': LOG_LEVEL,
        'default_text_case': DEFAULT_TEXT_CASE,
        'serve_message_template': SERVE_MESSAGE_TEMPLATE,
    }


def print_config():
    """Imprime configuracion actual."""
    print("="*60)
    print("CONFIGURACION - PATRONES")
    print("="*60)

    config = get_config_summary()
    for key, value in config.items():
        print(f"  {key}: {value}")

    print("="*60)


# Validar configuracion al importar
if not validate_config():
    raise ValueError("Configuracion invalida. Revisa los errores arriba.")
