"""
utils - Логирование и обработка ошибок.
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    EngineError, InvalidConfigurationError, InvalidPositionError,
    IllegalMoveError, validate_rows, log_engine_errors
)

__all__ = [
    'get_logger', 'setup_file_logging',
    'EngineError', 'InvalidConfigurationError', 'InvalidPositionError',
    'IllegalMoveError', 'validate_rows', 'log_engine_errors'
]
