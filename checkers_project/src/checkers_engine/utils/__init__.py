"""
工具模块

包含日志、异常处理和其他通用工具。
"""

from .logger import setup_logger, get_logger, LoggerMixin
from .exceptions import (
    CheckersError, OutOfBoundsError, InvalidQueryError, ConfigurationError, BoardStateError
)

__all__ = [
    'setup_logger', 'get_logger', 'LoggerMixin',
    'CheckersError', 'OutOfBoundsError', 'InvalidQueryError', 'ConfigurationError', 'BoardStateError'
]
