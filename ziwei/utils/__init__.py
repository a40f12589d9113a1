# -*- coding: utf-8 -*-
"""
工具模块：异常与日志
"""

from .exceptions import ZiweiError, StructuralError, InvalidScopeError
from .logging_utils import setup_logging, safe_log

__all__ = [
    'ZiweiError',
    'StructuralError',
    'InvalidScopeError',
    'setup_logging',
    'safe_log',
]
