"""
Checkers Project 源代码模块

包含跳棋规则引擎子系统 checkers_engine。
"""

from . import checkers_engine

__all__ = [
    "checkers_engine",
]
