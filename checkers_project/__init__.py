"""
跳棋规则引擎项目 (Checkers Project)

一个8x8跳棋走法生成引擎，支持兵的连吃规则和王的滑行吃子。
"""

__version__ = "0.1.0"
__author__ = "Checkers Engine Team"
__description__ = "跳棋规则引擎 - 兵与王的合法走法生成"

from checkers_project.src import checkers_engine

__all__ = [
    "checkers_engine",
    "__version__",
    "__author__",
    "__description__",
]
