"""
配置管理模块

包含规则引擎配置和系统配置。
"""

from .config_manager import load_configs_from_file
from .engine_config import (
    EngineConfig, SystemConfig,
    KING_CONTINUATION_FREE, KING_CONTINUATION_CAPTURE_ONLY, KING_CONTINUATION_POLICIES
)

__all__ = [
    'load_configs_from_file', 'EngineConfig', 'SystemConfig',
    'KING_CONTINUATION_FREE', 'KING_CONTINUATION_CAPTURE_ONLY', 'KING_CONTINUATION_POLICIES'
]
