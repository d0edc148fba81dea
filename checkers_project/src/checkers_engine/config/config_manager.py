"""
配置加载

从单个YAML文件读取引擎配置和系统配置。
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Tuple, Type, TypeVar
from dataclasses import fields
import logging

from .engine_config import EngineConfig, SystemConfig
from ..utils.exceptions import ConfigurationError

T = TypeVar('T')

logger = logging.getLogger(__name__)


def _section_to_dataclass(section: str, data: Any, dataclass_type: Type[T]) -> T:
    """
    将配置段转换为数据类对象，未知字段被忽略

    Args:
        section: 配置段名称
        data: 配置段内容
        dataclass_type: 数据类类型

    Returns:
        数据类对象
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(section, "配置段应为字典")

    field_names = {f.name for f in fields(dataclass_type)}
    unknown = sorted(k for k in data if k not in field_names)
    if unknown:
        logger.warning(f"忽略未知配置项 [{section}]: {', '.join(map(str, unknown))}")

    return dataclass_type(**{k: v for k, v in data.items() if k in field_names})


def load_configs_from_file(path: str) -> Tuple[EngineConfig, SystemConfig]:
    """
    从单个YAML文件加载引擎和系统配置

    文件格式::

        engine:
          king_continuation: free
          sort_moves: true
        system:
          log_level: DEBUG

    缺失的部分使用默认值。

    Args:
        path: 配置文件路径

    Returns:
        Tuple[EngineConfig, SystemConfig]: 引擎配置和系统配置

    Raises:
        ConfigurationError: 文件无法读取或结构不正确
    """
    config_path = Path(path)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(str(config_path), f"无法读取配置文件: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(str(config_path), "配置文件顶层应为字典")

    engine_config = _section_to_dataclass('engine', data.get('engine'), EngineConfig)
    system_config = _section_to_dataclass('system', data.get('system'), SystemConfig)

    logger.info(f"从文件加载配置: {config_path}")
    return engine_config, system_config
