"""
引擎配置数据结构

定义规则引擎和系统的配置类与默认参数。
"""

from dataclasses import dataclass


# 王在连吃阶段的行为
KING_CONTINUATION_FREE = 'free'                  # 不受连吃限制
KING_CONTINUATION_CAPTURE_ONLY = 'capture_only'  # 连吃阶段只能吃子
KING_CONTINUATION_POLICIES = (KING_CONTINUATION_FREE, KING_CONTINUATION_CAPTURE_ONLY)


@dataclass
class EngineConfig:
    """规则引擎配置"""
    king_continuation: str = KING_CONTINUATION_FREE  # 王的连吃策略
    sort_moves: bool = False                         # 是否按规范顺序返回走法


@dataclass
class SystemConfig:
    """系统配置"""
    # 日志配置
    log_level: str = 'INFO'             # 日志级别
    log_file: str = ''                  # 日志文件，为空则只输出到控制台
    log_dir: str = 'logs'               # 日志目录
    log_max_size: int = 10              # 日志文件最大大小(MB)
    log_backup_count: int = 5           # 日志备份数量
