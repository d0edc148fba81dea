"""
异常定义

定义跳棋规则引擎的各种异常类型。
"""


class CheckersError(Exception):
    """
    跳棋引擎基础异常

    所有跳棋相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class OutOfBoundsError(CheckersError, IndexError):
    """
    越界异常

    当访问的坐标不在棋盘范围内时抛出。走法生成过程中视为该方向的终点。
    """

    def __init__(self, location, size: int = 8):
        message = f"坐标越界: {location}, 有效范围 [0, {size})"
        super().__init__(message, "OUT_OF_BOUNDS")
        self.location = location
        self.size = size


class InvalidQueryError(CheckersError):
    """
    非法查询异常

    当对空格子请求走法时抛出，属于调用方的逻辑错误。
    """

    def __init__(self, location, reason: str = ""):
        message = f"非法查询: {location}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "INVALID_QUERY")
        self.location = location
        self.reason = reason


class ConfigurationError(CheckersError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason


class BoardStateError(CheckersError):
    """
    棋盘状态异常

    当棋盘文本或JSON数据无法解析为合法棋盘时抛出。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"棋盘状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "BOARD_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason
