"""事务属性异常"""

from typing import Any, Optional, Type


class TransactionAttributeError(Exception):
    """事务属性错误基类"""
    pass


class IllegalTransactionCodeError(TransactionAttributeError, ValueError):
    """未知的事务整型编码"""

    def __init__(self, target: Type, code: Any):
        self.target = target
        self.code = code
        super().__init__(f'{code!r} 不是合法的 {target.__name__} 编码')


class IllegalTransactionNameError(TransactionAttributeError, KeyError):
    """未知的事务枚举名称"""

    def __init__(self, target: Type, name: str):
        self.target = target
        self.name = name
        super().__init__(f'{name!r} 不是合法的 {target.__name__} 名称')

    def __str__(self):
        # KeyError默认会给消息加引号
        return self.args[0]


class InvalidTimeoutError(TransactionAttributeError, ValueError):
    """超时时间非法"""

    def __init__(self, timeout: Any, message: Optional[str] = None):
        self.timeout = timeout
        super().__init__(message or f'事务超时时间非法: {timeout!r}，必须大于等于-1')


class TransactionAlreadyStartedError(TransactionAttributeError):
    """事务已开始，隔离级别无法再生效"""

    def __init__(self, target: Any, message: Optional[str] = None):
        self.target = target
        super().__init__(message or f'{type(target).__name__} 已开始事务，隔离级别需在事务开始前设置')
