from enum import Enum
from typing import Any, Tuple, Type, Union

from .constants import _T
from .exceptions import IllegalTransactionCodeError, IllegalTransactionNameError


def _normalize_name(name: str) -> str:
    return '_'.join(name.replace('-', ' ').replace('_', ' ').upper().split())


def _code_to_enum(target: Type[_T], code: Any) -> _T:
    """整型编码转换为目标枚举，布尔值、浮点数及其他枚举一律拒绝"""
    if isinstance(code, target):
        return code
    if isinstance(code, bool):
        raise TypeError(f'{target.__name__} 不接受布尔值: {code!r}')
    if isinstance(code, Enum):
        raise TypeError(f'期望 {target.__name__}，实际为 {type(code).__name__}')
    if not isinstance(code, int):
        raise TypeError(f'{target.__name__} 编码必须为整数，实际为 {type(code).__name__}')
    try:
        return target(code)
    except ValueError:
        raise IllegalTransactionCodeError(target, code) from None


def _deserialize_enum(target: Type[_T], value: Union[Enum, int, str]) -> _T:
    """枚举、整型编码、名称统一转换为目标枚举"""
    if isinstance(value, (int, Enum)):
        return _code_to_enum(target, value)
    if isinstance(value, str):
        member = target.__members__.get(_normalize_name(value))
        if member is None:
            raise IllegalTransactionNameError(target, value)
        return member
    raise TypeError(f'无法将 {type(value).__name__} 转换为 {target.__name__}')


def _check_exception_classes(name: str, classes: Any) -> Tuple[Type[BaseException], ...]:
    if classes is None:
        return ()
    if isinstance(classes, type):
        classes = (classes,)
    classes = tuple(classes)
    for cls in classes:
        if not (isinstance(cls, type) and issubclass(cls, BaseException)):
            raise TypeError(f'{name} 只能包含异常类，实际为 {cls!r}')
    return classes


def _exception_depth(exc_type: type, rule: type) -> int:
    """异常类到规则类在MRO中的距离，不匹配返回-1"""
    try:
        return exc_type.__mro__.index(rule)
    except ValueError:
        return -1
