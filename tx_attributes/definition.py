from typing import Any, Dict, Iterable, Optional, Tuple, Type, Union

from .constants import TIMEOUT_DEFAULT
from .exceptions import InvalidTimeoutError
from .transaction_enums import Propagation, Isolation
from .utils import _deserialize_enum, _check_exception_classes, _exception_depth

ExceptionClasses = Union[Type[BaseException], Iterable[Type[BaseException]], None]


class TransactionDefinition:
    """
    事务定义，描述一个工作单元应当以何种方式运行，由外部事务管理器读取。

    Args:
        propagation: 事务传播方式，可传枚举、整型编码或名称
        isolation: 事务隔离级别，可传枚举、整型编码或名称
        timeout: 超时秒数，-1 表示使用底层默认
        read_only: 是否只读事务
        name: 事务名称，用于日志和监控
        rollback_for: 需要回滚的异常类
        no_rollback_for: 不需要回滚的异常类

    Example:
        TransactionDefinition(propagation='requires_new', isolation=Isolation.SERIALIZABLE, timeout=30)
    """

    __slots__ = ('propagation', 'isolation', 'timeout', 'read_only', 'name', 'rollback_for', 'no_rollback_for')

    propagation: Propagation
    isolation: Isolation
    timeout: int
    read_only: bool
    name: Optional[str]
    rollback_for: Tuple[Type[BaseException], ...]
    no_rollback_for: Tuple[Type[BaseException], ...]

    def __init__(
        self,
        propagation: Union[Propagation, int, str] = Propagation.REQUIRED,
        isolation: Union[Isolation, int, str] = Isolation.DEFAULT,
        timeout: int = TIMEOUT_DEFAULT,
        read_only: bool = False,
        name: Optional[str] = None,
        rollback_for: ExceptionClasses = (),
        no_rollback_for: ExceptionClasses = ()
    ):
        if isinstance(timeout, bool) or not isinstance(timeout, int):
            raise InvalidTimeoutError(timeout, f'事务超时时间必须为整数秒: {timeout!r}')
        if timeout < TIMEOUT_DEFAULT:
            raise InvalidTimeoutError(timeout)

        _set = object.__setattr__
        _set(self, 'propagation', _deserialize_enum(Propagation, propagation))
        _set(self, 'isolation', _deserialize_enum(Isolation, isolation))
        _set(self, 'timeout', timeout)
        _set(self, 'read_only', bool(read_only))
        _set(self, 'name', name)
        _set(self, 'rollback_for', _check_exception_classes('rollback_for', rollback_for))
        _set(self, 'no_rollback_for', _check_exception_classes('no_rollback_for', no_rollback_for))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} 不可修改，请使用 replace()')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} 不可修改')

    def __reduce__(self):
        # copy/pickle 通过构造函数重建，不走 __setattr__
        return self.__class__, self._key()

    @classmethod
    def with_defaults(cls) -> 'TransactionDefinition':
        """默认事务定义：REQUIRED、DEFAULT隔离、默认超时、非只读"""
        return DEFAULT_DEFINITION

    def replace(self, **changes) -> 'TransactionDefinition':
        """复制并修改部分属性"""
        values = {key: getattr(self, key) for key in self.__slots__}
        unknown = set(changes) - set(values)
        if unknown:
            raise TypeError(f'未知的事务属性: {", ".join(sorted(unknown))}')
        values.update(changes)
        return self.__class__(**values)

    @property
    def has_timeout(self) -> bool:
        return self.timeout != TIMEOUT_DEFAULT

    def rollback_on(self, exc: Union[BaseException, Type[BaseException]]) -> bool:
        """
        判断异常是否需要回滚

        匹配距离最近的规则生效，距离相同时不回滚规则优先，没有任何规则匹配时回滚。
        """
        exc_type = exc if isinstance(exc, type) else type(exc)
        rollback_depth = self._closest(exc_type, self.rollback_for)
        no_rollback_depth = self._closest(exc_type, self.no_rollback_for)

        if no_rollback_depth < 0:
            return True
        if rollback_depth < 0:
            return False
        return rollback_depth < no_rollback_depth

    @staticmethod
    def _closest(exc_type: type, rules: Tuple[type, ...]) -> int:
        depths = [depth for depth in (_exception_depth(exc_type, rule) for rule in rules) if depth >= 0]
        return min(depths) if depths else -1

    def to_dict(self) -> Dict[str, Any]:
        """转换为整型编码形式，回滚规则为进程内类对象不参与序列化"""
        return {
            'name': self.name,
            'propagation': self.propagation.value,
            'isolation': self.isolation.value,
            'timeout': self.timeout,
            'read_only': self.read_only,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionDefinition':
        allowed = ('name', 'propagation', 'isolation', 'timeout', 'read_only')
        unknown = set(data) - set(allowed)
        if unknown:
            raise TypeError(f'未知的事务属性: {", ".join(sorted(unknown))}')
        return cls(**data)

    def _key(self) -> tuple:
        return tuple(getattr(self, key) for key in self.__slots__)

    def __eq__(self, other):
        if not isinstance(other, TransactionDefinition):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (f"{self.__class__.__name__}("
                f"name={self.name!r}, propagation=Propagation.{self.propagation.name}, "
                f"isolation=Isolation.{self.isolation.name}, timeout={self.timeout}, "
                f"read_only={self.read_only})")


DEFAULT_DEFINITION = TransactionDefinition()
