# -*- coding:utf-8 -*-
import enum
from typing import Optional

from . import constants
from .exceptions import IllegalTransactionNameError
from .utils import _code_to_enum


class _CodedEnum(enum.IntEnum):
    """绑定事务定义契约整型编码的枚举基类"""

    @classmethod
    def from_code(cls, code: int):
        """根据整型编码反查枚举，未知编码抛出 IllegalTransactionCodeError，非整数抛出 TypeError"""
        return _code_to_enum(cls, code)

    @property
    def code(self) -> int:
        return int(self.value)


@enum.unique
class Propagation(_CodedEnum):
    """事务传播枚举类"""

    REQUIRED = constants.PROPAGATION_REQUIRED
    """如果当前存在事务，则加入该事务；如果当前没有事务，则创建一个新的事务。（默认）"""

    SUPPORTS = constants.PROPAGATION_SUPPORTS
    """如果当前存在事务，则加入该事务；如果当前没有事务，则以非事务的方式继续运行。"""

    MANDATORY = constants.PROPAGATION_MANDATORY
    """如果当前存在事务，则加入该事务；如果当前没有事务，则抛出异常。"""

    REQUIRES_NEW = constants.PROPAGATION_REQUIRES_NEW
    """创建一个新的事务，如果当前存在事务，则把当前事务挂起。"""

    NOT_SUPPORTED = constants.PROPAGATION_NOT_SUPPORTED
    """以非事务方式运行，如果当前存在事务，则把当前事务挂起。"""

    NEVER = constants.PROPAGATION_NEVER
    """以非事务方式运行，如果当前存在事务，则抛出异常。"""

    NESTED = constants.PROPAGATION_NESTED
    """如果当前存在事务，则在嵌套事务（保存点）内执行；否则与REQUIRED相同。"""

    @property
    def requires_existing(self) -> bool:
        """没有上级事务时必须报错"""
        return self is Propagation.MANDATORY

    @property
    def forbids_existing(self) -> bool:
        """存在上级事务时必须报错"""
        return self is Propagation.NEVER

    @property
    def suspends_existing(self) -> bool:
        """需要挂起上级事务"""
        return self in (Propagation.REQUIRES_NEW, Propagation.NOT_SUPPORTED)

    @property
    def creates_if_missing(self) -> bool:
        """没有上级事务时创建新事务"""
        return self in (Propagation.REQUIRED, Propagation.REQUIRES_NEW, Propagation.NESTED)

    @property
    def is_transactional(self) -> bool:
        return self not in (Propagation.SUPPORTS, Propagation.NOT_SUPPORTED, Propagation.NEVER)


@enum.unique
class Isolation(_CodedEnum):
    """事务隔离级别枚举类"""

    DEFAULT = constants.ISOLATION_DEFAULT
    """使用数据库默认隔离级别"""

    READ_UNCOMMITTED = constants.ISOLATION_READ_UNCOMMITTED
    """读未提交"""

    READ_COMMITTED = constants.ISOLATION_READ_COMMITTED
    """读已提交"""

    REPEATABLE_READ = constants.ISOLATION_REPEATABLE_READ
    """可重复读(mysql默认)"""

    SERIALIZABLE = constants.ISOLATION_SERIALIZABLE
    """串行化"""

    @property
    def sql_name(self) -> Optional[str]:
        """SQL语句中的隔离级别写法，DEFAULT没有对应写法"""
        if self is Isolation.DEFAULT:
            return None
        return self.name.replace('_', ' ')

    @classmethod
    def from_sql_name(cls, sql_name: str) -> 'Isolation':
        """根据SQL写法反查，如 `READ COMMITTED`"""
        if not isinstance(sql_name, str):
            raise TypeError(f'{cls.__name__} SQL写法必须为字符串，实际为 {type(sql_name).__name__}')
        normalized = ' '.join(sql_name.replace('_', ' ').replace('-', ' ').upper().split())
        for isolation in cls:
            if isolation.sql_name == normalized:
                return isolation
        raise IllegalTransactionNameError(cls, sql_name)
