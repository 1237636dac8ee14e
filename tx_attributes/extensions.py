import inspect
import logging
from typing import Any, Dict, Optional, Type, Union

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import Session

from .constants import TIMEOUT_DEFAULT, _DEFINITION_ATTRIBUTE
from .definition import TransactionDefinition, ExceptionClasses
from .exceptions import TransactionAlreadyStartedError
from .transaction_enums import Propagation, Isolation
from .utils import _deserialize_enum

"""
声明式事务属性：只负责把事务定义挂到函数或类上，由外部事务管理器读取并执行，
本身不开启、不提交、不回滚任何事务。
"""

logger = logging.getLogger(__name__)


def transactional(
    propagation: Union[Propagation, int, str] = Propagation.REQUIRED,
    isolation: Union[Isolation, int, str] = Isolation.DEFAULT,
    timeout: int = TIMEOUT_DEFAULT,
    read_only: bool = False,
    name: Optional[str] = None,
    rollback_for: ExceptionClasses = (),
    no_rollback_for: ExceptionClasses = ()
):
    """
    事务属性装饰器 transactional decorator
    :param propagation: 事务传播方式 Transaction propagation behavior
    :param isolation: 事务隔离级别 Transaction isolation level
    :param timeout: 超时秒数 Timeout in seconds, -1 for the default
    :param read_only: 是否只读 Whether the transaction is read-only
    :param name: 事务名称，默认为被装饰对象的限定名 Transaction name, defaults to the qualified name
    :param rollback_for: 需要回滚的异常类 Exception classes that trigger rollback
    :param no_rollback_for: 不需要回滚的异常类 Exception classes that must not trigger rollback

    装饰类时，类中未单独声明的方法都使用类上的事务定义。
    """

    # 参数错误在装饰时立即抛出
    definition = TransactionDefinition(
        propagation=propagation,
        isolation=isolation,
        timeout=timeout,
        read_only=read_only,
        name=name,
        rollback_for=rollback_for,
        no_rollback_for=no_rollback_for
    )

    def decorator(target):
        if not (isinstance(target, type) or callable(target)):
            raise TypeError(f'transactional 只能装饰函数或类，实际为 {type(target).__name__}')
        target_definition = definition
        if name is None:
            target_definition = definition.replace(name=getattr(target, '__qualname__', None))
        setattr(target, _DEFINITION_ATTRIBUTE, target_definition)
        logger.debug('attached %r to %s', target_definition, target_definition.name)
        return target
    return decorator


def get_transaction_definition(target: Any, owner: Optional[Type] = None) -> Optional[TransactionDefinition]:
    """
    获取事务定义

    查找顺序：方法自身 -> 绑定对象所属类（或传入的owner） -> None
    """
    if inspect.ismethod(target):
        definition = getattr(target.__func__, _DEFINITION_ATTRIBUTE, None)
        if definition is not None:
            return definition
        bound = target.__self__
        owner = owner or (bound if isinstance(bound, type) else type(bound))
    else:
        definition = getattr(target, _DEFINITION_ATTRIBUTE, None)
        if definition is not None:
            return definition

    if owner is not None:
        return getattr(owner, _DEFINITION_ATTRIBUTE, None)
    return None


def has_transaction_definition(target: Any, owner: Optional[Type] = None) -> bool:
    return get_transaction_definition(target, owner=owner) is not None


def isolation_execution_options(isolation: Union[Isolation, int, str]) -> Dict[str, str]:
    """隔离级别转换为sqlalchemy执行参数，DEFAULT不设置"""
    isolation = _deserialize_enum(Isolation, isolation)
    if isolation.sql_name is None:
        return {}
    return {'isolation_level': isolation.sql_name}


def apply_isolation(
    target: Union[Session, Connection, Engine],
    isolation: Union[Isolation, int, str]
) -> Union[Connection, Engine]:
    """
    激活隔离级别

    Session 需在事务开始前调用，返回设置后的连接；
    Connection 原地设置后返回；Engine 返回共享连接池的新引擎。
    Session或Connection已开始事务时抛出 TransactionAlreadyStartedError（DEFAULT除外）。
    """
    options = isolation_execution_options(isolation)

    # 事务开始后sqlalchemy只会警告并忽略隔离级别
    if options and isinstance(target, (Session, Connection)) and target.in_transaction():
        raise TransactionAlreadyStartedError(target)

    if isinstance(target, Session):
        connection = target.connection(execution_options=options or None)
    elif isinstance(target, (Connection, Engine)):
        connection = target.execution_options(**options) if options else target
    else:
        raise TypeError(f'无法设置隔离级别: {type(target).__name__}')

    if options:
        logger.debug('isolation level %s applied to %s', options['isolation_level'], type(target).__name__)
    return connection


def apply_definition(session: Session, definition: TransactionDefinition) -> Connection:
    """按事务定义准备会话：激活隔离级别，并把定义记录到 session.info 供事务管理器读取"""
    connection = apply_isolation(session, definition.isolation)
    session.info[_DEFINITION_ATTRIBUTE] = definition
    return connection
