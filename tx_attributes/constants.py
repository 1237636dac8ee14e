from typing import TypeVar

_T = TypeVar('_T')

"""事务定义契约常量，整型值作为外部事务管理器的互通值，不可修改"""

PROPAGATION_REQUIRED = 0
PROPAGATION_SUPPORTS = 1
PROPAGATION_MANDATORY = 2
PROPAGATION_REQUIRES_NEW = 3
PROPAGATION_NOT_SUPPORTED = 4
PROPAGATION_NEVER = 5
PROPAGATION_NESTED = 6

# 与JDBC Connection.TRANSACTION_* 取值一致
ISOLATION_DEFAULT = -1
ISOLATION_READ_UNCOMMITTED = 1
ISOLATION_READ_COMMITTED = 2
ISOLATION_REPEATABLE_READ = 4
ISOLATION_SERIALIZABLE = 8

TIMEOUT_DEFAULT = -1

_DEFINITION_ATTRIBUTE = '__transaction_definition__'
