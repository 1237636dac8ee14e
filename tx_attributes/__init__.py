from .constants import (PROPAGATION_REQUIRED, PROPAGATION_SUPPORTS, PROPAGATION_MANDATORY, PROPAGATION_REQUIRES_NEW,
                        PROPAGATION_NOT_SUPPORTED, PROPAGATION_NEVER, PROPAGATION_NESTED, ISOLATION_DEFAULT,
                        ISOLATION_READ_UNCOMMITTED, ISOLATION_READ_COMMITTED, ISOLATION_REPEATABLE_READ,
                        ISOLATION_SERIALIZABLE, TIMEOUT_DEFAULT)
from .transaction_enums import Propagation, Isolation
from .definition import TransactionDefinition, DEFAULT_DEFINITION
from .exceptions import (TransactionAttributeError, IllegalTransactionCodeError, IllegalTransactionNameError,
                         InvalidTimeoutError, TransactionAlreadyStartedError)
from .extensions import (transactional, get_transaction_definition, has_transaction_definition,
                         isolation_execution_options, apply_isolation, apply_definition)

__all__ = [
    'Propagation',
    'Isolation',
    'TransactionDefinition',
    'DEFAULT_DEFINITION',
    'transactional',
    'get_transaction_definition',
    'has_transaction_definition',
    'isolation_execution_options',
    'apply_isolation',
    'apply_definition',
    'TransactionAttributeError',
    'IllegalTransactionCodeError',
    'IllegalTransactionNameError',
    'InvalidTimeoutError',
    'TransactionAlreadyStartedError',
    'PROPAGATION_REQUIRED',
    'PROPAGATION_SUPPORTS',
    'PROPAGATION_MANDATORY',
    'PROPAGATION_REQUIRES_NEW',
    'PROPAGATION_NOT_SUPPORTED',
    'PROPAGATION_NEVER',
    'PROPAGATION_NESTED',
    'ISOLATION_DEFAULT',
    'ISOLATION_READ_UNCOMMITTED',
    'ISOLATION_READ_COMMITTED',
    'ISOLATION_REPEATABLE_READ',
    'ISOLATION_SERIALIZABLE',
    'TIMEOUT_DEFAULT',
]
