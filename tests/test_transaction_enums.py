"""传播方式与隔离级别的编码契约"""

import pytest

from tx_attributes import constants
from tx_attributes.exceptions import IllegalTransactionCodeError, IllegalTransactionNameError
from tx_attributes.transaction_enums import Propagation, Isolation


PROPAGATION_CODES = {
    'REQUIRED': 0,
    'SUPPORTS': 1,
    'MANDATORY': 2,
    'REQUIRES_NEW': 3,
    'NOT_SUPPORTED': 4,
    'NEVER': 5,
    'NESTED': 6,
}

ISOLATION_CODES = {
    'DEFAULT': -1,
    'READ_UNCOMMITTED': 1,
    'READ_COMMITTED': 2,
    'REPEATABLE_READ': 4,
    'SERIALIZABLE': 8,
}


class TestPropagation:

    def test_members_are_closed_set(self):
        assert [member.name for member in Propagation] == list(PROPAGATION_CODES)

    @pytest.mark.parametrize('name, code', PROPAGATION_CODES.items())
    def test_code(self, name, code):
        member = Propagation[name]
        assert member.value == code
        assert member.code == code
        assert int(member) == code
        assert getattr(constants, f'PROPAGATION_{name}') == code

    def test_codes_unique(self):
        codes = [member.value for member in Propagation]
        assert len(codes) == len(set(codes))

    def test_round_trip(self):
        for member in Propagation:
            assert Propagation(member.value) is member
            assert Propagation.from_code(member.code) is member

    def test_compares_with_contract_integer(self):
        assert Propagation.NESTED == constants.PROPAGATION_NESTED

    def test_unknown_code(self):
        with pytest.raises(IllegalTransactionCodeError) as exc_info:
            Propagation.from_code(7)
        assert exc_info.value.code == 7
        assert exc_info.value.target is Propagation
        # 兼容普通枚举的ValueError
        with pytest.raises(ValueError):
            Propagation.from_code(-1)

    @pytest.mark.parametrize('code', [True, False, 1.0, '1', None, Isolation.READ_UNCOMMITTED])
    def test_from_code_rejects_non_integers(self, code):
        with pytest.raises(TypeError):
            Propagation.from_code(code)

    def test_behaviour_predicates(self):
        assert Propagation.MANDATORY.requires_existing
        assert not Propagation.REQUIRED.requires_existing
        assert Propagation.NEVER.forbids_existing
        assert {p for p in Propagation if p.suspends_existing} == {Propagation.REQUIRES_NEW,
                                                                  Propagation.NOT_SUPPORTED}
        assert {p for p in Propagation if p.creates_if_missing} == {Propagation.REQUIRED,
                                                                   Propagation.REQUIRES_NEW,
                                                                   Propagation.NESTED}
        assert {p for p in Propagation if not p.is_transactional} == {Propagation.SUPPORTS,
                                                                     Propagation.NOT_SUPPORTED,
                                                                     Propagation.NEVER}


class TestIsolation:

    def test_members_are_closed_set(self):
        assert [member.name for member in Isolation] == list(ISOLATION_CODES)

    @pytest.mark.parametrize('name, code', ISOLATION_CODES.items())
    def test_code(self, name, code):
        member = Isolation[name]
        assert member.value == code
        assert getattr(constants, f'ISOLATION_{name}') == code

    def test_codes_unique(self):
        codes = [member.value for member in Isolation]
        assert len(codes) == len(set(codes))

    def test_round_trip(self):
        for member in Isolation:
            assert Isolation.from_code(member.value) is member

    def test_unknown_code(self):
        with pytest.raises(IllegalTransactionCodeError):
            Isolation.from_code(3)
        with pytest.raises(TypeError):
            Isolation.from_code(2.0)
        with pytest.raises(TypeError):
            Isolation.from_code(True)
        with pytest.raises(IllegalTransactionCodeError):
            Isolation.from_code(0)

    def test_sql_name(self):
        assert Isolation.DEFAULT.sql_name is None
        assert Isolation.READ_UNCOMMITTED.sql_name == 'READ UNCOMMITTED'
        assert Isolation.READ_COMMITTED.sql_name == 'READ COMMITTED'
        assert Isolation.REPEATABLE_READ.sql_name == 'REPEATABLE READ'
        assert Isolation.SERIALIZABLE.sql_name == 'SERIALIZABLE'

    @pytest.mark.parametrize('sql_name, expected', [
        ('READ COMMITTED', Isolation.READ_COMMITTED),
        ('read  uncommitted', Isolation.READ_UNCOMMITTED),
        ('repeatable_read', Isolation.REPEATABLE_READ),
        ('Serializable', Isolation.SERIALIZABLE),
    ])
    def test_from_sql_name(self, sql_name, expected):
        assert Isolation.from_sql_name(sql_name) is expected

    def test_from_sql_name_unknown(self):
        with pytest.raises(IllegalTransactionNameError) as exc_info:
            Isolation.from_sql_name('SNAPSHOT')
        assert 'SNAPSHOT' in str(exc_info.value)
        with pytest.raises(IllegalTransactionNameError):
            Isolation.from_sql_name('DEFAULT')

    @pytest.mark.parametrize('sql_name', [2, None, Isolation.READ_COMMITTED])
    def test_from_sql_name_rejects_non_strings(self, sql_name):
        with pytest.raises(TypeError) as exc_info:
            Isolation.from_sql_name(sql_name)
        assert 'Isolation' in str(exc_info.value)
