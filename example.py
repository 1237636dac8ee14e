from sqlalchemy import Column, Integer, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base
from tx_attributes import (transactional, get_transaction_definition, apply_definition, Propagation, Isolation,
                           TransactionDefinition)

engine = create_engine('sqlite:///test.db')
Base = declarative_base()


class User(Base):
    __tablename__ = 'user'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(32), nullable=False, unique=True)

    def __repr__(self):
        return f"User(id={self.id}, username={self.username})"


Base.metadata.create_all(engine)


@transactional(read_only=True)
class UserService:
    """类上的事务定义对未单独声明的方法生效"""

    def list_users(self, session: Session):
        return session.scalars(select(User)).all()

    @transactional(propagation=Propagation.REQUIRES_NEW, isolation='serializable', rollback_for=ValueError)
    def create_user(self, session: Session, username: str):
        session.add(User(username=username))


service = UserService()

print(get_transaction_definition(service.list_users))
# > TransactionDefinition(name='UserService', propagation=Propagation.REQUIRED, isolation=Isolation.DEFAULT,
#   timeout=-1, read_only=True)

definition = get_transaction_definition(service.create_user)
print(definition.to_dict())
# > {'name': 'UserService.create_user', 'propagation': 3, 'isolation': 8, 'timeout': -1, 'read_only': False}

"""外部事务管理器按整型编码反查"""
print(TransactionDefinition.from_dict({'propagation': 3, 'isolation': 8}).propagation is Propagation.REQUIRES_NEW)
# > True

with Session(engine) as session:
    connection = apply_definition(session, definition)
    print(connection.get_isolation_level())
    # > SERIALIZABLE
    service.create_user(session, 'example')
    session.rollback()

print(Isolation.READ_COMMITTED.sql_name, int(Isolation.READ_COMMITTED))
# > READ COMMITTED 2
