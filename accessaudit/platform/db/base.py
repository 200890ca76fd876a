import sqlalchemy
from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Largest value an Integer identity column holds on every supported dialect
MAX_ID = 2**31 - 1


class BaseModel(Base):
    __abstract__ = True
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    created_at = Column(
        sqlalchemy.DateTime(timezone=True), server_default=sqlalchemy.func.now(), nullable=False
    )

# Note: Models will import this Base. Do not import models here to avoid circular imports.
# accessaudit.platform.db.session imports them before create_all.
