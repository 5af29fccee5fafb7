from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class SetupScopedBase(Base):
    """Abstract base for records owned by a shop's CustomerSetup row.

    ``shop_name`` is both the natural key (UNIQUE) and the FK to the parent.
    """

    __abstract__ = True

    shop_name: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("customer_setups.shop_name"),
        unique=True,
        nullable=False,
    )
