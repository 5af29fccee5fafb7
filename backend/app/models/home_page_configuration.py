import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import SetupScopedBase
from app.db.types import JSONEncodedList


class HomePageConfiguration(SetupScopedBase):
    __tablename__ = "home_page_configurations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # shop_name inherited from SetupScopedBase
    hero_banners: Mapped[list[str]] = mapped_column(
        JSONEncodedList, nullable=False, default=list
    )
    top_collections: Mapped[list[str]] = mapped_column(
        JSONEncodedList, nullable=False, default=list
    )
    primary_product_list: Mapped[str] = mapped_column(Text, nullable=False)
    primary_product_list_sort_key: Mapped[str] = mapped_column(String(32), nullable=False)
    primary_product_list_sort_key_reverse: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    secondary_product_list: Mapped[str] = mapped_column(Text, nullable=False)
    secondary_product_list_sort_key: Mapped[str] = mapped_column(String(32), nullable=False)
    secondary_product_list_sort_key_reverse: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=func.now()
    )

    customer_setup: Mapped["CustomerSetup"] = relationship(  # noqa: F821
        back_populates="home_page_configuration"
    )
