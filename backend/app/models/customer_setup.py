import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class CustomerSetup(Base):
    __tablename__ = "customer_setups"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    shop_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    company_name: Mapped[str] = mapped_column(String(150), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(320), nullable=False)
    customer_phone_number_country_code: Mapped[str | None] = mapped_column(
        String(8), nullable=True
    )
    customer_phone_number: Mapped[str] = mapped_column(String(15), nullable=False)
    app_name: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=func.now()
    )

    theme_configurations: Mapped[list["ThemeConfiguration"]] = relationship(  # noqa: F821
        back_populates="customer_setup",
        order_by="ThemeConfiguration.created_at",
    )
    home_page_configuration: Mapped["HomePageConfiguration | None"] = relationship(  # noqa: F821
        back_populates="customer_setup",
    )
