import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import SetupScopedBase


class ThemeConfiguration(SetupScopedBase):
    __tablename__ = "theme_configurations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # shop_name inherited from SetupScopedBase
    theme_code: Mapped[str] = mapped_column(String(64), nullable=False)
    primary_color: Mapped[str] = mapped_column(String(7), nullable=False)
    secondary_color: Mapped[str] = mapped_column(String(7), nullable=False)
    background_color: Mapped[str] = mapped_column(String(7), nullable=False)
    button_color: Mapped[str] = mapped_column(String(7), nullable=False)
    app_bar_background_color: Mapped[str] = mapped_column(String(7), nullable=False)
    # Unit-suffixed values, e.g. "12px", "50%"
    button_radius: Mapped[str] = mapped_column(String(16), nullable=False)
    edge_padding: Mapped[str] = mapped_column(String(16), nullable=False)
    splash_screen_width: Mapped[str] = mapped_column(String(16), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=func.now()
    )

    customer_setup: Mapped["CustomerSetup"] = relationship(  # noqa: F821
        back_populates="theme_configurations"
    )
