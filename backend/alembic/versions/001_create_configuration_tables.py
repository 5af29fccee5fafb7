"""Create customer_setups, theme_configurations, home_page_configurations

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "customer_setups",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("shop_name", sa.String(255), nullable=False, unique=True),
        sa.Column("company_name", sa.String(150), nullable=False),
        sa.Column("customer_email", sa.String(320), nullable=False),
        sa.Column("customer_phone_number_country_code", sa.String(8), nullable=True),
        sa.Column("customer_phone_number", sa.String(15), nullable=False),
        sa.Column("app_name", sa.String(50), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "theme_configurations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "shop_name",
            sa.String(255),
            sa.ForeignKey("customer_setups.shop_name"),
            nullable=False,
            unique=True,
        ),
        sa.Column("theme_code", sa.String(64), nullable=False),
        sa.Column("primary_color", sa.String(7), nullable=False),
        sa.Column("secondary_color", sa.String(7), nullable=False),
        sa.Column("background_color", sa.String(7), nullable=False),
        sa.Column("button_color", sa.String(7), nullable=False),
        sa.Column("app_bar_background_color", sa.String(7), nullable=False),
        sa.Column("button_radius", sa.String(16), nullable=False),
        sa.Column("edge_padding", sa.String(16), nullable=False),
        sa.Column("splash_screen_width", sa.String(16), nullable=False),
        *_timestamps(),
    )

    # hero_banners / top_collections hold JSON-encoded arrays as text
    op.create_table(
        "home_page_configurations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "shop_name",
            sa.String(255),
            sa.ForeignKey("customer_setups.shop_name"),
            nullable=False,
            unique=True,
        ),
        sa.Column("hero_banners", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("top_collections", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("primary_product_list", sa.Text(), nullable=False),
        sa.Column("primary_product_list_sort_key", sa.String(32), nullable=False),
        sa.Column(
            "primary_product_list_sort_key_reverse",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column("secondary_product_list", sa.Text(), nullable=False),
        sa.Column("secondary_product_list_sort_key", sa.String(32), nullable=False),
        sa.Column(
            "secondary_product_list_sort_key_reverse",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("home_page_configurations")
    op.drop_table("theme_configurations")
    op.drop_table("customer_setups")
