"""create supplier tables

Revision ID: 5b1d7c2e9a40
Revises:
Create Date: 2025-10-06 10:12:44.318902

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1d7c2e9a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """suppliers + adres/kişi/grup tabloları."""
    op.create_table(
        "suppliers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("nick_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "supplier_addresses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("is_main", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "supplier_contacts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("job_position", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("mobile", sa.String(50), nullable=False),
        sa.Column("is_main", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "supplier_groups",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id"), nullable=False),
        sa.Column("group_name", sa.String(255), nullable=False),
        sa.Column("value", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    # Alt tablolarda supplier_id indeksleri
    op.create_index("ix_supplier_addresses_supplier_id", "supplier_addresses", ["supplier_id"], unique=False)
    op.create_index("ix_supplier_contacts_supplier_id",  "supplier_contacts",  ["supplier_id"], unique=False)
    op.create_index("ix_supplier_groups_supplier_id",    "supplier_groups",    ["supplier_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_supplier_groups_supplier_id",    table_name="supplier_groups")
    op.drop_index("ix_supplier_contacts_supplier_id",  table_name="supplier_contacts")
    op.drop_index("ix_supplier_addresses_supplier_id", table_name="supplier_addresses")

    op.drop_table("supplier_groups")
    op.drop_table("supplier_contacts")
    op.drop_table("supplier_addresses")
    op.drop_table("suppliers")
