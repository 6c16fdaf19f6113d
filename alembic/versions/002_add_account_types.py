"""Add account_types table and accounts.account_type_id.

Accounts must reference a type. The column is added nullable, rows that
already exist are pointed at a per-category "General" type, then the
column is made NOT NULL.

Revision ID: 002
Revises: 001
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create account_types and link accounts to it."""
    op.create_table(
        "account_types",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("account_category_id", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["account_category_id"], ["account_categories.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_account_types_id"), "account_types", ["id"])
    op.create_index(
        op.f("ix_account_types_account_category_id"), "account_types", ["account_category_id"]
    )

    with op.batch_alter_table("accounts") as batch_op:
        batch_op.add_column(sa.Column("account_type_id", sa.Integer(), nullable=True))

    # Backfill: one "General" type per category that already has accounts
    op.execute(
        """
        INSERT INTO account_types (name, description, account_category_id, is_active)
        SELECT 'General ' || c.name, NULL, c.id, TRUE
        FROM account_categories c
        WHERE EXISTS (SELECT 1 FROM accounts a WHERE a.account_category_id = c.id)
        """
    )
    op.execute(
        """
        UPDATE accounts SET account_type_id = (
            SELECT t.id FROM account_types t
            WHERE t.account_category_id = accounts.account_category_id
        )
        """
    )

    with op.batch_alter_table("accounts") as batch_op:
        batch_op.alter_column("account_type_id", existing_type=sa.Integer(), nullable=False)
        batch_op.create_foreign_key(
            "fk_accounts_account_type_id",
            "account_types",
            ["account_type_id"],
            ["id"],
            ondelete="RESTRICT",
        )
        batch_op.create_index(op.f("ix_accounts_account_type_id"), ["account_type_id"])


def downgrade() -> None:
    """Drop accounts.account_type_id and the account_types table."""
    with op.batch_alter_table("accounts") as batch_op:
        batch_op.drop_index(op.f("ix_accounts_account_type_id"))
        batch_op.drop_constraint("fk_accounts_account_type_id", type_="foreignkey")
        batch_op.drop_column("account_type_id")

    op.drop_index(op.f("ix_account_types_account_category_id"), table_name="account_types")
    op.drop_index(op.f("ix_account_types_id"), table_name="account_types")
    op.drop_table("account_types")
