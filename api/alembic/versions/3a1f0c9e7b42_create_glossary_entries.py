"""create glossary_entries

Revision ID: 3a1f0c9e7b42
Revises:
Create Date: 2026-10-19 10:12:44.118207

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel  # noqa: F401


# revision identifiers, used by Alembic.
revision = '3a1f0c9e7b42'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'glossary_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('aggregate_identifier', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('glossary_language', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('creation_date_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_modification_date_time', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('aggregate_identifier', 'glossary_language', name='uq_glossary_entry_aggregate_lang'),
    )
    op.create_index(op.f('ix_glossary_entries_aggregate_identifier'), 'glossary_entries', ['aggregate_identifier'], unique=False)
    op.create_index(op.f('ix_glossary_entries_glossary_language'), 'glossary_entries', ['glossary_language'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_glossary_entries_glossary_language'), table_name='glossary_entries')
    op.drop_index(op.f('ix_glossary_entries_aggregate_identifier'), table_name='glossary_entries')
    op.drop_table('glossary_entries')
