"""create_library_tables

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'genres',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False,
                  comment="Genre name (e.g., 'Science Fiction', 'Mystery')"),
        sa.Column('name_key', sa.String(length=300), nullable=False,
                  comment='Case-folded name used for uniqueness'),
        sa.Column('description', sa.String(length=500), nullable=True,
                  comment='Description of what this genre encompasses'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name_key'),
    )
    op.create_index(op.f('ix_genres_name'), 'genres', ['name'], unique=False)

    op.create_table(
        'authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False,
                  comment="Author's given name"),
        sa.Column('last_name', sa.String(length=100), nullable=False,
                  comment="Author's family name"),
        sa.Column('name_key', sa.String(length=600), nullable=False,
                  comment='Case-folded first and last name used for uniqueness'),
        sa.Column('biography', sa.String(length=1000), nullable=True,
                  comment='Author biography'),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('death_date', sa.Date(), nullable=True),
        sa.Column('nationality', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  comment='When the author record was created'),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False,
                  comment='When the author record was last updated'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name_key'),
    )
    op.create_index(op.f('ix_authors_last_name'), 'authors', ['last_name'], unique=False)

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False, comment='Book title'),
        sa.Column('isbn', sa.String(length=20), nullable=True,
                  comment='International Standard Book Number'),
        sa.Column('description', sa.String(length=2000), nullable=True,
                  comment='Book description or summary'),
        sa.Column('publication_date', sa.Date(), nullable=True, comment='Date of publication'),
        sa.Column('publisher', sa.String(length=100), nullable=True),
        sa.Column('page_count', sa.Integer(), nullable=True,
                  comment='Number of pages in the book'),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=True, comment='Book price'),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('genre_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['genre_id'], ['genres.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_isbn'), 'books', ['isbn'], unique=True)
    op.create_index(op.f('ix_books_author_id'), 'books', ['author_id'], unique=False)
    op.create_index(op.f('ix_books_genre_id'), 'books', ['genre_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_genre_id'), table_name='books')
    op.drop_index(op.f('ix_books_author_id'), table_name='books')
    op.drop_index(op.f('ix_books_isbn'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_authors_last_name'), table_name='authors')
    op.drop_table('authors')
    op.drop_index(op.f('ix_genres_name'), table_name='genres')
    op.drop_table('genres')
