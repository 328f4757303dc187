#!/usr/bin/env python3
"""
Database Seed Script

Loads the starter catalog: five genres, three Brazilian authors and one
book by each of them.

USAGE:
    # From the project root
    python scripts/seed_data.py

    # Keep existing rows and only add the starter catalog
    python scripts/seed_data.py --keep
"""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.models import Author, Book, Genre


def clear_data(db: Session) -> None:
    """Delete every book, author and genre (books first, they hold the foreign keys)."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.execute(delete(Genre))
    db.commit()
    print("Data cleared.")


def create_genres(db: Session) -> dict[str, Genre]:
    print("Creating genres...")
    genres_data = [
        {"name": "Ficção", "description": "Obras de ficção literária"},
        {"name": "Romance", "description": "Histórias românticas"},
        {"name": "Mistério", "description": "Livros de mistério e suspense"},
        {"name": "Fantasia", "description": "Obras de fantasia e ficção científica"},
        {"name": "Biografia", "description": "Biografias e autobiografias"},
    ]

    genres = {}
    for data in genres_data:
        genre = Genre(**data)
        db.add(genre)
        genres[data["name"]] = genre

    db.commit()
    for genre in genres.values():
        db.refresh(genre)

    print(f"Created {len(genres)} genres.")
    return genres


def create_authors(db: Session) -> dict[str, Author]:
    print("Creating authors...")
    authors_data = [
        {
            "first_name": "Machado",
            "last_name": "de Assis",
            "biography": "Escritor brasileiro, considerado um dos maiores nomes "
                         "da literatura nacional.",
            "birth_date": date(1839, 6, 21),
            "death_date": date(1908, 9, 29),
            "nationality": "Brasileira",
        },
        {
            "first_name": "Clarice",
            "last_name": "Lispector",
            "biography": "Escritora brasileira nascida na Ucrânia, uma das principais "
                         "representantes da literatura brasileira.",
            "birth_date": date(1920, 12, 10),
            "death_date": date(1977, 12, 9),
            "nationality": "Brasileira",
        },
        {
            "first_name": "Jorge",
            "last_name": "Amado",
            "biography": "Escritor brasileiro, um dos autores mais adaptados para "
                         "cinema, teatro e televisão.",
            "birth_date": date(1912, 8, 10),
            "death_date": date(2001, 8, 6),
            "nationality": "Brasileira",
        },
    ]

    authors = {}
    for data in authors_data:
        author = Author(**data)
        db.add(author)
        authors[author.full_name] = author

    db.commit()
    for author in authors.values():
        db.refresh(author)

    print(f"Created {len(authors)} authors.")
    return authors


def create_books(
    db: Session,
    authors: dict[str, Author],
    genres: dict[str, Genre],
) -> list[Book]:
    """Create the starter books, linking each to its author and genre by name."""
    print("Creating books...")

    books_data = [
        {
            "title": "Dom Casmurro",
            "isbn": "9788525406958",
            "description": "Romance clássico da literatura brasileira",
            "publication_date": date(1899, 1, 1),
            "publisher": "Globo",
            "page_count": 208,
            "price": Decimal("29.90"),
            "author": "Machado de Assis",
            "genre": "Ficção",
        },
        {
            "title": "A Hora da Estrela",
            "isbn": "9788520925188",
            "description": "Último romance de Clarice Lispector",
            "publication_date": date(1977, 1, 1),
            "publisher": "Rocco",
            "page_count": 87,
            "price": Decimal("24.90"),
            "author": "Clarice Lispector",
            "genre": "Ficção",
        },
        {
            "title": "Gabriela, Cravo e Canela",
            "isbn": "9788535909814",
            "description": "Romance de Jorge Amado ambientado em Ilhéus",
            "publication_date": date(1958, 1, 1),
            "publisher": "Companhia das Letras",
            "page_count": 424,
            "price": Decimal("39.90"),
            "author": "Jorge Amado",
            "genre": "Romance",
        },
    ]

    books = []
    for data in books_data:
        author_name = data.pop("author")
        genre_name = data.pop("genre")

        book = Book(**data)
        book.author = authors[author_name]
        book.genre = genres[genre_name]

        db.add(book)
        books.append(book)

    db.commit()
    for book in books:
        db.refresh(book)

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        genres = create_genres(db)
        authors = create_authors(db)
        books = create_books(db, authors, genres)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Genres: {len(genres)}")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database(clear_existing="--keep" not in sys.argv[1:])
