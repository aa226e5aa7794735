#!/usr/bin/env python3
"""Initialize the Marfa Gallery database.

Applies pending migrations for the database in DATABASE_URL and can
optionally load a handful of demo art pieces.
"""

import argparse
import sys

from marfa_gallery.database import get_database, run_migrations
from marfa_gallery.identifiers import generate_unique_ids, is_valid_two_word_id
from marfa_gallery.store import ArtPieceRepository

DEMO_PIECES = [
    ("QmSampleMetadata1", "Digital Dreams #1", "Digital landscapes and neon aesthetics."),
    ("QmSampleMetadata2", "Abstract Harmony #2", "Flowing forms and electric colors."),
    ("QmSampleMetadata3", "Gradient Genesis #3", "Soft gradients and sculptural forms."),
    ("QmSampleMetadata4", "Dark Matter #4", "Space and form through dark compositions."),
]


def seed(db) -> int:
    repo = ArtPieceRepository(db)
    fresh = [p for p in DEMO_PIECES if repo.get_by_metadata_url(f"ipfs://{p[0]}") is None]
    words = generate_unique_ids(len(fresh), repo.existing_identifiers(is_valid_two_word_id))
    for (cid, title, description), word in zip(fresh, words):
        repo.create(
            ipfs_metadata_url=f"ipfs://{cid}",
            ipfs_image_url=f"https://ipfs.io/ipfs/{cid}",
            title=title,
            description=description,
            identification_word=word,
            metadata={"name": title, "description": description, "image": f"ipfs://{cid}"},
        )
        print(f"  + {word}: {title}")
    return len(fresh)


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="Insert demo art pieces")
    args = parser.parse_args()

    print("Initializing Marfa Gallery database...")
    print("-" * 60)

    db = get_database()
    try:
        applied = run_migrations(db)
        print(f"Applied migrations: {', '.join(applied) or 'none pending'}")
        if args.seed:
            print(f"Seeded {seed(db)} demo art pieces")
    except Exception as e:
        print(f"\nError initializing database: {e}")
        sys.exit(1)
    finally:
        db.close()

    print("-" * 60)
    print("Database initialized successfully!")


if __name__ == "__main__":
    main()
