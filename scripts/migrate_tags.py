#!/usr/bin/env python3
"""
Normalise legacy sheep tags to the gender-prefixed format (F0042 / M0007).

Tags already in the new format are left untouched. Numbers are taken from the
first run of digits in the old tag (``0`` when there is none).

Usage:
  python scripts/migrate_tags.py [--database-url URL] [--dry-run]
"""

import argparse
import asyncio
import sys
from pathlib import Path

from sqlalchemy import select

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.domain.value_objects.tag_number import normalize_legacy_tag
from src.infrastructure.db.orm.sheep import SheepORM
from src.infrastructure.db.session import create_engine, create_session_factory


async def migrate_tags(database_url: str, *, dry_run: bool = False) -> tuple[int, int]:
    engine = create_engine(database_url)
    session_factory = create_session_factory(engine)
    migrated = 0
    skipped = 0
    try:
        async with session_factory() as session:
            result = await session.execute(select(SheepORM).order_by(SheepORM.created_at))
            for sheep in result.scalars().all():
                new_tag = normalize_legacy_tag(sheep.tag_number, sheep.gender)
                if new_tag is None:
                    skipped += 1
                    continue
                print(f"  {sheep.tag_number} ({sheep.gender}) -> {new_tag}")
                sheep.tag_number = new_tag
                migrated += 1
            if dry_run:
                await session.rollback()
            else:
                await session.commit()
    finally:
        await engine.dispose()
    return migrated, skipped


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Normalise legacy sheep tag numbers")
    parser.add_argument("--database-url", help="Overrides DATABASE_URL from the environment")
    parser.add_argument("--dry-run", action="store_true", help="Report changes without saving")
    args = parser.parse_args()

    url = args.database_url or get_settings().database_url
    try:
        migrated, skipped = asyncio.run(migrate_tags(url, dry_run=args.dry_run))
    except Exception as exc:
        print(f"Error migrating tags: {exc}")
        sys.exit(1)

    suffix = " (dry run, nothing saved)" if args.dry_run else ""
    print(f"\nDone: {migrated} migrated, {skipped} already in new format{suffix}")
