#!/usr/bin/env python3
"""
Seed a demo account with a small herd spanning two generations.

Usage:
  python scripts/seed_demo.py [--username demo] [--password demo123] [--reset]

With --reset the demo user's existing herd is removed first. Other accounts
are never touched.
"""

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path

from sqlalchemy import delete

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.use_cases.sheep import create_sheep
from src.config.settings import get_settings
from src.domain.models.user import User
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.orm.sheep import SheepORM
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)

FOUNDERS = [
    (1, "female", "2022-03-15", 65, "Assaf", "BB", "healthy", "Strong and healthy, excellent genetics"),
    (2, "male", "2021-11-20", 85, "French Dorset", "BB", "healthy", "Main breeding ram"),
    (5, "female", "2022-05-08", 60, "English Dorset", "B+", "healthy", "Bought at market last spring"),
    (6, "male", "2021-08-12", 90, "Afek", "BB", "healthy", "Best ram of the flock"),
    (8, "female", "2022-09-14", 63, "French Slowfek", "AA", "needs attention", "Limping on right front leg"),
    (9, "male", "2022-04-18", 80, "English Slowfek", "BB", "healthy", "Calm temperament"),
]

# (number, gender, birth date, weight, breed, fertility, health, notes, mother, father)
OFFSPRING = [
    (3, "female", "2023-01-10", 52, "Assaf", "B+", "healthy", "First lamb of 1 and 2", 1, 2),
    (4, "male", "2023-01-10", 58, "Romano", "B+", "healthy", "Twin of 3", 1, 2),
    (7, "female", "2023-03-22", 48, "Dropper", "B+", "healthy", "Young and energetic", 5, 6),
    (10, "female", "2023-06-05", 42, "Sherolle", "AA", "healthy", "Small but healthy", 8, 9),
    (11, "male", "2023-02-28", 55, "Romano", "BB", "healthy", "Dark wool", 5, 2),
    (15, "female", "2024-04-10", 45, "English Dorset", "B+", "needs attention", "Off her feed", 5, 9),
]


async def seed(username: str, password: str, *, reset: bool) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    hasher = PasswordHasher(schemes=settings.password_hash_schemes_list or ("bcrypt",))

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            user = await uow.users.get_by_username(username)
            if user is None:
                user = await uow.users.add(
                    User.create(
                        username=username,
                        email=f"{username}@example.com",
                        hashed_password=hasher.hash(password),
                        farm_name="Green Valley Farm",
                    )
                )
                print(f"Created user {username!r} (password: {password})")
            else:
                print(f"User {username!r} already exists, reusing it")
            if reset:
                await uow.session.execute(delete(SheepORM).where(SheepORM.owner_id == user.id))
                print("Cleared existing herd")
            await uow.commit()

        ids = {}
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            for row in FOUNDERS:
                number, gender, born, weight, breed, fertility, health, notes = row
                ids[number] = await _add(
                    uow, user.id, number, gender, born, weight, breed, fertility, health, notes
                )
            for row in OFFSPRING:
                number, gender, born, weight, breed, fertility, health, notes, mother, father = row
                ids[number] = await _add(
                    uow,
                    user.id,
                    number,
                    gender,
                    born,
                    weight,
                    breed,
                    fertility,
                    health,
                    notes,
                    mother_id=ids[mother],
                    father_id=ids[father],
                )
        print(f"\nDone! Seeded {len(ids)} sheep for {username!r}")
    finally:
        await engine.dispose()


async def _add(uow, owner_id, number, gender, born, weight, breed, fertility, health, notes, **parents):
    sheep = await create_sheep.execute(
        uow,
        owner_id,
        create_sheep.CreateSheepInput(
            tag_number=str(number),
            gender=gender,
            birth_date=date.fromisoformat(born),
            weight=float(weight),
            breed=breed,
            fertility=fertility,
            health_status=health,
            notes=notes,
            **parents,
        ),
    )
    print(f"  {sheep.tag_number} ({gender}, {breed}) -> {sheep.id}")
    return sheep.id


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed a demo user and herd")
    parser.add_argument("--username", default="demo")
    parser.add_argument("--password", default="demo123")
    parser.add_argument("--reset", action="store_true", help="Remove the demo user's herd first")
    args = parser.parse_args()

    try:
        asyncio.run(seed(args.username, args.password, reset=args.reset))
    except Exception as exc:
        print(f"Error seeding demo data: {exc}")
        sys.exit(1)
