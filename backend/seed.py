import sys

from sqlmodel import Session, select

from db import engine
from models import Entry
from store import EntryStore

DEMO_USER = "demo-user"


def seed_database(user_id: str = DEMO_USER):
    """Seed the database with sample data."""
    with Session(engine) as session:
        # Check if data already exists
        existing = session.exec(select(Entry).where(Entry.user_id == user_id)).first()
        if existing:
            print("Database already has data, skipping seed.")
            return

        sample_entries = [
            ("Lindsay Mendez", "Actor", "Understudy in the spring revival, incredible belt"),
            ("Rachel Chavkin", "Director", "Met at the festival talkback"),
            ("Annie Baker", "Playwright", "Read The Flick, ask about new commission"),
            ("Mimi Lien", "Designer", "Set design, worth following up on the workshop"),
            ("The Public Theater", "Place", "Lobby bar is the best spot for notes"),
            ("Hadestown", "Play", "Second-act staircase still the headlining moment"),
            ("Stage door contact", "Stage Manager", "Keeps the sign-in sheet, very organized"),
        ]

        store = EntryStore(session)
        for name, category, notes in sample_entries:
            store.insert(user_id, name=name, notes=notes, category=category)
        print(f"Seeded database with {len(sample_entries)} sample entries for {user_id}.")


if __name__ == "__main__":
    from db import create_db_and_tables

    create_db_and_tables()
    seed_database(sys.argv[1] if len(sys.argv) > 1 else DEMO_USER)
