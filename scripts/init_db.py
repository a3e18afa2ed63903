# scripts/init_db.py

from sqlalchemy import inspect

from taskapi.config import load_settings
from taskapi.db import build_engine, create_db_and_tables


def main() -> None:
    settings = load_settings()
    engine = build_engine(settings.DATABASE_URL)
    print("Using engine:", engine.url.render_as_string(hide_password=True))

    print("Creating tables...")
    create_db_and_tables(engine)

    # Show what tables actually exist
    insp = inspect(engine)
    print("Tables now in DB:", insp.get_table_names())
    engine.dispose()


if __name__ == "__main__":
    main()
