from sqlalchemy import inspect
from checkin_app.db.session import engine, Base

# Import all models before create_all
from checkin_app.models import user, venue, checkin, friendship
from checkin_app.utils.logger import logger

def create_missing_tables(bind=None):
    bind = bind or engine
    existing = set(inspect(bind).get_table_names())
    missing = [name for name in Base.metadata.tables if name not in existing]
    Base.metadata.create_all(bind=bind)
    if missing:
        logger.info(f"Created tables: {', '.join(missing)}")
    return missing

if __name__ == "__main__":
    print("Syncing database...")
    create_missing_tables()
    print("Database sync complete.")
