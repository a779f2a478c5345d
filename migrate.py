"""Provision the tasks table against DATABASE_URL."""
from taskboard import crud
from taskboard.config import DATABASE_URL
from taskboard.database import create_tables, get_session

# Create tables if not exist
create_tables()

# Report what is already there
with get_session() as session:
    count = crud.count_tasks(session)

print(f"Tasks table ready at {DATABASE_URL} ({count} existing tasks)")
