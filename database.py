from sqlmodel import create_engine, SQLModel, Session
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///myDatabase.db")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

# SQLite connections are handed across FastAPI's threadpool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Create engine
engine = create_engine(DATABASE_URL, echo=DB_ECHO, connect_args=connect_args)


def create_db_and_tables():
    """Create userDetails and taskList if they do not exist yet"""
    SQLModel.metadata.create_all(engine)


def get_session():
    """Get database session - used as FastAPI dependency"""
    with Session(engine) as session:
        yield session
