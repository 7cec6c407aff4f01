from sqlmodel import SQLModel, create_engine, Session
from txpredict.config import settings
import os

# data dir for the default SQLite journal
if settings.db_dsn.startswith("sqlite:///./data"):
    os.makedirs("data", exist_ok=True)

engine = create_engine(settings.db_dsn, echo=False)

def init_db(bind=None):
    from txpredict.db import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)

def get_session():
    with Session(engine) as session:
        yield session
