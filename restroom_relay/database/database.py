# restroom_relay/database/database.py

from restroom_relay.core import settings
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

Base = declarative_base()

if settings.URL_DATABASE_SQL.startswith("sqlite"):
    # SQLite (desarrollo local / pruebas) no acepta las opciones del pool
    engine = create_engine(
        settings.URL_DATABASE_SQL,
        connect_args={"check_same_thread": False},
        echo=False,
    )
else:
    engine = create_engine(
        settings.URL_DATABASE_SQL,
        pool_size=8,
        max_overflow=4,
        pool_timeout=20,
        pool_recycle=1800,
        pool_pre_ping=True,     # Verifica que la conexión esté viva antes de usarla
        pool_use_lifo=True,
        echo=False,
        echo_pool=False
    )

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
