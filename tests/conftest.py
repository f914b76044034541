import os

os.environ.setdefault("URL_DATABASE_SQL", "sqlite://")
os.environ.setdefault("KEY_SECRET", "clave-de-pruebas")
os.environ["DISCORD_WEBHOOK_URL"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from restroom_relay.main import app
from restroom_relay.database import Base, get_db
from restroom_relay.core import create_token
from restroom_relay.models import AdminSetting, Toilet, ControlMode

SECRET_CODE = "abc123xyz"
TOILET_ID = "0b7c5f0e-3a51-4c0e-9a39-2d6f1b8a7c11"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def secret_code(db_session):
    db_session.add(AdminSetting(setting_key="secret_code", setting_value=SECRET_CODE))
    db_session.commit()
    return SECRET_CODE


@pytest.fixture
def user_headers():
    token = create_token({"sub": "user-1", "role": "user"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    token = create_token({"sub": "admin-1", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def wifi_toilet(db_session):
    toilet = Toilet(name="Baño Norte", location="Planta baja", control_mode=ControlMode.WIFI, wifi_ip="192.168.1.50")
    db_session.add(toilet)
    db_session.commit()
    db_session.refresh(toilet)
    return toilet


@pytest.fixture
def gsm_toilet(db_session):
    toilet = Toilet(name="Baño Sur", location="Estacionamiento", control_mode=ControlMode.GSM, gsm_number="+233201234567")
    db_session.add(toilet)
    db_session.commit()
    db_session.refresh(toilet)
    return toilet
