import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from sailclub.db.base import Base
from sailclub.db.reference import seed_provinces
from sailclub.validation import ProvinceOrState

FAKE_PROVINCES: dict[str, ProvinceOrState] = {
    "ON": ProvinceOrState(code="ON", name="Ontario", country_code="CA"),
    "QC": ProvinceOrState(code="QC", name="Quebec", country_code="CA"),
    "NY": ProvinceOrState(code="NY", name="New York", country_code="US"),
    "JA": ProvinceOrState(code="JA", name="Jalisco", country_code="MX"),
}


@pytest.fixture
def fake_lookup():
    """Dict-backed province lookup that records every code it was asked for."""
    calls: list[str] = []

    def _lookup(code: str) -> ProvinceOrState | None:
        calls.append(code)
        return FAKE_PROVINCES.get(code)

    _lookup.calls = calls
    return _lookup


@pytest.fixture
def db_session():
    """In-memory SQLite session with all tables created and provinces seeded."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    seed_provinces(session)
    session.commit()
    yield session
    session.close()


@pytest.fixture
def client(db_session: Session, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """TestClient with get_db overridden to use the in-memory session."""
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")

    from sailclub.core.settings import get_settings

    get_settings.cache_clear()

    from sailclub.api.deps import get_db
    from sailclub.api.main import app

    def _override_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_settings.cache_clear()
