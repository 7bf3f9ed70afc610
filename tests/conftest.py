import os
import tempfile

# Banco e segredo de teste definidos antes de importar a aplicação
_test_tmp_dir = tempfile.mkdtemp(prefix="blog_api_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_test_tmp_dir, 'test.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only")
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from blog_api.db.base import Base  # noqa: E402
from blog_api.db.session import SessionLocal, engine  # noqa: E402
import blog_api.models  # noqa: E402,F401


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from blog_api.main import api

    with TestClient(api) as c:
        yield c


@pytest.fixture
def register(client):
    def _register(email="alice@example.com", username="alice", password="secret123", name="Alice"):
        resp = client.post(
            "/api/v1/auth/signup",
            json={"email": email, "username": username, "password": password, "name": name},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register
