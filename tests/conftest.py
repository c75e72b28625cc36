import os
import tempfile

import pytest

# must be set before the app modules read their configuration
_DB_FILE = os.path.join(tempfile.mkdtemp(prefix="yoga-directory-"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_FILE}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["JWT_ISSUER"] = "https://id.test"
os.environ["ADMIN_PRINCIPALS"] = "admin-1"
os.environ.pop("REDIS_HOST", None)

from fastapi.testclient import TestClient  # noqa: E402

from main import app  # noqa: E402
from model.base import Base  # noqa: E402
from tests.fakes import make_token  # noqa: E402
from utils.database import engine, init_db  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _fresh_db():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {make_token('admin-1')}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {make_token('visitor-7')}"}


@pytest.fixture
def seeded(client, admin_headers):
    """Three schools: A offers 200h, B offers 300h, C offers nothing."""
    schools = [
        {"id": "a", "name": "Ashram A", "location": "Rishikesh", "country": "India", "state": "Uttarakhand", "city": "Rishikesh"},
        {"id": "b", "name": "Bali B", "location": "Bali, Indonesia"},
        {"id": "c", "name": "Centre C", "location": "Goa", "country": "India", "state": "Goa"},
    ]
    for body in schools:
        r = client.post("/schools", json=body, headers=admin_headers)
        assert r.status_code == 201, r.text

    for tid, sid, hours in [("a-200", "a", 200), ("b-300", "b", 300)]:
        r = client.post(
            "/trainings",
            json={"id": tid, "hours": hours, "description": f"{hours}h course", "school_id": sid},
            headers=admin_headers,
        )
        assert r.status_code == 201, r.text
    return schools


