import os

from seed import migrate_csv_to_db
from utils.database import SessionLocal

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")


def test_seed_loads_sample_data_and_is_idempotent(client):
    db = SessionLocal()
    try:
        first = migrate_csv_to_db(DATA_DIR, db)
        second = migrate_csv_to_db(DATA_DIR, db)
    finally:
        db.close()

    assert first == {"schools": 4, "trainings": 6, "teachers": 3}
    assert second == {"schools": 0, "trainings": 0, "teachers": 0}

    r = client.get("/directory/schools", params={"hours": [300]})
    assert [c["school"]["id"] for c in r.json()] == ["rishikesh-yogpeeth"]
