import csv
import os
import sys

from dotenv import load_dotenv
from fastapi import HTTPException
from sqlalchemy.orm import Session

from crud.school import create_school
from crud.teacher import add_teacher
from crud.training import add_training
from model.user import UserRole
from schemas.school_schema import SchoolCreate
from schemas.teacher_schema import TeacherCreate
from schemas.training_schema import TrainingCreate
from schemas.user_schema import Identity
from utils.app_logger import get_logger
from utils.database import SessionLocal, init_db

# .env 파일 로드
load_dotenv()

log = get_logger("seed")

SEED_IDENTITY = Identity(principal=os.getenv("SEED_PRINCIPAL", "seed"), role=UserRole.ADMIN)


def load_rows(csv_file_path: str) -> list[dict]:
    if not os.path.exists(csv_file_path):
        return []
    with open(csv_file_path, "r", encoding="utf-8-sig") as f:
        return [row for row in csv.DictReader(f)]


def _blank_to_none(row: dict) -> dict:
    return {k: (v.strip() or None) if isinstance(v, str) else v for k, v in row.items()}


def _insert(db: Session, kind: str, row_id: str, create) -> bool:
    try:
        create()
    except HTTPException as e:
        if e.status_code != 409:
            raise
        db.rollback()
        log.info("%s %s already exists, skipped", kind, row_id)
        return False
    return True


def seed_schools(db: Session, rows: list[dict]) -> int:
    count = 0
    for row in map(_blank_to_none, rows):
        payload = SchoolCreate(
            id=row["id"],
            name=row["name"],
            location=row.get("location") or "",
            country=row.get("country"),
            state=row.get("state"),
            city=row.get("city"),
            video_url=row.get("video_url"),
        )
        count += _insert(db, "school", payload.id, lambda: create_school(db, SEED_IDENTITY, payload))
    return count


def seed_trainings(db: Session, rows: list[dict]) -> int:
    count = 0
    for row in map(_blank_to_none, rows):
        payload = TrainingCreate(
            id=row["id"],
            hours=int(row["hours"]),
            description=row.get("description") or "",
            school_id=row["school_id"],
        )
        count += _insert(db, "training", payload.id, lambda: add_training(db, SEED_IDENTITY, payload))
    return count


def seed_teachers(db: Session, rows: list[dict]) -> int:
    count = 0
    for row in map(_blank_to_none, rows):
        payload = TeacherCreate(
            id=row["id"],
            name=row["name"],
            specialization=row.get("specialization") or "",
            school_id=row["school_id"],
        )
        count += _insert(db, "teacher", payload.id, lambda: add_teacher(db, SEED_IDENTITY, payload))
    return count


def migrate_csv_to_db(data_dir: str, db: Session | None = None) -> dict[str, int]:
    """data_dir 의 schools.csv / trainings.csv / teachers.csv 를 순서대로 넣는다."""
    owns_session = db is None
    db = db or SessionLocal()
    try:
        counts = {
            "schools": seed_schools(db, load_rows(os.path.join(data_dir, "schools.csv"))),
            "trainings": seed_trainings(db, load_rows(os.path.join(data_dir, "trainings.csv"))),
            "teachers": seed_teachers(db, load_rows(os.path.join(data_dir, "teachers.csv"))),
        }
    finally:
        if owns_session:
            db.close()

    log.info("seeded %s", counts)
    return counts


if __name__ == "__main__":
    init_db()
    migrate_csv_to_db(sys.argv[1] if len(sys.argv) > 1 else "data")
