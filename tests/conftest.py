# tests/conftest.py

import os

# main 모듈 import 시 만들어지는 기본 앱도 파일 DB를 건드리지 않도록
os.environ.setdefault("SQLITE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from database.db import create_db_engine, create_session_factory, init_db
from main import create_app
from services.result_store import EntityKind, ResultStore
from services.seed import seed_demo_data


@pytest.fixture
def empty_store():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    return ResultStore(create_session_factory(engine))


@pytest.fixture
def store(empty_store):
    seed_demo_data(empty_store)
    return empty_store


@pytest.fixture
def sample_scenario(empty_store):
    """학생 1명, 과목 3개(3/4/3학점), 성적 3건 (1학기 A, A-, 2학기 B)"""
    s = empty_store
    student = s.create(EntityKind.STUDENT, {
        "name": "Ada Lovelace", "email": "ada@student.edu", "student_id": "STU100", "password": "pw",
    })
    teacher = s.create(EntityKind.TEACHER, {
        "name": "Dr. Babbage", "email": "babbage@university.edu", "department": "Mathematics", "password": "tpw",
    })
    math = s.create(EntityKind.SUBJECT, {"name": "Mathematics", "code": "MATH201", "credits": 3})
    physics = s.create(EntityKind.SUBJECT, {"name": "Physics", "code": "PHYS201", "credits": 4})
    chemistry = s.create(EntityKind.SUBJECT, {"name": "Chemistry", "code": "CHEM201", "credits": 3})
    for subject, grade, semester in ((math, "A", 1), (physics, "A-", 1), (chemistry, "B", 2)):
        s.create(EntityKind.RESULT, {
            "student_id": student.id,
            "subject_id": subject.id,
            "grade": grade,
            "semester": semester,
            "academic_year": "2024-2025",
            "teacher_id": teacher.id,
        })
    return {"store": s, "student": student, "teacher": teacher}


@pytest.fixture
def client():
    app = create_app(Settings(SQLITE_URL="sqlite://", SEED_DEMO_DATA=True, ENV="test"))
    with TestClient(app) as c:
        yield c
