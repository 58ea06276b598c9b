import logging

from services.result_store import EntityKind, ResultStore

logger = logging.getLogger(__name__)

# ✅ 데모용 기본 데이터 (학생 3명, 교사 2명, 과목 6개, 성적 7건)
DEMO_STUDENTS = [
    {"name": "John Doe", "email": "john.doe@student.edu", "student_id": "STU001", "password": "password123"},
    {"name": "Jane Smith", "email": "jane.smith@student.edu", "student_id": "STU002", "password": "password123"},
    {"name": "Bob Johnson", "email": "bob.johnson@student.edu", "student_id": "STU003", "password": "password123"},
]

DEMO_TEACHERS = [
    {"name": "Dr. Smith", "email": "dr.smith@university.edu", "department": "Mathematics", "password": "teacher123"},
    {"name": "Dr. Johnson", "email": "dr.johnson@university.edu", "department": "Physics", "password": "teacher123"},
]

DEMO_SUBJECTS = [
    {"name": "Mathematics", "code": "MATH101", "credits": 3},
    {"name": "Physics", "code": "PHYS101", "credits": 4},
    {"name": "Chemistry", "code": "CHEM101", "credits": 3},
    {"name": "Biology", "code": "BIOL101", "credits": 3},
    {"name": "English", "code": "ENG101", "credits": 2},
    {"name": "Computer Science", "code": "CS101", "credits": 4},
]

# (학번, 과목코드, 등급, 학기, 학년도, 교사 이메일)
DEMO_RESULTS = [
    ("STU001", "MATH101", "A", 1, "2023-2024", "dr.smith@university.edu"),
    ("STU001", "PHYS101", "A-", 1, "2023-2024", "dr.johnson@university.edu"),
    ("STU001", "CHEM101", "B+", 1, "2023-2024", "dr.smith@university.edu"),
    ("STU001", "BIOL101", "B", 2, "2023-2024", "dr.johnson@university.edu"),
    ("STU002", "MATH101", "A", 1, "2023-2024", "dr.smith@university.edu"),
    ("STU002", "PHYS101", "B+", 1, "2023-2024", "dr.johnson@university.edu"),
    ("STU003", "MATH101", "B", 1, "2023-2024", "dr.smith@university.edu"),
]


def seed_demo_data(store: ResultStore) -> bool:
    """비어 있는 DB에만 데모 데이터를 넣음. 넣었으면 True"""
    if not store.is_empty():
        return False

    for data in DEMO_STUDENTS:
        store.create(EntityKind.STUDENT, data)
    for data in DEMO_TEACHERS:
        store.create(EntityKind.TEACHER, data)
    for data in DEMO_SUBJECTS:
        store.create(EntityKind.SUBJECT, data)

    # 학번/과목코드/이메일 → id 로 풀어서 성적 등록
    for student_code, subject_code, grade, semester, year, teacher_email in DEMO_RESULTS:
        store.create(EntityKind.RESULT, {
            "student_id": store.get_by_student_code(student_code).id,
            "subject_id": store.get_by_code(subject_code).id,
            "grade": grade,
            "semester": semester,
            "academic_year": year,
            "teacher_id": store.get_by_email(EntityKind.TEACHER, teacher_email).id,
        })

    logger.info("✅ 데모 데이터 입력 완료")
    return True
