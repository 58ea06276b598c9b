from typing import List

from fastapi import APIRouter, Depends

from dependencies.store import get_store
from schemas.common import EntityId
from schemas.gpa import GPASummary
from schemas.results import ResultWithDetails, StudentWithResults
from schemas.students import Student
from services.exceptions import NotFoundError
from services.gpa_calculator import pairs_from_results, summarize
from services.result_store import EntityKind, ResultStore

router = APIRouter(prefix="/students", tags=["students"])


# ==========================================================
# [1단계] 목록 / 단건 조회
# ==========================================================

# ✅ [READ] 전체 학생 조회 (비밀번호 제외)
@router.get("", response_model=List[Student])
def read_students(store: ResultStore = Depends(get_store)):
    return [account.to_public() for account in store.list_all(EntityKind.STUDENT)]


# ✅ [READ] 특정 학생 상세 조회
@router.get("/{student_id}", response_model=Student)
def read_student(student_id: EntityId, store: ResultStore = Depends(get_store)):
    account = store.get_by_id(EntityKind.STUDENT, student_id)
    if account is None:
        raise NotFoundError("Student not found")
    return account.to_public()


# ==========================================================
# [2단계] 학생별 성적 / 평점
# ==========================================================

# ✅ [READ] 학생 정보 + 성적 (과목 포함)
@router.get("/{student_id}/with-results", response_model=StudentWithResults)
def read_student_with_results(student_id: EntityId, store: ResultStore = Depends(get_store)):
    student = store.get_student_with_results(student_id)
    if student is None:
        raise NotFoundError("Student not found")
    return student


# ✅ [READ] 학생 성적 (학생/과목/교사 포함)
@router.get("/{student_id}/results", response_model=List[ResultWithDetails])
def read_student_results(student_id: EntityId, store: ResultStore = Depends(get_store)):
    if store.get_by_id(EntityKind.STUDENT, student_id) is None:
        raise NotFoundError("Student not found")
    return store.results_for_student(student_id)


# ✅ [SUMMARY] 누적 평점(CGPA) + 학기별 평점
@router.get("/{student_id}/gpa", response_model=GPASummary)
def read_student_gpa(student_id: EntityId, store: ResultStore = Depends(get_store)):
    student = store.get_student_with_results(student_id)
    if student is None:
        raise NotFoundError("Student not found")
    return summarize(student.id, pairs_from_results(student.results))
