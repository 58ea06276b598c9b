from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from dependencies.store import get_store
from schemas.common import EntityId, MAX_DB_INT, MessageResponse
from schemas.results import Result, ResultCreate, ResultFilters, ResultUpdate, ResultWithDetails
from services.exceptions import NotFoundError
from services.result_store import EntityKind, ResultStore

router = APIRouter(prefix="/results", tags=["results"])


# ==========================================================
# [1단계] 검색 / 조회
# ==========================================================

# ✅ [SEARCH] 학생/과목/학기/교사 조건 AND 검색 (+ 과목명·학생명 키워드)
@router.get("", response_model=List[ResultWithDetails])
def search_results(
    student_id: Optional[int] = Query(None, alias="studentId", ge=1, le=MAX_DB_INT),
    subject_id: Optional[int] = Query(None, alias="subjectId", ge=1, le=MAX_DB_INT),
    semester: Optional[int] = Query(None, ge=1, le=MAX_DB_INT),
    teacher_id: Optional[int] = Query(None, alias="teacherId", ge=1, le=MAX_DB_INT),
    q: Optional[str] = Query(None, max_length=100),
    store: ResultStore = Depends(get_store),
):
    filters = ResultFilters(
        student_id=student_id,
        subject_id=subject_id,
        semester=semester,
        teacher_id=teacher_id,
        query=q or None,
    )
    return store.search(filters)


# ✅ [READ] 특정 교사가 입력한 성적
@router.get("/teacher/{teacher_id}", response_model=List[ResultWithDetails])
def read_teacher_results(teacher_id: EntityId, store: ResultStore = Depends(get_store)):
    return store.results_for_teacher(teacher_id)


# ✅ [READ] 특정 성적 조회
@router.get("/{result_id}", response_model=Result)
def read_result(result_id: EntityId, store: ResultStore = Depends(get_store)):
    result = store.get_by_id(EntityKind.RESULT, result_id)
    if result is None:
        raise NotFoundError("Result not found")
    return result


# ==========================================================
# [2단계] 등록 / 수정 / 삭제 (교사)
# ==========================================================

# ✅ [CREATE] 성적 등록 - 평점은 등급으로 서버에서 계산
@router.post("", response_model=Result, status_code=201)
def create_result(payload: ResultCreate, store: ResultStore = Depends(get_store)):
    return store.create(EntityKind.RESULT, payload)


# ✅ [UPDATE] 성적 수정
@router.put("/{result_id}", response_model=Result)
def update_result(result_id: EntityId, payload: ResultUpdate, store: ResultStore = Depends(get_store)):
    return store.update(result_id, payload)


# ✅ [DELETE] 성적 삭제
@router.delete("/{result_id}", response_model=MessageResponse)
def delete_result(result_id: EntityId, store: ResultStore = Depends(get_store)):
    if not store.delete(result_id):
        raise NotFoundError("Result not found")
    return MessageResponse(message="Result deleted successfully")
