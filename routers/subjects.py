from typing import List

from fastapi import APIRouter, Depends

from dependencies.store import get_store
from schemas.common import EntityId
from schemas.subjects import Subject
from services.exceptions import NotFoundError
from services.result_store import EntityKind, ResultStore

router = APIRouter(prefix="/subjects", tags=["subjects"])


# ✅ [READ] 전체 과목 조회
@router.get("", response_model=List[Subject])
def read_subjects(store: ResultStore = Depends(get_store)):
    return store.list_all(EntityKind.SUBJECT)


# ✅ [READ] 과목 코드로 조회
@router.get("/code/{code}", response_model=Subject)
def read_subject_by_code(code: str, store: ResultStore = Depends(get_store)):
    subject = store.get_by_code(code)
    if subject is None:
        raise NotFoundError("Subject not found")
    return subject


# ✅ [READ] 특정 과목 조회
@router.get("/{subject_id}", response_model=Subject)
def read_subject(subject_id: EntityId, store: ResultStore = Depends(get_store)):
    subject = store.get_by_id(EntityKind.SUBJECT, subject_id)
    if subject is None:
        raise NotFoundError("Subject not found")
    return subject
