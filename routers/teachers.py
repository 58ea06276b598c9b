from typing import List

from fastapi import APIRouter, Depends

from dependencies.store import get_store
from schemas.common import EntityId
from schemas.teachers import Teacher
from services.exceptions import NotFoundError
from services.result_store import EntityKind, ResultStore

router = APIRouter(prefix="/teachers", tags=["teachers"])


# ✅ [READ] 전체 교사 조회 (비밀번호 제외)
@router.get("", response_model=List[Teacher])
def read_teachers(store: ResultStore = Depends(get_store)):
    return [account.to_public() for account in store.list_all(EntityKind.TEACHER)]


# ✅ [READ] 특정 교사 조회
@router.get("/{teacher_id}", response_model=Teacher)
def read_teacher(teacher_id: EntityId, store: ResultStore = Depends(get_store)):
    account = store.get_by_id(EntityKind.TEACHER, teacher_id)
    if account is None:
        raise NotFoundError("Teacher not found")
    return account.to_public()
