from typing import Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dependencies.store import get_store
from schemas.students import Student
from schemas.teachers import Teacher
from services.auth_service import authenticate
from services.result_store import ResultStore

router = APIRouter(prefix="/auth", tags=["auth"])

# ✅ 요청 형식 정의
class LoginRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    user_type: str                           # "student" | "teacher"

# ✅ 응답 형식 정의 (비밀번호 없음)
class LoginResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user: Union[Student, Teacher]
    user_type: str

# ✅ [LOGIN] 로그인 API
@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, store: ResultStore = Depends(get_store)):
    user, user_type = authenticate(store, request.email, request.password, request.user_type)
    return LoginResponse(user=user, user_type=user_type)
