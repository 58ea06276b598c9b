from decimal import Decimal
from typing import Annotated, Any, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from schemas.common import MAX_DB_INT
from schemas.students import Student
from schemas.subjects import Subject
from schemas.teachers import Teacher
from services.gpa_calculator import GRADE_POINTS

_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


def _check_grade(value: str) -> str:
    if value not in GRADE_POINTS:
        raise ValueError(f"grade must be one of {', '.join(GRADE_POINTS)}")
    return value


# 등급표에 있는 문자열만 허용
Grade = Annotated[str, AfterValidator(_check_grade)]


# ✅ 입력용: 성적 등록 (POST /api/results)
class ResultCreate(BaseModel):
    model_config = _config

    student_id: int = Field(..., ge=1, le=MAX_DB_INT)             # 학생 ID
    subject_id: int = Field(..., ge=1, le=MAX_DB_INT)             # 과목 ID
    grade: Grade                                   # 성적 등급 (A ~ F)
    points: Optional[Any] = None                   # 클라이언트 값은 검증 없이 버림, 등급으로 다시 계산
    semester: int = Field(..., ge=1, le=MAX_DB_INT)               # 학기
    academic_year: str = Field(..., min_length=1)  # 학년도
    teacher_id: int = Field(..., ge=1, le=MAX_DB_INT)             # 입력 교사 ID


# ✅ 입력용: 성적 부분 수정 (PUT /api/results/{id})
# id는 필드에 없으므로 바꿀 수 없음 (알 수 없는 키는 무시)
class ResultUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    student_id: Optional[int] = Field(default=None, ge=1, le=MAX_DB_INT)
    subject_id: Optional[int] = Field(default=None, ge=1, le=MAX_DB_INT)
    grade: Optional[Grade] = None
    points: Optional[Any] = None                   # 무시됨
    semester: Optional[int] = Field(default=None, ge=1, le=MAX_DB_INT)
    academic_year: Optional[str] = Field(default=None, min_length=1)
    teacher_id: Optional[int] = Field(default=None, ge=1, le=MAX_DB_INT)

    def changes(self) -> dict:
        # 실제로 보낸 값만 (null은 "변경 없음"으로 취급)
        return self.model_dump(exclude_unset=True, exclude_none=True)


# ✅ 출력용: 성적 단건
class Result(BaseModel):
    model_config = _config

    id: int
    student_id: int
    subject_id: int
    grade: str
    points: Decimal
    semester: int
    academic_year: str
    teacher_id: int


# ✅ 과목 정보가 붙은 성적 (학생 대시보드용)
class ResultWithSubject(Result):
    subject: Subject


# ✅ 학생/과목/교사 정보가 모두 붙은 성적 (검색 결과)
class ResultWithDetails(Result):
    student: Student
    subject: Subject
    teacher: Teacher


class StudentWithResults(Student):
    results: List[ResultWithSubject] = []


# ✅ 검색 조건: 값이 있는 조건끼리 AND, None이면 조건 없음
class ResultFilters(BaseModel):
    student_id: Optional[int] = None
    subject_id: Optional[int] = None
    semester: Optional[int] = None
    teacher_id: Optional[int] = None
    query: Optional[str] = None        # 과목명/학생명 부분 일치 (대소문자 무시)

    model_config = ConfigDict(frozen=True)
