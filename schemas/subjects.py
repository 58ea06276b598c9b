from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# ✅ 입력용: 과목 생성 시 사용할 스키마
class SubjectCreate(BaseModel):
    model_config = _config

    name: str = Field(..., min_length=1)     # 과목 이름
    code: str = Field(..., min_length=1)     # 과목 코드 (고유)
    credits: int = Field(..., ge=1)          # 학점 (양의 정수)


# ✅ 출력용: GET 응답 등에서 사용할 스키마
class Subject(SubjectCreate):
    id: int                                  # 고유 과목 ID
