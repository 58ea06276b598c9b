from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# ✅ 입력용 스키마: 교사 정보를 새로 생성할 때 사용
class TeacherCreate(BaseModel):
    model_config = _config

    name: str = Field(..., min_length=1)           # 교사 이름
    email: str = Field(..., min_length=1)          # 이메일 주소 (고유)
    department: str = Field(..., min_length=1)     # 소속 학과
    password: str = Field(..., min_length=1)       # 비밀번호


# ✅ 출력용 스키마: 교사 정보를 조회할 때 사용 (비밀번호 제외)
class Teacher(BaseModel):
    model_config = _config

    id: int                                  # 고유 교사 ID
    name: str
    email: str
    department: str


# ✅ 내부용: 비밀번호 포함
class TeacherAccount(BaseModel):
    model_config = _config

    id: int
    name: str
    email: str
    department: str
    password: str

    def to_public(self) -> Teacher:
        return Teacher.model_validate(self.model_dump(exclude={"password"}))
