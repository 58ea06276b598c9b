from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# JSON 필드명은 camelCase(studentId), 파이썬 속성은 snake_case(student_id)
_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# ✅ 입력용 (생성/시드 데이터)
class StudentCreate(BaseModel):
    model_config = _config

    name: str = Field(..., min_length=1)           # 학생 이름
    email: str = Field(..., min_length=1)          # 로그인 이메일 (고유)
    student_id: str = Field(..., min_length=1)     # 학번 (고유, 예: STU001)
    password: str = Field(..., min_length=1)       # 비밀번호 (평문 저장)


# ✅ 출력용 (GET 응답) - 비밀번호 없음
class Student(BaseModel):
    model_config = _config

    id: int
    name: str
    email: str
    student_id: str


# ✅ 내부용: 로그인 비교에만 쓰는 비밀번호 포함 레코드
# Student를 상속하지 않음 → 응답 모델로 그대로 새어나가지 않도록
class StudentAccount(BaseModel):
    model_config = _config

    id: int
    name: str
    email: str
    student_id: str
    password: str

    def to_public(self) -> Student:
        return Student.model_validate(self.model_dump(exclude={"password"}))
