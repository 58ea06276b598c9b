from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GPACalculation(BaseModel):
    """학점 가중 평점 계산 결과 (gpa, 총 학점, 총 평점합)"""
    model_config = _config

    gpa: float = 0.0
    total_credits: int = 0
    total_grade_points: float = 0.0


class SemesterGPA(BaseModel):
    model_config = _config

    semester: int
    gpa: float
    credits: int


class GPASummary(BaseModel):
    """학생 1명의 누적 평점(CGPA)과 학기별 평점"""
    model_config = _config

    student_id: int
    cgpa: GPACalculation
    semesters: List[SemesterGPA] = []
