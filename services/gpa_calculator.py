"""
services/gpa_calculator.py

- 성적 목록으로부터 GPA / CGPA / 학기별 GPA를 계산하는 순수 함수 모음
- 입력은 (성적, 과목) 쌍의 목록. 성적은 points, semester 속성을,
  과목은 credits 속성을 가지면 됨 (ORM 객체, pydantic 스키마 모두 가능)
- 내부 상태 없음, DB 접근 없음
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from schemas.gpa import GPACalculation, SemesterGPA, GPASummary

# ✅ 등급 → 평점 고정표
GRADE_POINTS: Dict[str, Decimal] = {
    "A": Decimal("4.00"),
    "A-": Decimal("3.70"),
    "B+": Decimal("3.30"),
    "B": Decimal("3.00"),
    "B-": Decimal("2.70"),
    "C+": Decimal("2.30"),
    "C": Decimal("2.00"),
    "C-": Decimal("1.70"),
    "D": Decimal("1.00"),
    "F": Decimal("0.00"),
}

_ZERO = Decimal("0.00")
_CENTS = Decimal("0.01")

ResultPair = Tuple[Any, Any]


def points_for(grade: str) -> Decimal:
    """등급 문자열의 평점. 표에 없는 값은 0.00 (예외 없음)"""
    return GRADE_POINTS.get(grade, _ZERO)


def _round2(value: Decimal) -> float:
    # 소수 둘째 자리 반올림 (half-up)
    return float(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


def calculate_gpa(pairs: Sequence[ResultPair]) -> GPACalculation:
    if not pairs:
        return GPACalculation(gpa=0.0, total_credits=0, total_grade_points=0.0)

    total_grade_points = Decimal(0)
    total_credits = 0
    for result, subject in pairs:
        credits = int(subject.credits)
        total_grade_points += Decimal(str(result.points)) * credits
        total_credits += credits

    gpa = total_grade_points / total_credits if total_credits > 0 else Decimal(0)
    return GPACalculation(
        gpa=_round2(gpa),
        total_credits=total_credits,
        total_grade_points=_round2(total_grade_points),
    )


def calculate_semester_gpa(pairs: Sequence[ResultPair], semester: int) -> GPACalculation:
    return calculate_gpa([(r, s) for r, s in pairs if r.semester == semester])


def calculate_cgpa(pairs: Sequence[ResultPair]) -> GPACalculation:
    # 누적 평점 = 전체 성적에 대한 GPA
    return calculate_gpa(pairs)


def get_semester_wise_gpa(pairs: Sequence[ResultPair]) -> List[SemesterGPA]:
    semesters = sorted({r.semester for r, _ in pairs})
    summary = []
    for semester in semesters:
        calc = calculate_semester_gpa(pairs, semester)
        summary.append(SemesterGPA(semester=semester, gpa=calc.gpa, credits=calc.total_credits))
    return summary


def pairs_from_results(results: Iterable[Any]) -> List[ResultPair]:
    """subject 속성이 붙은 성적(ResultWithSubject 등)을 (성적, 과목) 쌍으로 변환"""
    return [(r, r.subject) for r in results]


def summarize(student_id: int, pairs: Sequence[ResultPair]) -> GPASummary:
    return GPASummary(
        student_id=student_id,
        cgpa=calculate_cgpa(pairs),
        semesters=get_semester_wise_gpa(pairs),
    )
