"""
services/result_store.py

- 학생/교사/과목/성적 데이터를 읽고 쓰는 저장소 객체 (SQLAlchemy 세션 기반)
- 앱 시작 시 세션 팩토리를 주입해서 생성 (모듈 전역 싱글톤 없음)
- 반환값은 항상 pydantic 스키마 → 응답 객체를 고쳐도 DB 행은 바뀌지 않음
- 성적 조회 시 학생/과목/교사를 매번 JOIN으로 붙임 (캐시 없음)
- 참조 대상이 사라진 성적(고아 레코드)은 조회 결과에서 제외하고 경고 로그만 남김
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from sqlalchemy import or_, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from models.results import Result as ResultModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from models.teachers import Teacher as TeacherModel
from schemas.results import (
    Result,
    ResultCreate,
    ResultFilters,
    ResultUpdate,
    ResultWithDetails,
    ResultWithSubject,
    StudentWithResults,
)
from schemas.students import Student, StudentAccount, StudentCreate
from schemas.subjects import Subject, SubjectCreate
from schemas.teachers import Teacher, TeacherAccount, TeacherCreate
from services.exceptions import (
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from services.gpa_calculator import points_for

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    SUBJECT = "subject"
    RESULT = "result"


# 종류별 (ORM 모델, 출력 스키마, 입력 스키마, 고유 컬럼)
_REGISTRY = {
    EntityKind.STUDENT: (StudentModel, StudentAccount, StudentCreate, ("email", "student_id")),
    EntityKind.TEACHER: (TeacherModel, TeacherAccount, TeacherCreate, ("email",)),
    EntityKind.SUBJECT: (SubjectModel, Subject, SubjectCreate, ("code",)),
    EntityKind.RESULT: (ResultModel, Result, ResultCreate, ()),
}

# 성적의 외래키 → 참조 모델
_RESULT_REFERENCES = {
    "student_id": StudentModel,
    "subject_id": SubjectModel,
    "teacher_id": TeacherModel,
}

Payload = Union[BaseModel, Dict[str, Any]]


def _validate(schema_cls, data: Payload):
    if isinstance(data, schema_cls):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return schema_cls.model_validate(data)
    except SchemaError as e:
        raise ValidationError("Invalid request data") from e


class ResultStore:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    # ==========================================================
    # [1단계] 단건 조회
    # ==========================================================

    # ✅ id로 조회 (없으면 None)
    def get_by_id(self, kind: EntityKind, entity_id: int):
        model, schema, _, _ = _REGISTRY[EntityKind(kind)]
        with self._session() as db:
            row = db.get(model, entity_id)
            return schema.model_validate(row) if row is not None else None

    # ✅ 이메일로 학생/교사 조회 (로그인용, 대소문자/공백 정규화 없음)
    def get_by_email(self, kind: EntityKind, email: str):
        kind = EntityKind(kind)
        if kind not in (EntityKind.STUDENT, EntityKind.TEACHER):
            raise ValueError(f"{kind.value} has no email")
        model, schema, _, _ = _REGISTRY[kind]
        with self._session() as db:
            row = db.query(model).filter(model.email == email).first()
            return schema.model_validate(row) if row is not None else None

    # ✅ 과목 코드로 조회
    def get_by_code(self, subject_code: str) -> Optional[Subject]:
        with self._session() as db:
            row = db.query(SubjectModel).filter(SubjectModel.code == subject_code).first()
            return Subject.model_validate(row) if row is not None else None

    # ✅ 학번으로 학생 조회
    def get_by_student_code(self, student_code: str) -> Optional[StudentAccount]:
        with self._session() as db:
            row = db.query(StudentModel).filter(StudentModel.student_id == student_code).first()
            return StudentAccount.model_validate(row) if row is not None else None

    # ✅ 종류별 전체 목록 (id 순)
    def list_all(self, kind: EntityKind) -> list:
        model, schema, _, _ = _REGISTRY[EntityKind(kind)]
        with self._session() as db:
            return [schema.model_validate(r) for r in db.query(model).order_by(model.id).all()]

    def is_empty(self) -> bool:
        with self._session() as db:
            return all(db.query(model).count() == 0 for model, _, _, _ in _REGISTRY.values())

    # ==========================================================
    # [2단계] 생성 / 수정 / 삭제
    # ==========================================================

    # ✅ [CREATE] 새 id를 부여하고 저장 (삭제된 id는 재사용하지 않음)
    def create(self, kind: EntityKind, data: Payload):
        kind = EntityKind(kind)
        model, schema, create_schema, unique_fields = _REGISTRY[kind]
        payload = _validate(create_schema, data)
        values = payload.model_dump()

        with self._session() as db:
            for field in unique_fields:
                if db.query(model).filter(getattr(model, field) == values[field]).first():
                    raise ConflictError(f"{kind.value.capitalize()} with this {field} already exists")

            if kind is EntityKind.RESULT:
                self._check_references(db, values)
                values["points"] = points_for(values["grade"])

            row = model(**values)
            db.add(row)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise ConflictError(f"{kind.value.capitalize()} violates a unique constraint") from e
            db.refresh(row)
            logger.info(f"{kind.value} created: id={row.id}")
            return schema.model_validate(row)

    # ✅ [UPDATE] 성적 부분 수정 - 등급이 바뀌면 평점 재계산, id는 변경 불가
    def update(self, result_id: int, changes: Payload) -> Result:
        changes = _validate(ResultUpdate, data=changes).changes()
        # 평점은 항상 등급에서 계산
        changes.pop("points", None)

        with self._session() as db:
            row = db.get(ResultModel, result_id)
            if row is None:
                raise NotFoundError("Result not found")

            self._check_references(db, changes)
            for key, value in changes.items():
                setattr(row, key, value)
            if "grade" in changes:
                row.points = points_for(changes["grade"])

            db.commit()
            db.refresh(row)
            logger.info(f"result updated: id={result_id} fields={sorted(changes)}")
            return Result.model_validate(row)

    # ✅ [DELETE] 성적 삭제 - 지워졌으면 True, 없으면 False
    def delete(self, result_id: int) -> bool:
        with self._session() as db:
            row = db.get(ResultModel, result_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            logger.info(f"result deleted: id={result_id}")
            return True

    @staticmethod
    def _check_references(db: Session, values: Dict[str, Any]) -> None:
        for field, model in _RESULT_REFERENCES.items():
            if field in values and db.get(model, values[field]) is None:
                raise InvalidReferenceError(f"{model.__name__} {values[field]} does not exist")

    # ==========================================================
    # [3단계] 검색 / JOIN 조회
    # ==========================================================

    # ✅ [SEARCH] 주어진 조건을 모두 만족하는 성적 + 학생/과목/교사 정보
    def search(self, filters: Optional[ResultFilters] = None) -> List[ResultWithDetails]:
        filters = filters or ResultFilters()
        with self._session() as db:
            q = (
                db.query(ResultModel, StudentModel, SubjectModel, TeacherModel)
                .outerjoin(StudentModel, StudentModel.id == ResultModel.student_id)
                .outerjoin(SubjectModel, SubjectModel.id == ResultModel.subject_id)
                .outerjoin(TeacherModel, TeacherModel.id == ResultModel.teacher_id)
            )
            if filters.student_id is not None:
                q = q.filter(ResultModel.student_id == filters.student_id)
            if filters.subject_id is not None:
                q = q.filter(ResultModel.subject_id == filters.subject_id)
            if filters.semester is not None:
                q = q.filter(ResultModel.semester == filters.semester)
            if filters.teacher_id is not None:
                q = q.filter(ResultModel.teacher_id == filters.teacher_id)
            if filters.query:
                term = filters.query.lower()
                q = q.filter(or_(
                    func.lower(SubjectModel.name).contains(term, autoescape=True),
                    func.lower(StudentModel.name).contains(term, autoescape=True),
                ))

            enriched = []
            for result, student, subject, teacher in q.order_by(ResultModel.id).all():
                if student is None or subject is None or teacher is None:
                    logger.warning(f"result {result.id} skipped: dangling reference")
                    continue
                enriched.append(ResultWithDetails(
                    **Result.model_validate(result).model_dump(),
                    student=Student.model_validate(student),
                    subject=Subject.model_validate(subject),
                    teacher=Teacher.model_validate(teacher),
                ))
            return enriched

    def results_for_student(self, student_id: int) -> List[ResultWithDetails]:
        return self.search(ResultFilters(student_id=student_id))

    def results_for_teacher(self, teacher_id: int) -> List[ResultWithDetails]:
        return self.search(ResultFilters(teacher_id=teacher_id))

    # ✅ 학생 정보 + 과목이 붙은 성적 목록 (교사 정보 없음)
    def get_student_with_results(self, student_id: int) -> Optional[StudentWithResults]:
        with self._session() as db:
            student = db.get(StudentModel, student_id)
            if student is None:
                return None

            rows = (
                db.query(ResultModel, SubjectModel)
                .outerjoin(SubjectModel, SubjectModel.id == ResultModel.subject_id)
                .filter(ResultModel.student_id == student_id)
                .order_by(ResultModel.id)
                .all()
            )
            results = []
            for result, subject in rows:
                if subject is None:
                    logger.warning(f"result {result.id} skipped: subject {result.subject_id} missing")
                    continue
                results.append(ResultWithSubject(
                    **Result.model_validate(result).model_dump(),
                    subject=Subject.model_validate(subject),
                ))

            return StudentWithResults(**Student.model_validate(student).model_dump(), results=results)
