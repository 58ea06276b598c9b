from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from database.db import Base

class Result(Base):
    __tablename__ = "results"  # 과목별 성적 테이블
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)                              # 성적 고유 ID (Primary Key)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)   # 학생 ID
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)   # 과목 ID
    grade = Column(String(2), nullable=False)                                       # 성적 등급 (예: A, B+)
    points = Column(Numeric(3, 2), nullable=False)                                  # 평점 (등급에서 서버가 계산)
    semester = Column(Integer, nullable=False, index=True)                          # 학기
    academic_year = Column(String(20), nullable=False)                              # 학년도 (예: 2023-2024)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False, index=True)   # 입력한 교사 ID
