from sqlalchemy import Column, Integer, String
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)               # 고유 학생 ID (Primary Key)
    name = Column(String(100), nullable=False)                      # 학생 이름
    email = Column(String(150), nullable=False, unique=True)        # 로그인 이메일
    student_id = Column(String(30), nullable=False, unique=True)    # 학번 (예: STU001)
    password = Column(String(255), nullable=False)                  # 비밀번호 (응답에 절대 포함 금지)
