from sqlalchemy import Column, Integer, String
from database.db import Base

class Teacher(Base):
    __tablename__ = "teachers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)      # 교사 고유 ID (PK)
    name = Column(String(100), nullable=False)              # 교사 이름
    email = Column(String(150), nullable=False, unique=True)  # 로그인 이메일
    department = Column(String(100), nullable=False)        # 소속 학과
    password = Column(String(255), nullable=False)          # 비밀번호
