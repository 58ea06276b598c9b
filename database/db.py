from sqlalchemy import create_engine               # SQLAlchemy 엔진 생성 도구
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker  # 모델 Base 클래스 / 세션 팩토리
from sqlalchemy.pool import StaticPool

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    DB URL로 엔진 생성.
    - 메모리 SQLite("sqlite://")는 커넥션마다 DB가 달라지므로 StaticPool로 하나를 공유
    - SQLite는 요청 스레드가 바뀌어도 쓸 수 있도록 check_same_thread 해제
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    # ✅ 세션 팩토리: 요청마다 새 세션을 여는 생성기
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    # 모델 모듈을 import 해야 Base.metadata에 테이블이 등록됨
    from models import results, students, subjects, teachers  # noqa: F401

    Base.metadata.create_all(bind=engine)
