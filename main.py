import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, settings
from database.db import create_db_engine, create_session_factory, init_db

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware, TimeoutMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import auth, results, students, subjects, teachers

from services.result_store import ResultStore
from services.seed import seed_demo_data

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    logging.basicConfig(level=app_settings.LOG_LEVEL)
    # HTTP 라이브러리 디버그 로그 비활성화
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app = FastAPI(
        title=app_settings.APP_TITLE,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
    )

    # ✅ 저장소 생성 (앱마다 하나, 테스트는 앱마다 새로)
    engine = create_db_engine(app_settings.DATABASE_URL, echo=app_settings.SQL_ECHO)
    init_db(engine)
    store = ResultStore(create_session_factory(engine))
    if app_settings.SEED_DEMO_DATA:
        seed_demo_data(store)
    app.state.store = store
    app.state.settings = app_settings

    # ✅ CORS 설정 (프론트엔드 연동)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ 요청 제한 시간 + 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=app_settings.REQUEST_TIMEOUT_SECONDS)
    app.add_middleware(TimingMiddleware)

    # ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
    add_error_handlers(app)

    # ✅ /api 프리픽스 라우터 등록
    app.include_router(auth.router,      prefix="/api")
    app.include_router(students.router,  prefix="/api")
    app.include_router(teachers.router,  prefix="/api")
    app.include_router(subjects.router,  prefix="/api")
    app.include_router(results.router,   prefix="/api")

    # ✅ 헬스체크 엔드포인트
    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": "API is running"}

    logger.info(f"{app_settings.APP_TITLE} ready (env={app_settings.ENV})")
    return app


app = create_app()
