from fastapi import Request

from services.result_store import ResultStore


# ✅ 앱 시작 시 만든 저장소를 요청마다 꺼내 씀 (테스트는 앱마다 새 저장소)
def get_store(request: Request) -> ResultStore:
    return request.app.state.store
