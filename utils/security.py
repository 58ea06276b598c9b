import hmac


def verify_password(plain_password: str, stored_password: str) -> bool:
    """
    로그인 비밀번호 비교 (현재는 평문 그대로 비교, 대소문자/공백 정규화 없음)
    - 해시 저장으로 바꿀 때는 이 함수만 교체하면 됨
    """
    # 타이밍 안전 비교 (비ASCII 문자열도 비교되도록 bytes로)
    return hmac.compare_digest(plain_password.encode("utf-8"), stored_password.encode("utf-8"))
