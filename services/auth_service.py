import logging
from typing import Tuple, Union

from schemas.students import Student
from schemas.teachers import Teacher
from services.exceptions import AuthError, ValidationError
from services.result_store import EntityKind, ResultStore
from utils.security import verify_password

logger = logging.getLogger(__name__)

USER_TYPES = ("student", "teacher")


def authenticate(
    store: ResultStore, email: str, password: str, user_type: str
) -> Tuple[Union[Student, Teacher], str]:
    """
    이메일 + 비밀번호 + 사용자 유형으로 로그인.
    - 이메일 없음 / 유형 불일치 / 비밀번호 불일치는 모두 같은 AuthError
    - 성공 시 비밀번호를 뺀 사용자 정보와 유형을 반환
    """
    if user_type not in USER_TYPES:
        raise ValidationError("Invalid user type")

    account = store.get_by_email(EntityKind(user_type), email)
    if account is None or not verify_password(password, account.password):
        logger.info(f"login failed: email={email} user_type={user_type}")
        raise AuthError("Invalid credentials")

    logger.info(f"login ok: {user_type} id={account.id}")
    return account.to_public(), user_type
