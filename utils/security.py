from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from utils.exceptions import AuthError


# ==========================================================
# 비밀번호 해시 (bcrypt)
# ==========================================================

def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # 저장된 값이 bcrypt 해시 형식이 아닌 경우
        return False


# ==========================================================
# 액세스 토큰 (JWT)
# ==========================================================

def create_access_token(teacher_id: int, secret: str, algorithm: str = "HS256",
                        expires_hours: int = 24) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "id": teacher_id,
        "iat": now,
        "exp": now + timedelta(hours=expires_hours),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> int:
    """토큰을 검증하고 교사 ID를 반환. 실패 시 AuthError."""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token")

    teacher_id = payload.get("id")
    if not isinstance(teacher_id, int):
        raise AuthError("Invalid token")
    return teacher_id
