# portfolio_api/auth/auth_utils.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from .. import config

# argon2id，參數用 argon2-cffi 預設值
_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(
    user_id: int,
    email: str,
    expires_minutes: Optional[int] = None,
) -> str:
    if expires_minutes is None:
        expires_minutes = config.jwt_expires_minutes()
    payload = {
        "sub": str(user_id),
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, config.jwt_secret(), algorithm=config.jwt_alg())


def decode_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, config.jwt_secret(), algorithms=[config.jwt_alg()])
    except jwt.PyJWTError:
        return None
