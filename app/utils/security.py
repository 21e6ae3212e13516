# app/utils/security.py
"""
Password hashing and access token helpers.

Passwords are hashed with bcrypt (random salt, cost from BCRYPT_ROUNDS).
bcrypt only reads 72 bytes, so the password is first reduced to the
base64 of its SHA-256 digest (44 bytes) whatever its length or encoding.
Access tokens are HS256 JWTs signed with SECRET_KEY.
"""
import base64
import hashlib
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import jwt

from app.config.settings import settings


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prehash(password), salt).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time comparison against a bcrypt hash"""
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed_password.encode())
    except (ValueError, TypeError):
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry; raises jose.JWTError on failure"""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
