from __future__ import annotations

import base64
import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone

from cryptography.exceptions import InvalidKey
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from sqlalchemy.exc import IntegrityError

from prodash import repositories
from prodash.settings import get_settings

logger = logging.getLogger(__name__)

SESSION_COOKIE = "prodash_session"
ADMIN_LABEL = "admin"

PBKDF2_ITERATIONS = 240_000


class IdentityError(Exception):
    """Failures shown to the user with a fixed message."""

    status_code = 400
    message = "Authentication failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidCredentials(IdentityError):
    status_code = 401
    message = "Invalid email or password"


class EmailAlreadyRegistered(IdentityError):
    status_code = 409
    message = "Email already registered"


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(algorithm=hashes.SHA256(), length=32, salt=salt, iterations=iterations)


def hash_password(password: str, salt: bytes | None = None) -> str:
    salt = salt or secrets.token_bytes(16)
    digest = _kdf(salt, PBKDF2_ITERATIONS).derive(password.encode("utf-8"))
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = str(encoded).split("$")
        rounds = int(iterations)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
    except ValueError:
        return False
    if algorithm != "pbkdf2_sha256" or rounds < 1:
        return False
    try:
        _kdf(salt, rounds).verify(password.encode("utf-8"), expected)
    except InvalidKey:
        return False
    return True


def _fernet() -> Fernet:
    settings = get_settings()
    digest = hashlib.sha256(settings.session_secret.encode("utf-8")).digest()
    return Fernet(base64.urlsafe_b64encode(digest))


def encode_session_cookie(session_id: str) -> str:
    return _fernet().encrypt(session_id.encode("utf-8")).decode("utf-8")


def decode_session_cookie(value: str) -> str | None:
    if not value:
        return None
    try:
        raw = _fernet().decrypt(value.encode("utf-8"), ttl=get_settings().session_max_age_seconds)
    except InvalidToken:
        return None
    return raw.decode("utf-8")


def public_user(user: dict) -> dict:
    return {
        "id": user.get("id"),
        "name": user.get("name"),
        "email": user.get("email"),
        "labels": list(user.get("labels") or []),
        "created_at": user.get("created_at"),
    }


def is_admin(user: dict | None) -> bool:
    return ADMIN_LABEL in ((user or {}).get("labels") or [])


async def open_session(user_id: str) -> str:
    settings = get_settings()
    session_id = secrets.token_urlsafe(32)
    expires_at = datetime.now(timezone.utc) + timedelta(seconds=settings.session_max_age_seconds)
    await repositories.create_session(session_id, user_id, expires_at.isoformat())
    return session_id


async def register(name: str, email: str, password: str) -> tuple[dict, str]:
    settings = get_settings()
    email = email.strip().lower()
    if await repositories.get_user_by_email(email):
        raise EmailAlreadyRegistered()
    labels = [ADMIN_LABEL] if email in settings.admin_emails else []
    try:
        user = await repositories.create_user(name.strip(), email, hash_password(password), labels)
    except IntegrityError as exc:
        raise EmailAlreadyRegistered() from exc
    logger.info("Registered user %s", user["id"])
    return user, await open_session(user["id"])


async def login(email: str, password: str) -> tuple[dict, str]:
    user = await repositories.get_user_by_email(email.strip().lower())
    if not user or not verify_password(password, user.get("password_hash", "")):
        raise InvalidCredentials()
    return user, await open_session(user["id"])


async def logout(session_id: str | None) -> None:
    if not session_id:
        return
    await repositories.delete_session(session_id)


async def resolve_session(session_id: str | None) -> dict | None:
    if not session_id:
        return None
    return await repositories.get_session_user(session_id, datetime.now(timezone.utc).isoformat())
