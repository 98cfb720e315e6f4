import logging
import os
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

SESSION_COOKIE = "prodash_session"

_SECRET_GETTER = None
_SESSION_GETTER = None


class ApiError(RuntimeError):
    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")


def _build_session():
    session = requests.Session()
    # POST and PATCH are never retried.
    retry = Retry(
        total=2,
        backoff_factor=0.5,
        status_forcelist=(502, 503, 504),
        allowed_methods=("GET", "DELETE"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_connections=10, pool_maxsize=10)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


_SESSION = _build_session()


def configure(secret_getter, session_getter):
    global _SECRET_GETTER, _SESSION_GETTER
    _SECRET_GETTER = secret_getter
    _SESSION_GETTER = session_getter


def _get_secret(path, default=None):
    if _SECRET_GETTER is None:
        return default
    return _SECRET_GETTER(path, default)


def api_base_url():
    return (
        _get_secret(("app", "API_BASE_URL"))
        or _get_secret(("API_BASE_URL",))
        or os.getenv("API_BASE_URL")
        or "http://localhost:8000"
    )


def session_token():
    return _SESSION_GETTER() if _SESSION_GETTER else None


def _error_detail(response):
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and "detail" in payload:
        return payload["detail"]
    return payload


def _send(method: str, path: str, params: dict | None = None, json: dict | None = None, timeout: int = 10):
    base = api_base_url().rstrip("/")
    cookies = {}
    token = session_token()
    if token:
        cookies[SESSION_COOKIE] = token
    url = f"{base}{path}"
    response = _SESSION.request(method, url, params=params, json=json, cookies=cookies, timeout=timeout)
    if not response.ok:
        raise ApiError(response.status_code, _error_detail(response))
    return response


def request(method: str, path: str, params: dict | None = None, json: dict | None = None, timeout: int = 10) -> Any:
    response = _send(method, path, params=params, json=json, timeout=timeout)
    if response.status_code == 204:
        return None
    return response.json()


def _auth_call(path: str, payload: dict):
    response = _send("POST", path, json=payload)
    token = response.cookies.get(SESSION_COOKIE)
    if not token:
        raise ApiError(response.status_code, "Missing session cookie in response")
    return response.json().get("user"), token


def login(email: str, password: str):
    return _auth_call("/v1/auth/login", {"email": email, "password": password})


def register(name: str, email: str, password: str):
    return _auth_call("/v1/auth/register", {"name": name, "email": email, "password": password})


def logout():
    try:
        request("POST", "/v1/auth/logout")
    except (ApiError, requests.RequestException) as exc:
        logger.warning("Logout request failed: %s", exc)


def current_user():
    if not session_token():
        return None
    try:
        payload = request("GET", "/v1/auth/me")
    except ApiError as exc:
        if exc.status_code == 401:
            return None
        raise
    return (payload or {}).get("user")
