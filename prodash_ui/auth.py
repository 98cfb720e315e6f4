import logging
import os

import requests
import streamlit as st

from prodash_ui.data import api_client
from prodash_ui.data.api_client import ApiError

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth.session_token"
USER_KEY = "auth.user"

ENV_FALLBACK_KEYS = {
    ("app", "API_BASE_URL"): "API_BASE_URL",
}


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key and os.getenv(env_key):
        return os.getenv(env_key)
    try:
        current = st.secrets
        for key in path:
            if key not in current:
                return default
            current = current[key]
    except FileNotFoundError:
        return default
    return current


def get_session_token():
    return st.session_state.get(TOKEN_KEY)


def _store(user, token):
    st.session_state[TOKEN_KEY] = token
    st.session_state[USER_KEY] = user


def clear_session():
    st.session_state.pop(TOKEN_KEY, None)
    st.session_state.pop(USER_KEY, None)


def _show_error(exc):
    if isinstance(exc, ApiError):
        detail = exc.detail
        if isinstance(detail, list):
            detail = "; ".join(str(item.get("msg", item)) for item in detail if isinstance(item, dict)) or str(detail)
        st.error(str(detail))
        return
    logger.warning("Backend unreachable: %s", exc)
    st.error("Could not reach the ProDash API. Check API_BASE_URL.")


def _render_login_form():
    with st.form("auth.login"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", use_container_width=True)
    if not submitted:
        return
    try:
        user, token = api_client.login(email.strip(), password)
    except (ApiError, requests.RequestException) as exc:
        _show_error(exc)
        return
    _store(user, token)
    st.rerun()


def _render_register_form():
    with st.form("auth.register"):
        name = st.text_input("Full name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password", help="At least 8 characters")
        submitted = st.form_submit_button("Create account", use_container_width=True)
    if not submitted:
        return
    if len(password) < 8:
        st.error("Password must be at least 8 characters")
        return
    try:
        user, token = api_client.register(name.strip(), email.strip(), password)
    except (ApiError, requests.RequestException) as exc:
        _show_error(exc)
        return
    _store(user, token)
    st.rerun()


def render_auth_screen():
    st.markdown("## ProDash")
    st.caption("Your personal productivity dashboard")
    login_tab, register_tab = st.tabs(["Sign in", "Create account"])
    with login_tab:
        _render_login_form()
    with register_tab:
        _render_register_form()


def require_login():
    if not get_session_token():
        render_auth_screen()
        st.stop()
    try:
        user = api_client.current_user()
    except (ApiError, requests.RequestException) as exc:
        _show_error(exc)
        st.stop()
    if user is None:
        clear_session()
        render_auth_screen()
        st.stop()
    st.session_state[USER_KEY] = user
    return user


def sign_out():
    api_client.logout()
    clear_session()
    st.rerun()
