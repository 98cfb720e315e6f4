import streamlit as st

from prodash_ui import auth
from prodash_ui.data import api_client, repositories
from prodash_ui.logging_config import configure_logging
from prodash_ui.router import render_router

st.set_page_config(page_title="ProDash", page_icon="⚡", layout="wide")

configure_logging()
api_client.configure(auth.get_secret, auth.get_session_token)
repositories.configure(st.toast)

user = auth.require_login()
is_admin = "admin" in (user.get("labels") or [])

with st.sidebar:
    st.markdown(f"**{user.get('name')}**")
    st.caption(user.get("email"))
    if is_admin:
        st.caption("🛡 Admin")
    if st.button("Sign out", use_container_width=True):
        auth.sign_out()

context = {
    "user_name": user.get("name") or "",
    "user_email": user.get("email") or "",
    "is_admin": is_admin,
}

render_router(context)
