import pandas as pd
import streamlit as st

from prodash_ui.data import repositories


def render_admin_tab(ctx):
    st.markdown("### Admin · Users")
    users = repositories.list_users()
    if not users:
        st.info("No users to show.")
        return
    frame = pd.DataFrame(users, columns=["name", "email", "labels", "created_at"])
    frame["labels"] = frame["labels"].apply(lambda labels: ", ".join(labels or []))
    st.dataframe(frame, hide_index=True, use_container_width=True)
