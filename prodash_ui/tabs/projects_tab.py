import streamlit as st

from prodash_ui.constants import PROJECT_STATUSES, PROJECT_STATUS_LABELS
from prodash_ui.data import repositories


def _render_create_form():
    with st.form("projects.create", clear_on_submit=True):
        name = st.text_input("Name")
        description = st.text_area("Description")
        cols = st.columns(2)
        status = cols[0].selectbox("Status", PROJECT_STATUSES, format_func=PROJECT_STATUS_LABELS.get)
        progress = cols[1].slider("Progress", 0, 100, 0)
        submitted = st.form_submit_button("Create project")
    if not submitted:
        return
    if not name.strip():
        st.error("Name required")
        return
    payload = {
        "name": name.strip(),
        "description": description.strip() or None,
        "status": status,
        "progress": int(progress),
    }
    if repositories.create_project(payload):
        st.toast("Project created")
        st.rerun()


def render_projects_tab(ctx):
    projects = repositories.list_projects()
    active = sum(1 for project in projects if project.get("status") == "active")
    st.markdown("### Projects")
    st.caption(f"{len(projects)} projects · {active} active")

    with st.expander("New project"):
        _render_create_form()

    if not projects:
        st.info("No projects yet.")
        return

    for project in projects:
        project_id = project["id"]
        with st.container(border=True):
            st.markdown(f"**{project.get('name')}** · {PROJECT_STATUS_LABELS.get(project.get('status'), '')}")
            if project.get("description"):
                st.caption(project["description"])
            progress = st.slider(
                "Progress",
                0,
                100,
                int(project.get("progress") or 0),
                key=f"projects.progress.{project_id}",
            )
            cols = st.columns([3, 1])
            status = cols[0].selectbox(
                "Status",
                PROJECT_STATUSES,
                index=PROJECT_STATUSES.index(project.get("status", "planning")),
                key=f"projects.status.{project_id}",
                format_func=PROJECT_STATUS_LABELS.get,
            )
            patch = {}
            if progress != int(project.get("progress") or 0):
                patch["progress"] = int(progress)
            if status != project.get("status"):
                patch["status"] = status
            if patch and repositories.update_project(project_id, patch):
                st.rerun()
            if cols[1].button("Delete", key=f"projects.delete.{project_id}"):
                if repositories.delete_project(project_id):
                    st.toast("Project deleted")
                    st.rerun()
