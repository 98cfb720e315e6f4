import streamlit as st

from prodash_ui.constants import TASK_PRIORITIES, TASK_STATUSES, TASK_STATUS_LABELS
from prodash_ui.data import repositories


def _render_create_form():
    with st.form("tasks.create", clear_on_submit=True):
        title = st.text_input("Title")
        description = st.text_area("Description")
        cols = st.columns(3)
        priority = cols[0].selectbox("Priority", TASK_PRIORITIES, index=1)
        status = cols[1].selectbox("Status", TASK_STATUSES, format_func=TASK_STATUS_LABELS.get)
        due_date = cols[2].date_input("Due date", value=None)
        submitted = st.form_submit_button("Create task")
    if not submitted:
        return
    if not title.strip():
        st.error("Title required")
        return
    payload = {
        "title": title.strip(),
        "description": description.strip() or None,
        "priority": priority,
        "status": status,
        "due_date": due_date.isoformat() if due_date else None,
    }
    if repositories.create_task(payload):
        st.toast("Task created")
        st.rerun()


def render_tasks_tab(ctx):
    tasks = repositories.list_tasks()
    pending = sum(1 for task in tasks if task.get("status") != "done")
    st.markdown("### Tasks")
    st.caption(f"{pending} pending · {len(tasks) - pending} completed")

    with st.expander("New task"):
        _render_create_form()

    filters = ["all"] + TASK_STATUSES
    active = st.segmented_control(
        "Filter",
        filters,
        key="tasks.filter",
        default="all",
        format_func=lambda value: "All" if value == "all" else TASK_STATUS_LABELS[value],
    )
    visible = tasks if active in (None, "all") else [task for task in tasks if task.get("status") == active]
    if not visible:
        st.info("No tasks here yet.")
        return

    for task in visible:
        task_id = task["id"]
        cols = st.columns([6, 2, 1, 1])
        done = task.get("status") == "done"
        title = f"~~{task.get('title')}~~" if done else f"**{task.get('title')}**"
        due = f" · due {task['due_date']}" if task.get("due_date") else ""
        cols[0].markdown(f"{title}  \n{task.get('priority')} · {task.get('status')}{due}")
        new_status = cols[1].selectbox(
            "Status",
            TASK_STATUSES,
            index=TASK_STATUSES.index(task.get("status", "todo")),
            key=f"tasks.status.{task_id}",
            label_visibility="collapsed",
        )
        if new_status != task.get("status"):
            if repositories.update_task(task_id, {"status": new_status}):
                st.rerun()
        if cols[2].button("✓" if not done else "↺", key=f"tasks.done.{task_id}"):
            if repositories.update_task(task_id, {"status": "todo" if done else "done"}):
                st.rerun()
        if cols[3].button("🗑", key=f"tasks.delete.{task_id}"):
            if repositories.delete_task(task_id):
                st.toast("Task deleted")
                st.rerun()
