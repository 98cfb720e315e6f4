from datetime import datetime

import streamlit as st

from prodash_ui.data import repositories
from prodash_ui.visualizations import format_money, progress_percent


def time_greeting(hour):
    if hour < 12:
        return "morning"
    if hour < 17:
        return "afternoon"
    return "evening"


def render_overview_tab(ctx):
    payload = repositories.overview()
    stats = payload.get("stats") or {}
    first_name = payload.get("user_name") or (ctx.get("user_name") or "").split(" ")[0]

    st.markdown(f"### Good {time_greeting(datetime.now().hour)}, {first_name} 👋")
    st.caption(datetime.now().strftime("%A, %B %d %Y"))

    cols = st.columns(4)
    cols[0].metric("Tasks", stats.get("pending_tasks", 0), f"{stats.get('completed_tasks', 0)} completed", delta_color="off")
    cols[1].metric("Job Applications", stats.get("active_jobs", 0), f"{stats.get('total_jobs', 0)} total tracked", delta_color="off")
    cols[2].metric(
        "Habits Today",
        f"{stats.get('habits_done_today', 0)}/{stats.get('total_habits', 0)}",
        f"🔥 {stats.get('longest_streak', 0)} day streak",
        delta_color="off",
    )
    cols[3].metric(
        "Monthly Balance",
        format_money(stats.get("monthly_balance")),
        f"{format_money(stats.get('income'))} income",
        delta_color="off",
    )

    left, right = st.columns([2, 1])
    with left:
        st.markdown("#### Recent Tasks")
        recent = payload.get("recent_tasks") or []
        if not recent:
            st.info("No tasks yet. Create your first task in the Tasks tab.")
        for task in recent:
            marker = "✅" if task.get("status") == "done" else "🟡" if task.get("status") == "in-progress" else "⚪"
            due = f" · due {task['due_date']}" if task.get("due_date") else ""
            st.markdown(f"{marker} **{task.get('title')}** · {task.get('priority')}{due}")
    with right:
        st.markdown("#### Progress")
        rows = [
            ("Tasks Done", stats.get("completed_tasks", 0), stats.get("total_tasks", 0)),
            ("Habits Today", stats.get("habits_done_today", 0), stats.get("total_habits", 0)),
            ("Jobs → Interviews", stats.get("interviews", 0), stats.get("total_jobs", 0)),
        ]
        for label, value, total in rows:
            st.caption(f"{label}: {value}/{total}")
            st.progress(progress_percent(value, total))
