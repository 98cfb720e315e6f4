import streamlit as st

from prodash_ui.tabs.admin_tab import render_admin_tab
from prodash_ui.tabs.budget_tab import render_budget_tab
from prodash_ui.tabs.chat_tab import render_chat_tab
from prodash_ui.tabs.habits_tab import render_habits_tab
from prodash_ui.tabs.jobs_tab import render_jobs_tab
from prodash_ui.tabs.overview_tab import render_overview_tab
from prodash_ui.tabs.projects_tab import render_projects_tab
from prodash_ui.tabs.tasks_tab import render_tasks_tab

TAB_RENDERERS = {
    "Overview": render_overview_tab,
    "Tasks": render_tasks_tab,
    "Job Applications": render_jobs_tab,
    "Projects": render_projects_tab,
    "Habits": render_habits_tab,
    "Budget": render_budget_tab,
    "AI Assistant": render_chat_tab,
}
ADMIN_TAB = "Admin"


def tab_options(is_admin=False):
    options = list(TAB_RENDERERS)
    if is_admin:
        options.append(ADMIN_TAB)
    return options


def render_router(ctx):
    options = tab_options(ctx.get("is_admin", False))
    active = st.session_state.get("ui.active_tab", options[0])
    if active not in options:
        active = options[0]
    active = st.segmented_control(
        "Workspace",
        options,
        key="ui.active_tab",
        default=active,
    )
    _render_tab(active or options[0], ctx)


@st.fragment
def _render_tab(active, ctx):
    if active == ADMIN_TAB:
        return render_admin_tab(ctx)
    return TAB_RENDERERS[active](ctx)
