from datetime import date

import streamlit as st

from prodash_ui.constants import JOB_COLUMNS, JOB_STATUS_LABELS
from prodash_ui.data import repositories


def _render_create_form():
    with st.form("jobs.create", clear_on_submit=True):
        cols = st.columns(2)
        company = cols[0].text_input("Company")
        role = cols[1].text_input("Role")
        cols = st.columns(2)
        status = cols[0].selectbox("Status", [key for key, _ in JOB_COLUMNS], format_func=JOB_STATUS_LABELS.get)
        date_applied = cols[1].date_input("Date applied", value=date.today())
        notes = st.text_area("Notes")
        submitted = st.form_submit_button("Add application")
    if not submitted:
        return
    if not company.strip() or not role.strip():
        st.error("Company and role required")
        return
    payload = {
        "company": company.strip(),
        "role": role.strip(),
        "status": status,
        "notes": notes.strip() or None,
        "date_applied": date_applied.isoformat(),
    }
    if repositories.create_job(payload):
        st.toast("Job added")
        st.rerun()


def _render_card(job):
    job_id = job["id"]
    with st.container(border=True):
        st.markdown(f"**{job.get('role')}**  \n{job.get('company')}")
        st.caption(f"Applied {job.get('date_applied')}")
        if job.get("notes"):
            st.caption(job["notes"])
        next_status = job.get("next_status")
        if next_status:
            if st.button(f"Move to {JOB_STATUS_LABELS[next_status]}", key=f"jobs.advance.{job_id}"):
                if repositories.advance_job(job_id):
                    st.rerun()
        if job.get("status") != "rejected":
            if st.button("Mark rejected", key=f"jobs.reject.{job_id}"):
                if repositories.update_job(job_id, {"status": "rejected"}):
                    st.rerun()
        if st.button("Remove", key=f"jobs.delete.{job_id}"):
            if repositories.delete_job(job_id):
                st.toast("Job removed")
                st.rerun()


def render_jobs_tab(ctx):
    jobs = repositories.list_jobs()
    interviews = sum(1 for job in jobs if job.get("status") == "interview")
    st.markdown("### Job Applications")
    st.caption(f"{len(jobs)} applications tracked · {interviews} interviews")

    with st.expander("Add application"):
        _render_create_form()

    columns = st.columns(len(JOB_COLUMNS))
    for column, (status, label) in zip(columns, JOB_COLUMNS):
        column_jobs = [job for job in jobs if job.get("status") == status]
        with column:
            st.markdown(f"**{label}** ({len(column_jobs)})")
            for job in column_jobs:
                _render_card(job)
