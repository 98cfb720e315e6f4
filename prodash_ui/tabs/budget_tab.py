from datetime import date

import pandas as pd
import streamlit as st

from prodash_ui.constants import BUDGET_TYPES
from prodash_ui.data import repositories
from prodash_ui.visualizations import category_chart, format_money

ENTRY_COLUMNS = ["date", "type", "category", "amount", "description"]


def entries_frame(entries):
    frame = pd.DataFrame(list(entries or []), columns=["id"] + ENTRY_COLUMNS)
    frame["amount"] = pd.to_numeric(frame["amount"], errors="coerce").fillna(0.0)
    return frame


def _render_create_form():
    with st.form("budget.create", clear_on_submit=True):
        cols = st.columns(3)
        entry_type = cols[0].selectbox("Type", BUDGET_TYPES, format_func=str.title)
        amount = cols[1].number_input("Amount", min_value=0.0, step=0.01, format="%.2f")
        entry_date = cols[2].date_input("Date", value=date.today())
        category = st.text_input("Category")
        description = st.text_input("Description")
        submitted = st.form_submit_button("Add entry")
    if not submitted:
        return
    if amount < 0.01:
        st.error("Amount must be > 0")
        return
    if not category.strip():
        st.error("Category required")
        return
    payload = {
        "type": entry_type,
        "amount": f"{amount:.2f}",
        "date": entry_date.isoformat(),
        "category": category.strip(),
        "description": description.strip() or None,
    }
    if repositories.create_budget_entry(payload):
        st.toast("Income added" if entry_type == "income" else "Expense added")
        st.rerun()


def render_budget_tab(ctx):
    entries = repositories.list_budget_entries()
    summary = repositories.budget_summary()
    categories = repositories.budget_categories()

    st.markdown("### Budget")
    cols = st.columns(3)
    cols[0].metric("Income", format_money(summary.get("income")))
    cols[1].metric("Expenses", format_money(summary.get("expenses")))
    cols[2].metric("Balance", format_money(summary.get("balance")))

    with st.expander("Add entry"):
        _render_create_form()

    if not entries:
        st.info("No entries yet.")
        return

    left, right = st.columns([3, 2])
    with left:
        frame = entries_frame(entries)
        st.dataframe(
            frame[ENTRY_COLUMNS],
            hide_index=True,
            use_container_width=True,
            column_config={"amount": st.column_config.NumberColumn("amount", format="%.2f")},
        )
        labels = {row["id"]: f"{row['date']} · {row['category']} · {format_money(row['amount'])}" for _, row in frame.iterrows()}
        selected = st.selectbox("Delete entry", [None] + list(labels.keys()), format_func=lambda key: labels.get(key, "Select an entry"))
        if selected and st.button("Delete", key="budget.delete"):
            if repositories.delete_budget_entry(selected):
                st.toast("Entry deleted")
                st.rerun()
    with right:
        if categories:
            st.plotly_chart(category_chart(categories), use_container_width=True)
