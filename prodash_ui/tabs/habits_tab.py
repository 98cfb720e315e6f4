import streamlit as st

from prodash_ui.data import repositories


def _render_create_form():
    with st.form("habits.create", clear_on_submit=True):
        name = st.text_input("Name")
        description = st.text_input("Description")
        submitted = st.form_submit_button("Create habit")
    if not submitted:
        return
    if not name.strip():
        st.error("Name required")
        return
    if repositories.create_habit({"name": name.strip(), "description": description.strip() or None}):
        st.toast("Habit created")
        st.rerun()


def _toggle(habit_id):
    updated = repositories.toggle_habit(habit_id)
    if updated is None:
        return
    st.toast("🔥 Habit completed!" if updated.get("done_today") else "Habit unchecked")


def render_habits_tab(ctx):
    habits = repositories.list_habits()
    done_today = sum(1 for habit in habits if habit.get("done_today"))
    st.markdown("### Habits")
    st.caption(f"{done_today}/{len(habits)} completed today")

    with st.expander("New habit"):
        _render_create_form()

    if not habits:
        st.info("No habits yet.")
        return

    for habit in habits:
        habit_id = habit["id"]
        cols = st.columns([1, 6, 2, 1])
        cols[0].checkbox(
            "Done today",
            value=bool(habit.get("done_today")),
            key=f"habits.done.{habit_id}",
            label_visibility="collapsed",
            on_change=_toggle,
            args=(habit_id,),
        )
        description = f"  \n{habit['description']}" if habit.get("description") else ""
        cols[1].markdown(f"**{habit.get('name')}**{description}")
        cols[2].markdown(f"🔥 {int(habit.get('streak') or 0)} days")
        if cols[3].button("🗑", key=f"habits.delete.{habit_id}"):
            if repositories.delete_habit(habit_id):
                st.toast("Habit deleted")
                st.rerun()
