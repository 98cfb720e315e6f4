import streamlit as st

from prodash_ui.data import repositories

SUGGESTIONS = [
    "How can I be more productive?",
    "Help me build a morning routine",
    "Tips for job interview preparation",
]


def _send(prompt, history):
    saved = repositories.save_chat_message("user", prompt)
    if saved is None:
        return
    turns = [{"role": item.get("role"), "content": item.get("content")} for item in history]
    turns.append({"role": "user", "content": prompt})
    reply = repositories.send_chat(turns)
    if reply:
        repositories.save_chat_message("assistant", reply)


def render_chat_tab(ctx):
    st.markdown("### AI Assistant")
    history = repositories.chat_history()

    if st.button("Clear history", key="chat.clear", disabled=not history):
        if repositories.clear_chat_history():
            st.toast("Chat cleared")
            st.rerun()

    if not history:
        st.caption("Ask me anything about productivity, habits, jobs or budgeting.")
        cols = st.columns(len(SUGGESTIONS))
        for col, suggestion in zip(cols, SUGGESTIONS):
            if col.button(suggestion, key=f"chat.suggest.{suggestion}"):
                _send(suggestion, history)
                st.rerun()

    for message in history:
        with st.chat_message(message.get("role", "assistant")):
            st.markdown(message.get("content", ""))

    prompt = st.chat_input("Message ProDash AI")
    if prompt and prompt.strip():
        with st.spinner("Thinking…"):
            _send(prompt.strip(), history)
        st.rerun()
