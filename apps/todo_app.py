import os

import streamlit as st
from dotenv import load_dotenv

from todoapp.client import TodoApiClient, TodoListController, TodoListState
from todoapp.core.config import DEFAULT_API_URL

load_dotenv()

st.set_page_config(page_title="Todo List", page_icon="📝")
st.title("📝 Todo List")


# -----------------------------
# One controller per browser session
# -----------------------------
if "todo_controller" not in st.session_state:
    api_url = os.getenv("TODO_API_URL", DEFAULT_API_URL)
    st.session_state.todo_controller = TodoListController(TodoApiClient(api_url))

controller = st.session_state.todo_controller

if controller.state is TodoListState.IDLE:
    with st.spinner("Loading todos..."):
        controller.load()


# -----------------------------
# Add form
# -----------------------------
with st.form("add_todo", clear_on_submit=True):
    content = st.text_input("New todo")
    if st.form_submit_button("Add"):
        controller.add(content)


# -----------------------------
# List with delete buttons
# -----------------------------
if not controller.todos:
    st.info("Nothing to do yet.")

for todo in controller.todos:
    col_text, col_button = st.columns([5, 1])
    col_text.write(todo.content)
    if col_button.button("Delete", key=f"delete-{todo.id}"):
        controller.remove(todo.id)
        st.rerun()
