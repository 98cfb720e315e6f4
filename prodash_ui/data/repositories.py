import logging

import requests

from prodash_ui.data import api_client
from prodash_ui.data.api_client import ApiError

logger = logging.getLogger(__name__)

_NOTIFY_CALLBACK = None


def configure(notify_callback=None):
    global _NOTIFY_CALLBACK
    _NOTIFY_CALLBACK = notify_callback


def _notify(message):
    if _NOTIFY_CALLBACK is None:
        return
    _NOTIFY_CALLBACK(message)


def _items(path, label):
    try:
        payload = api_client.request("GET", path)
    except (ApiError, requests.RequestException) as exc:
        logger.warning("Failed to load %s: %s", label, exc)
        _notify(f"Failed to load {label}")
        return []
    return list((payload or {}).get("items") or [])


def _write(method, path, failure_message, json=None):
    try:
        return api_client.request(method, path, json=json)
    except (ApiError, requests.RequestException) as exc:
        logger.warning("%s: %s", failure_message, exc)
        _notify(failure_message)
        return None


def list_tasks():
    return _items("/v1/tasks", "tasks")


def create_task(payload):
    return _write("POST", "/v1/tasks", "Failed to create task", json=payload)


def update_task(task_id, patch):
    return _write("PATCH", f"/v1/tasks/{task_id}", "Failed to update task", json=patch)


def delete_task(task_id):
    return _write("DELETE", f"/v1/tasks/{task_id}", "Failed to delete task") is not None


def list_jobs():
    return _items("/v1/jobs", "jobs")


def create_job(payload):
    return _write("POST", "/v1/jobs", "Failed to add job", json=payload)


def update_job(job_id, patch):
    return _write("PATCH", f"/v1/jobs/{job_id}", "Failed to update job", json=patch)


def advance_job(job_id):
    return _write("POST", f"/v1/jobs/{job_id}/advance", "Failed to update job")


def delete_job(job_id):
    return _write("DELETE", f"/v1/jobs/{job_id}", "Failed to delete job") is not None


def list_projects():
    return _items("/v1/projects", "projects")


def create_project(payload):
    return _write("POST", "/v1/projects", "Failed to create project", json=payload)


def update_project(project_id, patch):
    return _write("PATCH", f"/v1/projects/{project_id}", "Failed to update project", json=patch)


def delete_project(project_id):
    return _write("DELETE", f"/v1/projects/{project_id}", "Failed to delete project") is not None


def list_habits():
    return _items("/v1/habits", "habits")


def create_habit(payload):
    return _write("POST", "/v1/habits", "Failed to create habit", json=payload)


def toggle_habit(habit_id):
    return _write("POST", f"/v1/habits/{habit_id}/toggle", "Failed to update habit")


def delete_habit(habit_id):
    return _write("DELETE", f"/v1/habits/{habit_id}", "Failed to delete habit") is not None


def list_budget_entries():
    return _items("/v1/budget", "budget")


def create_budget_entry(payload):
    return _write("POST", "/v1/budget", "Failed to add entry", json=payload)


def delete_budget_entry(entry_id):
    return _write("DELETE", f"/v1/budget/{entry_id}", "Failed to delete entry") is not None


def budget_summary():
    payload = _write("GET", "/v1/budget/summary", "Failed to load budget summary")
    return payload or {"income": 0, "expenses": 0, "balance": 0}


def budget_categories():
    return _items("/v1/budget/categories", "budget categories")


def chat_history():
    return _items("/v1/chat/messages", "chat history")


def save_chat_message(role, content):
    return _write("POST", "/v1/chat/messages", "Failed to save message", json={"role": role, "content": content})


def clear_chat_history():
    return _write("DELETE", "/v1/chat/messages", "Failed to clear chat") is not None


def send_chat(messages):
    payload = _write("POST", "/v1/chat", "Failed to get AI response", json={"messages": messages})
    if not payload:
        return None
    return (payload.get("message") or {}).get("content") or "Sorry, I could not respond right now."


def overview():
    return _write("GET", "/v1/overview", "Failed to load overview") or {}


def list_users():
    try:
        payload = api_client.request("GET", "/v1/admin/users")
    except (ApiError, requests.RequestException) as exc:
        logger.warning("Failed to load users: %s", exc)
        _notify("Failed to load users. Admin access required.")
        return []
    return list((payload or {}).get("users") or [])
