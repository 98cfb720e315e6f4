TASK_STATUSES = ["todo", "in-progress", "done"]
TASK_STATUS_LABELS = {"todo": "To Do", "in-progress": "In Progress", "done": "Done"}
TASK_PRIORITIES = ["low", "medium", "high"]

JOB_COLUMNS = [
    ("applied", "Applied"),
    ("interview", "Interview"),
    ("offer", "Offer 🎉"),
    ("rejected", "Rejected"),
]
JOB_STATUS_LABELS = dict(JOB_COLUMNS)

PROJECT_STATUSES = ["planning", "active", "on-hold", "completed"]
PROJECT_STATUS_LABELS = {
    "planning": "Planning",
    "active": "Active",
    "on-hold": "On hold",
    "completed": "Completed",
}

BUDGET_TYPES = ["expense", "income"]

CURRENCY_SYMBOL = "£"

PALETTE = {
    "text_main": "#e2e8f0",
    "text_soft": "#94a3b8",
    "plot_grid": "rgba(148, 163, 184, 0.15)",
    "border": "#1e293b",
    "income": "#10b981",
    "expense": "#ef4444",
    "accent": "#3b82f6",
}

CHART_COLORS = ["#3b82f6", "#8b5cf6", "#f59e0b", "#10b981", "#ef4444", "#06b6d4", "#ec4899", "#84cc16"]
