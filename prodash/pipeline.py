from __future__ import annotations

# Forward path only; "rejected" is set by editing the status directly.
PIPELINE_ORDER = ("applied", "interview", "offer")


def next_status(status: str) -> str | None:
    if status not in PIPELINE_ORDER:
        return None
    idx = PIPELINE_ORDER.index(status)
    if idx >= len(PIPELINE_ORDER) - 1:
        return None
    return PIPELINE_ORDER[idx + 1]


def is_active(status: str) -> bool:
    return status in {"applied", "interview"}
