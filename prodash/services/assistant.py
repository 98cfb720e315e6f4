from __future__ import annotations

import logging
import random

import httpx

from prodash.settings import get_settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are ProDash AI, a friendly and concise productivity assistant. Help users manage tasks, "
    "build habits, track job applications, manage budgets, and achieve their goals. Be actionable "
    "and specific. Keep responses under 200 words unless asked for detail."
)

CANNED_TIPS = [
    "Great question! Here's my productivity tip: Break large tasks into smaller, actionable steps. "
    "This makes them less overwhelming and easier to track progress on.",
    "I'd recommend using the Pomodoro technique - work for 25 minutes, then take a 5-minute break. "
    "After 4 cycles, take a longer break. This keeps your focus sharp!",
    "For habit building, try habit stacking - attach a new habit to an existing one. For example, "
    "'After I pour my morning coffee, I will write my top 3 priorities for the day.'",
    "Time blocking is powerful! Dedicate specific time slots for different types of work. "
    "This reduces context switching and boosts productivity.",
    "Remember the 80/20 rule - 80% of results come from 20% of efforts. Focus on identifying "
    "and prioritizing those high-impact tasks!",
]

FALLBACK_REPLY = "I'm having trouble connecting right now. Please try again in a moment!"
EMPTY_REPLY = "Sorry, I could not respond right now."

HISTORY_LIMIT = 20


def canned_reply() -> str:
    return random.choice(CANNED_TIPS)


def build_messages(history: list[dict]) -> list[dict]:
    turns = [
        {"role": str(item.get("role") or "user"), "content": str(item.get("content") or "")}
        for item in history
    ]
    return [{"role": "system", "content": SYSTEM_PROMPT}, *turns[-HISTORY_LIMIT:]]


async def _post_completion(payload: dict) -> dict:
    settings = get_settings()
    url = f"{settings.openai_base_url.rstrip('/')}/v1/chat/completions"
    headers = {
        "Authorization": f"Bearer {settings.openai_api_key}",
        "Content-Type": "application/json",
    }
    async with httpx.AsyncClient(timeout=30) as client:
        response = await client.post(url, json=payload, headers=headers)
    response.raise_for_status()
    return response.json()


async def reply(history: list[dict]) -> str:
    settings = get_settings()
    if not settings.openai_api_key:
        return canned_reply()
    payload = {
        "model": settings.openai_model,
        "messages": build_messages(history),
        "max_tokens": 500,
        "temperature": 0.7,
    }
    try:
        data = await _post_completion(payload)
    except (httpx.HTTPError, ValueError) as exc:
        logger.exception("Chat completion failed: %s", exc)
        return FALLBACK_REPLY
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        logger.warning("Unexpected chat completion payload: %s", data)
        return EMPTY_REPLY
    return content or EMPTY_REPLY
