import logging
from typing import List, Optional

import requests

from core.config import settings
from models.habit import Habit

logger = logging.getLogger(__name__)

OFFLINE_MESSAGE = "System Offline: AI Core functionality requires an API Key."

def habit_summary(habits: List[Habit]) -> str:
    return "\n".join(f"- {h.title} (Streak: {h.streak} days)" for h in habits)

def report_data(habits: List[Habit]) -> str:
    lines = []
    for h in habits:
        total = len(h.logs)
        # Logs without a rating count as full efficiency
        efficiency = sum(
            log.efficiency if log.efficiency is not None else 100 for log in h.logs.values()
        ) / (total or 1)
        lines.append(
            f"Habit: {h.title} | Streak: {h.streak} | Total Completions: {total} "
            f"| Avg Efficiency: {int(efficiency + 0.5)}%"
        )
    return "\n".join(lines)

def generate_text(prompt: str, api_key: Optional[str] = None) -> Optional[str]:
    """
    Sends one prompt to the Gemini generateContent endpoint.

    Returns None when the service answers with no text. Transport and
    HTTP errors are raised to the caller.
    """
    api_key = api_key or settings.GEMINI_API_KEY
    response = requests.post(
        f"{settings.GEMINI_API_URL}/{settings.GEMINI_MODEL}:generateContent",
        params={"key": api_key},
        json={"contents": [{"parts": [{"text": prompt}]}]},
        timeout=settings.AI_TIMEOUT_SECONDS,
    )
    response.raise_for_status()

    candidates = response.json().get("candidates") or []
    if not candidates:
        return None
    parts = candidates[0].get("content", {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts)
    return text or None

def _ask(prompt: str, empty_message: str, error_message: str) -> str:
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not set, AI coach is offline")
        return OFFLINE_MESSAGE
    try:
        return generate_text(prompt) or empty_message
    except (requests.RequestException, ValueError) as e:
        logger.error("AI request failed: %s", e)
        return error_message

def get_habit_motivation(habits: List[Habit]) -> str:
    prompt = f"""You are a futuristic, cyberpunk AI Habit Coach named "Neon".

Your user has the following active habits:
{habit_summary(habits)}

Give a short, punchy, high-energy motivational message (max 2 sentences) to encourage them to complete their tasks today.
Use words related to upgrading, leveling up, systems, and momentum."""
    return _ask(
        prompt,
        "Systems active. Proceed with objective.",
        "Connection interrupted. Maintain internal discipline.",
    )

def get_detailed_coaching(habits: List[Habit], query: str) -> str:
    prompt = f"""You are "Neon", a cyberpunk AI life coach.

User's Habits:
{habit_summary(habits)}

User Query: "{query}"

Provide strategic advice. Keep it cool, technical, and encouraging. Focus on actionable steps."""
    return _ask(
        prompt,
        "Analysis complete. No output generated.",
        "Error processing request. Check neural link.",
    )

def generate_performance_report(habits: List[Habit]) -> str:
    """Loosely structured three-section report, rendered as-is by the client."""
    prompt = f"""You are a tactical performance AI named "Neon". Analyze the user's habit data below.

DATA:
{report_data(habits)}

OUTPUT FORMAT:
Provide a "System Diagnostic Report" with exactly 3 sections (use Markdown bolding for headers):
1. **OPTIMAL SYSTEMS**: Identify 1-2 habits that are going well.
2. **PERFORMANCE BOTTLENECKS**: Identify 1-2 habits that need attention or have low streaks.
3. **TACTICAL UPGRADE**: One specific, actionable tip to improve overall efficiency based on the data.

Tone: Cyberpunk, military-grade analysis, encouraging but strict. Keep it concise. Do not use generic filler."""
    return _ask(
        prompt,
        "Diagnostic failed. No data returned.",
        "Connection interrupted. Analysis aborted. Check neural link.",
    )
