import logging
from typing import Dict, List, Sequence

import requests

from tripsplit.core.config import settings
from tripsplit.models.balance import Balance
from tripsplit.models.expense import Expense
from tripsplit.schemas.recommendation import RecommendationResponse, RecommendationSource
from tripsplit.utils.money import is_negligible

logger = logging.getLogger(__name__)

RECENT_EXPENSES = 5

PROMPT_TEMPLATE = """As a group expense assistant, analyze the following trip data and provide 2-3 short, logical recommendations for the group.
Focus on fairness and who should pay next.

Participants and Net Balances (Positive means they are owed, Negative means they owe):
{balances}

Recent Expenses:
{expenses}

Format the response as a simple list of advice."""


class RecommendationError(Exception):
    """The advice model could not be reached or gave nothing back."""
    pass


def _gemini_generate_content(parts: List[Dict], temperature: float = 0.6, max_output_tokens: int = 512) -> str:
    if not settings.GEMINI_API_KEY:
        raise RecommendationError("GEMINI_API_KEY not configured on server")

    url = (
        f"https://generativelanguage.googleapis.com/v1beta/models/"
        f"{settings.GEMINI_MODEL}:generateContent?key={settings.GEMINI_API_KEY}"
    )
    payload = {
        "contents": [
            {
                "role": "user",
                "parts": parts
            }
        ],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens
        }
    }

    try:
        response = requests.post(url, json=payload, timeout=settings.GEMINI_TIMEOUT)
        if response.status_code != 200:
            raise RecommendationError(f"Gemini API request failed: {response.text}")
        data = response.json()
    except requests.RequestException as exc:
        raise RecommendationError(f"Gemini API request failed: {exc}") from exc

    candidates = data.get("candidates", [])
    if not candidates:
        return ""

    content = candidates[0].get("content", {})
    parts_out = content.get("parts", [])
    return "".join(part.get("text", "") for part in parts_out if isinstance(part, dict))


class RecommendationService:
    """
    Short spending advice for a trip.

    Asks Gemini when an API key is configured. Without a key, or when the
    call fails or comes back empty, the advice is worked out from the
    balances alone: whoever owes the most should pay next.
    """

    @staticmethod
    def build_prompt(expenses: Sequence[Expense], balances: Sequence[Balance]) -> str:
        balance_lines = ", ".join(f"{b.name}: Net {b.net:.2f}" for b in balances)
        expense_lines = ", ".join(
            f"{e.title or 'Untitled'} (₹{e.amount:.2f}) paid by {e.paid_by}"
            for e in list(expenses)[:RECENT_EXPENSES]
        )
        return PROMPT_TEMPLATE.format(balances=balance_lines, expenses=expense_lines or "none")

    @staticmethod
    def fallback_advice(balances: Sequence[Balance]) -> str:
        debtors = [b for b in balances if not is_negligible(b.net) and b.net < 0]
        if not debtors:
            return "Everyone is settled up. Anyone can pick up the next expense."

        # min() keeps the first of equal balances, so ties go by participant order
        debtor = min(debtors, key=lambda b: b.net)
        return (
            f"{debtor.name} has the most negative balance ({debtor.net:.2f}). "
            f"Consider asking {debtor.name} to pay next for better balance."
        )

    @staticmethod
    def recommend(expenses: Sequence[Expense], balances: Sequence[Balance]) -> RecommendationResponse:
        """
        Blocking: makes an HTTP call when Gemini is configured.
        Never raises for model errors; falls back to balance-based advice.
        """
        if not settings.GEMINI_API_KEY:
            logger.info("GEMINI_API_KEY not set, using balance-based advice")
            return RecommendationResponse(
                advice=RecommendationService.fallback_advice(balances),
                source=RecommendationSource.FALLBACK
            )

        prompt = RecommendationService.build_prompt(expenses, balances)
        try:
            advice = _gemini_generate_content([{"text": prompt}]).strip()
        except RecommendationError as exc:
            logger.warning("Advice generation failed: %s", exc)
            advice = ""

        if not advice:
            return RecommendationResponse(
                advice=RecommendationService.fallback_advice(balances),
                source=RecommendationSource.FALLBACK
            )

        return RecommendationResponse(advice=advice, source=RecommendationSource.GEMINI)
