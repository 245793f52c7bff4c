"""Log free-text food names against the daily ledger."""

import re
from dataclasses import dataclass

from calorie_bot.domain.foods import (
    FoodLogReport,
    ItemReport,
    Resolved,
    normalize_query,
)
from calorie_bot.services.ledger import DailyLedger
from calorie_bot.services.resolution import CalorieResolver

_QUERY_SEPARATORS = re.compile(r"[,\n]+|\s{2,}")

EMPTY_INPUT_TEXT = "Пожалуйста, отправьте название продукта."


def split_queries(text: str) -> list[str]:
    """Split a message into food names on commas, newlines or double spaces."""
    tokens = (normalize_query(token) for token in _QUERY_SEPARATORS.split(text))
    return [token for token in tokens if token]


@dataclass
class FoodLogService:
    """Resolve each food name in a message and add the hits to today's total."""

    resolver: CalorieResolver
    ledger: DailyLedger

    async def log_food(self, user_id: int | str, text: str) -> FoodLogReport:
        """Process a message and return per-item results and the day total."""
        queries = split_queries(text)
        if not queries:
            return FoodLogReport()

        items: list[ItemReport] = []
        added = 0
        for query in queries:
            result = await self.resolver.resolve(query)
            if not isinstance(result, Resolved):
                items.append(ItemReport(query=query, kcal=None))
                continue
            self.ledger.add(user_id, result.kcal)
            added += result.kcal
            items.append(ItemReport(query=query, kcal=result.kcal))

        return FoodLogReport(
            items=items,
            added_kcal=added,
            day_total=self.ledger.total(user_id),
        )


def format_report(report: FoodLogReport) -> str:
    """Render a food log report as a chat reply."""
    if report.is_empty:
        return EMPTY_INPUT_TEXT
    lines = []
    for item in report.items:
        if item.found:
            lines.append(f"✅ {item.query} ≈ {item.kcal} ккал")
        else:
            lines.append(f"❓ {item.query} — не найдено.")
    lines.append(f"\nВсего за сегодня: {report.day_total} ккал.")
    return "\n".join(lines)
