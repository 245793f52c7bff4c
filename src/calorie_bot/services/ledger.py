"""Per-user daily calorie totals."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from zoneinfo import ZoneInfo

from calorie_bot.adapters.json_store import KeyValueStore

Clock = Callable[[], date]


def timezone_clock(timezone_name: str = "UTC") -> Clock:
    """Return a clock giving the current date in the named timezone."""
    tz = ZoneInfo(timezone_name)

    def today() -> date:
        return datetime.now(tz=tz).date()

    return today


@dataclass
class DailyLedger:
    """Running kcal totals keyed by user and ISO calendar day.

    The backing mapping has the shape ``{user_id: {"YYYY-MM-DD": kcal}}``.
    Rows are only ever accumulated or zeroed, never removed.
    """

    store: KeyValueStore
    clock: Clock = field(default_factory=timezone_clock)
    _rows: dict[str, dict[str, int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rows = {
            str(user): dict(days)
            for user, days in self.store.load().items()
            if isinstance(days, dict)
        }

    def add(self, user_id: int | str, kcal: int) -> None:
        """Add kcal to today's total and persist."""
        if isinstance(kcal, bool) or not isinstance(kcal, int) or kcal < 0:
            raise ValueError(f"kcal must be a non-negative integer, got {kcal!r}")
        day = self._today()
        days = dict(self._rows.get(str(user_id), {}))
        days[day] = _as_total(days.get(day)) + kcal
        self._commit(str(user_id), days)

    def total(self, user_id: int | str) -> int:
        """Return today's total, zero when nothing was logged."""
        days = self._rows.get(str(user_id), {})
        return _as_total(days.get(self._today()))

    def reset(self, user_id: int | str) -> None:
        """Zero today's total for a user who has any ledger rows."""
        current = self._rows.get(str(user_id))
        if current is None:
            return
        days = dict(current)
        days[self._today()] = 0
        self._commit(str(user_id), days)

    def _today(self) -> str:
        return self.clock().isoformat()

    def _commit(self, user: str, days: dict[str, int]) -> None:
        """Save the updated rows; memory changes only once the save succeeds."""
        rows = {key: dict(value) for key, value in self._rows.items()}
        rows[user] = days
        self.store.save(rows)
        self._rows = rows


def _as_total(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value
