from typing import Iterable

from txpredict.core.errors import EmptyHistory
from txpredict.core.types import History, Outcome, Ratios, Session


def order_latest_first(sessions: Iterable[Session]) -> tuple[Session, ...]:
    rows = tuple(sessions)
    if all(rows[i].id > rows[i + 1].id for i in range(len(rows) - 1)):
        return rows
    return tuple(sorted(rows, key=lambda s: s.id, reverse=True))


def to_pattern(sessions: Iterable[Session]) -> str:
    return ''.join(s.symbol for s in sessions)


def ratios(sessions: Iterable[Session]) -> Ratios:
    rows = list(sessions)
    total = len(rows)
    if total == 0:
        raise EmptyHistory()
    n_high = sum(1 for s in rows if s.outcome is Outcome.HIGH)
    n_low = total - n_high
    return Ratios(
        high_pct=round(n_high / total * 100, 2),
        low_pct=round(n_low / total * 100, 2),
    )


def normalize(sessions: Iterable[Session]) -> History:
    """Latest-first ordering, full-length pattern and HIGH/LOW split."""
    rows = order_latest_first(sessions)
    if not rows:
        raise EmptyHistory()
    return History(sessions=rows, pattern=to_pattern(rows), ratios=ratios(rows))
