import logging

from txpredict.analytics.patterns import PAIR_SHAPES, contains_shape, head_streak, is_alternating
from txpredict.core.rng import RandomSource
from txpredict.core.types import ModelVote, opposite

log = logging.getLogger(__name__)

NAME = "shape"
SHORT_HEAD = 5
LONG_HEAD = 8
# 3-1: three of a kind broken once, expect the run to come back
THREE_ONE = {"TTTX": "T", "XXXT": "X"}


def shape_vote(pattern: str, rng: RandomSource) -> ModelVote:
    """Structural read of the head: streak, 1-1, 2-2, 3-1, else coin flip.

    Only the 8 most recent symbols are inspected. The first rule that
    matches decides.
    """
    head = pattern[:LONG_HEAD]
    if not head:
        sym = rng.symbol()
        return ModelVote(NAME, sym, 0.5, "Empty pattern, random guess.")
    last = head[0]

    if head_streak(head) >= 4:
        return ModelVote(NAME, last, 0.8,
                         f"Streak of {last} at the head, expecting {last} to continue.")

    if is_alternating(head[:SHORT_HEAD]):
        nxt = opposite(last)
        return ModelVote(NAME, nxt, 0.7, f"1-1 alternation, expecting a flip to {nxt}.")

    if any(contains_shape(head, s) for s in PAIR_SHAPES):
        nxt = "X" if head[:2] == "TT" else "T"
        return ModelVote(NAME, nxt, 0.75, f"2-2 blocks, expecting the next pair to open with {nxt}.")

    for s, sym in THREE_ONE.items():
        if contains_shape(head, s):
            return ModelVote(NAME, sym, 0.65, f"3-1 shape {s}, expecting a return to {sym}.")

    sym = rng.symbol()
    log.debug("shape: no structure in %s, coin flip -> %s", head, sym)
    return ModelVote(NAME, sym, 0.5, "No clear shape detected, random guess.")
