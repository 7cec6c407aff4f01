from txpredict.analytics.patterns import head_streak
from txpredict.core.types import ModelVote, Ratios, opposite

NAME = "heuristic"


def heuristic_vote(pattern: str, ratios: Ratios) -> ModelVote:
    last = pattern[0]
    streak = head_streak(pattern)
    if streak >= 4:
        return ModelVote(NAME, opposite(last), 0.7,
                         f"Streak of {streak} {last}, expecting it to break.")
    if ratios.high_pct > 60:
        return ModelVote(NAME, "X", 0.65, f"T share is high ({ratios.high_pct:.2f}%), predicting X.")
    return ModelVote(NAME, last, 0.6, "Following the latest trend.")
