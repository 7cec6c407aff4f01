from txpredict.core.types import ModelVote

NAME = "frequency"
WINDOW = 20


def frequency_vote(pattern: str, window: int = WINDOW) -> ModelVote:
    """Mean reversion over the most recent `window` rounds."""
    recent = pattern[:window]
    ratio = recent.count("T") / len(recent) if recent else 0.5
    if ratio > 0.7:
        return ModelVote(NAME, "X", 0.75,
                         f"T at {ratio:.0%} of the last {len(recent)}, expecting X to balance.")
    if ratio < 0.3:
        return ModelVote(NAME, "T", 0.75,
                         f"X at {1 - ratio:.0%} of the last {len(recent)}, expecting T to balance.")
    sym = "T" if ratio > 0.5 else "X"
    return ModelVote(NAME, sym, 0.6, f"Following the recent majority ({ratio:.2f} T), predicting {sym}.")
