from txpredict.core.types import ModelVote

NAME = "ngram"
N = 4


def ngram_counts(pattern: str, n: int = N) -> dict[str, int]:
    """Tally what followed each earlier occurrence of the latest n-gram.

    Scans oldest to newest. The current n-gram has no known successor
    and is not counted.
    """
    chrono = pattern[::-1]
    counts = {'T': 0, 'X': 0}
    if len(chrono) <= n:
        return counts
    key = chrono[-n:]
    for i in range(len(chrono) - n):
        if chrono[i:i + n] == key:
            counts[chrono[i + n]] += 1
    return counts


def ngram_vote(pattern: str, n: int = N) -> ModelVote:
    key = pattern[:n]
    c = ngram_counts(pattern, n)
    total = c['T'] + c['X']
    if total == 0:
        return ModelVote(NAME, 'T', 0.5, f"No earlier match for {key}, default T.")
    pT = c['T'] / total
    sym = 'T' if pT > 0.5 else 'X'
    return ModelVote(NAME, sym, max(pT, 1 - pT),
                     f"After {key}: T followed {pT:.2f} of {total} times, predicting {sym}.")
