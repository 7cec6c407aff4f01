from collections import deque
from dataclasses import dataclass
import math

from txpredict.core.types import ModelVote

NAME = "markov"


def binom_cdf(k: int, n: int, p: float) -> float:
    """P(X <= k) for X ~ Binomial(n, p)."""
    if k < 0:
        return 0.0
    if n <= 0 or k >= n:
        return 1.0
    s = sum(math.comb(n, i) * (p ** i) * ((1 - p) ** (n - i)) for i in range(k + 1))
    return min(max(s, 0.0), 1.0)


@dataclass
class MarkovStats:
    transition: list[list[float]]
    counts: list[list[int]]
    last_label: str | None
    p_value_row: dict[str, float]
    entropy: float


class MarkovEngine:
    """First-order T/X transition counts.

    Labels are pushed oldest first. Counts cover only the transitions inside
    the last ``window`` labels (``None`` keeps the whole history); ``alpha``
    is Laplace smoothing (0 = raw frequencies).
    """

    def __init__(self, window: int | None = None, alpha: float = 0.0):
        if window is not None and window < 2:
            raise ValueError("window must hold at least one transition")
        if alpha < 0:
            raise ValueError("alpha must be >= 0")
        self.a = alpha
        self.buf = deque(maxlen=window)  # 'T'/'X'
        self.C = {'T': {'T': 0, 'X': 0}, 'X': {'T': 0, 'X': 0}}

    def reset(self):
        self.buf.clear()
        self.C = {'T': {'T': 0, 'X': 0}, 'X': {'T': 0, 'X': 0}}

    def push(self, y: str):
        if self.buf.maxlen is not None and len(self.buf) == self.buf.maxlen:
            # oldest transition leaves the window
            self.C[self.buf[0]][self.buf[1]] -= 1
        if self.buf:
            prev = self.buf[-1]
            self.C[prev][y] += 1
        self.buf.append(y)

    def build_from(self, labels):
        self.reset()
        for y in labels:
            self.push(y)
        return self

    def _row(self, i: str) -> float:
        nT = self.C[i]['T']
        nX = self.C[i]['X']
        denom = nT + nX + 2 * self.a
        if denom == 0:
            return 0.5
        return (nT + self.a) / denom

    def probs(self, last: str | None) -> tuple[float, float]:
        if last in ('T', 'X'):
            pT = self._row(last)
            return pT, 1 - pT
        t = sum(self.C['T'].values()) + sum(self.C['X'].values())
        if t == 0:
            return 0.5, 0.5
        mT = self.C['T']['T'] + self.C['X']['T']
        pT = (mT + self.a) / (t + 2 * self.a)
        return pT, 1 - pT

    def entropy(self) -> float:
        n = len(self.buf)
        nT = sum(1 for v in self.buf if v == 'T')
        H = 0.0
        for c in (nT, n - nT):
            if c == 0:
                continue
            p = c / n
            H -= p * math.log(p, 2)
        return H

    def p_values(self) -> dict[str, float]:
        """Two-sided binomial test of each row against a fair 0.5."""
        out = {}
        for i in ('T', 'X'):
            t_cnt, x_cnt = self.C[i]['T'], self.C[i]['X']
            n = t_cnt + x_cnt
            if n == 0:
                out[i] = 1.0
                continue
            k = max(t_cnt, x_cnt)
            pv = 2 * min(binom_cdf(k, n, 0.5), 1 - binom_cdf(k - 1, n, 0.5))
            out[i] = max(min(pv, 1.0), 0.0)
        return out

    def stats(self, last: str | None) -> MarkovStats:
        pTT = self._row('T')
        pXT = self._row('X')
        return MarkovStats(
            transition=[[pTT, 1 - pTT], [pXT, 1 - pXT]],
            counts=[[self.C['T']['T'], self.C['T']['X']], [self.C['X']['T'], self.C['X']['X']]],
            last_label=last,
            p_value_row=self.p_values(),
            entropy=self.entropy(),
        )


def markov_vote(pattern: str) -> ModelVote:
    # pattern is latest first, the engine wants oldest first
    last = pattern[0] if pattern else None
    mk = MarkovEngine().build_from(reversed(pattern))
    pT, _ = mk.probs(last)
    sym = 'T' if pT > 0.5 else 'X'
    return ModelVote(NAME, sym, max(pT, 1 - pT),
                     f"Transition probability {last} -> T: {pT:.2f}, predicting {sym}.")
