# predictor.py
# Ensemble soi cầu Tài/Xỉu: 5 models + supplementary voters
from __future__ import annotations
import logging
from typing import Iterable, List

from txpredict.analytics.ensemble import SupplementaryVoters, aggregate
from txpredict.analytics.frequency import WINDOW, frequency_vote
from txpredict.analytics.heuristic import heuristic_vote
from txpredict.analytics.markov import markov_vote
from txpredict.analytics.ngram import ngram_vote
from txpredict.analytics.normalize import normalize
from txpredict.analytics.shape import shape_vote
from txpredict.core.rng import RandomSource
from txpredict.core.types import EnsembleResult, History, ModelVote, Session

log = logging.getLogger(__name__)


def model_votes(h: History, rng: RandomSource, freq_window: int = WINDOW) -> List[ModelVote]:
    votes = [
        shape_vote(h.pattern, rng),
        frequency_vote(h.pattern, freq_window),
        markov_vote(h.pattern),
        ngram_vote(h.pattern),
        heuristic_vote(h.pattern, h.ratios),
    ]
    for v in votes:
        log.debug("%s -> %s %.2f", v.name, v.prediction, v.confidence)
    return votes


def predict_history(h: History, rng: RandomSource | None = None,
                    extra: SupplementaryVoters | None = None,
                    freq_window: int = WINDOW) -> EnsembleResult:
    rng = rng or RandomSource.system()
    return aggregate(model_votes(h, rng, freq_window), rng, extra)


def predict(sessions: Iterable[Session], rng: RandomSource | None = None,
            extra: SupplementaryVoters | None = None,
            freq_window: int = WINDOW) -> EnsembleResult:
    """Session history -> next-round call.

    Pure apart from ``rng``; pass ``RandomSource.seeded(n)`` for a
    reproducible result. Raises EmptyHistory on no sessions.
    """
    return predict_history(normalize(sessions), rng, extra, freq_window)
