"""Weighted vote over the five models plus synthetic supplementary voters."""
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Iterable, List

from txpredict.core.rng import RandomSource
from txpredict.core.types import EnsembleResult, ModelVote, Outcome

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupplementaryVoters:
    """Random extra voters that pad the ensemble.

    They carry no analysis; ``count=0`` turns them off.
    """
    count: int = 5
    low: float = 0.6
    high: float = 0.8

    def __post_init__(self):
        if self.count < 0 or not 0 <= self.low <= self.high <= 1:
            raise ValueError(f"bad supplementary voters {self!r}")

    def draw(self, rng: RandomSource) -> List[ModelVote]:
        out = []
        for i in range(self.count):
            sym = rng.symbol()
            conf = rng.uniform(self.low, self.high)
            label = Outcome.from_symbol(sym).value
            out.append(ModelVote(f"extra-{i + 1}", sym, conf,
                                 f"Supplementary voter {i + 1}: {label} at {conf:.2f}."))
        return out


def aggregate(votes: Iterable[ModelVote], rng: RandomSource,
              extra: SupplementaryVoters | None = None) -> EnsembleResult:
    extra = extra if extra is not None else SupplementaryVoters()
    models = list(votes)
    allv = models + extra.draw(rng)

    acc = {'T': 0.0, 'X': 0.0}
    total_weight = 0.0
    explains = []
    for v in allv:
        acc[v.prediction] += v.confidence
        total_weight += v.confidence
        explains.append(v.explanation)

    # equal weight goes to LOW
    prediction = Outcome.HIGH if acc['T'] > acc['X'] else Outcome.LOW
    confidence = round(max(acc['T'], acc['X']) / total_weight * 100, 2) if total_weight else 0.0
    explanation = (
        f"Combined analysis of {len(allv)} voters ({len(models)} models + {extra.count} supplementary). "
        "Recent readings: " + " | ".join(explains)
        + f" Final call: {prediction.value} by weighted vote."
    )
    log.info("ensemble: %s %.2f%% (T=%.3f X=%.3f)", prediction.value, confidence, acc['T'], acc['X'])
    return EnsembleResult(prediction, confidence, explanation, tuple(allv))
