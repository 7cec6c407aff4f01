from dataclasses import asdict
import logging
from typing import Iterable, Optional

from sqlmodel import Session

from txpredict.analytics.ensemble import SupplementaryVoters
from txpredict.analytics.markov import MarkovEngine
from txpredict.analytics.normalize import normalize
from txpredict.analytics.patterns import alternations, blocks, runs
from txpredict.config import settings
from txpredict.core.rng import RandomSource
from txpredict.core.types import EnsembleResult, History
from txpredict.core.types import Session as Round
from txpredict.db.crud import create_prediction, history, latest_unresolved_prediction, resolve_predictions, resolved
from txpredict.predictor import predict_history

log = logging.getLogger(__name__)


def default_rng() -> RandomSource:
    if settings.seed is not None:
        return RandomSource.seeded(settings.seed)
    return RandomSource.system()


def supplementary_voters() -> SupplementaryVoters:
    return SupplementaryVoters(settings.extra_voters, settings.extra_conf_low, settings.extra_conf_high)


def build_report(h: History, result: EnsembleResult) -> dict:
    latest = h.latest
    return {
        'session': latest.id,
        'dice': list(latest.dice) if latest.dice is not None else None,
        'total': latest.total,
        'result': latest.outcome.value,
        'next_session': latest.id + 1,
        'prediction': result.prediction.value,
        'confidence': result.confidence_pct,
        'explanation': result.explanation,
        'pattern': h.pattern,
        'ratios': h.ratios.as_labels(),
    }


def predict_next(rounds: Iterable[Round], session: Optional[Session] = None,
                 rng: Optional[RandomSource] = None) -> dict:
    h = normalize(rounds)
    result = predict_history(h, rng or default_rng(), supplementary_voters(), settings.freq_window)
    report = build_report(h, result)
    if session is not None and settings.journal:
        done = resolve_predictions(session, h.sessions)
        if done:
            log.info("resolved %d journaled predictions", len(done))
        # one journaled call per round, later polls keep the first
        if latest_unresolved_prediction(session, report['next_session']) is None:
            create_prediction(session, report['next_session'], result.prediction.value,
                              result.confidence, h.pattern[:settings.window])
    return report


def get_stats(rounds: Iterable[Round], alpha: Optional[float] = None):
    h = normalize(rounds)
    mk = MarkovEngine(alpha=settings.markov_alpha if alpha is None else alpha).build_from(reversed(h.pattern))
    return asdict(mk.stats(h.pattern[0]))


def get_patterns(rounds: Iterable[Round], min_run: int = 3):
    h = normalize(rounds)
    labels = h.pattern[:settings.window][::-1]  # oldest first
    return {
        'runs': [tuple(r) for r in runs(labels, k=min_run)],
        'alternations': alternations(labels, L=4),
        'blocks': [tuple(b) for b in blocks(labels)],
    }


def get_history(session: Session, limit: int = 50):
    rows = history(session, limit=limit)
    def to_dict(p):
        return {
            'id': p.id,
            'session_id': p.session_id,
            'label_pred': p.label_pred,
            'confidence': p.confidence,
            'actual_label': p.actual_label,
            'correct': p.correct,
            'ts': p.ts.isoformat(),
            'resolved_ts': p.resolved_ts.isoformat() if p.resolved_ts else None,
        }
    return [to_dict(x) for x in rows]


def get_summary(session: Session):
    rows = resolved(session)
    wins = sum(1 for r in rows if r.correct is True)
    losses = len(rows) - wins
    total = wins + losses
    winrate = (wins / total) if total else 0.0
    return {'wins': wins, 'losses': losses, 'total': total, 'winrate': winrate}
