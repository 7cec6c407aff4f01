from typing import Iterable
from sqlmodel import Session, select
from txpredict.core.types import Session as Round
from txpredict.db.models import Prediction
from datetime import datetime, timezone


def create_prediction(session: Session, session_id: int, label_pred: str, confidence: float,
                      pattern: str = "") -> Prediction:
    pred = Prediction(session_id=session_id, label_pred=label_pred, confidence=confidence, pattern=pattern)
    session.add(pred)
    session.commit()
    session.refresh(pred)
    return pred


def latest_unresolved_prediction(session: Session, session_id: int) -> Prediction | None:
    return session.exec(
        select(Prediction)
        .where(Prediction.session_id == session_id)
        .where(Prediction.correct.is_(None))
        .order_by(Prediction.ts.desc())
        .limit(1)
    ).first()


def unresolved_predictions(session: Session, session_ids: Iterable[int]) -> list[Prediction]:
    ids = list(session_ids)
    if not ids:
        return []
    return list(session.exec(
        select(Prediction)
        .where(Prediction.session_id.in_(ids))
        .where(Prediction.correct.is_(None))
    ).all())


def resolve_predictions(session: Session, rounds: Iterable[Round]) -> list[Prediction]:
    """Mark journaled calls right or wrong for every round now known."""
    by_id = {r.id: r for r in rounds}
    out = []
    for pred in unresolved_predictions(session, by_id):
        actual = by_id[pred.session_id].outcome.value
        pred.actual_label = actual
        pred.correct = (pred.label_pred == actual)
        pred.resolved_ts = datetime.now(timezone.utc)
        session.add(pred)
        out.append(pred)
    if out:
        session.commit()
        for pred in out:
            session.refresh(pred)
    return out


def history(session: Session, limit: int = 50) -> list[Prediction]:
    return list(session.exec(select(Prediction).order_by(Prediction.ts.desc(), Prediction.id.desc()).limit(limit)).all())


def resolved(session: Session) -> list[Prediction]:
    return list(session.exec(select(Prediction).where(Prediction.correct.is_not(None))).all())
