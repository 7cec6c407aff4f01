import logging

from fastapi import APIRouter, Depends, HTTPException, Header, Query
from sqlmodel import Session
from txpredict.db.base import get_session
from txpredict.api.schemas import PredictOut, StatsOut, PatternsOut, PredictionItem, SummaryOut
from txpredict.services import predict_next, get_stats, get_patterns, get_history, get_summary
from txpredict.config import settings
from txpredict.core.errors import EmptyHistory, ProviderError
from txpredict.provider import fetch_sessions

log = logging.getLogger(__name__)

router = APIRouter()


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


def _rounds():
    try:
        rounds = fetch_sessions()
    except ProviderError as e:
        log.error("provider: %s", e)
        raise HTTPException(502, detail="Failed to fetch session history")
    if not rounds:
        raise HTTPException(404, detail="No sessions found")
    return rounds


@router.get('/predict', response_model=PredictOut, dependencies=[Depends(_auth)])
def predict(rounds=Depends(_rounds), session: Session = Depends(get_session)):
    try:
        return predict_next(rounds, session)
    except EmptyHistory:
        raise HTTPException(404, detail="No sessions found")

@router.get('/stats', response_model=StatsOut, dependencies=[Depends(_auth)])
def stats(alpha: float | None = Query(default=None, ge=0), rounds=Depends(_rounds)):
    return get_stats(rounds, alpha=alpha)

@router.get('/patterns', response_model=PatternsOut, dependencies=[Depends(_auth)])
def patterns(min_k: int = 3, rounds=Depends(_rounds)):
    return get_patterns(rounds, min_run=min_k)

@router.get('/history', response_model=list[PredictionItem], dependencies=[Depends(_auth)])
def prediction_history(limit: int = 50, session: Session = Depends(get_session)):
    return get_history(session, limit=limit)

@router.get('/summary', response_model=SummaryOut, dependencies=[Depends(_auth)])
def summary(session: Session = Depends(get_session)):
    return get_summary(session)
