from pydantic import BaseModel


class PredictOut(BaseModel):
    session: int
    dice: list[int] | None
    total: int | None
    result: str
    next_session: int
    prediction: str
    confidence: str
    explanation: str
    pattern: str
    ratios: dict[str, str]


class StatsOut(BaseModel):
    transition: list[list[float]]
    counts: list[list[int]]
    last_label: str | None
    p_value_row: dict[str, float]
    entropy: float


class PatternsOut(BaseModel):
    runs: list[tuple[int, int, str, int]]
    alternations: list[tuple[int, int]]
    blocks: list[tuple[int, int, str, int]]


class PredictionItem(BaseModel):
    id: int
    session_id: int
    label_pred: str
    confidence: float
    actual_label: str | None
    correct: bool | None
    ts: str
    resolved_ts: str | None


class SummaryOut(BaseModel):
    wins: int
    losses: int
    total: int
    winrate: float
