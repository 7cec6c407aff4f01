from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


class Prediction(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    session_id: int = Field(index=True)  # round being predicted
    label_pred: str  # 'TAI' | 'XIU'
    confidence: float
    pattern: str = ""
    algo: str = "ensemble"
    version: str = "1.0.0"
    ts: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    # filled once the round is known
    actual_label: str | None = None
    correct: bool | None = None
    resolved_ts: datetime | None = None
