from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

Symbol = str  # "T" (Tài) | "X" (Xỉu)


class Outcome(str, Enum):
    HIGH = "TAI"
    LOW = "XIU"

    @property
    def symbol(self) -> Symbol:
        return "T" if self is Outcome.HIGH else "X"

    @classmethod
    def from_label(cls, label: str) -> "Outcome":
        return cls(label.strip().upper())

    @classmethod
    def from_symbol(cls, sym: Symbol) -> "Outcome":
        if sym == "T":
            return cls.HIGH
        if sym == "X":
            return cls.LOW
        raise ValueError(f"unknown symbol {sym!r}")


def opposite(sym: Symbol) -> Symbol:
    return "X" if sym == "T" else "T"


class Session(BaseModel):
    """One completed round. Dice and total are display-only."""
    model_config = ConfigDict(frozen=True)

    id: int
    outcome: Outcome
    dice: Optional[Tuple[int, ...]] = None
    total: Optional[int] = None

    @property
    def symbol(self) -> Symbol:
        return self.outcome.symbol


@dataclass(frozen=True)
class Ratios:
    # each side rounded on its own, so the sum may be off by 0.01
    high_pct: float
    low_pct: float

    def as_labels(self) -> dict:
        return {
            Outcome.HIGH.value: f"{self.high_pct:.2f}%",
            Outcome.LOW.value: f"{self.low_pct:.2f}%",
        }


@dataclass(frozen=True)
class History:
    sessions: Tuple[Session, ...]  # latest first
    pattern: str
    ratios: Ratios

    @property
    def latest(self) -> Session:
        return self.sessions[0]


@dataclass(frozen=True)
class ModelVote:
    name: str
    prediction: Symbol
    confidence: float
    explanation: str


@dataclass(frozen=True)
class EnsembleResult:
    prediction: Outcome
    confidence: float  # percent, 2 decimals
    explanation: str
    votes: Tuple[ModelVote, ...] = field(default=())

    @property
    def confidence_pct(self) -> str:
        return f"{self.confidence:.2f}%"
