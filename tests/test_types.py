import pytest
from pydantic import ValidationError

from txpredict.core.rng import RandomSource
from txpredict.core.types import EnsembleResult, Outcome, Session, opposite


def test_outcome_mapping():
    assert Outcome.from_label("TAI") is Outcome.HIGH
    assert Outcome.from_label(" xiu ") is Outcome.LOW
    assert Outcome.HIGH.symbol == "T" and Outcome.LOW.symbol == "X"
    assert Outcome.from_symbol("X") is Outcome.LOW
    with pytest.raises(ValueError):
        Outcome.from_symbol("B")
    assert opposite("T") == "X" and opposite("X") == "T"


def test_session_is_frozen():
    s = Session(id=1, outcome=Outcome.HIGH, dice=(6, 4, 1), total=11)
    with pytest.raises(ValidationError):
        s.id = 2
    assert s.symbol == "T"


def test_confidence_pct_text():
    r = EnsembleResult(Outcome.LOW, 61.5, "x")
    assert r.confidence_pct == "61.50%"


def test_seeded_source_repeats():
    a, b = RandomSource.seeded(3), RandomSource.seeded(3)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
    u = RandomSource.seeded(1)
    for _ in range(100):
        assert 0.6 <= u.uniform(0.6, 0.8) < 0.8
    assert RandomSource.system().symbol() in ("T", "X")
