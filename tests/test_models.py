import pytest

from txpredict.analytics.frequency import frequency_vote
from txpredict.analytics.heuristic import heuristic_vote
from txpredict.analytics.markov import MarkovEngine, binom_cdf, markov_vote
from txpredict.analytics.ngram import ngram_counts, ngram_vote
from txpredict.analytics.shape import shape_vote
from txpredict.core.rng import RandomSource
from txpredict.core.types import Ratios


def _shape(p, seed=0):
    v = shape_vote(p, RandomSource.seeded(seed))
    return v.prediction, v.confidence


def test_shape_streak():
    assert _shape("TTTTX") == ("T", 0.8)
    assert _shape("XXXXXT") == ("X", 0.8)


def test_shape_alternation():
    assert _shape("TXTXT") == ("X", 0.7)
    assert _shape("XTXTXXX") == ("T", 0.7)
    assert _shape("TX") == ("X", 0.7)


def test_shape_two_two():
    assert _shape("TTXXT") == ("X", 0.75)
    assert _shape("XXTTX") == ("T", 0.75)


def test_shape_three_one():
    assert _shape("XTTTXTXX") == ("T", 0.65)
    assert _shape("TXXXTXTT") == ("X", 0.65)


def test_shape_default_is_seeded_coin():
    p = "TXXTXTTX"
    a = shape_vote(p, RandomSource.seeded(42))
    b = shape_vote(p, RandomSource.seeded(42))
    assert a == b
    assert a.confidence == 0.5 and a.prediction in ("T", "X")
    assert "random" in a.explanation
    # only the head is read
    assert shape_vote(p + "TTTTTTTT", RandomSource.seeded(42)) == a


def test_frequency_mean_reversion():
    v = frequency_vote("T" * 15 + "X" * 5)
    assert (v.prediction, v.confidence) == ("X", 0.75)
    v = frequency_vote("X" * 15 + "T" * 5)
    assert (v.prediction, v.confidence) == ("T", 0.75)


def test_frequency_majority_and_window():
    assert frequency_vote("T" * 12 + "X" * 8).prediction == "T"
    tie = frequency_vote("TX" * 10)
    assert (tie.prediction, tie.confidence) == ("X", 0.6)
    # older rounds beyond the window are ignored
    assert frequency_vote("X" * 20 + "T" * 30).prediction == "T"
    assert frequency_vote("T").prediction == "X"


def test_markov_probs():
    mk = MarkovEngine(window=10)
    for y in "TTTXXXTTTX":
        mk.push(y)
    pT, pX = mk.probs('T')
    assert 0.0 <= pT <= 1.0 and 0.0 <= pX <= 1.0 and abs((pT+pX)-1.0) < 1e-9


def test_markov_all_transitions_to_t():
    # oldest first: X T T T
    v = markov_vote("TTTX")
    assert v.prediction == "T"
    assert v.confidence == 1.0
    assert "1.00" in v.explanation


def test_markov_no_transitions_from_last():
    v = markov_vote("XT")
    assert (v.prediction, v.confidence) == ("X", 0.5)
    assert markov_vote("T").confidence == 0.5


def test_markov_direction_is_older_to_newer():
    # oldest first: T X T X T X T -> every T goes to X
    v = markov_vote("TXTXTXT")
    assert (v.prediction, v.confidence) == ("X", 1.0)


def test_markov_stats():
    mk = MarkovEngine().build_from("TX")
    st = mk.stats("X")
    assert st.counts == [[0, 1], [0, 0]]
    assert st.p_value_row["X"] == 1.0
    assert st.entropy == pytest.approx(1.0)
    assert binom_cdf(3, 3, 0.5) == 1.0
    assert binom_cdf(-1, 3, 0.5) == 0.0
    assert binom_cdf(0, 2, 0.5) == pytest.approx(0.25)


def test_ngram_no_repeat_defaults_to_t():
    v = ngram_vote("TTTTX")
    assert (v.prediction, v.confidence) == ("T", 0.5)
    assert ngram_vote("TXT").confidence == 0.5


def test_ngram_counts_followers():
    # oldest first: T T T T X T T T T T T
    p = "TTTTTTXTTTT"
    assert ngram_counts(p) == {'T': 2, 'X': 1}
    v = ngram_vote(p)
    assert v.prediction == "T"
    assert v.confidence == pytest.approx(2 / 3)


def test_ngram_single_match():
    # oldest first: T X T X T X
    v = ngram_vote("XTXTXT")
    assert (v.prediction, v.confidence) == ("T", 1.0)


def test_heuristic_rules():
    v = heuristic_vote("TTTTX", Ratios(80.0, 20.0))
    assert (v.prediction, v.confidence) == ("X", 0.7)
    v = heuristic_vote("TXTX", Ratios(70.0, 30.0))
    assert (v.prediction, v.confidence) == ("X", 0.65)
    v = heuristic_vote("XTX", Ratios(33.33, 66.67))
    assert (v.prediction, v.confidence) == ("X", 0.6)
    v = heuristic_vote("T", Ratios(100.0, 0.0))
    assert (v.prediction, v.confidence) == ("X", 0.65)


def test_markov_window_bounds_counts():
    mk = MarkovEngine(window=3)
    for y in "TTTTXX":
        mk.push(y)
    # window holds T X X: T->X, X->X
    assert mk.stats('X').counts == [[0, 1], [0, 1]]
    assert MarkovEngine().build_from("TTTTXX").stats('X').counts == [[3, 1], [0, 1]]
    with pytest.raises(ValueError):
        MarkovEngine(window=1)


def test_markov_smoothing():
    mk = MarkovEngine(alpha=1.0).build_from("TTT")
    pT, _ = mk.probs('T')
    assert pT == pytest.approx(3 / 4)
    assert MarkovEngine(alpha=1.0).probs('X') == (0.5, 0.5)
