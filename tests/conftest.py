import pytest

from txpredict.core.types import Outcome, Session


def make_rounds(pattern: str, start_id: int = 1):
    """Sessions for a latest-first T/X pattern; pattern[0] gets the highest id."""
    n = len(pattern)
    return [
        Session(id=start_id + n - 1 - i, outcome=Outcome.from_symbol(sym), dice=(1, 2, 3), total=6)
        for i, sym in enumerate(pattern)
    ]


@pytest.fixture
def rounds():
    return make_rounds
