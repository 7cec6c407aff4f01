from typing import Iterable, NamedTuple, Sequence


class Run(NamedTuple):
    start: int
    end: int
    label: str
    length: int


class Block(NamedTuple):
    start: int
    end: int
    shape: str
    repeats: int


PAIR_SHAPES = ("TTXX", "XXTT")


def head_streak(seq: Sequence[str]) -> int:
    """Length of the run of identical symbols at seq[0]."""
    if not seq:
        return 0
    k = 1
    while k < len(seq) and seq[k] == seq[0]:
        k += 1
    return k


def is_alternating(seq: Sequence[str]) -> bool:
    if len(seq) < 2:
        return False
    return all(seq[i] != seq[i + 1] for i in range(len(seq) - 1))


def contains_shape(seq: Sequence[str], shape: Sequence[str]) -> bool:
    n = len(shape)
    for i in range(len(seq) - n + 1):
        if all(seq[i + j] == shape[j] for j in range(n)):
            return True
    return False


def runs(labels: Iterable[str], k: int = 3) -> list[Run]:
    labels = list(labels)
    out: list[Run] = []
    start = 0
    for i in range(1, len(labels) + 1):
        if i < len(labels) and labels[i] == labels[start]:
            continue
        if i - start >= k:
            out.append(Run(start, i - 1, labels[start], i - start))
        start = i
    return out


def alternations(labels: Iterable[str], L: int = 4) -> list[tuple[int, int]]:
    labels = list(labels)
    out = []
    start = 0
    for i in range(1, len(labels) + 1):
        if i < len(labels) and labels[i] != labels[i - 1]:
            continue
        # segment [start, i-1] alternates
        if i - start >= L:
            out.append((start, i - 1))
        start = i
    return out


def blocks(labels: Iterable[str]) -> list[Block]:
    """2-2 segments: repeated TTXX or XXTT."""
    seq = list(labels)
    out: list[Block] = []
    i = 0
    while i + 4 <= len(seq):
        chunk = ''.join(seq[i:i + 4])
        if chunk not in PAIR_SHAPES:
            i += 1
            continue
        j = i + 4
        while j + 4 <= len(seq) and ''.join(seq[j:j + 4]) == chunk:
            j += 4
        out.append(Block(i, j - 1, chunk, (j - i) // 4))
        i = j
    return out
