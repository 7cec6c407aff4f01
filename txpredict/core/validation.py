LABELS = ("TAI", "XIU")

def is_valid_dice(d: int) -> bool:
    return isinstance(d, int) and not isinstance(d, bool) and 1 <= d <= 6

def is_valid_label(s: str) -> bool:
    return isinstance(s, str) and s.strip().upper() in LABELS

