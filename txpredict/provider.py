import logging

import requests

from txpredict.config import settings
from txpredict.core.errors import ProviderError
from txpredict.core.types import Outcome, Session
from txpredict.core.validation import is_valid_dice, is_valid_label

log = logging.getLogger(__name__)


def parse_session(item: dict) -> Session:
    if not isinstance(item, dict):
        raise ProviderError(f"malformed session {item!r}")
    label = item.get("resultTruyenThong")
    if not is_valid_label(label):
        raise ProviderError(f"session {item.get('id')}: bad result {label!r}")
    dice = item.get("dices")
    if dice is not None and not (isinstance(dice, list) and all(is_valid_dice(d) for d in dice)):
        raise ProviderError(f"session {item.get('id')}: dice must be 1..6")
    try:
        return Session(
            id=int(item["id"]),
            outcome=Outcome.from_label(label),
            dice=tuple(dice) if dice is not None else None,
            total=item.get("point"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ProviderError(f"malformed session {item!r}: {e}") from e


def parse_payload(data) -> list[Session]:
    if not isinstance(data, dict) or not isinstance(data.get("list"), list):
        raise ProviderError("payload has no session list")
    return [parse_session(x) for x in data["list"]]


def fetch_sessions(url: str | None = None, timeout: float | None = None) -> list[Session]:
    url = url or settings.source_url
    try:
        r = requests.get(url, timeout=timeout or settings.fetch_timeout)
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as e:
        log.warning("fetch %s failed: %s", url, e)
        raise ProviderError(f"failed to fetch sessions: {e}") from e
    except ValueError as e:
        raise ProviderError("session source did not return JSON") from e
    sessions = parse_payload(data)
    log.debug("fetched %d sessions from %s", len(sessions), url)
    return sessions
