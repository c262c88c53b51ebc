"""
Fixture payload loader.

Parses the JSON payload of upcoming matches into validated domain objects.
The payload comes either from a remote API or, when no API URL is set,
from the bundled sample file.

Payload shape:
  {"date": "...", "matches": [
     {"matchId", "competition", "startTime", "playerA", "playerB",
      "last10": {"playerA": [{"sets": [[11, 7], ...]}, ...],
                 "playerB": [...]}}]}
"""

import json
import logging
from pathlib import Path

import httpx

from tt_predictor.core.interfaces import BaseLoader
from tt_predictor.core.schema import (
    InvalidInputError, MatchFixture, Payload, PlayedMatch, SetScore,
)
from tt_predictor.ingestion.base import as_points, get_value, safe_str

log = logging.getLogger(__name__)

ASSET_PATH = Path(__file__).resolve().parent.parent / "assets" / "sample_matches.json"


# ── Parsing ────────────────────────────────────────────────────────────

def parse_set(raw) -> SetScore:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise InvalidInputError(f"set must be a 2-element list, got {raw!r}")
    return SetScore(as_points(raw[0]), as_points(raw[1]))


def parse_played_match(raw) -> PlayedMatch:
    """Accepts {"sets": [[a, b], ...]} or a bare list of sets."""
    if isinstance(raw, dict):
        sets = raw.get("sets")
        if sets is None:
            raise InvalidInputError("played match has no 'sets'")
    else:
        sets = raw
    if not isinstance(sets, list):
        raise InvalidInputError(f"sets must be a list, got {type(sets).__name__}")
    return PlayedMatch(tuple(parse_set(s) for s in sets))


def parse_history(raw) -> list[PlayedMatch]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise InvalidInputError(f"history must be a list, got {type(raw).__name__}")
    return [parse_played_match(m) for m in raw]


def parse_fixture(raw: dict) -> MatchFixture:
    if not isinstance(raw, dict):
        raise InvalidInputError(f"fixture must be an object, got {type(raw).__name__}")
    last10 = get_value(raw, ["last10", "last_10"])
    if not isinstance(last10, dict):
        raise InvalidInputError(f"fixture {raw.get('matchId')!r} has no 'last10' object")

    return MatchFixture(
        match_id=safe_str(get_value(raw, ["matchId", "match_id", "id"])),
        competition=safe_str(get_value(raw, ["competition", "league"])),
        start_time=safe_str(get_value(raw, ["startTime", "start_time"])),
        player_a=safe_str(get_value(raw, ["playerA", "player_a"])),
        player_b=safe_str(get_value(raw, ["playerB", "player_b"])),
        history_a=parse_history(get_value(last10, ["playerA", "player_a"])),
        history_b=parse_history(get_value(last10, ["playerB", "player_b"])),
    )


def parse_payload(data: dict, strict: bool = False) -> Payload:
    """Convert a decoded payload into a Payload.

    Envelope errors always raise. A malformed fixture is logged and skipped,
    or raises when ``strict`` is set.
    """
    if not isinstance(data, dict):
        raise InvalidInputError(f"payload must be an object, got {type(data).__name__}")
    raw_matches = data.get("matches")
    if not isinstance(raw_matches, list):
        raise InvalidInputError("payload has no 'matches' list")

    fixtures = []
    for i, raw in enumerate(raw_matches):
        try:
            fixtures.append(parse_fixture(raw))
        except InvalidInputError as e:
            if strict:
                raise
            log.warning(f"Skipping fixture #{i}: {e}")

    log.info(f"Parsed {len(fixtures)}/{len(raw_matches)} fixtures")
    return Payload(date=safe_str(data.get("date")), matches=fixtures)


# ── Loaders ────────────────────────────────────────────────────────────

class JsonPayloadLoader(BaseLoader):
    """Shared decode + parse step for every JSON source."""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def load(self) -> Payload:
        text = self.read()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"payload is not valid JSON: {e}") from e
        return parse_payload(data, strict=self.strict)


class LocalPayloadLoader(JsonPayloadLoader):
    """Reads a payload file; defaults to the bundled sample."""

    def __init__(self, path: str | Path | None = None, strict: bool = False):
        super().__init__(strict)
        self.path = Path(path) if path else ASSET_PATH

    def read(self) -> str:
        if not self.path.exists():
            raise FileNotFoundError(f"Payload file not found: {self.path}")
        log.info(f"Loading payload from {self.path}")
        return self.path.read_text(encoding="utf-8")


class HttpPayloadLoader(JsonPayloadLoader):
    """GETs the payload from an API endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = 15.0,
        client: httpx.Client | None = None,
        strict: bool = False,
    ):
        super().__init__(strict)
        self.url = url
        self.timeout = timeout
        self.client = client

    def read(self) -> str:
        log.info(f"Fetching payload from {self.url}")
        if self.client is not None:
            return self._get(self.client)
        with httpx.Client(timeout=httpx.Timeout(self.timeout)) as client:
            return self._get(client)

    def _get(self, client: httpx.Client) -> str:
        resp = client.get(self.url, headers={"Accept": "application/json"})
        resp.raise_for_status()
        return resp.text


def make_loader(
    api_url: str | None,
    local_path: str | Path | None = None,
    timeout: float = 15.0,
    strict: bool = False,
) -> JsonPayloadLoader:
    """HTTP loader when an API URL is set, the local file otherwise."""
    if api_url and api_url.strip():
        return HttpPayloadLoader(api_url.strip(), timeout=timeout, strict=strict)
    return LocalPayloadLoader(local_path, strict=strict)
