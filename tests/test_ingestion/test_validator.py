"""Tests for post-load payload validation."""

from tt_predictor.core.schema import MatchFixture, PlayedMatch, SetScore
from tt_predictor.ingestion.validator import PayloadValidator


def _history(n: int) -> list[PlayedMatch]:
    return [PlayedMatch((SetScore(11, 9), SetScore(11, 7), SetScore(11, 8))) for _ in range(n)]


def _fixture(match_id="m1", n_a=5, n_b=5, **kw) -> MatchFixture:
    return MatchFixture(
        match_id=match_id, competition="C", start_time="t",
        player_a="A", player_b="B",
        history_a=kw.get("history_a", _history(n_a)),
        history_b=kw.get("history_b", _history(n_b)),
    )


class TestPayloadValidator:
    def test_clean(self):
        r = PayloadValidator().validate([_fixture()])
        assert r["is_clean"]
        assert r["errors"] == []
        assert r["warnings"] == []
        assert r["stats"]["fixtures"] == 1
        assert r["stats"]["played_matches"] == 10

    def test_empty_history_warns(self):
        r = PayloadValidator().validate([_fixture(n_a=0)])
        assert r["is_clean"]
        assert r["stats"]["empty_histories"] == 1
        assert any("fallback" in w for w in r["warnings"])

    def test_single_match_warns(self):
        r = PayloadValidator().validate([_fixture(n_b=1)])
        assert any("dispersion" in w and "player B" in w for w in r["warnings"])

    def test_long_history_warns(self):
        r = PayloadValidator().validate([_fixture(n_a=14)])
        assert r["stats"]["truncated_histories"] == 1
        assert any("first 10" in w for w in r["warnings"])

    def test_custom_window(self):
        r = PayloadValidator(window=5).validate([_fixture(n_a=6)])
        assert r["stats"]["truncated_histories"] == 1

    def test_match_without_sets(self):
        r = PayloadValidator().validate([_fixture(history_a=[PlayedMatch(), *_history(3)])])
        assert r["stats"]["matches_without_sets"] == 1

    def test_duplicate_ids_error(self):
        r = PayloadValidator().validate([_fixture("m1"), _fixture("m1")])
        assert not r["is_clean"]
        assert any("duplicate" in e for e in r["errors"])

    def test_empty_list(self):
        r = PayloadValidator().validate([])
        assert r["is_clean"]
        assert r["stats"] == {}
