import random

import pytest

from agents.matching_agent import MatchingAgent, filter_by_budget, match_label, score_destinations
from data.destinations import all_destinations
from models.destination import Destination, Ratings
from models.preferences import UserPreferences


def make_dest(id, tags=("praia",), cost="medium", **ratings):
    values = dict(culture=5.0, nature=5.0, food=5.0, adventure=5.0, relaxation=5.0)
    values.update(ratings)
    return Destination(
        id=id,
        name=id.title(),
        country="Lugar",
        description="",
        tags=tuple(tags),
        ratings=Ratings(**values),
        average_cost=cost,
    )


def prefs(**kwargs):
    kwargs.setdefault("budget", "")
    return UserPreferences(**kwargs)


def test_interest_plus_cultural_style():
    dest = make_dest("a", tags=("praia", "cultura"), culture=9.5)
    result = score_destinations(prefs(interests=["cultura"], travel_style="cultural"), [dest])
    assert result[0].match_score == pytest.approx(5.0)


def test_activity_adds_weighted_rating():
    dest = make_dest("a", food=9.0)
    result = score_destinations(
        prefs(preferred_activities=["experimentar gastronomia"], travel_style="equilibrado"), [dest]
    )
    assert result[0].match_score == pytest.approx(2.7)


def test_activity_needs_rating_above_seven():
    dest = make_dest("a", food=7.0)
    result = score_destinations(prefs(preferred_activities=["experimentar gastronomia"]), [dest])
    assert result[0].match_score == 0


def test_unknown_activity_scores_nothing():
    dest = make_dest("a", food=10.0)
    result = score_destinations(prefs(preferred_activities=["mergulhar"]), [dest])
    assert result[0].match_score == 0


def test_style_bonus_needs_rating_above_eight():
    dest = make_dest("a", adventure=8.0)
    assert score_destinations(prefs(travel_style="aventureiro"), [dest])[0].match_score == 0
    dest = make_dest("b", adventure=8.1)
    assert score_destinations(prefs(travel_style="aventureiro"), [dest])[0].match_score == 3


def test_interest_matches_substring_case_insensitive():
    dest = make_dest("a", tags=("gastronomia",))
    result = score_destinations(prefs(interests=["Gastro"]), [dest])
    assert result[0].match_score == 2


def test_empty_preferences_score_zero_in_catalog_order():
    catalog = all_destinations()
    result = score_destinations(prefs(interests=[], preferred_activities=[], travel_style="equilibrado"), catalog)
    assert [s.match_score for s in result] == [0] * len(catalog)
    assert [s.id for s in result] == [d.id for d in catalog]


def test_ties_keep_catalog_order():
    catalog = [make_dest("z"), make_dest("y", tags=("cultura",)), make_dest("x")]
    result = score_destinations(prefs(interests=["praia"]), catalog)
    assert [s.id for s in result] == ["z", "x", "y"]


def test_ranking_on_real_catalog():
    result = score_destinations(prefs(interests=["praia"], travel_style="relaxado"))
    assert [s.id for s in result][:5] == ["dest-004", "dest-008", "dest-001", "dest-007", "dest-002"]
    assert result[0].match_score == 5
    assert result[4].match_score == 2


def test_scoring_is_deterministic():
    p = prefs(interests=["cultura", "praia"], preferred_activities=["apreciar a natureza"], travel_style="aventureiro")
    first = score_destinations(p)
    second = score_destinations(p)
    assert [(s.id, s.match_score) for s in first] == [(s.id, s.match_score) for s in second]


def test_adding_matching_interest_never_lowers_score():
    base = prefs(interests=["cultura"])
    more = prefs(interests=["cultura", "praia"])
    before = {s.id: s.match_score for s in score_destinations(base)}
    after = {s.id: s.match_score for s in score_destinations(more)}
    for dest_id, score in before.items():
        assert after[dest_id] >= score
    assert after["dest-008"] == before["dest-008"] + 2


def test_economico_only_returns_low_cost():
    result = score_destinations(prefs(budget="econômico", interests=["cultura"]))
    assert result
    assert all(s.destination.average_cost == "low" for s in result)


def test_moderado_keeps_low_and_medium_cost():
    result = score_destinations(prefs(budget="moderado", interests=["praia"]))
    ids = {s.id for s in result}
    assert ids == {"dest-001", "dest-002", "dest-003", "dest-005", "dest-007", "dest-008"}
    # Santorini and Nova Zelândia are high cost
    assert "dest-004" not in ids
    assert "dest-006" not in ids
    assert all(s.destination.average_cost in {"low", "medium"} for s in result)


def test_luxo_excludes_low_cost():
    result = score_destinations(prefs(budget="Luxo"))
    assert result
    assert all(s.destination.average_cost in {"medium", "high", "very high"} for s in result)


def test_unknown_budget_label_does_not_filter():
    catalog = all_destinations()
    assert len(filter_by_budget("premium", catalog)) == len(catalog)
    assert len(filter_by_budget("", catalog)) == len(catalog)


def test_scoring_does_not_touch_catalog():
    catalog = all_destinations()
    score_destinations(prefs(interests=["cultura"]), catalog)
    assert [d.id for d in catalog] == [d.id for d in all_destinations()]


@pytest.mark.parametrize(
    "score, label",
    [
        (11, "Combinação perfeita"),
        (10, "Ótima escolha"),
        (6.5, "Ótima escolha"),
        (6, "Boa opção"),
        (3.5, "Boa opção"),
        (3, "Compatibilidade baixa"),
        (0, "Compatibilidade baixa"),
    ],
)
def test_match_label(score, label):
    assert match_label(score) == label


def test_recommend_samples_when_nothing_selected():
    agent = MatchingAgent(rng=random.Random(7))
    picks = agent.recommend(prefs(), limit=4)
    assert len(picks) == 4
    assert len({p.id for p in picks}) == 4
    assert all(p.match_score is None for p in picks)


def test_recommend_returns_top_ranked():
    agent = MatchingAgent()
    picks = agent.recommend(prefs(interests=["praia"], travel_style="relaxado"), limit=3)
    assert [p.id for p in picks] == ["dest-004", "dest-008", "dest-001"]
