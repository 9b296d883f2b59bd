import pytest

from conftest import make_courts

from leaguenight.calculator import (
    calculate_all_time_standings,
    calculate_court_details,
    calculate_event_rankings,
    calculate_final_standings,
    calculate_next_round_courts,
    calculate_night_result,
    calculate_player_rankings,
    calculate_season_standings,
)
from leaguenight.exceptions import (
    EmptyInputError,
    InvalidCourtCountError,
    InvalidCourtError,
    InvalidRoundError,
)
from leaguenight.models import (
    Court,
    EventConfig,
    FinalPosition,
    MatchScore,
    NightResult,
    Season,
    SeasonStanding,
)
from leaguenight.standings import (
    MatchAggregator,
    NextRoundAssigner,
    RankingEngine,
    calculate_final_positions,
    generate_next_round_courts,
    has_scores,
    points_for_rank,
    season_standings,
)

SAMPLE_SCORES = [MatchScore(11, 5), MatchScore(9, 11), MatchScore(12, 10)]


def _scored_court(names, matches, number=1):
    return Court(player_names=names, matches=list(matches), court_number=number)


# ---------- MatchAggregator ----------


def test_aggregate_full_court():
    court = _scored_court(["a", "b", "c", "d"], SAMPLE_SCORES)
    totals = MatchAggregator().aggregate(court, [1, 2, 3, 4])

    assert (totals[1].points_for, totals[1].points_against) == (32, 26)
    assert (totals[2].points_for, totals[2].points_against) == (32, 26)
    assert (totals[3].points_for, totals[3].points_against) == (24, 34)
    assert (totals[4].points_for, totals[4].points_against) == (28, 30)
    assert [totals[s].wins for s in (1, 2, 3, 4)] == [2, 2, 0, 2]
    assert all(t.played == 3 for t in totals.values())
    assert totals[3].losses == 3
    assert totals[4].point_differential == -2


def test_aggregate_skips_unplayed_matches():
    court = _scored_court(
        ["a", "b", "c", "d"], [MatchScore(11, 5), MatchScore(None, 11)]
    )
    totals = MatchAggregator().aggregate(court, [1, 4, 5, 8])

    assert totals[1].played == 1 and totals[1].wins == 1
    assert totals[1].points_for == 11 and totals[1].points_against == 5
    assert totals[5].played == 1 and totals[5].wins == 0
    assert totals[8].points_for == 5


def test_tied_match_gives_no_win():
    court = _scored_court(["a", "b", "c", "d"], [MatchScore(7, 7)])
    totals = MatchAggregator().aggregate(court, [1, 2, 3, 4])

    assert all(t.wins == 0 for t in totals.values())
    assert all(t.played == 1 for t in totals.values())
    assert all(t.losses == 1 for t in totals.values())


def test_aggregate_reflects_edited_scores():
    aggregator = MatchAggregator()
    court = _scored_court(["a", "b", "c", "d"], [MatchScore(11, 5)])
    first = aggregator.aggregate(court, [1, 2, 3, 4])

    court.matches[0] = MatchScore(3, 11)
    second = aggregator.aggregate(court, [1, 2, 3, 4])

    assert first[1].wins == 1
    assert second[1].wins == 0 and second[3].wins == 1
    assert second[1].points_for == 3


def test_aggregate_needs_four_distinct_seeds():
    court = _scored_court(["a", "b", "c", "d"], [])
    with pytest.raises(InvalidCourtError):
        MatchAggregator().aggregate(court, [1, 1, 2, 3])


def test_has_scores_ignores_zero_zero_matches():
    court = _scored_court(["a", "b", "c", "d"], [MatchScore(0, 0), MatchScore(5, None)])
    assert not has_scores([court])

    court.matches.append(MatchScore(11, 0))
    assert has_scores([court])


# ---------- RankingEngine + NextRoundAssigner ----------


def test_single_court_round_one_ranking():
    courts = make_courts(1)
    courts[0].matches = list(SAMPLE_SCORES)

    players = calculate_player_rankings(courts, 1)

    assert [p.name for p in players] == ["p1-1", "p1-2", "p1-4", "p1-3"]
    assert [p.round_place for p in players] == [1, 2, 3, 4]
    assert [p.court_place for p in players] == [1, 2, 3, 4]
    assert [(p.wins, p.losses) for p in players] == [(2, 1), (2, 1), (2, 1), (0, 3)]
    assert [p.point_differential for p in players] == [6, 6, -2, -10]
    for p in players:
        assert p.next_court == 1
        assert p.next_tier == "A"
        assert p.tier == 0


def test_round_three_has_no_next_round():
    courts = make_courts(2)
    for court in courts:
        court.matches = [MatchScore(), MatchScore(), MatchScore()]

    players = calculate_player_rankings(courts, 3)

    assert all(p.next_court == 0 for p in players)
    assert all(p.next_tier == "" for p in players)
    assert [p.name for p in players[:4]] == ["p1-1", "p1-2", "p1-3", "p1-4"]
    assert [p.name for p in players[4:]] == ["p2-1", "p2-2", "p2-3", "p2-4"]
    assert [p.tier for p in players] == [0] * 4 + [1] * 4


def test_two_court_ranking_orders_by_court_place_then_record():
    courts = make_courts(2, prefix="c")
    courts[0].matches = list(SAMPLE_SCORES)

    players = calculate_player_rankings(courts, 1)

    assert [p.name for p in players] == [
        "c1-1",
        "c2-1",
        "c1-2",
        "c2-2",
        "c1-4",
        "c2-3",
        "c2-4",
        "c1-3",
    ]
    places = {p.name: p.round_place for p in players}
    assert places == {
        "c1-1": 1,
        "c1-2": 2,
        "c1-4": 3,
        "c2-1": 4,
        "c2-2": 5,
        "c2-3": 6,
        "c2-4": 7,
        "c1-3": 8,
    }
    next_courts = {p.name: p.next_court for p in players}
    assert next_courts == {
        "c1-1": 1,
        "c1-2": 2,
        "c1-4": 2,
        "c2-1": 1,
        "c2-2": 1,
        "c2-3": 2,
        "c2-4": 2,
        "c1-3": 1,
    }
    assert all(p.next_tier == "A–B" for p in players)


def test_seeds_come_from_the_round_layout():
    players = RankingEngine().rank(make_courts(4), 2)
    seeds = {p.name: p.seed for p in players}

    assert [seeds[f"p3-{j}"] for j in range(1, 5)] == [9, 12, 13, 16]
    assert {p.court_number for p in players if p.name.startswith("p4")} == {4}


def test_no_scores_in_round_one_keeps_entry_seeds():
    players = calculate_player_rankings(make_courts(4), 1)
    by_name = {p.name: p for p in players}

    # court 1 holds seeds 1, 8, 9, 16
    assert [by_name[f"p1-{j}"].next_court for j in range(1, 5)] == [1, 1, 3, 3]
    assert by_name["p1-1"].next_tier == "A–B"
    assert by_name["p1-3"].next_tier == "C–D"
    assert sorted(p.round_place for p in players) == list(range(1, 17))


def test_round_two_moves_into_single_court_tiers():
    courts = make_courts(4)
    courts[3].matches = [MatchScore(11, 0), MatchScore(11, 0), MatchScore(11, 0)]

    players = calculate_player_rankings(courts, 2)
    by_name = {p.name: p for p in players}

    # p4-1 won all three on the bottom court and ranks first overall
    assert by_name["p4-1"].round_place == 1
    assert by_name["p4-1"].next_court == 1
    assert by_name["p4-1"].next_tier == "A"
    counts = {}
    for p in players:
        counts[p.next_court] = counts.get(p.next_court, 0) + 1
    assert counts == {1: 4, 2: 4, 3: 4, 4: 4}


def test_twelve_player_event_never_uses_the_padding_court():
    courts = make_courts(3)
    courts[1].matches = list(SAMPLE_SCORES)

    players = calculate_player_rankings(courts, 1, player_count=12)

    assert {p.next_court for p in players} == {1, 2, 3}
    assert all(p.next_tier == "A–C" for p in players)


def test_ranking_is_repeatable():
    courts = make_courts(3)
    courts[0].matches = list(SAMPLE_SCORES)
    courts[2].matches = [MatchScore(4, 11), MatchScore()]

    first = [p.to_dict() for p in calculate_player_rankings(courts, 2)]
    second = [p.to_dict() for p in calculate_player_rankings(courts, 2)]

    assert first == second


def test_empty_names_are_shown_as_dash():
    court = Court(player_names=["a", "", "c", "d"])
    players = RankingEngine().rank([court], 1)
    assert "-" in [p.name for p in players]


def test_ranking_errors():
    with pytest.raises(EmptyInputError):
        calculate_player_rankings([], 1)
    with pytest.raises(InvalidRoundError):
        calculate_player_rankings(make_courts(1), 0)
    with pytest.raises(InvalidRoundError):
        RankingEngine().rank(make_courts(1), 4)
    with pytest.raises(InvalidCourtCountError):
        RankingEngine().rank(make_courts(2), 1, court_count=3)


def test_assigner_validates_round():
    with pytest.raises(InvalidRoundError):
        NextRoundAssigner().assign([], 7, 2)


def test_optional_rank_arguments_are_keyword_only():
    with pytest.raises(TypeError):
        RankingEngine().rank(make_courts(2), 1, 2)
    players = RankingEngine().rank(make_courts(2), 1, court_count=2)
    assert len(players) == 8


def _twelve_on_four_courts():
    return make_courts(3) + [Court(player_names=["-"] * 4, court_number=4)]


def test_twelve_players_on_four_courts_leave_the_last_court_empty():
    players = calculate_player_rankings(_twelve_on_four_courts(), 1, player_count=12)

    assert len(players) == 12
    assert "-" not in [p.name for p in players]
    assert sorted(p.round_place for p in players) == list(range(1, 13))
    assert {p.next_court for p in players} == {1, 2, 3}
    assert all(p.next_tier == "A–C" for p in players)


def test_formula_layout_seats_placeholders_when_legacy_tables_are_off():
    players = calculate_player_rankings(
        _twelve_on_four_courts(), 1, player_count=12, use_legacy_layouts=False
    )

    assert len(players) == 16
    assert {p.next_court for p in players} == {1, 2, 3, 4}
    assert {p.next_tier for p in players} == {"A–B", "C–D"}


def test_next_round_keeps_the_empty_court_empty():
    courts = _twelve_on_four_courts()
    courts[0].matches = list(SAMPLE_SCORES)

    next_courts = calculate_next_round_courts(courts, 1, player_count=12)

    assert len(next_courts) == 4
    assert next_courts[3].player_names == ["-"] * 4
    seated = sorted(n for c in next_courts[:3] for n in c.player_names)
    assert seated == sorted(n for c in courts[:3] for n in c.player_names)


def test_court_details_mark_the_empty_court():
    details = calculate_court_details(_twelve_on_four_courts(), 2, player_count=12)

    assert [d.tier for d in details] == ["A–C", "A–C", "A–C", ""]
    assert details[3].seeds == [0, 0, 0, 0]


def test_event_player_count_reaches_the_engine():
    config = EventConfig(name="Short night", courts=_twelve_on_four_courts(), player_count=12)
    assert len(calculate_event_rankings(config)) == 12

    config.use_legacy_layouts = False
    assert len(calculate_event_rankings(config)) == 16


# ---------- Court details ----------


def test_court_details_pass_names_through():
    courts = make_courts(4)
    details = calculate_court_details(courts, 2)

    assert [d.tier for d in details] == ["A–B", "A–B", "C–D", "C–D"]
    assert details[2].seeds == [9, 12, 13, 16]
    assert all(d.round == 2 for d in details)
    assert [d.court_number for d in details] == [1, 2, 3, 4]
    assert details[1].player_names == courts[1].player_names


def test_court_details_reject_empty_input():
    with pytest.raises(EmptyInputError):
        calculate_court_details([], 1)


# ---------- Next round courts ----------


def test_generate_next_round_courts():
    courts = make_courts(2, prefix="c")
    courts[0].matches = list(SAMPLE_SCORES)

    next_courts = calculate_next_round_courts(courts, 1)

    assert [c.player_names for c in next_courts] == [
        ["c1-1", "c2-1", "c2-2", "c1-3"],
        ["c1-2", "c1-4", "c2-3", "c2-4"],
    ]
    assert [c.court_number for c in next_courts] == [1, 2]


def test_no_courts_after_the_final_round():
    players = RankingEngine().rank(make_courts(2), 3)
    with pytest.raises(InvalidRoundError):
        generate_next_round_courts(players, 3)
    with pytest.raises(EmptyInputError):
        generate_next_round_courts([], 1)


# ---------- Final positions ----------


def test_final_positions_follow_court_order():
    courts = make_courts(2)
    courts[1].matches = [MatchScore(11, 0), MatchScore(11, 0), MatchScore(11, 0)]

    positions = calculate_final_standings(courts, 3)

    assert [fp.name for fp in positions[:4]] == ["p1-1", "p1-2", "p1-3", "p1-4"]
    assert positions[4].name == "p2-1"
    assert (positions[4].court, positions[4].position) == (2, 1)
    assert positions[0].points == 1000
    assert positions[4].points == 400
    assert (positions[4].wins, positions[4].point_differential) == (3, 33)


def test_points_for_rank():
    assert points_for_rank(1) == 1000
    assert points_for_rank(2) == 800
    assert points_for_rank(3) == 600
    assert points_for_rank(0) == 0
    assert points_for_rank(99) == 0
    assert points_for_rank(3, {1: [10, 5]}) == 0
    assert points_for_rank(2, {1: [10, 5]}) == 5


def test_final_positions_need_players():
    with pytest.raises(EmptyInputError):
        calculate_final_positions([])


# ---------- Season standings ----------


def _night(name, rows, completed=True):
    positions = [
        FinalPosition(
            name=player,
            rank=rank,
            court=(rank - 1) // 4 + 1,
            position=(rank - 1) % 4 + 1,
            points=points,
            wins=wins,
            point_differential=diff,
        )
        for player, rank, points, wins, diff in rows
    ]
    return NightResult(name=name, positions=positions, is_completed=completed)


SEASON_NIGHTS = [
    _night(
        "Week 1",
        [("ann", 1, 1000, 3, 20), ("bob", 2, 800, 2, 10), ("cat", 5, 400, 2, 5)],
    ),
    _night(
        "Week 2",
        [("bob", 1, 1000, 3, 15), ("dan", 2, 800, 2, 4), ("ann", 6, 350, 1, -3)],
    ),
    _night("Week 3", [("ann", 1, 1000, 3, 30)], completed=False),
]


def test_season_standings_sum_completed_nights():
    standings = season_standings(SEASON_NIGHTS)
    by_name = {s.name: s for s in standings}

    assert [s.name for s in standings] == ["bob", "ann", "dan", "cat"]
    assert [s.rank for s in standings] == [1, 2, 3, 4]
    assert by_name["bob"].points == 1800
    assert by_name["ann"].points == 1350
    assert by_name["ann"].appearances == 2
    assert by_name["ann"].weekly_ranks == [1, 6]
    assert by_name["ann"].wins == 4
    assert by_name["ann"].point_differential == 17
    assert by_name["bob"].champ_court == 2
    assert by_name["cat"].champ_court == 0


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([("x", 1, 500, 1, 0), ("y", 2, 500, 3, 0)], ["y", "x"]),
        ([("x", 1, 500, 2, -1), ("y", 2, 500, 2, 4)], ["y", "x"]),
        ([("x", 1, 500, 2, 4), ("y", 2, 500, 2, 4)], ["x", "y"]),
    ],
)
def test_season_ties_break_on_wins_then_differential(rows, expected):
    standings = season_standings([_night("Week 1", rows)])
    assert [s.name for s in standings] == expected


def test_season_without_completed_nights_is_empty():
    assert season_standings([]) == []
    assert calculate_season_standings(Season("Spring", SEASON_NIGHTS[2:])) == []


def test_all_time_standings_mix_stored_and_derived_seasons():
    current = Season(
        "Fall",
        nights=SEASON_NIGHTS,
        standings=[SeasonStanding(name="zed", points=9999)],
    )
    stored = Season(
        "Spring",
        standings=[
            SeasonStanding(name="ann", points=5000),
            SeasonStanding(name="eve", points=100),
        ],
    )
    derived = Season("Summer", nights=[_night("Week 1", [("cat", 1, 1000, 3, 9)])])

    standings = calculate_all_time_standings(current, [stored, derived])

    assert [(s.name, s.points) for s in standings] == [
        ("ann", 6350),
        ("bob", 1800),
        ("cat", 1400),
        ("dan", 800),
        ("eve", 100),
    ]
    assert [s.rank for s in standings] == [1, 2, 3, 4, 5]
    assert {s.name: s.seasons for s in standings}["ann"] == 2
    assert {s.name: s.seasons for s in standings}["dan"] == 1


def test_night_result_from_an_event():
    courts = make_courts(2)
    courts[1].matches = [MatchScore(11, 0), MatchScore(11, 0), MatchScore(11, 0)]

    night = calculate_night_result(EventConfig(name="Week 1", round=3, courts=courts))

    assert night.is_completed
    assert night.name == "Week 1"
    assert [fp.points for fp in night.positions[:2]] == [1000, 800]
    assert night.positions[4].wins == 3

    unfinished = calculate_night_result(EventConfig(name="Week 2", round=2, courts=courts))
    assert not unfinished.is_completed


def test_season_round_trips_through_dict():
    season = Season(
        "Fall",
        nights=SEASON_NIGHTS[:1],
        standings=season_standings(SEASON_NIGHTS[:1]),
    )
    assert Season.from_dict(season.to_dict()) == season
