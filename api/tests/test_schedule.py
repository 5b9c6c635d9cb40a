"""Tests for schedule filtering, broadcast synthesis and score buckets."""

from __future__ import annotations

from datetime import date

from conftest import BOS, MTL, TOR, make_game, utc
from fanhub.services.schedule import (
    bucket_scores,
    filter_schedule,
    find_team_game,
    synthesize_broadcasts,
    ticket_link,
)


class TestSynthesizeBroadcasts:
    """Prime time and weekend are judged on Toronto wall-clock time."""

    def test_weekday_home_afternoon(self, team) -> None:
        # Wednesday 2024-10-16 17:00 UTC is 13:00 in Toronto
        game = make_game(1, utc(2024, 10, 16, 17))
        broadcasts = synthesize_broadcasts(game, team)

        assert broadcasts.canada == ["Sportsnet Ontario"]
        assert broadcasts.usa == []
        assert broadcasts.streaming == ["NHL.TV", "ESPN+", "Sportsnet NOW"]

    def test_weekday_away_afternoon_has_no_canadian_tv(self, team) -> None:
        game = make_game(2, utc(2024, 10, 16, 17), home=BOS, away=TOR)
        broadcasts = synthesize_broadcasts(game, team)

        assert broadcasts.canada == []
        assert broadcasts.streaming == ["NHL.TV", "ESPN+"]

    def test_saturday_prime_time(self, team) -> None:
        # Saturday 2024-10-19 23:00 UTC is 19:00 in Toronto
        game = make_game(3, utc(2024, 10, 19, 23), home=BOS, away=TOR)
        broadcasts = synthesize_broadcasts(game, team)

        assert broadcasts.canada == ["Sportsnet Ontario", "Hockey Night in Canada"]
        assert broadcasts.usa == ["ESPN+", "TNT"]

    def test_utc_evening_is_not_local_prime_time(self, team) -> None:
        # 20:00 UTC is 16:00 in Toronto
        game = make_game(4, utc(2024, 10, 16, 20), home=BOS, away=TOR)
        assert synthesize_broadcasts(game, team).usa == []

    def test_playoffs(self, team) -> None:
        game = make_game(5, utc(2024, 4, 24, 17), game_type=3)
        broadcasts = synthesize_broadcasts(game, team)

        assert broadcasts.canada[-2:] == ["CBC", "Sportsnet"]
        assert broadcasts.usa == ["ESPN", "TNT"]


class TestTicketLink:
    def test_home_game(self, team) -> None:
        link = ticket_link(make_game(2024020001, utc(2024, 10, 12, 23)), team)
        assert link.endswith("?game=2024020001")

    def test_away_game(self, team) -> None:
        assert ticket_link(make_game(1, utc(2024, 10, 12, 23), home=MTL, away=TOR), team) is None


class TestFilterSchedule:
    games = [
        make_game(3, utc(2024, 11, 2, 23), home=BOS, away=TOR),
        make_game(1, utc(2024, 10, 12, 23)),
        make_game(2, utc(2024, 10, 19, 23), home=MTL, away=TOR),
    ]

    def test_sorted_without_filters(self) -> None:
        assert [g.id for g in filter_schedule(self.games, 10)] == [1, 2, 3]

    def test_home_filter(self) -> None:
        assert [g.id for g in filter_schedule(self.games, 10, venue_filter="home")] == [1]

    def test_away_filter(self) -> None:
        assert [g.id for g in filter_schedule(self.games, 10, venue_filter="away")] == [2, 3]

    def test_month_filter(self) -> None:
        assert [g.id for g in filter_schedule(self.games, 10, month="2024-10")] == [1, 2]

    def test_unknown_filter_ignored(self) -> None:
        assert len(filter_schedule(self.games, 10, venue_filter="neutral")) == 3


class TestBucketScores:
    def test_recent_and_upcoming(self) -> None:
        finals = [make_game(i, utc(2024, 10, i, 23), state="final") for i in range(1, 8)]
        upcoming = [make_game(100 + i, utc(2024, 10, 10 + i, 23)) for i in range(1, 8)]
        today_final = make_game(50, utc(2024, 10, 10, 1), state="final")
        buckets = bucket_scores(finals + upcoming + [today_final], date(2024, 10, 10))

        assert [g.id for g in buckets.recent] == [3, 4, 5, 6, 7]
        assert [g.id for g in buckets.upcoming] == [101, 102, 103, 104, 105]

    def test_unfinished_past_game_is_neither(self) -> None:
        stale = make_game(1, utc(2024, 10, 1, 23))
        buckets = bucket_scores([stale], date(2024, 10, 10))
        assert buckets.recent == [] and buckets.upcoming == []


class TestFindTeamGame:
    def test_found(self) -> None:
        games = [make_game(1, utc(2024, 10, 1), home=BOS, away=MTL), make_game(2, utc(2024, 10, 1))]
        assert find_team_game(games, 10).id == 2

    def test_not_playing(self) -> None:
        assert find_team_game([make_game(1, utc(2024, 10, 1), home=BOS, away=MTL)], 10) is None
