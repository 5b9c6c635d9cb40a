"""Tests for the fan hub HTTP endpoints."""

from __future__ import annotations

import unittest
from datetime import timedelta

from fastapi.testclient import TestClient

from api.main import app
from conftest import BOS, TOR, build_boxscore_payload, make_game
from fanhub.clients import MissingCredentialsError, RateLimitedError, UpstreamStatusError
from fanhub.dependencies import get_lineup_store, get_news_client, get_nhl_client, get_x_client
from fanhub.models import NewsArticle
from fanhub.services.lineups import InMemoryLineupStore
from fanhub.utils.datetime_utils import now_utc


class _FakeNHL:
    def __init__(
        self,
        games=None,
        scoreboard=None,
        boxscore=None,
        landing=None,
        roster=None,
        error: Exception | None = None,
    ) -> None:
        self.games = games or []
        self.scoreboard = scoreboard or []
        self.boxscore = boxscore
        self.landing = landing
        self.roster = roster
        self.error = error

    def _maybe_fail(self) -> None:
        if self.error is not None:
            raise self.error

    async def fetch_club_schedule(self, team, season):
        self._maybe_fail()
        return self.games

    async def fetch_score_now(self):
        self._maybe_fail()
        return self.scoreboard

    async def fetch_boxscore(self, game_id):
        self._maybe_fail()
        return self.boxscore

    async def fetch_landing(self, game_id):
        self._maybe_fail()
        return self.landing

    async def fetch_roster(self, team):
        self._maybe_fail()
        return self.roster


class _FakeNews:
    def __init__(self, by_url: dict[str, list[NewsArticle]], failing: set[str] | None = None) -> None:
        self.by_url = by_url
        self.failing = failing or set()

    async def fetch_rss(self, url: str) -> list[NewsArticle]:
        if url in self.failing:
            raise UpstreamStatusError(url, "HTTP 500", status_code=500)
        return self.by_url.get(url, [])

    async def fetch_gnews(self) -> list[NewsArticle]:
        raise MissingCredentialsError("gnews", "no key")


class _FakeX:
    def __init__(self, payload: dict | None = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.queries: list[str] = []

    async def search_recent(self, query: str) -> dict:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload or {}


class _EndpointTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def override_nhl(self, fake: _FakeNHL) -> None:
        app.dependency_overrides[get_nhl_client] = lambda: fake


class TestHealth(_EndpointTestCase):
    def test_healthz(self) -> None:
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})


class TestCalendarEndpoint(_EndpointTestCase):
    def _future_games(self) -> list:
        soon = now_utc() + timedelta(days=3)
        return [make_game(1, soon), make_game(2, soon + timedelta(days=2), home=BOS, away=TOR)]

    def test_ics_download(self) -> None:
        self.override_nhl(_FakeNHL(games=self._future_games()))
        response = self.client.get("/api/calendar/ics")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("text/calendar"))
        self.assertIn("attachment", response.headers["content-disposition"])
        self.assertEqual(response.text.count("BEGIN:VEVENT"), 2)
        self.assertEqual(response.headers["cache-control"], "public, max-age=3600")

    def test_ics_with_upstream_down_is_empty(self) -> None:
        self.override_nhl(_FakeNHL(error=UpstreamStatusError("nhl", "HTTP 500", status_code=500)))
        response = self.client.get("/api/calendar/ics")
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("BEGIN:VEVENT", response.text)

    def test_google_redirect(self) -> None:
        self.override_nhl(_FakeNHL(games=self._future_games()))
        response = self.client.get("/api/calendar/google", follow_redirects=False)

        self.assertEqual(response.status_code, 307)
        self.assertTrue(
            response.headers["location"].startswith("https://calendar.google.com/calendar/render?")
        )

    def test_google_without_future_game(self) -> None:
        past = make_game(1, now_utc() - timedelta(days=3), state="final")
        self.override_nhl(_FakeNHL(games=[past]))
        response = self.client.get("/api/calendar/google", follow_redirects=False)
        self.assertEqual(response.status_code, 204)

    def test_unknown_format(self) -> None:
        self.override_nhl(_FakeNHL())
        response = self.client.get("/api/calendar/pdf")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Invalid format")


class TestRecapEndpoints(_EndpointTestCase):
    def test_recap(self) -> None:
        self.override_nhl(_FakeNHL(boxscore=build_boxscore_payload()))
        response = self.client.get("/api/recap/2024020100")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["game"]["finalScore"], "4-2")
        self.assertTrue(body["game"]["isTeamWin"])
        self.assertEqual(body["recap"]["keyStats"]["powerPlay"], "TOR 1/3 - 0/2 MTL")
        self.assertEqual(body["recap"]["topPerformers"]["team"][0]["name"], "A. Matthews")
        self.assertIn("turningPoint", body["recap"])
        self.assertIn("keywords", body["seo"])
        self.assertTrue(body["seo"]["imageUrl"].endswith("/api/image-recap/2024020100"))
        self.assertTrue(body["seo"]["canonicalUrl"].endswith("/recaps/2024020100"))

    def test_recap_not_final(self) -> None:
        self.override_nhl(_FakeNHL(boxscore=build_boxscore_payload(game_state="LIVE")))
        response = self.client.get("/api/recap/2024020100")
        self.assertEqual(response.status_code, 400)

    def test_recap_unavailable(self) -> None:
        self.override_nhl(_FakeNHL(error=UpstreamStatusError("nhl", "HTTP 404", status_code=404)))
        response = self.client.get("/api/recap/1")
        self.assertEqual(response.status_code, 404)

    def test_recap_image(self) -> None:
        self.override_nhl(_FakeNHL(boxscore=build_boxscore_payload()))
        response = self.client.get("/api/image-recap/2024020100")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["content-type"], "image/png")
        self.assertTrue(response.content.startswith(b"\x89PNG\r\n\x1a\n"))
        self.assertIn("max-age", response.headers["cache-control"])

    def test_recap_image_svg(self) -> None:
        self.override_nhl(_FakeNHL(boxscore=build_boxscore_payload()))
        response = self.client.get("/api/image-recap/2024020100?format=svg")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("image/svg+xml"))
        self.assertIn("VICTORY", response.text)

    def test_recap_image_placeholder(self) -> None:
        self.override_nhl(_FakeNHL(error=UpstreamStatusError("nhl", "HTTP 404", status_code=404)))
        response = self.client.get("/api/image-recap/1?format=svg")

        self.assertEqual(response.status_code, 200)
        self.assertIn("Not Available", response.text)

    def test_recap_image_placeholder_png(self) -> None:
        self.override_nhl(_FakeNHL(error=UpstreamStatusError("nhl", "HTTP 404", status_code=404)))
        response = self.client.get("/api/image-recap/1")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["content-type"], "image/png")

    def test_recap_image_unknown_format(self) -> None:
        self.override_nhl(_FakeNHL(boxscore=build_boxscore_payload()))
        response = self.client.get("/api/image-recap/1?format=gif")
        self.assertEqual(response.status_code, 422)


class TestGamePreviewEndpoint(_EndpointTestCase):
    def test_preview(self) -> None:
        landing = {
            "gameDate": "2024-11-09",
            "gameType": 2,
            "venue": {"default": "Scotiabank Arena"},
            "homeTeam": {"id": 10, "abbrev": "TOR", "name": {"default": "Maple Leafs"}},
            "awayTeam": {"id": 6, "abbrev": "BOS", "name": {"default": "Bruins"}},
        }
        self.override_nhl(_FakeNHL(landing=landing))
        response = self.client.get("/api/game-preview/2024020200")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["game"]["id"], 2024020200)
        self.assertEqual(body["game"]["opponent"]["abbrev"], "BOS")
        self.assertEqual(response.headers["cache-control"], "public, max-age=300")

    def test_preview_not_found(self) -> None:
        self.override_nhl(_FakeNHL(error=UpstreamStatusError("nhl", "HTTP 404", status_code=404)))
        self.assertEqual(self.client.get("/api/game-preview/1").status_code, 404)


class TestRosterEndpoint(_EndpointTestCase):
    def test_live_roster(self) -> None:
        roster = [
            {"id": 1, "firstName": {"default": "Auston"}, "lastName": {"default": "Matthews"},
             "positionCode": "C", "sweaterNumber": 34, "heightInInches": 75,
             "birthDate": "1997-09-17"},
            {"id": 2, "firstName": {"default": "Joseph"}, "lastName": {"default": "Woll"},
             "positionCode": "G", "sweaterNumber": 60},
        ]
        self.override_nhl(_FakeNHL(roster=roster))
        body = self.client.get("/api/roster").json()

        self.assertFalse(body["sample"])
        self.assertEqual(body["totalPlayers"], 2)
        self.assertEqual(body["forwards"][0]["height"], "6'3\"")
        self.assertEqual(body["forwards"][0]["fullName"], "Auston Matthews")

    def test_fallback_roster(self) -> None:
        self.override_nhl(_FakeNHL(error=UpstreamStatusError("nhl", "HTTP 500", status_code=500)))
        body = self.client.get("/api/roster").json()

        self.assertTrue(body["sample"])
        self.assertEqual(body["totalPlayers"], 7)


class TestScheduleEndpoints(_EndpointTestCase):
    def _games(self) -> list:
        base = now_utc().replace(day=1, hour=23, minute=0, second=0, microsecond=0)
        return [
            make_game(1, base),
            make_game(2, base + timedelta(days=2), home=BOS, away=TOR, venue="TD Garden"),
        ]

    def test_schedule(self) -> None:
        self.override_nhl(_FakeNHL(games=self._games()))
        body = self.client.get("/api/schedule").json()

        self.assertEqual(body["totalGames"], 2)
        self.assertEqual(body["homeGames"], 1)
        self.assertEqual(body["awayGames"], 1)
        home = body["games"][0]
        self.assertIsNotNone(home["ticketLink"])
        self.assertIn("NHL.TV", home["tvBroadcasts"]["streaming"])
        self.assertIsNone(body["games"][1]["ticketLink"])

    def test_schedule_home_filter(self) -> None:
        self.override_nhl(_FakeNHL(games=self._games()))
        body = self.client.get("/api/schedule", params={"filter": "away"}).json()
        self.assertEqual([g["id"] for g in body["games"]], [2])
        self.assertEqual(body["totalGames"], 2)

    def test_schedule_bad_month(self) -> None:
        self.override_nhl(_FakeNHL(games=self._games()))
        self.assertEqual(self.client.get("/api/schedule", params={"month": "May"}).status_code, 422)

    def test_scores(self) -> None:
        now = now_utc()
        games = [
            make_game(1, now - timedelta(days=3), state="final"),
            make_game(2, now + timedelta(days=2)),
        ]
        live = make_game(3, now, state="live")
        self.override_nhl(_FakeNHL(games=games, scoreboard=[live]))
        body = self.client.get("/api/scores").json()

        self.assertEqual(body["currentGame"]["id"], 3)
        self.assertEqual([g["id"] for g in body["recentGames"]], [1])
        self.assertEqual([g["id"] for g in body["upcomingGames"]], [2])
        self.assertEqual(body["recentGames"][0]["status"], "final")


class TestLineupEndpoints(_EndpointTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.store = InMemoryLineupStore()
        app.dependency_overrides[get_lineup_store] = lambda: self.store

    def test_get_lineups(self) -> None:
        body = self.client.get("/api/lineups").json()
        self.assertEqual(
            body["depthChart"]["evenStrength"]["goalies"]["starter"]["name"], "Joseph Woll"
        )
        self.assertEqual(len(body["changeLog"]), 3)

    def test_confirm_change(self) -> None:
        response = self.client.post(
            "/api/lineups",
            json={
                "action": "confirm",
                "situation": "even-strength",
                "details": {"playersInvolved": ["Bobby McMann"]},
            },
        )
        self.assertEqual(response.status_code, 200)
        change = response.json()["change"]
        self.assertTrue(response.json()["success"])
        self.assertEqual(change["type"], "confirm")
        self.assertEqual(change["details"], {"playersInvolved": ["Bobby McMann"]})

        body = self.client.get("/api/lineups").json()
        self.assertEqual(body["changeLog"][0]["id"], change["id"])
        self.assertTrue(body["depthChart"]["evenStrength"]["forwards"]["line3"]["left"]["confirmed"])

    def test_invalid_action(self) -> None:
        response = self.client.post(
            "/api/lineups", json={"action": "delete", "situation": "even-strength", "details": {}}
        )
        self.assertEqual(response.status_code, 422)


class TestNewsEndpoints(_EndpointTestCase):
    def test_news(self) -> None:
        from fanhub.config import get_settings

        first, second = get_settings().news_config.rss_sources[:2]
        fake = _FakeNews(
            {
                first: [
                    NewsArticle("Leafs win", "https://a.com/1?x=1", "a.com", "2024-10-10T10:00:00Z"),
                    NewsArticle("Raptors lose", "https://a.com/2", "a.com", "2024-10-10T11:00:00Z"),
                ],
                second: [
                    NewsArticle("Leafs win again", "https://a.com/1", "b.com", "2024-10-11T10:00:00Z"),
                ],
            }
        )
        app.dependency_overrides[get_news_client] = lambda: fake
        body = self.client.get("/api/news").json()

        self.assertEqual(body["count"], 1)
        self.assertEqual(body["articles"][0]["link"], "https://a.com/1?x=1")
        self.assertEqual(body["sources"], get_settings().news_source_count)
        self.assertIn("timestamp", body)

    def test_news_with_failing_source(self) -> None:
        from fanhub.config import get_settings

        first, second = get_settings().news_config.rss_sources[:2]
        fake = _FakeNews(
            {second: [NewsArticle("Maple Leafs notes", "https://c.com/1", "c.com", "")]},
            failing={first},
        )
        app.dependency_overrides[get_news_client] = lambda: fake
        body = self.client.get("/api/news").json()
        self.assertEqual(body["count"], 1)

    def test_news_search_live(self) -> None:
        fake = _FakeX(payload={"data": [{"id": "1", "text": "Go Leafs", "author_id": "u"}],
                               "includes": {"users": [{"id": "u", "username": "fan"}]}})
        app.dependency_overrides[get_x_client] = lambda: fake
        response = self.client.get("/api/news-search", params={"q": "#GoLeafsGo"})
        body = response.json()

        self.assertFalse(body["sample"])
        self.assertEqual(body["articles"][0]["url"], "https://x.com/fan/status/1")
        self.assertEqual(fake.queries, ["#GoLeafsGo"])
        self.assertEqual(response.headers["cache-control"], "public, max-age=10")

    def test_news_search_rate_limited(self) -> None:
        fake = _FakeX(error=RateLimitedError("x", "slow down", status_code=429))
        app.dependency_overrides[get_x_client] = lambda: fake
        body = self.client.get("/api/news-search").json()

        self.assertTrue(body["sample"])
        self.assertTrue(body["rate_limited"])

    def test_news_search_without_token(self) -> None:
        fake = _FakeX(error=MissingCredentialsError("x", "no token"))
        app.dependency_overrides[get_x_client] = lambda: fake
        body = self.client.get("/api/news-search").json()

        self.assertTrue(body["sample"])
        self.assertNotIn("rate_limited", body)
        self.assertEqual(len(fake.queries), 1)


class TestSocialEndpoint(_EndpointTestCase):
    def test_social(self) -> None:
        body = self.client.get("/api/social").json()
        self.assertEqual(body["count"], 5)
        self.assertIn("lastUpdated", body)
