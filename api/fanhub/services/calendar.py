"""Schedule-to-calendar conversion (iCalendar feed and Google Calendar link)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Sequence
from urllib.parse import urlencode

from icalendar import Calendar, Event

from ..config import TeamConfig
from ..models import Game
from ..utils.datetime_utils import now_utc

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
DEFAULT_EVENT_HOURS = 3


def _location(game: Game, team: TeamConfig) -> str:
    return team.arena if game.is_home(team.id) else game.venue


def _summary(game: Game) -> str:
    return f"{game.away_team.abbrev} @ {game.home_team.abbrev}"


def _description(game: Game, team: TeamConfig) -> str:
    is_home = game.is_home(team.id)
    opponent = game.away_team if is_home else game.home_team
    return f"{team.name} {'vs' if is_home else '@'} {opponent.name}"


def _compact_utc(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def build_calendar(
    games: Sequence[Game],
    team: TeamConfig,
    *,
    event_hours: int = DEFAULT_EVENT_HOURS,
    generated_at: datetime | None = None,
) -> bytes:
    """Render the schedule as an iCalendar document, one VEVENT per game."""
    stamp = generated_at or now_utc()
    cal = Calendar()
    cal.add("prodid", f"-//{team.name}//Schedule//EN")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", f"{team.name} Schedule")
    cal.add("x-wr-caldesc", f"Complete {team.name} game schedule")

    for game in games:
        event = Event()
        event.add("uid", f"{team.slug}-game-{game.id}@{team.calendar_domain}")
        event.add("dtstamp", stamp)
        event.add("dtstart", game.start_time)
        event.add("dtend", game.start_time + timedelta(hours=event_hours))
        event.add("summary", _summary(game))
        event.add("description", _description(game, team))
        event.add("location", _location(game, team))
        event.add("status", "CONFIRMED")
        event.add("transp", "OPAQUE")
        cal.add_component(event)

    return cal.to_ical()


def next_game(games: Sequence[Game], now: datetime | None = None) -> Game | None:
    """The earliest game starting strictly after ``now``."""
    now = now or now_utc()
    upcoming = [game for game in games if game.start_time > now]
    if not upcoming:
        return None
    return min(upcoming, key=lambda game: game.start_time)


def google_calendar_url(
    games: Sequence[Game],
    team: TeamConfig,
    *,
    now: datetime | None = None,
    event_hours: int = DEFAULT_EVENT_HOURS,
) -> str:
    """Deep link that adds the next game to Google Calendar; "" when none."""
    game = next_game(games, now)
    if game is None:
        return ""
    end = game.start_time + timedelta(hours=event_hours)
    params = {
        "action": "TEMPLATE",
        "text": _summary(game),
        "dates": f"{_compact_utc(game.start_time)}/{_compact_utc(end)}",
        "details": _description(game, team),
        "location": _location(game, team),
    }
    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"
