"""Recap generation from NHL boxscores.

The recap is template prose parameterized with facts pulled from the
boxscore: final score, each side's top scorer and starting goalie, special
teams conversion and a heuristic turning-point label. Callers must check the
game is final before generating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..clients.nhl_helpers import build_team_ref, map_nhl_game_state
from ..config import TeamConfig
from ..models import TeamRef
from ..utils.datetime_utils import parse_iso_datetime
from ..utils.parsing import (
    as_dict,
    as_list,
    localized,
    parse_float,
    parse_fraction,
    parse_int,
    parse_save_shots,
)

# Winning margin above which headlines use "Dominate"/"Overwhelm"
DOMINANT_MARGIN = 2
# Final period numbers above this get the "decided in ..." turning point
OVERTIME_AFTER_PERIOD = 2

PERIOD_TYPE_LABELS = {"REG": "regulation", "OT": "overtime", "SO": "a shootout"}


@dataclass(frozen=True)
class SkaterLine:
    player_id: int
    name: str
    goals: int
    assists: int
    points: int
    plus_minus: int = 0
    shots: int = 0
    hits: int = 0
    time_on_ice: str = ""


@dataclass(frozen=True)
class GoalieLine:
    player_id: int
    name: str
    saves: int
    shots_against: int
    save_pct: float
    time_on_ice: str = ""


@dataclass(frozen=True)
class TeamGameStats:
    shots: int = 0
    hits: int = 0
    power_play_goals: int = 0
    power_play_opportunities: int = 0
    faceoff_pct: float = 0.0


@dataclass(frozen=True)
class BoxscoreSide:
    team: TeamRef
    # Forwards followed by defense, in payload order
    skaters: list[SkaterLine] = field(default_factory=list)
    goalies: list[GoalieLine] = field(default_factory=list)
    stats: TeamGameStats = field(default_factory=TeamGameStats)

    @property
    def score(self) -> int:
        return self.team.score or 0


@dataclass(frozen=True)
class Boxscore:
    game_id: int
    game_date: datetime | None
    venue: str
    game_state: str
    period_number: int
    period_type: str
    home: BoxscoreSide
    away: BoxscoreSide

    @property
    def is_final(self) -> bool:
        return map_nhl_game_state(self.game_state) == "final"


@dataclass(frozen=True)
class Performer:
    name: str
    stats: str
    description: str


@dataclass(frozen=True)
class RecapGameInfo:
    id: int
    date: str
    venue: str
    final_score: str
    winner: str
    loser: str
    is_team_win: bool


@dataclass(frozen=True)
class KeyStats:
    shots: str
    power_play: str
    faceoffs: str
    hits: str


@dataclass(frozen=True)
class RecapSeo:
    title: str
    description: str
    keywords: list[str]
    canonical_url: str
    image_url: str


@dataclass(frozen=True)
class GameRecap:
    game: RecapGameInfo
    headline: str
    summary: str
    turning_point: str
    team_performers: list[Performer]
    opponent_performers: list[Performer]
    key_stats: KeyStats
    content: str
    seo: RecapSeo


# ──────────────────────────────────────────────────────────────────────────────
# Boxscore parsing
# ──────────────────────────────────────────────────────────────────────────────


def _parse_skater(data: dict) -> SkaterLine:
    goals = parse_int(data.get("goals"))
    assists = parse_int(data.get("assists"))
    return SkaterLine(
        player_id=parse_int(data.get("playerId")),
        name=localized(data.get("name")),
        goals=goals,
        assists=assists,
        points=goals + assists,
        plus_minus=parse_int(data.get("plusMinus")),
        shots=parse_int(data.get("shots", data.get("sog"))),
        hits=parse_int(data.get("hits")),
        time_on_ice=str(data.get("timeOnIce") or data.get("toi") or ""),
    )


def _parse_goalie(data: dict) -> GoalieLine:
    saves, shots_against = parse_save_shots(data.get("saveShotsAgainst"))
    if saves is None:
        saves = parse_int(data.get("saves"))
    if shots_against is None:
        shots_against = parse_int(data.get("shotsAgainst"))
    raw_pct = data.get("savePercentage", data.get("savePctg"))
    if raw_pct not in (None, ""):
        save_pct = parse_float(raw_pct)
    else:
        save_pct = saves / shots_against if shots_against else 0.0
    return GoalieLine(
        player_id=parse_int(data.get("playerId")),
        name=localized(data.get("name")),
        saves=saves,
        shots_against=shots_against,
        save_pct=save_pct,
        time_on_ice=str(data.get("timeOnIce") or data.get("toi") or ""),
    )


def _stats_from_mapping(data: dict) -> TeamGameStats:
    return TeamGameStats(
        shots=parse_int(data.get("shots", data.get("sog"))),
        hits=parse_int(data.get("hits")),
        power_play_goals=parse_int(data.get("powerPlayGoals")),
        power_play_opportunities=parse_int(data.get("powerPlayOpportunities")),
        faceoff_pct=parse_float(data.get("faceoffWinningPctg")),
    )


def _stats_from_categories(rows: list, side: str) -> TeamGameStats:
    """Team stats from the category list shape ({category, homeValue, awayValue})."""
    values: dict[str, Any] = {}
    for row in rows:
        row = as_dict(row)
        category = row.get("category")
        if category:
            values[str(category)] = row.get(f"{side}Value")
    pp_goals, pp_opportunities = parse_fraction(values.get("powerPlay"))
    return TeamGameStats(
        shots=parse_int(values.get("sog")),
        hits=parse_int(values.get("hits")),
        power_play_goals=pp_goals,
        power_play_opportunities=pp_opportunities,
        faceoff_pct=parse_float(values.get("faceoffWinningPctg")),
    )


def _team_stats(payload: dict, side: str) -> TeamGameStats:
    raw = as_dict(payload.get("summary")).get("teamGameStats", payload.get("teamGameStats"))
    if isinstance(raw, list):
        return _stats_from_categories(raw, side)
    return _stats_from_mapping(as_dict(as_dict(raw).get(f"{side}Team")))


def _parse_side(payload: dict, game: dict, side: str) -> BoxscoreSide:
    players = as_dict(as_dict(payload.get("playerByGameStats")).get(f"{side}Team"))
    skaters = [
        _parse_skater(as_dict(item))
        for group in ("forwards", "defense")
        for item in as_list(players.get(group))
    ]
    goalies = [_parse_goalie(as_dict(item)) for item in as_list(players.get("goalies"))]
    return BoxscoreSide(
        team=build_team_ref(game.get(f"{side}Team")),
        skaters=skaters,
        goalies=goalies,
        stats=_team_stats(payload, side),
    )


def parse_boxscore(payload: Any) -> Boxscore:
    """Normalize a boxscore payload. Missing fields become blanks or zeros.

    Accepts both the flat api-web.nhle.com shape and payloads that nest the
    game header under a ``game`` key.
    """
    payload = as_dict(payload)
    game = as_dict(payload.get("game")) or payload
    period = as_dict(game.get("periodDescriptor") or payload.get("periodDescriptor"))
    return Boxscore(
        game_id=parse_int(game.get("id")),
        game_date=parse_iso_datetime(game.get("startTimeUTC") or game.get("gameDate")),
        venue=localized(game.get("venue")),
        game_state=str(game.get("gameState") or ""),
        period_number=parse_int(period.get("number")),
        period_type=str(period.get("periodType") or ""),
        home=_parse_side(payload, game, "home"),
        away=_parse_side(payload, game, "away"),
    )


# ──────────────────────────────────────────────────────────────────────────────
# Recap generation
# ──────────────────────────────────────────────────────────────────────────────


def top_performer(skaters: list[SkaterLine]) -> SkaterLine | None:
    """Skater with the most points; ties go to the first listed."""
    if not skaters:
        return None
    # max() returns the first maximal element
    return max(skaters, key=lambda skater: skater.points)


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


def _pct(value: float) -> str:
    return f"{value * 100:.1f}"


def headline_for(
    team: TeamConfig,
    team_score: int,
    opponent: TeamRef,
    opponent_score: int,
    dominant_margin: int = DOMINANT_MARGIN,
) -> str:
    if team_score > opponent_score:
        verb = "Dominate" if team_score - opponent_score > dominant_margin else "Edge"
        return f"{team.short_name} {verb} {opponent.name} {team_score}-{opponent_score}"
    verb = "Overwhelm" if opponent_score - team_score > dominant_margin else "Defeat"
    return f"{opponent.name} {verb} {team.short_name} {opponent_score}-{team_score}"


def turning_point_for(
    period_number: int,
    period_type: str,
    overtime_after_period: int = OVERTIME_AFTER_PERIOD,
) -> str:
    if period_number > overtime_after_period:
        label = PERIOD_TYPE_LABELS.get(period_type.upper(), period_type.lower() or "regulation")
        return f"The game was decided in {label}, with crucial plays determining the outcome."
    ordinal = "first" if period_number == 1 else "second"
    return f"Key momentum shifts in the {ordinal} period proved decisive."


def _skater_stats(skater: SkaterLine) -> str:
    return f"{skater.goals}G, {skater.assists}A, {skater.points}P"


def _goalie_stats(goalie: GoalieLine) -> str:
    return f"{goalie.saves} saves, {_pct(goalie.save_pct)}% SV%"


def _format_game_date(value: datetime | None) -> str:
    if value is None:
        return "game night"
    return f"{value:%B} {value.day}, {value.year}"


def _campaign(value: datetime | None) -> str:
    if value is None or value.month >= 10 or value.month <= 4:
        return "season"
    return "playoff"


def _build_content(
    team: TeamConfig,
    box: Boxscore,
    ours: BoxscoreSide,
    theirs: BoxscoreSide,
    is_win: bool,
    final_score: str,
    turning_point: str,
) -> str:
    opponent = theirs.team
    our_top = top_performer(ours.skaters)
    their_top = top_performer(theirs.skaters)
    our_goalie = ours.goalies[0] if ours.goalies else None
    their_goalie = theirs.goalies[0] if theirs.goalies else None

    paragraphs = [
        f"The {team.name} {'secured a' if is_win else 'suffered a'} {final_score} "
        f"{'victory over' if is_win else 'loss to'} the {opponent.name} at {box.venue or 'the arena'} "
        f"on {_format_game_date(box.game_date)}."
    ]

    opening = (
        f"The {team.short_name} controlled the pace early"
        if is_win
        else f"The {team.short_name} faced an uphill battle"
    )
    if our_top is not None:
        lead = (
            f"{opening}, with {our_top.name} leading the charge with {our_top.goals} "
            f"{_plural(our_top.goals, 'goal')} and {our_top.assists} "
            f"{_plural(our_top.assists, 'assist')} for {our_top.points} "
            f"{_plural(our_top.points, 'point')}."
        )
    else:
        lead = f"{opening}."
    if our_goalie is not None:
        lead += (
            f" Between the pipes, {our_goalie.name} made {our_goalie.saves} saves on "
            f"{our_goalie.shots_against} shots for a {_pct(our_goalie.save_pct)}% save percentage."
        )
    paragraphs.append(lead)

    if their_top is not None:
        rival = (
            f"The {opponent.name} were led by {their_top.name}, who recorded {their_top.points} "
            f"{_plural(their_top.points, 'point')} on the night."
        )
    else:
        rival = f"The {opponent.name} spread their offense around the lineup."
    if their_goalie is not None:
        rival += (
            f" Their goaltender {their_goalie.name} faced {their_goalie.shots_against} shots, "
            f"making {their_goalie.saves} saves."
        )
    paragraphs.append(rival)

    ours_pp, theirs_pp = ours.stats, theirs.stats
    special_teams_role = (
        "crucial" if ours_pp.power_play_goals > 0 or theirs_pp.power_play_goals > 0 else "minimal"
    )
    paragraphs.append(
        f"Special teams played a {special_teams_role} role, with the {team.short_name} going "
        f"{ours_pp.power_play_goals}/{ours_pp.power_play_opportunities} on the power play while "
        f"{opponent.abbrev} converted {theirs_pp.power_play_goals}/"
        f"{theirs_pp.power_play_opportunities} of their opportunities."
    )
    paragraphs.append(
        f"{turning_point} The {team.short_name} "
        f"{'showed resilience and determination' if is_win else 'will look to bounce back'} "
        f"as they continue their {_campaign(box.game_date)} campaign."
    )
    paragraphs.append(
        f"This {'victory' if is_win else 'setback'} "
        f"{'builds momentum' if is_win else 'provides valuable lessons'} for the {team.short_name} "
        f"as they {'continue their strong play' if is_win else 'work to get back on track'} "
        "moving forward."
    )
    return "\n\n".join(paragraphs)


def _performers(
    side: BoxscoreSide,
    skater_description: str,
    goalie_description: str,
) -> list[Performer]:
    performers: list[Performer] = []
    top = top_performer(side.skaters)
    if top is not None:
        performers.append(
            Performer(
                name=top.name,
                stats=_skater_stats(top),
                description=skater_description.format(points=top.points),
            )
        )
    if side.goalies:
        goalie = side.goalies[0]
        performers.append(
            Performer(name=goalie.name, stats=_goalie_stats(goalie), description=goalie_description)
        )
    return performers


def generate_recap(
    box: Boxscore,
    team: TeamConfig,
    *,
    site_name: str = "Leafs News",
    site_url: str = "http://localhost:8000",
    dominant_margin: int = DOMINANT_MARGIN,
    overtime_after_period: int = OVERTIME_AFTER_PERIOD,
) -> GameRecap:
    """Build the recap for a final game from the team's point of view."""
    is_home = box.home.team.id == team.id
    ours, theirs = (box.home, box.away) if is_home else (box.away, box.home)
    opponent = theirs.team
    base_url = site_url.rstrip("/")

    is_win = ours.score > theirs.score
    final_score = f"{ours.score}-{theirs.score}"
    headline = headline_for(team, ours.score, opponent, theirs.score, dominant_margin)
    turning_point = turning_point_for(box.period_number, box.period_type, overtime_after_period)

    abbrev = team.abbreviation
    key_stats = KeyStats(
        shots=f"{abbrev} {ours.stats.shots} - {theirs.stats.shots} {opponent.abbrev}",
        power_play=(
            f"{abbrev} {ours.stats.power_play_goals}/{ours.stats.power_play_opportunities} - "
            f"{theirs.stats.power_play_goals}/{theirs.stats.power_play_opportunities} {opponent.abbrev}"
        ),
        faceoffs=(
            f"{abbrev} {_pct(ours.stats.faceoff_pct)}% - "
            f"{_pct(theirs.stats.faceoff_pct)}% {opponent.abbrev}"
        ),
        hits=f"{abbrev} {ours.stats.hits} - {theirs.stats.hits} {opponent.abbrev}",
    )

    our_top = top_performer(ours.skaters)
    keywords = [team.name, "game recap", opponent.name, "NHL", "hockey"]
    if our_top is not None:
        keywords.append(our_top.name)

    return GameRecap(
        game=RecapGameInfo(
            id=box.game_id,
            date=box.game_date.isoformat() if box.game_date else "",
            venue=box.venue,
            final_score=final_score,
            winner=team.name if is_win else opponent.name,
            loser=opponent.name if is_win else team.name,
            is_team_win=is_win,
        ),
        headline=headline,
        summary=(
            f"{'Victory' if is_win else 'Loss'} against {opponent.name} "
            "with standout performances from key players."
        ),
        turning_point=turning_point,
        team_performers=_performers(
            ours, f"Led the {team.short_name} with {{points}} points", "Solid performance in net"
        ),
        opponent_performers=_performers(
            theirs, f"Top performer for {opponent.abbrev}", "Goaltending effort"
        ),
        key_stats=key_stats,
        content=_build_content(team, box, ours, theirs, is_win, final_score, turning_point),
        seo=RecapSeo(
            title=f"{headline} - Game Recap | {site_name}",
            description=(
                f"Complete recap of the {team.name} {'victory over' if is_win else 'loss to'} "
                f"{opponent.name} {final_score}. Player stats, highlights, and analysis."
            ),
            keywords=keywords,
            canonical_url=f"{base_url}/recaps/{box.game_id}",
            image_url=f"{base_url}/api/image-recap/{box.game_id}",
        ),
    )
