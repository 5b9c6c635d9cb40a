"""Roster grouping and derived display fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable

from ..utils.datetime_utils import calculate_age, parse_date
from ..utils.parsing import as_dict, localized, parse_int

FORWARD_POSITIONS = frozenset({"C", "L", "R", "LW", "RW"})
DEFENSE_POSITIONS = frozenset({"D"})
GOALIE_POSITIONS = frozenset({"G"})

# Players without a sweater number sort after everyone else
_NO_NUMBER = 10_000


@dataclass(frozen=True)
class RosterPlayer:
    id: int
    first_name: str
    last_name: str
    sweater_number: int | None
    position_code: str
    shoots_catches: str
    height_in_inches: int | None
    height: str
    weight_in_pounds: int | None
    birth_date: str
    age: int | None
    birth_city: str
    birth_state_province: str
    birth_country: str
    headshot: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class RosterGroups:
    forwards: list[RosterPlayer] = field(default_factory=list)
    defensemen: list[RosterPlayer] = field(default_factory=list)
    goalies: list[RosterPlayer] = field(default_factory=list)

    @property
    def total_players(self) -> int:
        return len(self.forwards) + len(self.defensemen) + len(self.goalies)


def format_height(total_inches: int | None) -> str:
    """6'3" style height; blank when unknown."""
    if not total_inches:
        return ""
    feet, inches = divmod(total_inches, 12)
    return f"{feet}'{inches}\""


def _optional_int(value: Any) -> int | None:
    return parse_int(value) if value not in (None, "") else None


def build_roster_player(data: Any, today: date | None = None) -> RosterPlayer:
    data = as_dict(data)
    height_in_inches = _optional_int(data.get("heightInInches"))
    birth_date_raw = str(data.get("birthDate") or "")
    birth = parse_date(birth_date_raw)
    return RosterPlayer(
        id=parse_int(data.get("id")),
        first_name=localized(data.get("firstName")),
        last_name=localized(data.get("lastName")),
        sweater_number=_optional_int(data.get("sweaterNumber")),
        position_code=str(data.get("positionCode") or ""),
        shoots_catches=str(data.get("shootsCatches") or ""),
        height_in_inches=height_in_inches,
        height=format_height(height_in_inches),
        weight_in_pounds=_optional_int(data.get("weightInPounds")),
        birth_date=birth_date_raw,
        age=calculate_age(birth, today) if birth else None,
        birth_city=localized(data.get("birthCity")),
        birth_state_province=localized(data.get("birthStateProvince")),
        birth_country=str(data.get("birthCountry") or ""),
        headshot=str(data.get("headshot") or ""),
    )


def _by_number(player: RosterPlayer) -> int:
    return player.sweater_number if player.sweater_number is not None else _NO_NUMBER


def group_roster(players: Iterable[Any], today: date | None = None) -> RosterGroups:
    """Split a flat player list into position groups sorted by sweater number.

    Players with an unrecognized position code are left out.
    """
    forwards: list[RosterPlayer] = []
    defensemen: list[RosterPlayer] = []
    goalies: list[RosterPlayer] = []
    for raw in players:
        player = build_roster_player(raw, today)
        if player.position_code in FORWARD_POSITIONS:
            forwards.append(player)
        elif player.position_code in DEFENSE_POSITIONS:
            defensemen.append(player)
        elif player.position_code in GOALIE_POSITIONS:
            goalies.append(player)
    return RosterGroups(
        forwards=sorted(forwards, key=_by_number),
        defensemen=sorted(defensemen, key=_by_number),
        goalies=sorted(goalies, key=_by_number),
    )
