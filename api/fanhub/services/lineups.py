"""Lineup depth chart and change log.

State lives behind the LineupStore protocol. The in-memory store is seeded
from fixtures, shared by every request, and lost on restart.
"""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Protocol

from .. import fixtures
from ..logging_config import get_logger
from ..models import ChangeType, LineupChange, Player, Situation
from ..utils.datetime_utils import format_utc, now_utc

logger = get_logger(__name__)

FORWARD_LINES = ("line1", "line2", "line3", "line4")
FORWARD_SLOTS = ("left", "center", "right")
DEFENSE_PAIRS = ("pair1", "pair2", "pair3")
DEFENSE_SLOTS = ("left", "right")
GOALIE_SLOTS = ("starter", "backup")
SPECIAL_TEAMS = ("powerPlay", "penaltyKill")
SPECIAL_UNITS = ("unit1", "unit2")


@dataclass
class LineupData:
    """Players keyed by id, a depth chart of player ids, and the change log."""

    players: dict[int, Player]
    layout: dict
    change_log: list[LineupChange] = field(default_factory=list)
    last_updated: str = ""


class LineupStore(Protocol):
    def get(self) -> LineupData: ...

    def append(self, change: LineupChange) -> None: ...

    def set_confirmed(self, names: Iterable[str], confirmed: bool) -> int: ...


def _change_from_dict(data: dict) -> LineupChange:
    return LineupChange(
        id=str(data["id"]),
        timestamp=str(data["timestamp"]),
        type=data["type"],
        situation=data["situation"],
        description=str(data.get("description") or ""),
        details=dict(data.get("details") or {}),
    )


class InMemoryLineupStore:
    """Process-local lineup state seeded from the sample depth chart."""

    def __init__(
        self,
        players: Iterable[dict] | None = None,
        layout: dict | None = None,
        change_log: Iterable[dict] | None = None,
    ) -> None:
        seeded = players if players is not None else fixtures.lineup_players()
        self._data = LineupData(
            players={int(p["id"]): Player(**p) for p in seeded},
            layout=layout if layout is not None else fixtures.depth_chart_layout(),
            change_log=[
                _change_from_dict(item)
                for item in (change_log if change_log is not None else fixtures.lineup_change_log())
            ],
            last_updated=format_utc(now_utc()),
        )

    def get(self) -> LineupData:
        return self._data

    def append(self, change: LineupChange) -> None:
        self._data.change_log.insert(0, change)
        self._data.last_updated = change.timestamp

    def set_confirmed(self, names: Iterable[str], confirmed: bool) -> int:
        """Set the confirmed flag on every player with a matching name."""
        wanted = set(names)
        updated = 0
        for player in self._data.players.values():
            if player.name in wanted:
                player.confirmed = confirmed
                updated += 1
        return updated


def record_lineup_change(
    store: LineupStore,
    action: ChangeType,
    situation: Situation,
    details: dict[str, Any] | None = None,
) -> LineupChange:
    """Append a change to the log (newest first) and apply confirmations."""
    details = dict(details or {})
    description = str(details.pop("description", "") or f"{action} action performed")
    change = LineupChange(
        id=uuid.uuid4().hex,
        timestamp=format_utc(now_utc()),
        type=action,
        situation=situation,
        description=description,
        details=details,
    )
    store.append(change)
    if action == "confirm":
        names = [str(name) for name in details.get("playersInvolved") or []]
        updated = store.set_confirmed(names, True)
        logger.info("lineup_players_confirmed", players=names, updated=updated)
    logger.info("lineup_change_recorded", change_id=change.id, type=action, situation=situation)
    return change


def _player(players: dict[int, Player], player_id: int) -> dict | None:
    player = players.get(player_id)
    return asdict(player) if player is not None else None


def _player_list(players: dict[int, Player], ids: Iterable[int]) -> list[dict]:
    return [asdict(players[pid]) for pid in ids if pid in players]


def serialize_depth_chart(data: LineupData) -> dict:
    """Resolve the id layout into nested player objects."""
    players = data.players
    even = data.layout.get("evenStrength", {})
    forwards = even.get("forwards", {})
    defense = even.get("defense", {})
    goalies = even.get("goalies", {})

    chart: dict[str, Any] = {
        "evenStrength": {
            "forwards": {
                line: {slot: _player(players, forwards.get(line, {}).get(slot)) for slot in FORWARD_SLOTS}
                for line in FORWARD_LINES
            },
            "defense": {
                pair: {slot: _player(players, defense.get(pair, {}).get(slot)) for slot in DEFENSE_SLOTS}
                for pair in DEFENSE_PAIRS
            },
            "goalies": {slot: _player(players, goalies.get(slot)) for slot in GOALIE_SLOTS},
        }
    }
    for situation in SPECIAL_TEAMS:
        units = data.layout.get(situation, {})
        chart[situation] = {
            unit: {
                "forwards": _player_list(players, units.get(unit, {}).get("forwards", [])),
                "defense": _player_list(players, units.get(unit, {}).get("defense", [])),
            }
            for unit in SPECIAL_UNITS
        }
    return chart


def serialize_change(change: LineupChange) -> dict:
    return asdict(change)


def lineup_payload(store: LineupStore) -> dict:
    data = store.get()
    return {
        "depthChart": serialize_depth_chart(data),
        "changeLog": [serialize_change(change) for change in data.change_log],
        "lastUpdated": data.last_updated,
    }
