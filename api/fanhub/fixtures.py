"""Static sample data served when live sources are unavailable.

Functions (rather than module constants) so relative timestamps are computed
at call time and callers always get a fresh, mutable copy.
"""

from __future__ import annotations

from datetime import timedelta

from .utils.datetime_utils import format_utc, now_utc

DEFAULT_PROFILE_IMAGE = (
    "https://abs.twimg.com/sticky/default_profile_images/default_profile_normal.png"
)


def _roster_player(
    player_id: int,
    first: str,
    last: str,
    number: int,
    position: str,
    shoots: str,
    height: int,
    weight: int,
    birth_date: str,
    city: str,
    country: str,
    province: str,
) -> dict:
    return {
        "id": player_id,
        "headshot": f"https://assets.nhle.com/mugs/nhl/20232024/TOR/{player_id}.png",
        "firstName": {"default": first},
        "lastName": {"default": last},
        "sweaterNumber": number,
        "positionCode": position,
        "shootsCatches": shoots,
        "heightInInches": height,
        "weightInPounds": weight,
        "birthDate": birth_date,
        "birthCity": {"default": city},
        "birthCountry": country,
        "birthStateProvince": {"default": province},
    }


def sample_roster() -> list[dict]:
    """Flat roster in the NHL roster API player shape."""
    return [
        _roster_player(8477934, "Auston", "Matthews", 34, "C", "L", 75, 220, "1997-09-17",
                       "San Ramon", "USA", "California"),
        _roster_player(8478483, "Mitch", "Marner", 16, "RW", "R", 72, 175, "1997-05-05",
                       "Markham", "CAN", "Ontario"),
        _roster_player(8477939, "William", "Nylander", 88, "RW", "R", 72, 196, "1996-05-01",
                       "Calgary", "CAN", "Alberta"),
        _roster_player(8476853, "Morgan", "Rielly", 44, "D", "L", 73, 220, "1994-03-09",
                       "North Vancouver", "CAN", "British Columbia"),
        _roster_player(8476931, "Jake", "McCabe", 22, "D", "L", 73, 208, "1993-10-12",
                       "Eau Claire", "USA", "Wisconsin"),
        _roster_player(8479361, "Joseph", "Woll", 60, "G", "L", 75, 203, "1998-07-12",
                       "Dardenne Prairie", "USA", "Missouri"),
        _roster_player(8476932, "Anthony", "Stolarz", 41, "G", "L", 78, 243, "1994-01-20",
                       "Edison", "USA", "New Jersey"),
    ]


def _lineup_player(player_id: int, name: str, position: str, number: int, confirmed: bool) -> dict:
    return {"id": player_id, "name": name, "position": position, "number": number, "confirmed": confirmed}


def lineup_players() -> list[dict]:
    return [
        _lineup_player(1, "Matthew Knies", "LW", 23, True),
        _lineup_player(2, "Auston Matthews", "C", 34, True),
        _lineup_player(3, "Mitch Marner", "RW", 16, True),
        _lineup_player(4, "Max Domi", "LW", 11, True),
        _lineup_player(5, "John Tavares", "C", 91, True),
        _lineup_player(6, "William Nylander", "RW", 88, True),
        _lineup_player(7, "Bobby McMann", "LW", 74, False),
        _lineup_player(8, "Max Pacioretty", "C", 67, False),
        _lineup_player(9, "Nicholas Robertson", "RW", 89, False),
        _lineup_player(10, "Steven Lorentz", "LW", 18, True),
        _lineup_player(11, "David Kampf", "C", 64, True),
        _lineup_player(12, "Connor Dewar", "RW", 21, True),
        _lineup_player(13, "Morgan Rielly", "D", 44, True),
        _lineup_player(14, "Chris Tanev", "D", 8, True),
        _lineup_player(15, "Jake McCabe", "D", 22, True),
        _lineup_player(16, "Oliver Ekman-Larsson", "D", 23, True),
        _lineup_player(17, "Simon Benoit", "D", 2, False),
        _lineup_player(18, "Conor Timmins", "D", 25, False),
        _lineup_player(19, "Joseph Woll", "G", 60, True),
        _lineup_player(20, "Anthony Stolarz", "G", 41, True),
    ]


def depth_chart_layout() -> dict:
    """Depth chart slots referencing lineup player ids."""
    return {
        "evenStrength": {
            "forwards": {
                "line1": {"left": 1, "center": 2, "right": 3},
                "line2": {"left": 4, "center": 5, "right": 6},
                "line3": {"left": 7, "center": 8, "right": 9},
                "line4": {"left": 10, "center": 11, "right": 12},
            },
            "defense": {
                "pair1": {"left": 13, "right": 14},
                "pair2": {"left": 15, "right": 16},
                "pair3": {"left": 17, "right": 18},
            },
            "goalies": {"starter": 19, "backup": 20},
        },
        "powerPlay": {
            "unit1": {"forwards": [2, 3, 6], "defense": [13, 5]},
            "unit2": {"forwards": [4, 8, 1], "defense": [16, 15]},
        },
        "penaltyKill": {
            "unit1": {"forwards": [11, 10], "defense": [15, 14]},
            "unit2": {"forwards": [12, 4], "defense": [16, 17]},
        },
    }


def lineup_change_log() -> list[dict]:
    now = now_utc()
    return [
        {
            "id": "1",
            "timestamp": format_utc(now - timedelta(hours=2)),
            "type": "confirm",
            "description": "Confirmed Joseph Woll as starting goalie",
            "situation": "even-strength",
            "details": {"playersInvolved": ["Joseph Woll"]},
        },
        {
            "id": "2",
            "timestamp": format_utc(now - timedelta(hours=4)),
            "type": "swap",
            "description": "Swapped Max Pacioretty and Nicholas Robertson on Line 3",
            "situation": "even-strength",
            "details": {
                "playersInvolved": ["Max Pacioretty", "Nicholas Robertson"],
                "previousPosition": "Line 3 RW",
                "newPosition": "Line 3 C",
            },
        },
        {
            "id": "3",
            "timestamp": format_utc(now - timedelta(hours=6)),
            "type": "update",
            "description": "Updated Power Play Unit 2 with Max Pacioretty",
            "situation": "power-play",
            "details": {"playersInvolved": ["Max Pacioretty"]},
        },
    ]


def _sample_tweet(
    tweet_id: str,
    text: str,
    username: str,
    name: str,
    image: str,
    verified: bool,
    hours_ago: int,
    metrics: tuple[int, int, int],
) -> dict:
    retweets, likes, replies = metrics
    return {
        "id": tweet_id,
        "text": text,
        "author": {
            "username": username,
            "name": name,
            "profile_image_url": image,
            "verified": verified,
        },
        "created_at": format_utc(now_utc() - timedelta(hours=hours_ago)),
        "public_metrics": {
            "retweet_count": retweets,
            "like_count": likes,
            "reply_count": replies,
        },
    }


def mock_tweets() -> list[dict]:
    """Static fan feed for the social page."""
    return [
        _sample_tweet(
            "1",
            "What a game! The Leafs showed incredible resilience tonight. Auston Matthews with "
            "another clutch performance! #LeafsForever #GoLeafsGo",
            "leafsfan2024", "Leafs Nation", "/hockey-fan-avatar.png", False, 2, (45, 234, 12),
        ),
        _sample_tweet(
            "2",
            "Mitch Marner's playmaking ability is just unreal. That assist was pure magic! #Leafs #NHL",
            "hockeyanalyst", "Hockey Analytics Pro", "/placeholder-avatar.png", True, 4, (78, 456, 23),
        ),
        _sample_tweet(
            "3",
            "The atmosphere at Scotiabank Arena tonight was electric! Nothing beats playoff "
            "hockey in Toronto. #LeafsNation",
            "torontosports", "Toronto Sports Hub", "/generic-sports-logo.png", True, 6, (123, 789, 45),
        ),
        _sample_tweet(
            "4",
            "William Nylander's speed on that breakaway was incredible. The future is bright "
            "for this team! #Leafs",
            "leafsinsider", "Leafs Insider", "/hockey-reporter-avatar.png", False, 8, (34, 187, 8),
        ),
        _sample_tweet(
            "5",
            "Joseph Woll has been absolutely stellar in net. The confidence he brings to the "
            "team is palpable. #GoLeafsGo",
            "goalieexpert", "Goalie Analysis", "/placeholder-avatar.png", False, 12, (56, 298, 15),
        ),
    ]


def _sample_search_row(
    tweet_id: str,
    text: str,
    minutes_ago: int,
    handle: str,
    name: str,
    username: str,
    verified: bool,
    metrics: tuple[int, int, int, int],
) -> dict:
    likes, retweets, replies, quotes = metrics
    return {
        "id": tweet_id,
        "text": text,
        "created_at": format_utc(now_utc() - timedelta(minutes=minutes_ago)),
        "url": f"https://x.com/{handle}/status/{tweet_id}",
        "user": {
            "name": name,
            "username": username,
            "verified": verified,
            "profile_image_url": DEFAULT_PROFILE_IMAGE,
        },
        "metrics": {
            "like_count": likes,
            "retweet_count": retweets,
            "reply_count": replies,
            "quote_count": quotes,
        },
        "media": [],
    }


def sample_search_rows() -> list[dict]:
    """Normalized rows served by the news-search endpoint without live data."""
    return [
        _sample_search_row(
            "0001", "Leafs camp buzz: top line flying at practice today. #LeafsForever",
            0, "MapleLeafs", "Sample Reporter", "samplebeat", False, (42, 7, 3, 1),
        ),
        _sample_search_row(
            "0002", "Game day! Leafs vs Habs, who you got? #GoLeafsGo",
            1, "nhl", "Sample Fan", "leafs_rules", False, (16, 2, 5, 0),
        ),
        _sample_search_row(
            "0003", "Injury update coming later today. Stay tuned. #LeafsNation",
            2, "theathleticnhl", "Sample Insider", "insider99", True, (5, 1, 0, 0),
        ),
    ]


def _forward_lines(names: list[str]) -> list[dict]:
    return [
        {"line": i + 1, "left": names[i * 3], "center": names[i * 3 + 1], "right": names[i * 3 + 2]}
        for i in range(len(names) // 3)
    ]


def _defense_pairs(names: list[str]) -> list[dict]:
    return [
        {"pair": i + 1, "left": names[i * 2], "right": names[i * 2 + 1]}
        for i in range(len(names) // 2)
    ]


def preview_content() -> dict:
    """Static preview sections (lineups, injuries, officials, odds)."""
    return {
        "probableLineups": {
            "team": {
                "forwards": _forward_lines([
                    "Matthew Knies", "Auston Matthews", "Mitch Marner",
                    "Max Domi", "John Tavares", "William Nylander",
                    "Bobby McMann", "Max Pacioretty", "Nicholas Robertson",
                    "Steven Lorentz", "David Kampf", "Connor Dewar",
                ]),
                "defense": _defense_pairs([
                    "Morgan Rielly", "Chris Tanev",
                    "Jake McCabe", "Oliver Ekman-Larsson",
                    "Simon Benoit", "Conor Timmins",
                ]),
                "goalies": {"starter": "Joseph Woll", "backup": "Anthony Stolarz"},
            },
            "opponent": {
                "forwards": _forward_lines([f"Player {letter}" for letter in "ABCDEFGHIJKL"]),
                "defense": _defense_pairs([f"Player {letter}" for letter in "MNOPQR"]),
                "goalies": {"starter": "Opponent Goalie 1", "backup": "Opponent Goalie 2"},
            },
        },
        "injuries": {
            "team": [
                {"player": "Calle Jarnkrok", "injury": "Lower Body", "status": "Day-to-Day",
                 "expectedReturn": "Next Week"},
                {"player": "Jani Hakanpaa", "injury": "Knee", "status": "Week-to-Week",
                 "expectedReturn": None},
            ],
            "opponent": [
                {"player": "Opponent Player", "injury": "Upper Body", "status": "Day-to-Day",
                 "expectedReturn": None},
            ],
        },
        "officials": {
            "referees": ["Referee 1", "Referee 2"],
            "linesmen": ["Linesman 1", "Linesman 2"],
        },
        "odds": {
            "moneyline": {"team": "-150", "opponent": "+130"},
            "total": {"over": "-110", "under": "-110", "line": "6.5"},
            "spread": {"team": "-110", "opponent": "-110", "line": "-1.5"},
        },
        "opponentRecord": "25-15-3",
        "outdoorWeather": {"temperature": "-2°C", "conditions": "Clear", "wind": "5 km/h NW"},
    }
