"""FACEIT Data API v4 endpoint catalog.

The table below is the single source of truth for every operation the client
exposes: ``FaceitAPIClient`` builds its resource namespaces from it, and the
request builder validates and serialises parameters against it. Paths are
relative to the base URL and must match the remote API exactly.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from .entities import Endpoint, Param
from .enums import ParamKind, ParamLocation
from .errors import UnknownEndpointError


def path(name: str) -> Param:
    return Param(name, ParamKind.NON_EMPTY_STRING, required=True, location=ParamLocation.PATH)


def required(name: str) -> Param:
    return Param(name, ParamKind.NON_EMPTY_STRING, required=True)


def query(name: str, kind: ParamKind = ParamKind.STRING) -> Param:
    return Param(name, kind)


OFFSET = query("offset", ParamKind.NUMBER)
LIMIT = query("limit", ParamKind.NUMBER)
PAGE = (OFFSET, LIMIT)
EXPANDED = query("expanded", ParamKind.ARRAY_OF_STRING)
TYPE = query("type")


_ENDPOINTS: Tuple[Endpoint, ...] = (
    # ── Championships ──────────────────────────────────────────────────
    Endpoint("championships", "all", "championships",
             (required("game"), TYPE, *PAGE),
             "Retrieve all championships of a game"),
    Endpoint("championships", "show", "championships/{championship_id}",
             (path("championship_id"), EXPANDED),
             "Retrieve championship details"),
    Endpoint("championships", "matches", "championships/{championship_id}/matches",
             (path("championship_id"), TYPE, *PAGE),
             "Retrieve all matches of a championship"),
    Endpoint("championships", "results", "championships/{championship_id}/results",
             (path("championship_id"), *PAGE),
             "Retrieve all results of a championship"),
    Endpoint("championships", "subscriptions", "championships/{championship_id}/subscriptions",
             (path("championship_id"), *PAGE),
             "Retrieve all subscriptions of a championship"),

    # ── Games ──────────────────────────────────────────────────────────
    Endpoint("games", "all", "games", PAGE,
             "Retrieve details of all games on FACEIT"),
    Endpoint("games", "show", "games/{game_id}", (path("game_id"),),
             "Retrieve game details"),
    Endpoint("games", "parent", "games/{game_id}/parent", (path("game_id"),),
             "Retrieve the details of the parent game, if the game is region-specific"),

    # ── Hubs ───────────────────────────────────────────────────────────
    Endpoint("hubs", "show", "hubs/{hub_id}", (path("hub_id"), EXPANDED),
             "Retrieve hub details"),
    Endpoint("hubs", "matches", "hubs/{hub_id}/matches", (path("hub_id"), TYPE, *PAGE),
             "Retrieve all matches of a hub"),
    Endpoint("hubs", "members", "hubs/{hub_id}/members", (path("hub_id"), *PAGE),
             "Retrieve all members of a hub"),
    Endpoint("hubs", "roles", "hubs/{hub_id}/roles", (path("hub_id"), *PAGE),
             "Retrieve all roles members can have in a hub"),
    Endpoint("hubs", "rules", "hubs/{hub_id}/rules", (path("hub_id"),),
             "Retrieve rules of a hub"),
    Endpoint("hubs", "stats", "hubs/{hub_id}/stats", (path("hub_id"), *PAGE),
             "Retrieve statistics of a hub"),

    # ── Leaderboards ───────────────────────────────────────────────────
    Endpoint("leaderboards", "show", "leaderboards/{leaderboard_id}",
             (path("leaderboard_id"), *PAGE),
             "Retrieve ranking from a leaderboard id"),
    Endpoint("leaderboards", "player", "leaderboards/{leaderboard_id}/players/{player_id}",
             (path("leaderboard_id"), path("player_id")),
             "Retrieve player ranking from a leaderboard id"),
    Endpoint("leaderboards.championships", "all", "leaderboards/championships/{championship_id}",
             (path("championship_id"), *PAGE),
             "Retrieve all leaderboards of a championship"),
    Endpoint("leaderboards.championships", "group",
             "leaderboards/championships/{championship_id}/groups/{group}",
             (path("championship_id"), path("group"), *PAGE),
             "Retrieve group ranking of a championship"),
    Endpoint("leaderboards.hubs", "all", "leaderboards/hubs/{hub_id}",
             (path("hub_id"), *PAGE),
             "Retrieve all leaderboards of a hub"),
    Endpoint("leaderboards.hubs", "general", "leaderboards/hubs/{hub_id}/general",
             (path("hub_id"), *PAGE),
             "Retrieve all time ranking of a hub"),
    Endpoint("leaderboards.hubs", "season", "leaderboards/hubs/{hub_id}/seasons/{season}",
             (path("hub_id"), path("season"), *PAGE),
             "Retrieve seasonal ranking of a hub"),

    # ── Matches ────────────────────────────────────────────────────────
    Endpoint("matches", "show", "matches/{match_id}", (path("match_id"),),
             "Retrieve match details"),
    Endpoint("matches", "stats", "matches/{match_id}/stats", (path("match_id"),),
             "Retrieve statistics of a match"),

    # ── Organizers ─────────────────────────────────────────────────────
    Endpoint("organizers", "get", "organizers", (required("name"),),
             "Retrieve organizer details from name"),
    Endpoint("organizers", "show", "organizers/{organizer_id}", (path("organizer_id"),),
             "Retrieve organizer details"),
    Endpoint("organizers", "championships", "organizers/{organizer_id}/championships",
             (path("organizer_id"), *PAGE),
             "Retrieve all championships of an organizer"),
    Endpoint("organizers", "games", "organizers/{organizer_id}/games", (path("organizer_id"),),
             "Retrieve all games an organizer is involved with"),
    Endpoint("organizers", "hubs", "organizers/{organizer_id}/hubs",
             (path("organizer_id"), *PAGE),
             "Retrieve all hubs of an organizer"),
    Endpoint("organizers", "tournaments", "organizers/{organizer_id}/tournaments",
             (path("organizer_id"), TYPE, *PAGE),
             "Retrieve all tournaments of an organizer"),

    # ── Players ────────────────────────────────────────────────────────
    Endpoint("players", "get", "players",
             (query("nickname"), query("game"), query("game_player_id")),
             "Retrieve player details by nickname or by game and game player id"),
    Endpoint("players", "show", "players/{player_id}", (path("player_id"),),
             "Retrieve player details"),
    Endpoint("players", "history", "players/{player_id}/history",
             (path("player_id"), required("game"),
              query("from", ParamKind.TIMESTAMP), query("to", ParamKind.TIMESTAMP), *PAGE),
             "Retrieve all matches of a player"),
    Endpoint("players", "hubs", "players/{player_id}/hubs", (path("player_id"), *PAGE),
             "Retrieve all hubs of a player"),
    Endpoint("players", "stats", "players/{player_id}/stats/{game_id}",
             (path("player_id"), path("game_id")),
             "Retrieve statistics of a player"),
    Endpoint("players", "tournaments", "players/{player_id}/tournaments",
             (path("player_id"), *PAGE),
             "Retrieve all tournaments of a player"),

    # ── Rankings ───────────────────────────────────────────────────────
    Endpoint("rankings", "game", "rankings/games/{game_id}/regions/{region}",
             (path("game_id"), path("region"), query("country"), *PAGE),
             "Retrieve global ranking of a game"),
    Endpoint("rankings", "player", "rankings/games/{game_id}/regions/{region}/players/{player_id}",
             (path("game_id"), path("region"), path("player_id"), query("country"), LIMIT),
             "Retrieve user position in the global ranking of a game"),

    # ── Search ─────────────────────────────────────────────────────────
    Endpoint("search", "championships", "search/championships",
             (required("name"), query("game"), query("region"), TYPE, *PAGE),
             "Search for championships"),
    Endpoint("search", "clans", "search/clans",
             (required("name"), query("game"), query("region"), *PAGE),
             "Search for clans"),
    Endpoint("search", "hubs", "search/hubs",
             (required("name"), query("game"), query("region"), *PAGE),
             "Search for hubs"),
    Endpoint("search", "organizers", "search/organizers", (required("name"), *PAGE),
             "Search for organizers"),
    Endpoint("search", "players", "search/players",
             (required("nickname"), query("game"), query("country"), *PAGE),
             "Search for players"),
    Endpoint("search", "teams", "search/teams",
             (required("nickname"), query("game"), *PAGE),
             "Search for teams"),
    Endpoint("search", "tournaments", "search/tournaments",
             (required("name"), query("game"), query("region"), TYPE, *PAGE),
             "Search for tournaments"),

    # ── Teams ──────────────────────────────────────────────────────────
    Endpoint("teams", "show", "teams/{team_id}", (path("team_id"),),
             "Retrieve team details"),
    Endpoint("teams", "stats", "teams/{team_id}/stats/{game_id}",
             (path("team_id"), path("game_id")),
             "Retrieve statistics of a team"),
    Endpoint("teams", "tournaments", "teams/{team_id}/tournaments", (path("team_id"), *PAGE),
             "Retrieve tournaments of a team"),

    # ── Tournaments ────────────────────────────────────────────────────
    Endpoint("tournaments", "all", "tournaments", (query("game"), query("region"), *PAGE),
             "Retrieve tournaments"),
    Endpoint("tournaments", "show", "tournaments/{tournament_id}",
             (path("tournament_id"), EXPANDED),
             "Retrieve tournament details"),
    Endpoint("tournaments", "brackets", "tournaments/{tournament_id}/brackets",
             (path("tournament_id"),),
             "Retrieve brackets of a tournament"),
    Endpoint("tournaments", "matches", "tournaments/{tournament_id}/matches",
             (path("tournament_id"), *PAGE),
             "Retrieve all matches of a tournament"),
    Endpoint("tournaments", "teams", "tournaments/{tournament_id}/teams",
             (path("tournament_id"), *PAGE),
             "Retrieve all teams of a tournament"),
)


def _index(endpoints: Tuple[Endpoint, ...]) -> Mapping[str, Mapping[str, Endpoint]]:
    by_resource: Dict[str, Dict[str, Endpoint]] = {}
    for endpoint in endpoints:
        ops = by_resource.setdefault(endpoint.resource, {})
        if endpoint.name in ops:
            raise ValueError(f"duplicate endpoint {endpoint.qualified_name}")
        ops[endpoint.name] = endpoint
    return MappingProxyType({r: MappingProxyType(ops) for r, ops in by_resource.items()})


CATALOG: Mapping[str, Mapping[str, Endpoint]] = _index(_ENDPOINTS)


def get_endpoint(resource: str, name: str) -> Endpoint:
    try:
        return CATALOG[resource][name]
    except KeyError:
        raise UnknownEndpointError(resource, name) from None


def iter_endpoints() -> Iterator[Endpoint]:
    return iter(_ENDPOINTS)


def resources() -> Tuple[str, ...]:
    """Dotted resource names in declaration order."""
    return tuple(CATALOG)
