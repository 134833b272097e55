import pytest

from faceit_data import EventType, ValidationError
from faceit_data.application import Operation, Resource
from faceit_data.domain import iter_endpoints

from .conftest import BASE_URL, PLAYER_ID


def _operation(client, endpoint):
    resource = client
    for part in endpoint.resource.split("."):
        resource = getattr(resource, part)
    return getattr(resource, endpoint.name)


def _valid_bag(endpoint):
    return {p.name: f"{p.name}-value" for p in endpoint.required_params}


REQUIRED_CASES = [
    (endpoint, param.name)
    for endpoint in iter_endpoints()
    for param in endpoint.required_params
]

PAGED_CASES = [
    (endpoint, param.name)
    for endpoint in iter_endpoints()
    for param in endpoint.query_params
    if param.name in ("offset", "limit")
]


class TestNamespaces:
    def test_top_level_resources(self, client):
        for name in ("championships", "games", "hubs", "leaderboards", "matches", "organizers",
                     "players", "rankings", "search", "teams", "tournaments"):
            assert isinstance(getattr(client, name), Resource)

    def test_nested_leaderboards(self, client):
        assert isinstance(client.leaderboards.championships, Resource)
        assert isinstance(client.leaderboards.hubs, Resource)
        assert client.leaderboards.hubs.name == "leaderboards.hubs"
        assert isinstance(client.leaderboards.show, Operation)

    def test_every_endpoint_reachable(self, client):
        for endpoint in iter_endpoints():
            assert _operation(client, endpoint).endpoint is endpoint

    def test_operations_iterates_nested(self, client):
        names = {op.endpoint.qualified_name for op in client.leaderboards.operations()}
        assert names == {
            "leaderboards.show", "leaderboards.player",
            "leaderboards.championships.all", "leaderboards.championships.group",
            "leaderboards.hubs.all", "leaderboards.hubs.general", "leaderboards.hubs.season",
        }

    def test_operation_docstring_and_repr(self, client):
        assert client.players.history.__doc__ == "Retrieve all matches of a player"
        assert repr(client.players.history) == "<Operation players.history GET /players/{player_id}/history>"
        assert "history" in dir(client.players)

    def test_clients_do_not_share_namespaces(self, client, fetch):
        from faceit_data import FaceitAPIClient

        other = FaceitAPIClient("other", fetch, base_url=BASE_URL)
        assert other.players is not client.players
        assert other.players.show.endpoint is client.players.show.endpoint


class TestRequiredParams:
    @pytest.mark.parametrize("endpoint,name", REQUIRED_CASES,
                             ids=[f"{e.qualified_name}-{n}" for e, n in REQUIRED_CASES])
    @pytest.mark.parametrize("bad", ["absent", None, ""])
    def test_missing_required(self, client, fetch, endpoint, name, bad):
        bag = _valid_bag(endpoint)
        if bad == "absent":
            del bag[name]
        else:
            bag[name] = bad
        with pytest.raises(ValidationError) as exc:
            _operation(client, endpoint)(bag)
        assert str(exc.value) == f"{name} must be of type: String"
        assert fetch.calls == []

    @pytest.mark.parametrize("endpoint,name", PAGED_CASES,
                             ids=[f"{e.qualified_name}-{n}" for e, n in PAGED_CASES])
    def test_paging_must_be_number(self, client, endpoint, name):
        bag = {**_valid_bag(endpoint), name: "se5drftuyhionjkm"}
        with pytest.raises(ValidationError) as exc:
            _operation(client, endpoint)(bag)
        assert str(exc.value) == f"{name} must be of type: Number"

    def test_no_arguments(self, client):
        with pytest.raises(ValidationError, match="^player_id must be of type: String$"):
            client.players.history()

    def test_non_mapping_bag(self, client):
        with pytest.raises(ValidationError, match="^params must be of type: Object$"):
            client.players.show([PLAYER_ID], limit=1)


class TestUrls:
    def test_keywords_override_mapping(self, client):
        url = client.search.players.url({"nickname": "a", "game": "csgo"}, nickname="DotJar")
        assert url == f"{BASE_URL}/search/players?nickname=DotJar&game=csgo"

    def test_undeclared_keys_dropped(self, client):
        url = client.players.hubs.url(player_id=PLAYER_ID, extra="1", limit=5)
        assert url == f"{BASE_URL}/players/{PLAYER_ID}/hubs?limit=5"
        assert "extra=" not in url

    def test_players_get_forwards_lookup_fields(self, client):
        url = client.players.get.url(game="csgo", game_player_id="76561198250920834")
        assert url == f"{BASE_URL}/players?game=csgo&game_player_id=76561198250920834"

    def test_rankings_player(self, client):
        url = client.rankings.player.url(game_id="csgo", region="EU", player_id=PLAYER_ID, country="nl", limit=1)
        assert url == f"{BASE_URL}/rankings/games/csgo/regions/EU/players/{PLAYER_ID}?country=nl&limit=1"

    def test_tournaments_show_expanded(self, client):
        url = client.tournaments.show.url(tournament_id="t1", expanded=["organizer", "game"])
        assert url == f"{BASE_URL}/tournaments/t1?expanded=organizer%2Cgame"

    def test_championships_with_event_type(self, client):
        url = client.championships.all.url(game="csgo", type=EventType.UPCOMING, offset=0, limit=10)
        assert url == f"{BASE_URL}/championships?game=csgo&type=upcoming&offset=0&limit=10"

    def test_leaderboard_season(self, client):
        url = client.leaderboards.hubs.season.url(hub_id="h1", season="4")
        assert url == f"{BASE_URL}/leaderboards/hubs/h1/seasons/4"

    def test_player_history_range(self, client):
        url = client.players.history.url(player_id=PLAYER_ID, game="csgo", to=1612137600, **{"from": 1609459200})
        assert url == f"{BASE_URL}/players/{PLAYER_ID}/history?game=csgo&from=1609459200&to=1612137600"

    def test_prepare_returns_descriptor(self, client):
        request = client.matches.stats.prepare(match_id="1-abc")
        assert request.endpoint.qualified_name == "matches.stats"
        assert request.url == f"{BASE_URL}/matches/1-abc/stats"
        assert request.query == ()
