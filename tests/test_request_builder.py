import datetime
from urllib.parse import parse_qsl, urlsplit

import pytest

from faceit_data.domain import EventType, ParamKind, ValidationError, get_endpoint
from faceit_data.infrastructure.api.request_builder import (
    RequestBuilder,
    build_url,
    encode_query,
    resolve_path,
    select_query_params,
    validate_common,
    validate_operation,
)

from .conftest import BASE_URL, PLAYER_ID


class TestValidateCommon:
    def test_params_must_be_mapping(self):
        with pytest.raises(ValidationError) as exc:
            validate_common(["player_id"])
        assert str(exc.value) == "params must be of type: Object"

    def test_type_must_be_string(self):
        with pytest.raises(ValidationError, match="^type must be of type: String$"):
            validate_common({"type": 3})

    def test_expanded_must_be_array(self):
        with pytest.raises(ValidationError, match=r"^expanded must be of type: Array\[String\]$"):
            validate_common({"expanded": "organizer"})

    @pytest.mark.parametrize("name", ["offset", "limit"])
    def test_paging_must_be_number(self, name):
        with pytest.raises(ValidationError) as exc:
            validate_common({name: "se5drftuyhionjkm"})
        assert str(exc.value) == f"{name} must be of type: Number"
        assert exc.value.param == name
        assert exc.value.kind is ParamKind.NUMBER

    def test_validation_error_is_type_error(self):
        with pytest.raises(TypeError):
            validate_common({"limit": "abc"})

    def test_first_violation_wins(self):
        with pytest.raises(ValidationError, match="^type"):
            validate_common({"type": 1, "limit": "x"})

    def test_accepts_valid_bag(self):
        validate_common({"type": EventType.ONGOING, "expanded": ["game"], "offset": 0, "limit": "20"})


class TestValidateOperation:
    def test_missing_required(self):
        with pytest.raises(ValidationError, match="^player_id must be of type: String$"):
            validate_operation(get_endpoint("players", "history"), {"game": "csgo"})

    def test_required_query_param(self):
        with pytest.raises(ValidationError, match="^game must be of type: String$"):
            validate_operation(get_endpoint("players", "history"), {"player_id": PLAYER_ID})

    def test_optional_wrong_type(self):
        with pytest.raises(ValidationError, match="^country must be of type: String$"):
            validate_operation(get_endpoint("search", "players"), {"nickname": "DotJar", "country": 31})

    def test_expanded_elements_must_be_strings(self):
        with pytest.raises(ValidationError, match=r"^expanded must be of type: Array\[String\]$"):
            validate_operation(get_endpoint("tournaments", "show"), {"tournament_id": "t1", "expanded": ["game", 2]})

    def test_timestamp_accepts_dates(self):
        validate_operation(
            get_endpoint("players", "history"),
            {"player_id": PLAYER_ID, "game": "csgo", "from": datetime.date(2021, 1, 1), "to": 1612137600},
        )

    def test_timestamp_rejects_text(self):
        with pytest.raises(ValidationError, match="^from must be of type: Number$"):
            validate_operation(get_endpoint("players", "history"),
                               {"player_id": PLAYER_ID, "game": "csgo", "from": "last week"})

    def test_none_optional_is_not_supplied(self):
        validate_operation(get_endpoint("search", "players"), {"nickname": "DotJar", "country": None})


class TestSelectQueryParams:
    def test_projects_declared_keys_in_catalog_order(self):
        endpoint = get_endpoint("players", "history")
        bag = {"limit": 5, "extra": "x", "player_id": PLAYER_ID, "game": "csgo"}
        assert select_query_params(endpoint, bag) == (("game", "csgo"), ("limit", 5))

    def test_keeps_falsy_values(self):
        endpoint = get_endpoint("hubs", "members")
        assert select_query_params(endpoint, {"hub_id": "h", "offset": 0}) == (("offset", 0),)

    def test_skips_none(self):
        endpoint = get_endpoint("hubs", "members")
        assert select_query_params(endpoint, {"hub_id": "h", "offset": None}) == ()

    def test_path_param_never_in_query(self):
        endpoint = get_endpoint("rankings", "player")
        bag = {"game_id": "csgo", "region": "EU", "player_id": PLAYER_ID, "limit": 1}
        assert select_query_params(endpoint, bag) == (("limit", 1),)


class TestEncodeQuery:
    def test_empty(self):
        assert encode_query({}) == ""
        assert encode_query(()) == ""

    def test_round_trip(self):
        encoded = encode_query({"a": "1", "b": "x y"})
        assert encoded == "a=1&b=x%20y"
        assert parse_qsl(encoded) == [("a", "1"), ("b", "x y")]

    def test_keys_and_values_encoded(self):
        assert encode_query({"a&b": "c=d/e"}) == "a%26b=c%3Dd%2Fe"

    def test_encode_uri_component_safe_set(self):
        assert encode_query({"q": "a-b_c.d!e~f*g'h(i)"}) == "q=a-b_c.d!e~f*g'h(i)"

    def test_value_conversions(self):
        encoded = encode_query((
            ("expanded", ["organizer", "game"]),
            ("type", EventType.PAST),
            ("from", datetime.datetime(2021, 1, 1, tzinfo=datetime.timezone.utc)),
            ("to", datetime.date(2021, 2, 1)),
            ("limit", 5),
        ))
        assert encoded == "expanded=organizer%2Cgame&type=past&from=1609459200&to=1612137600&limit=5"


class TestBuildUrl:
    def test_no_query_no_separator(self):
        assert build_url(BASE_URL, "games", {}) == f"{BASE_URL}/games"

    def test_query_appended(self):
        assert build_url(BASE_URL, "games", {"limit": 5}) == f"{BASE_URL}/games?limit=5"

    def test_slashes_normalised(self):
        assert build_url(BASE_URL + "/", "/games") == f"{BASE_URL}/games"

    def test_resolve_path_encodes_values(self):
        endpoint = get_endpoint("leaderboards.hubs", "season")
        assert resolve_path(endpoint, {"hub_id": "a/b", "season": "3"}) == "leaderboards/hubs/a%2Fb/seasons/3"


class TestRequestBuilder:
    def test_build(self):
        builder = RequestBuilder(BASE_URL)
        request = builder.build(get_endpoint("players", "history"),
                                {"player_id": PLAYER_ID, "game": "csgo", "limit": 5, "extra": "nope"})
        assert request.path == f"players/{PLAYER_ID}/history"
        assert request.query == (("game", "csgo"), ("limit", "5"))
        assert request.url == f"{BASE_URL}/players/{PLAYER_ID}/history?game=csgo&limit=5"
        assert "extra=" not in request.url

    def test_build_without_params(self):
        builder = RequestBuilder(BASE_URL)
        assert builder.build(get_endpoint("games", "all")).url == f"{BASE_URL}/games"

    def test_build_is_deterministic(self):
        builder = RequestBuilder(BASE_URL)
        endpoint = get_endpoint("search", "players")
        bag = {"nickname": "DotJar", "game": "csgo", "country": "nl"}
        assert builder.build(endpoint, bag) == builder.build(endpoint, dict(bag))

    def test_build_logs_endpoint(self, caplog):
        caplog.set_level(1, logger="faceit_data")
        RequestBuilder(BASE_URL).build(get_endpoint("matches", "show"), {"match_id": "1-abc"})
        record = next(r for r in caplog.records if r.getMessage() == "built matches.show")
        assert record.endpoint == "matches.show"
        assert record.url == f"{BASE_URL}/matches/1-abc"

    def test_query_separator_iff_query(self):
        builder = RequestBuilder(BASE_URL)
        url = builder.build(get_endpoint("players", "show"), {"player_id": PLAYER_ID, "limit": 5}).url
        assert "?" not in url
        assert urlsplit(url).path.endswith(f"/players/{PLAYER_ID}")
