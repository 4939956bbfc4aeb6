"""
Core client tests - URL building, headers, bodies and response interpretation.

All HTTP goes through httpx.MockTransport; nothing here needs the network.
"""

import json
import logging

import httpx
import pytest

from rain_sdk import ACCEPTED, NO_CONTENT, Config, Environment
from rain_sdk.core.client import APIClient, BaseAPIClient, check_header, encode_query
from rain_sdk.core.errors import (
    APIError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    DeserializationError,
    HTTPError,
    LockedError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from rain_sdk.core.types import User

from conftest import API_KEY, BASE_URL


def make_client(api, **kwargs) -> APIClient:
    kwargs.setdefault("config", Config.custom(BASE_URL))
    return APIClient(api_key=API_KEY, transport=api.transport(), **kwargs)


# =============================================================================
# URL Building
# =============================================================================


class TestBuildURL:
    def test_appends_segments_to_base_path(self, api):
        client = make_client(api)
        assert client.build_url("/users/usr_1") == "https://api.test/v1/issuing/users/usr_1"

    def test_keeps_base_path_without_trailing_slash(self, api):
        client = make_client(api, config=Config.custom("https://api.test/v1/issuing/"))
        assert client.build_url("cards") == "https://api.test/v1/issuing/cards"

    def test_drops_empty_segments(self, api):
        client = make_client(api)
        assert client.build_url("//users///usr_1/") == "https://api.test/v1/issuing/users/usr_1"

    def test_escapes_segments(self, api):
        client = make_client(api)
        assert client.build_url("/users/a b") == "https://api.test/v1/issuing/users/a%20b"
        assert client.build_url("/users/a%2Fb") == "https://api.test/v1/issuing/users/a%252Fb"

    def test_attaches_query(self, api):
        client = make_client(api)
        assert client.build_url("/users", "limit=20") == "https://api.test/v1/issuing/users?limit=20"

    def test_question_mark_stays_in_segment(self, api):
        client = make_client(api)
        assert client.build_url("/users/a?b") == "https://api.test/v1/issuing/users/a%3Fb"
        assert client.build_url("/users/a#b") == "https://api.test/v1/issuing/users/a%23b"

    def test_rejects_base_without_scheme(self, api):
        client = make_client(api, config=Config.custom("api.test/v1"))
        with pytest.raises(ConfigurationError):
            client.build_url("/users")

    def test_invalid_base_url_fails_before_sending(self, api):
        client = make_client(api, config=Config.custom("not a url"))
        with pytest.raises(ConfigurationError):
            client.get("/users")
        assert api.requests == []


# =============================================================================
# Query Encoding
# =============================================================================


class TestQueryEncoding:
    def test_drops_none(self):
        assert encode_query({"limit": 20, "cursor": None}) == "limit=20"

    def test_booleans_lowercase(self):
        assert encode_query({"isAmountNative": True}) == "isAmountNative=true"
        assert encode_query({"isAmountNative": False}) == "isAmountNative=false"

    def test_lists_repeat_key(self):
        assert encode_query({"type": ["spend", "fee"]}) == "type=spend&type=fee"

    def test_enums_use_value(self):
        assert encode_query({"env": Environment.PRODUCTION}) == "env=production"

    def test_values_are_escaped(self):
        assert encode_query({"q": "a b&c"}) == "q=a+b%26c"

    def test_unencodable_value(self):
        with pytest.raises(ValidationError):
            encode_query({"bad": object()})


# =============================================================================
# Headers
# =============================================================================


class TestHeaders:
    def test_default_headers(self, api):
        api.add("GET", "/users", json=[])
        make_client(api).get("/users")

        headers = api.last.headers
        assert headers["Api-Key"] == API_KEY
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"
        assert headers["User-Agent"].startswith("rain-sdk-python/")

    def test_custom_user_agent(self, api):
        api.add("GET", "/users", json=[])
        make_client(api, config=Config.custom(BASE_URL).with_user_agent("my-app/2.0")).get("/users")
        assert api.last.headers["User-Agent"] == "my-app/2.0"

    def test_extra_header_is_sent(self, api):
        api.add("GET", "/cards/c1/pin", json={"encryptedPin": {"iv": "i", "data": "d"}})
        make_client(api).get("/cards/c1/pin", headers={"SessionId": "sess-123"})
        assert api.last.headers["SessionId"] == "sess-123"

    def test_invalid_extra_header_fails_before_sending(self, api):
        with pytest.raises(ValidationError):
            make_client(api).get("/cards/c1/pin", headers={"SessionId": "bad\nvalue"})
        assert api.requests == []

    def test_invalid_api_key(self, api):
        with pytest.raises(ValidationError):
            APIClient(api_key="key\r\nInjected: 1", config=Config.custom(BASE_URL), transport=api.transport())

    def test_check_header_allows_tab(self):
        assert check_header("X", "a\tb") == "a\tb"

    def test_check_header_rejects_non_ascii(self):
        with pytest.raises(ValidationError):
            check_header("X", "café")


# =============================================================================
# Authentication & Configuration
# =============================================================================


class TestConfiguration:
    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("RAIN_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="RAIN_API_KEY"):
            APIClient(config=Config.custom(BASE_URL))

    def test_api_key_from_env(self, monkeypatch, api):
        monkeypatch.setenv("RAIN_API_KEY", "env-key")
        api.add("GET", "/balances", json={})
        client = APIClient(config=Config.custom(BASE_URL), transport=api.transport())
        assert client.auth.api_key == "env-key"

    def test_environments(self):
        assert Config.for_environment("dev").base_url == "https://api-dev.raincards.xyz/v1/issuing"
        assert Config.for_environment(Environment.PRODUCTION).base_url == "https://api.raincards.xyz/v1/issuing"

    def test_unknown_environment(self):
        with pytest.raises(ConfigurationError):
            Config.for_environment("staging")

    def test_from_env(self, monkeypatch):
        monkeypatch.delenv("RAIN_BASE_URL", raising=False)
        monkeypatch.setenv("RAIN_ENVIRONMENT", "production")
        monkeypatch.setenv("RAIN_TIMEOUT", "12.5")
        monkeypatch.setenv("RAIN_ENABLE_LOGGING", "true")
        monkeypatch.delenv("RAIN_USER_AGENT", raising=False)

        config = Config.from_env()
        assert config.base_url == Environment.PRODUCTION.base_url
        assert config.timeout == 12.5
        assert config.enable_logging is True

    def test_base_url_env_wins(self, monkeypatch):
        monkeypatch.setenv("RAIN_BASE_URL", "http://localhost:8080/v1/issuing")
        monkeypatch.setenv("RAIN_ENVIRONMENT", "production")
        assert Config.from_env().base_url == "http://localhost:8080/v1/issuing"

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("RAIN_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_overrides(self, api):
        client = make_client(api, base_url="https://other.test/v1", timeout=5)
        assert client.base_url == "https://other.test/v1"
        assert client.config.timeout == 5

    def test_base_client_is_abstract(self):
        with pytest.raises(TypeError):
            BaseAPIClient(api_key=API_KEY, config=Config.custom(BASE_URL))

    def test_config_is_immutable(self):
        config = Config.custom(BASE_URL)
        assert config.with_timeout(10).timeout == 10
        assert config.timeout == 30


# =============================================================================
# Request Bodies
# =============================================================================


class TestBodies:
    def test_json_body_from_dict(self, api):
        api.add("POST", "/keys", json={"id": "k1", "key": "secret"})
        make_client(api).post("/keys", {"name": "ci", "expiresAt": "2030-01-01"})
        assert json.loads(api.last.content) == {"name": "ci", "expiresAt": "2030-01-01"}

    def test_no_body(self, api):
        api.add("GET", "/balances", json={})
        make_client(api).get("/balances")
        assert api.last.content == b""

    def test_unencodable_body(self, api):
        with pytest.raises(ValidationError):
            make_client(api).post("/keys", {"bad": object()})
        assert api.requests == []


# =============================================================================
# Response Interpretation
# =============================================================================


class TestResponses:
    def test_json_parsed(self, api, user_payload):
        api.add("GET", "/users/usr_1", json=user_payload)
        user = make_client(api).get("/users/usr_1", parser=User.from_dict)
        assert isinstance(user, User)
        assert user.email == "ada@example.com"

    def test_no_parser_returns_payload(self, api):
        api.add("PATCH", "/transactions/t1", json={"ok": True})
        assert make_client(api).patch("/transactions/t1", {"memo": "x"}) == {"ok": True}

    def test_202_empty_is_accepted(self, api):
        api.add("POST", "/shipping-groups", status=202)
        result = make_client(api).post("/shipping-groups", {}, parser=User.from_dict, allow_empty=True)
        assert result is ACCEPTED
        assert not result

    def test_202_empty_without_parser_is_accepted(self, api):
        api.add("PUT", "/contracts/c1", status=202)
        assert make_client(api).put("/contracts/c1", {"onramp": True}) is ACCEPTED

    def test_202_empty_where_value_required(self, api):
        api.add("POST", "/users/usr_1/charges", status=202)
        with pytest.raises(ValidationError, match="Empty response body"):
            make_client(api).post("/users/usr_1/charges", {"amount": 1}, parser=User.from_dict)

    def test_202_empty_parses_when_type_allows(self, api):
        api.add("PATCH", "/subtenants/s1", status=202)
        result = make_client(api).patch("/subtenants/s1", {}, parser=lambda data: data)
        assert result == {}

    def test_204_is_no_content(self, api):
        api.add("DELETE", "/users/usr_1", status=204)
        assert make_client(api).delete("/users/usr_1") is NO_CONTENT

    def test_empty_200_without_parser_is_no_content(self, api):
        api.add("PUT", "/contracts/c1", status=200)
        assert make_client(api).put("/contracts/c1", {"onramp": True}) is NO_CONTENT

    def test_empty_body_where_value_required(self, api):
        api.add("GET", "/users/usr_1", status=200)
        with pytest.raises(ValidationError, match="Empty response body"):
            make_client(api).get("/users/usr_1", parser=User.from_dict)

    def test_empty_body_allowed(self, api):
        api.add("POST", "/shipping-groups", status=201)
        result = make_client(api).post("/shipping-groups", {}, parser=User.from_dict, allow_empty=True)
        assert result is NO_CONTENT

    def test_invalid_json(self, api):
        api.add("GET", "/users/usr_1", content=b"<html>oops</html>")
        with pytest.raises(DeserializationError):
            make_client(api).get("/users/usr_1", parser=User.from_dict)

    def test_wrong_shape(self, api):
        api.add("GET", "/users/usr_1", json={"id": "usr_1"})
        with pytest.raises(DeserializationError):
            make_client(api).get("/users/usr_1", parser=User.from_dict)

    def test_bytes_body(self, api):
        api.add("GET", "/transactions/t1/receipt", content=b"%PDF-1.4")
        assert make_client(api).get_bytes("/transactions/t1/receipt") == b"%PDF-1.4"

    def test_bytes_error(self, api):
        api.add("GET", "/reports/2024/01/15", status=404, content=b"missing")
        with pytest.raises(HTTPError) as exc:
            make_client(api).get_bytes("/reports/2024/01/15")
        assert exc.value.status == 404
        assert exc.value.message == "HTTP 404: missing"

    def test_empty_mode_error(self, api):
        api.add("DELETE", "/keys/k1", status=500, content=b"boom")
        with pytest.raises(HTTPError, match="HTTP 500: boom"):
            make_client(api).delete("/keys/k1")

    def test_empty_mode_202(self, api):
        api.add("DELETE", "/keys/k1", status=202, content=b"queued")
        assert make_client(api).delete("/keys/k1") is ACCEPTED


# =============================================================================
# Error Taxonomy
# =============================================================================


class TestErrors:
    @pytest.mark.parametrize(
        "status,error_cls",
        [
            (400, BadRequestError),
            (401, UnauthorizedError),
            (404, NotFoundError),
            (409, ConflictError),
            (423, LockedError),
        ],
    )
    def test_status_mapping(self, api, status, error_cls):
        api.add("GET", "/users/usr_1", status=status, json={"message": "nope", "code": "E1"})
        with pytest.raises(error_cls) as exc:
            make_client(api).get("/users/usr_1")
        assert exc.value.status == status
        assert exc.value.code == "E1"
        assert exc.value.message == "nope"

    def test_unmapped_status_is_api_error(self, api):
        api.add("GET", "/users/usr_1", status=418, json={"message": "teapot"})
        with pytest.raises(APIError) as exc:
            make_client(api).get("/users/usr_1")
        assert type(exc.value) is APIError
        assert exc.value.status == 418

    def test_details_carried(self, api):
        api.add("POST", "/users", status=400, json={"message": "invalid", "details": {"email": "required"}})
        with pytest.raises(BadRequestError) as exc:
            make_client(api).post("/users", {})
        assert exc.value.details == {"email": "required"}
        assert exc.value.to_dict()["status"] == 400

    def test_text_error_body(self, api):
        api.add("GET", "/users", status=502, content=b"Bad Gateway")
        with pytest.raises(HTTPError) as exc:
            make_client(api).get("/users")
        assert exc.value.status == 502
        assert "HTTP 502 from https://api.test/v1/issuing/users: Bad Gateway" == exc.value.message

    def test_long_text_error_truncated(self, api):
        api.add("GET", "/users", status=500, content=b"x" * 500)
        with pytest.raises(HTTPError) as exc:
            make_client(api).get("/users")
        assert exc.value.text == "x" * 200 + "..."

    @pytest.mark.parametrize("body", [{"message": 42}, {"message": "nope", "code": 7}])
    def test_non_string_fields_are_http_error(self, api, body):
        api.add("GET", "/users", status=400, json=body)
        with pytest.raises(HTTPError) as exc:
            make_client(api).get("/users")
        assert type(exc.value) is HTTPError
        assert exc.value.status == 400

    def test_connection_error(self):
        def fail(request):
            raise httpx.ConnectError("refused", request=request)

        client = APIClient(api_key=API_KEY, config=Config.custom(BASE_URL), transport=httpx.MockTransport(fail))
        with pytest.raises(TransportError, match="Connection error"):
            client.get("/users")

    def test_timeout(self):
        def slow(request):
            raise httpx.ReadTimeout("slow", request=request)

        client = APIClient(
            api_key=API_KEY, config=Config.custom(BASE_URL).with_timeout(2), transport=httpx.MockTransport(slow)
        )
        with pytest.raises(TransportError, match="timed out after 2"):
            client.get("/users")


# =============================================================================
# Logging
# =============================================================================


class TestLogging:
    def test_logs_when_enabled(self, api, caplog):
        api.add("GET", "/balances", json={})
        client = make_client(api, config=Config.custom(BASE_URL).with_logging())
        with caplog.at_level(logging.DEBUG, logger="rain_sdk"):
            client.get("/balances")

        messages = [r.getMessage() for r in caplog.records]
        assert any("GET https://api.test/v1/issuing/balances" in m for m in messages)
        assert not any(API_KEY in m for m in messages)

    def test_silent_by_default(self, api, caplog):
        api.add("GET", "/balances", json={})
        with caplog.at_level(logging.DEBUG, logger="rain_sdk"):
            make_client(api).get("/balances")
        assert [r for r in caplog.records if r.name.startswith("rain_sdk")] == []
