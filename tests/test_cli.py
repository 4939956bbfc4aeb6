"""
Rain CLI tests.

The offline suite drives main() with a client wired to the fake API and checks
the JSON that lands on stdout. The live smoke suite runs the real `rain`
module in a subprocess and is skipped unless RAIN_API_KEY is set.

Run the live part with: python -m pytest tests/test_cli.py -v -m live
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from rain_sdk import Config, RainClient
from rain_sdk import cli

from conftest import API_KEY, BASE_URL

# =============================================================================
# Helpers
# =============================================================================


@pytest.fixture
def run(api, monkeypatch, capsys):
    """Run main(argv) against the fake API; returns (exit_code, stdout)."""
    monkeypatch.setattr(cli, "load_dotenv", lambda: None)
    monkeypatch.setattr(
        cli,
        "build_client",
        lambda _args: RainClient(api_key=API_KEY, config=Config.custom(BASE_URL), transport=api.transport()),
    )

    def _run(*argv: str) -> tuple[int, str]:
        code = 0
        try:
            cli.main(list(argv))
        except SystemExit as e:
            code = e.code or 0
        return code, capsys.readouterr().out

    return _run


# =============================================================================
# Help & Parsing
# =============================================================================


class TestHelpCommands:
    def test_no_command_prints_help(self, run):
        code, out = run()
        assert code == 0
        assert "usage: rain" in out

    def test_group_without_subcommand_prints_help(self, run):
        code, out = run("cards")
        assert code == 0
        assert "list" in out and "get" in out

    def test_balances_scopes_are_exclusive(self, run):
        code, _ = run("balances", "--company", "co_1", "--user", "usr_1")
        assert code == 2


# =============================================================================
# JSON Output
# =============================================================================


class TestJSONOutput:
    def test_users_list(self, run, api, user_payload):
        api.add("GET", "/users", json=[user_payload])
        code, out = run("users", "list", "--limit", "5")

        assert code == 0
        data = json.loads(out)
        assert data["count"] == 1
        assert data["data"][0]["email"] == "ada@example.com"
        assert data["data"][0]["application_status"] == "approved"
        assert api.last.url.params["limit"] == "5"

    def test_cards_list_filters(self, run, api, card_payload):
        api.add("GET", "/cards", json=[card_payload])
        code, out = run("cards", "list", "--user", "usr_1", "--status", "active")

        assert code == 0
        assert json.loads(out)["data"][0]["last4"] == "4242"
        assert api.last.url.params["status"] == "active"

    def test_transactions_keep_type(self, run, api, spend_payload, fee_payload):
        api.add("GET", "/transactions", json=[spend_payload, fee_payload])
        code, out = run("transactions", "list", "-t", "spend", "-t", "fee")

        assert code == 0
        assert [t["type"] for t in json.loads(out)["data"]] == ["spend", "fee"]
        assert api.last.url.params.get_list("type") == ["spend", "fee"]

    def test_balances_for_company(self, run, api, balance_payload):
        api.add("GET", "/companies/co_1/balances", json=balance_payload)
        code, out = run("balances", "--company", "co_1")

        assert code == 0
        assert json.loads(out)["spending_power"] == 987500

    def test_subtenants_get(self, run, api):
        api.add("GET", "/subtenants/st_1", json={"id": "st_1", "name": "EU"})
        code, out = run("subtenants", "get", "st_1")
        assert code == 0
        assert json.loads(out) == {"id": "st_1", "name": "EU", "application_completion_link": None}


# =============================================================================
# Binary Output
# =============================================================================


class TestBinaryOutput:
    def test_report_to_file(self, run, api, tmp_path):
        api.add("GET", "/reports/2024/01/15", content=b"date,amount\n2024-01-15,100\n")
        target = tmp_path / "report.csv"

        code, out = run("reports", "get", "2024", "01", "15", "--format", "csv", "--output", str(target))

        assert code == 0
        assert target.read_bytes() == b"date,amount\n2024-01-15,100\n"
        assert json.loads(out) == {"output": str(target), "bytes": 27}
        assert api.last.url.params["format"] == "csv"

    def test_receipt_to_stdout(self, run, api):
        api.add("GET", "/transactions/tx_1/receipt", content=b"receipt-text")
        code, out = run("transactions", "receipt", "tx_1")
        assert code == 0
        assert out == "receipt-text"


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    def test_api_error_exits_1(self, run, api):
        api.add("GET", "/users/missing", status=404, json={"message": "User not found", "code": "NOT_FOUND"})
        code, out = run("users", "get", "missing")

        assert code == 1
        assert json.loads(out) == {
            "error": "User not found",
            "type": "NotFoundError",
            "status": 404,
            "code": "NOT_FOUND",
        }

    def test_http_error_exits_1(self, run, api):
        api.add("GET", "/webhooks/wh_1", status=502, content=b"Bad Gateway")
        code, out = run("webhooks", "get", "wh_1")

        assert code == 1
        error = json.loads(out)
        assert error["type"] == "HTTPError"
        assert error["status"] == 502

    def test_missing_api_key(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "load_dotenv", lambda: None)
        monkeypatch.delenv("RAIN_API_KEY", raising=False)

        with pytest.raises(SystemExit) as exc:
            cli.main(["balances"])

        assert exc.value.code == 1
        assert json.loads(capsys.readouterr().out)["type"] == "ConfigurationError"

    def test_bad_output_path_exits_1(self, run, api, tmp_path):
        api.add("GET", "/reports/2024/01/15", content=b"a,b\n")
        target = tmp_path / "missing-dir" / "report.csv"

        code, out = run("reports", "get", "2024", "01", "15", "--output", str(target))

        assert code == 1
        assert json.loads(out)["type"] == "ValidationError"


# =============================================================================
# Client Construction
# =============================================================================


class TestBuildClient:
    def test_env_flag_keeps_env_settings(self, monkeypatch):
        monkeypatch.setenv("RAIN_API_KEY", "k")
        monkeypatch.setenv("RAIN_TIMEOUT", "99")
        monkeypatch.setenv("RAIN_USER_AGENT", "my-app/1.0")
        args = cli.create_parser().parse_args(["--env", "production", "balances"])

        with cli.build_client(args) as client:
            assert client.config.base_url == "https://api.raincards.xyz/v1/issuing"
            assert client.config.timeout == 99
            assert client.config.user_agent == "my-app/1.0"

    def test_base_url_flag_wins(self, monkeypatch):
        monkeypatch.setenv("RAIN_API_KEY", "k")
        args = cli.create_parser().parse_args(["--env", "production", "--base-url", BASE_URL, "balances"])

        with cli.build_client(args) as client:
            assert client.config.base_url == BASE_URL


# =============================================================================
# Live Smoke Tests
# =============================================================================


def run_cli(*args: str) -> subprocess.CompletedProcess:
    """Run the CLI as a subprocess, as a user would."""
    return subprocess.run(
        [sys.executable, "-m", "rain_sdk.cli", *args],
        capture_output=True,
        text=True,
        timeout=60,
        cwd=Path(__file__).parent.parent,
    )


@pytest.fixture(scope="session")
def require_credentials():
    if not os.environ.get("RAIN_API_KEY"):
        pytest.skip("RAIN_API_KEY not set")


@pytest.mark.live
class TestLiveSmoke:
    def test_balances(self, require_credentials):
        result = run_cli("balances")
        assert result.returncode == 0, result.stdout + result.stderr
        assert "spending_power" in json.loads(result.stdout)

    def test_users_list(self, require_credentials):
        result = run_cli("users", "list", "--limit", "1")
        assert result.returncode == 0, result.stdout + result.stderr
        assert json.loads(result.stdout)["count"] <= 1

    def test_unknown_user(self, require_credentials):
        result = run_cli("users", "get", "00000000-0000-0000-0000-000000000000")
        assert result.returncode == 1
        assert "error" in json.loads(result.stdout)
