import json

import httpx
import pytest
from typer.testing import CliRunner

from conftest import API_TOKEN, ZONE_ID
from purge_bridge.main import app
from purge_bridge.models import keyring_config
from purge_bridge.models.keyring_config import KeyringConfig

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_keyring(monkeypatch):
    store = {}
    monkeypatch.setattr(
        keyring_config.keyring, "get_password", lambda s, u: store.get((s, u))
    )
    monkeypatch.setattr(
        keyring_config.keyring,
        "set_password",
        lambda s, u, p: store.__setitem__((s, u), p),
    )
    return store


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setenv("ARMOURY_CF_ZONE_ID", ZONE_ID)
    monkeypatch.setenv("ARMOURY_CF_API_TOKEN", API_TOKEN)


@pytest.fixture
def unconfigured(monkeypatch):
    monkeypatch.setenv("ARMOURY_CF_ZONE_ID", "")
    monkeypatch.setenv("ARMOURY_CF_API_TOKEN", "")


@pytest.fixture
def cf_api(monkeypatch):
    calls = []
    body = {"success": True, "errors": [], "result": {"id": ZONE_ID}}

    def fake_post(url, **kwargs):
        calls.append((url, kwargs))
        return httpx.Response(200, content=json.dumps(body))

    monkeypatch.setattr(httpx, "post", fake_post)
    return calls


def test_purge(configured, cf_api):
    result = runner.invoke(app, ["cf", "purge"])

    assert result.exit_code == 0, result.output
    assert "Purged" in result.output
    assert len(cf_api) == 1
    assert cf_api[0][0].endswith(f"/zones/{ZONE_ID}/purge_cache")


def test_purge_api_failure(configured, monkeypatch, caplog):
    body = {"success": False, "errors": [{"message": "Invalid token", "code": 1000}]}
    monkeypatch.setattr(
        httpx, "post", lambda url, **kw: httpx.Response(403, content=json.dumps(body))
    )

    result = runner.invoke(app, ["cf", "purge"])
    assert result.exit_code == 1
    assert [r.getMessage() for r in caplog.records] == [
        "CDN purge failed: Invalid token (Code: 1000)"
    ]
    assert result.output.count("Invalid token") <= 1


def test_purge_unconfigured(unconfigured, cf_api):
    result = runner.invoke(app, ["cf", "purge"])

    assert result.exit_code == 1
    assert cf_api == []


def test_purge_uses_keyring_token(monkeypatch, no_keyring, cf_api):
    monkeypatch.setenv("ARMOURY_CF_ZONE_ID", ZONE_ID)
    monkeypatch.setenv("ARMOURY_CF_API_TOKEN", "")
    no_keyring[(KeyringConfig.KR_SERVICE_NAME, KeyringConfig.KR_USERNAME)] = (
        json.dumps({"CF_API_TOKEN": "from-keyring"})
    )

    result = runner.invoke(app, ["cf", "purge"])
    assert result.exit_code == 0, result.output
    assert cf_api[0][1]["headers"]["Authorization"] == "Bearer from-keyring"


def test_check(configured):
    result = runner.invoke(app, ["cf", "check"])

    assert result.exit_code == 0
    assert ZONE_ID in result.output
    assert API_TOKEN not in result.output
    assert "Ready" in result.output


def test_check_unconfigured(unconfigured):
    result = runner.invoke(app, ["cf", "check"])
    assert result.exit_code == 1
    assert "zone_id" in result.output


def test_trigger(configured, cf_api):
    result = runner.invoke(app, ["cf", "trigger"])

    assert result.exit_code == 0, result.output
    assert len(cf_api) == 1


def test_trigger_failed_origin_purge(configured, cf_api):
    result = runner.invoke(app, ["cf", "trigger", "--failed"])

    assert result.exit_code == 0
    assert cf_api == []


def test_trigger_unconfigured(unconfigured, cf_api):
    result = runner.invoke(app, ["cf", "trigger"])

    assert result.exit_code == 1
    assert cf_api == []


def test_config_set_and_show(no_keyring):
    result = runner.invoke(app, ["config", "set", "CF_API_TOKEN", "abc"])
    assert result.exit_code == 0
    assert "Saved" in result.output

    result = runner.invoke(app, ["config", "show"])
    assert json.loads(result.output) == {
        "CF_ZONE_ID": "(not set)",
        "CF_API_TOKEN": "********",
    }

    result = runner.invoke(app, ["config", "set", "CF_API_TOKEN"])
    assert "Cleared" in result.output
    assert KeyringConfig.load_from_keyring() == {}
