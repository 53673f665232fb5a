import pytest
import requests
from urllib3.exceptions import InsecureRequestWarning

from kreedz_client import KreedzClient
from kreedz_client.exceptions import (
    HostConfigurationError,
    RequestError,
    UnexpectedResponseError,
    UnknownOperationError,
    VersionMismatchError,
)
from kreedz_client.versions import V1_0, V2_0

API = "https://kztimerglobal.com/api/v2.0"


def test_default_host_follows_version():
    assert KreedzClient().config.default_host == "kztimerglobal.com/api/v2.0"
    assert KreedzClient(version="v1.0").config.default_host == "kztimerglobal.com/api/v1.0"
    assert KreedzClient(version=V1_0).version is V1_0
    assert KreedzClient(version=None).version == V2_0


def test_call_returns_payload(requests_mock):
    client = KreedzClient()
    requests_mock.get(f"{API}/modes", json=[{"id": 200, "name": "kz_timer"}])

    modes = client.modes.list()

    assert modes == [{"id": 200, "name": "kz_timer"}]


def test_default_host_override(requests_mock):
    client = KreedzClient(default_host="https://api.example.com/")
    matcher = requests_mock.get("https://api.example.com/bans", json=[])

    client.bans.list()

    assert matcher.called_once


def test_status_operations_target_status_host(requests_mock):
    client = KreedzClient()
    matcher = requests_mock.get(
        "https://status.global-api.com/api/v2/summary.json",
        json={"status": {"indicator": "none"}},
    )

    client.status.summary()

    assert matcher.called_once


def test_host_overrides_from_config(requests_mock):
    client = KreedzClient(host_overrides={"StatusService": "status.example.net/v2"})
    matcher = requests_mock.get("https://status.example.net/v2/status.json", json={})

    client.status.status()

    assert matcher.called_once


def test_record_by_id_rejected_on_v1_without_network(requests_mock):
    client = KreedzClient(version="v1.0")

    with pytest.raises(VersionMismatchError) as excinfo:
        client.records.get(123)

    assert "[≥]" in str(excinfo.value)
    assert "records.by_id" in str(excinfo.value)
    assert requests_mock.call_count == 0


def test_record_by_id_allowed_on_v2(requests_mock):
    client = KreedzClient()
    requests_mock.get(f"{API}/records/123", json={"id": 123})

    assert client.records.get(123) == {"id": 123}


def test_resolve_url_does_not_send(requests_mock):
    client = KreedzClient()

    url = client.resolve_url("maps.by_name", {"map_name": "kz_beginnerblock_go"})

    assert url == f"{API}/maps/name/kz_beginnerblock_go"
    assert requests_mock.call_count == 0


def test_resolve_url_unknown_operation():
    with pytest.raises(UnknownOperationError):
        KreedzClient().resolve_url("maps.delete")


def test_version_gate_runs_before_path_expansion():
    with pytest.raises(VersionMismatchError):
        KreedzClient(version=V1_0).resolve_url("records.by_id")


def test_missing_path_parameter_on_supported_version():
    with pytest.raises(ValueError, match="id"):
        KreedzClient(version=V2_0).resolve_url("records.by_id")


def test_empty_host_override_rejected_by_client():
    with pytest.raises(HostConfigurationError):
        KreedzClient(host_overrides={"BanService": ""})


def test_query_defaults_and_headers_are_sent(requests_mock):
    client = KreedzClient(
        default_headers={"User-Agent": "kreedz-tests"},
        query_defaults={"limit": "5"},
    )
    matcher = requests_mock.get(f"{API}/players", json=[])

    client.players.list(name="gosh")

    request = matcher.last_request
    assert request.headers["User-Agent"] == "kreedz-tests"
    assert request.headers["Accept"] == "application/json"
    assert request.qs == {"limit": ["5"], "name": ["gosh"]}


def test_request_logging_includes_api_version(caplog, requests_mock):
    client = KreedzClient(version="v1.0")
    requests_mock.get("https://kztimerglobal.com/api/v1.0/servers", json=[])

    with caplog.at_level("INFO", logger="kreedz_client.client"):
        client.servers.list()

    assert "api_version=v1.0" in caplog.text
    assert "https://kztimerglobal.com/api/v1.0/servers" in caplog.text


def test_version_rejection_is_logged(caplog):
    client = KreedzClient(version="v1.0")

    with caplog.at_level("WARNING", logger="kreedz_client.pipeline"):
        with pytest.raises(VersionMismatchError):
            client.records.get(1)

    assert "records.by_id" in caplog.text


def test_http_error_status_is_propagated(requests_mock):
    client = KreedzClient()
    requests_mock.get(f"{API}/servers/9", status_code=404, text="not found")

    with pytest.raises(RequestError) as excinfo:
        client.servers.get(9)

    assert excinfo.value.status_code == 404
    assert requests_mock.call_count == 1


def test_invalid_json_raises_unexpected_response(requests_mock):
    client = KreedzClient()
    requests_mock.get(f"{API}/modes", text="<html>")

    with pytest.raises(UnexpectedResponseError):
        client.modes.list()


def test_request_error_includes_root_cause():
    class ExplodingSession:
        def request(self, *args, **kwargs):  # pragma: no cover - helper
            raise requests.exceptions.SSLError("CERTIFICATE_VERIFY_FAILED")

        def close(self):  # pragma: no cover - helper
            pass

    client = KreedzClient(session=ExplodingSession())

    with pytest.raises(RequestError) as excinfo:
        client.modes.list()

    assert "CERTIFICATE_VERIFY_FAILED" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, requests.exceptions.SSLError)


def test_disables_insecure_warning_when_verify_disabled(monkeypatch):
    captured: list[object] = []

    def fake_disable(warning):  # pragma: no cover - helper
        captured.append(warning)

    monkeypatch.setattr(
        "kreedz_client.client.urllib3.disable_warnings",
        fake_disable,
    )

    KreedzClient(verify_ssl=False)

    assert captured and captured[0] is InsecureRequestWarning


def test_context_manager_closes_session():
    closed = []

    class TrackingSession(requests.Session):
        def close(self):
            closed.append(True)
            super().close()

    with KreedzClient(session=TrackingSession()):
        pass

    assert closed == [True]
