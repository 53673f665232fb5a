from typer.testing import CliRunner

from kreedz_client.cli import app

runner = CliRunner()


def test_cli_respects_env_version_and_host(monkeypatch):
    captured: dict[str, object] = {}

    class DummyClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)
            self.modes = type("M", (), {"list": lambda self: []})()

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("kreedz_client.cli.KreedzClient", DummyClient)

    result = runner.invoke(
        app,
        ["modes", "list"],
        env={
            "KREEDZ_API_VERSION": "v1.0",
            "KREEDZ_HOST": "api.example.com",
            "KREEDZ_VERIFY_SSL": "0",
        },
    )

    assert result.exit_code == 0
    assert captured["version"] == "v1.0"
    assert captured["default_host"] == "api.example.com"
    assert captured["verify_ssl"] is False


def test_cli_flags_override_env(monkeypatch):
    captured: dict[str, object] = {}

    class DummyClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)
            self.modes = type("M", (), {"list": lambda self: []})()

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("kreedz_client.cli.KreedzClient", DummyClient)

    result = runner.invoke(
        app,
        ["modes", "list", "--api-version", "v2.0", "--verify"],
        env={"KREEDZ_API_VERSION": "v1.0", "KREEDZ_VERIFY_SSL": "0"},
    )

    assert result.exit_code == 0
    assert captured["version"] == "v2.0"
    assert captured["verify_ssl"] is True
