import pytest

from kreedz_client.exceptions import (
    HostConfigurationError,
    UnknownOperationError,
    VersionMismatchError,
)
from kreedz_client.hosts import HostResolver
from kreedz_client.http import HttpResponse
from kreedz_client.operations import (
    OperationDescriptor,
    OperationRegistry,
    ServiceDescriptor,
    VersionConstraint,
)
from kreedz_client.pipeline import (
    HostResolveStage,
    OutgoingRequest,
    Pipeline,
    UrlNormalizeStage,
    VersionGateStage,
    default_stages,
)
from kreedz_client.versions import V1_0, V2_0, ApiVersion

REGISTRY = OperationRegistry(
    [
        OperationDescriptor("bans.list", "BanService", "GET", "bans", VersionConstraint(V1_0)),
        OperationDescriptor(
            "legacy.only", "BanService", "GET", "legacy", VersionConstraint(V1_0, exact=True)
        ),
        OperationDescriptor("summary", "ExampleStatus", "GET", "/summary.json"),
        OperationDescriptor("mirror", "Mirror", "GET", "https://raw.example.com/maps.json"),
        OperationDescriptor("broken", "Broken", "GET", "anything"),
        OperationDescriptor("root", "BanService", "GET", "/"),
    ],
    [
        ServiceDescriptor("ExampleStatus", base_host="https://status.example.com/api/v2//"),
        ServiceDescriptor("Broken", base_host="https://"),
    ],
)


class RecordingTransport:
    def __init__(self):
        self.sent: list[OutgoingRequest] = []

    def __call__(self, request):
        self.sent.append(request)
        return HttpResponse(status_code=200, data={"url": request.url}, headers={})


def build_pipeline(version=V2_0, overrides=None):
    transport = RecordingTransport()
    resolver = HostResolver("api.example.com", REGISTRY, overrides=overrides)
    pipeline = Pipeline(REGISTRY, default_stages(version, resolver), transport)
    return pipeline, transport


def request_for(operation_id):
    descriptor = REGISTRY.lookup(operation_id)
    return OutgoingRequest(operation_id, descriptor.method, descriptor.path_template)


def test_at_least_constraint_allows_newer_client():
    pipeline, transport = build_pipeline(version=V2_0)

    response = pipeline.dispatch("bans.list", request_for("bans.list"))

    assert response.data == {"url": "https://api.example.com/bans"}
    assert len(transport.sent) == 1


def test_exact_constraint_rejects_other_version_before_transport():
    pipeline, transport = build_pipeline(version=V2_0)

    with pytest.raises(VersionMismatchError) as excinfo:
        pipeline.dispatch("legacy.only", request_for("legacy.only"))

    assert "[=]" in str(excinfo.value)
    assert "v1.0" in str(excinfo.value)
    assert "v2.0" in str(excinfo.value)
    assert excinfo.value.operator == "="
    assert excinfo.value.required == "v1.0"
    assert excinfo.value.actual == "v2.0"
    assert transport.sent == []


def test_at_least_constraint_rejects_older_client_with_operator():
    pipeline, transport = build_pipeline(version=ApiVersion(0, 9))

    with pytest.raises(VersionMismatchError) as excinfo:
        pipeline.dispatch("bans.list", request_for("bans.list"))

    assert excinfo.value.operator == "≥"
    assert "[≥]" in str(excinfo.value)
    assert excinfo.value.operation_id == "bans.list"
    assert transport.sent == []


def test_exact_constraint_allows_matching_client():
    pipeline, _ = build_pipeline(version=V1_0)

    response = pipeline.dispatch("legacy.only", request_for("legacy.only"))

    assert response.data["url"] == "https://api.example.com/legacy"


def test_declared_base_host_is_merged_with_path():
    pipeline, _ = build_pipeline()

    response = pipeline.dispatch("summary", request_for("summary"))

    assert response.data["url"] == "https://status.example.com/api/v2/summary.json"


def test_override_wins_over_declared_base_host():
    pipeline, _ = build_pipeline(overrides={"ExampleStatus": "mirror.example.org/status"})

    response = pipeline.dispatch("summary", request_for("summary"))

    assert response.data["url"] == "https://mirror.example.org/status/summary.json"


def test_absolute_template_bypasses_host_resolution():
    pipeline, _ = build_pipeline(overrides={"Mirror": "should-not-be-used.example.com"})

    response = pipeline.dispatch("mirror", request_for("mirror"))

    assert response.data["url"] == "https://raw.example.com/maps.json"


def test_empty_path_yields_bare_host():
    pipeline, _ = build_pipeline()

    response = pipeline.dispatch("root", request_for("root"))

    assert response.data["url"] == "https://api.example.com"


def test_invalid_declared_host_stops_before_transport():
    pipeline, transport = build_pipeline()

    with pytest.raises(HostConfigurationError):
        pipeline.dispatch("broken", request_for("broken"))

    assert transport.sent == []


def test_unknown_operation_is_terminal():
    pipeline, transport = build_pipeline()

    with pytest.raises(UnknownOperationError):
        pipeline.dispatch("nope", OutgoingRequest("nope", "GET", "nope"))

    assert transport.sent == []


def test_version_gate_runs_before_host_resolution():
    calls = []

    class ExplodingResolver:
        def resolve(self, service):
            calls.append(service)
            raise AssertionError("host resolution must not run")

    stages = (
        VersionGateStage(V2_0),
        HostResolveStage(ExplodingResolver()),
        UrlNormalizeStage(),
    )
    pipeline = Pipeline(REGISTRY, stages, RecordingTransport())

    with pytest.raises(VersionMismatchError):
        pipeline.dispatch("legacy.only", request_for("legacy.only"))

    assert calls == []


def test_stages_only_rewrite_url():
    pipeline, transport = build_pipeline()
    original = OutgoingRequest(
        "bans.list",
        "GET",
        "bans",
        params={"limit": "1"},
        headers={"Accept": "application/json"},
    )

    pipeline.dispatch("bans.list", original)

    sent = transport.sent[0]
    assert sent.params == {"limit": "1"}
    assert sent.headers == {"Accept": "application/json"}
    assert sent.method == "GET"
    assert original.url == "bans"


def test_unconstrained_operation_passes_gate_for_any_version():
    stage = VersionGateStage(ApiVersion(0, 1))
    request = request_for("summary")

    assert stage(REGISTRY.lookup("summary"), request) is request


def test_prepare_logs_each_stage(caplog):
    pipeline, _ = build_pipeline()

    with caplog.at_level("DEBUG", logger="kreedz_client.pipeline"):
        pipeline.prepare("bans.list", request_for("bans.list"))

    assert "VersionGateStage" in caplog.text
    assert "UrlNormalizeStage" in caplog.text
