import pytest

from kreedz_client.versions import (
    LATEST,
    V1_0,
    V2_0,
    ApiVersion,
    compare,
    from_api_name,
    parse_version,
)

SAMPLES = [None, ApiVersion(0, 9), V1_0, ApiVersion(1, 5), V2_0, ApiVersion(10, 0)]


def test_latest_is_v2():
    assert LATEST is V2_0
    assert LATEST.is_latest is True
    assert V1_0.is_latest is False
    assert str(LATEST) == "v2.0"


@pytest.mark.parametrize("left", SAMPLES)
@pytest.mark.parametrize("right", SAMPLES)
def test_compare_is_antisymmetric(left, right):
    assert compare(left, right) == -compare(right, left)


@pytest.mark.parametrize("version", SAMPLES)
def test_compare_is_reflexive(version):
    assert compare(version, version) == 0


def test_compare_orders_major_before_minor():
    assert compare(ApiVersion(1, 9), ApiVersion(2, 0)) == -1
    assert compare(ApiVersion(2, 1), ApiVersion(2, 0)) == 1
    assert compare(ApiVersion(2, 0), V2_0) == 0


def test_absent_version_sorts_first():
    assert compare(None, ApiVersion(0, 0)) == -1
    assert compare(V1_0, None) == 1


def test_equality_matches_compare():
    assert ApiVersion(1, 0) == V1_0
    assert hash(ApiVersion(1, 0)) == hash(V1_0)
    assert ApiVersion(1, 0) != ApiVersion(1, 1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("v2.0", V2_0), ("2.0", V2_0), ("2", V2_0), ("V1_0", V1_0), (" v1.0 ", V1_0)],
)
def test_parse_version_accepts_common_spellings(text, expected):
    assert parse_version(text) == expected


def test_parse_version_defaults_to_latest():
    assert parse_version(None) is LATEST


def test_parse_version_rejects_garbage():
    with pytest.raises(ValueError):
        parse_version("latest-ish")


def test_from_api_name_only_knows_declared_versions():
    assert from_api_name("v1.0") is V1_0
    assert from_api_name("v3.0") is None
    assert from_api_name(None) is None
