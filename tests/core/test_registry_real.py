"""Tests for RealRegistry using httpx.MockTransport (no network)."""

import httpx
import pytest

from vpub.core.errors import NetworkError, ParseError
from vpub.core.registry.real import RealRegistry, package_url


def _registry(handler) -> RealRegistry:
    return RealRegistry(timeout=1.0, transport=httpx.MockTransport(handler))


def test_package_url_joins_without_double_slash() -> None:
    assert package_url("http://r:4873/", "pkg") == "http://r:4873/pkg"


def test_package_url_encodes_scoped_names() -> None:
    assert package_url("http://r", "@scope/pkg") == "http://r/@scope%2fpkg"


def test_get_package_info_parses_versions() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(
            200, json={"name": "pkg", "versions": {"1.0.0": {"version": "1.0.0", "dist": {}}}}
        )

    info = _registry(handler).get_package_info("http://r", "pkg")

    assert seen == ["http://r/pkg"]
    assert list(info.versions) == ["1.0.0"]
    assert info.versions["1.0.0"].version == "1.0.0"


def test_get_package_info_without_versions_field_is_empty() -> None:
    info = _registry(lambda request: httpx.Response(200, json={"name": "pkg"})).get_package_info(
        "http://r", "pkg"
    )

    assert info.versions == {}


def test_get_package_info_404_is_network_error_with_status() -> None:
    registry = _registry(lambda request: httpx.Response(404, json={"error": "not found"}))

    with pytest.raises(NetworkError) as exc_info:
        registry.get_package_info("http://r", "pkg")

    assert exc_info.value.status_code == 404
    assert "status code 404" in str(exc_info.value)


def test_get_package_info_malformed_body_is_parse_error() -> None:
    registry = _registry(lambda request: httpx.Response(200, text="not json"))

    with pytest.raises(ParseError):
        registry.get_package_info("http://r", "pkg")


def test_get_package_info_wrong_shape_is_parse_error() -> None:
    registry = _registry(lambda request: httpx.Response(200, json={"versions": ["1.0.0"]}))

    with pytest.raises(ParseError):
        registry.get_package_info("http://r", "pkg")


def test_get_package_info_transport_failure_is_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(NetworkError) as exc_info:
        _registry(handler).get_package_info("http://r", "pkg")

    assert exc_info.value.status_code is None


def test_get_package_info_invalid_url_is_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("request should not be sent")

    with pytest.raises(NetworkError) as exc_info:
        _registry(handler).get_package_info("http://r:notaport", "pkg")

    assert exc_info.value.status_code is None
    assert "failed to fetch package versions" in str(exc_info.value)


def test_get_package_info_follows_redirects() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.scheme == "http":
            return httpx.Response(301, headers={"Location": "https://r/pkg"})
        return httpx.Response(200, json={"versions": {"1.0.0": {"version": "1.0.0"}}})

    info = _registry(handler).get_package_info("http://r", "pkg")

    assert list(info.versions) == ["1.0.0"]


def test_get_package_info_null_versions_is_empty() -> None:
    registry = _registry(lambda request: httpx.Response(200, json={"versions": None}))

    assert registry.get_package_info("http://r", "pkg").versions == {}


def test_get_package_info_null_version_entry_keeps_key() -> None:
    registry = _registry(lambda request: httpx.Response(200, json={"versions": {"1.0.0": None}}))

    info = registry.get_package_info("http://r", "pkg")

    assert list(info.versions) == ["1.0.0"]
    assert info.versions["1.0.0"].version is None
