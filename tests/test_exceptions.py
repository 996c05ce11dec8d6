from jarfetch.exceptions import (
    ArtifactNotFoundError,
    UnsupportedProviderError,
    UpstreamTransportError,
    VersionNotFoundError,
)


def test_to_dict():
    error = UpstreamTransportError(
        "request to https://example.invalid failed",
        context={"url": "https://example.invalid"},
    )
    assert error.to_dict() == {
        "error": True,
        "code": "E200",
        "message": "request to https://example.invalid failed",
        "context": {"url": "https://example.invalid"},
        "type": "UpstreamTransportError",
    }


def test_http_mapping():
    assert VersionNotFoundError().http_status == 404
    assert VersionNotFoundError().response_text() == "Version not found"
    assert UnsupportedProviderError().http_status == 400
    assert ArtifactNotFoundError("Forge version not found").code == "E302"
    assert UpstreamTransportError("boom").response_text() == "Error: boom"
    assert str(UpstreamTransportError("boom")) == "[E200] boom"
