import pytest

from shortflix.validation import validate_short_payload

from .conftest import valid_payload


def test_valid_payload():
    result = validate_short_payload(valid_payload())
    assert result.ok
    assert result.errors == {}
    assert result.value.video_url == "https://example.com/clip.mp4"
    assert result.value.tags == ["new", "Sample"]


def test_extra_keys_are_dropped():
    result = validate_short_payload(valid_payload(id=99, views=5))
    assert result.ok
    assert "id" not in result.value.model_dump()


@pytest.mark.parametrize("url", ["not-a-url", "", "example", "://missing"])
def test_bad_urls_rejected(url):
    result = validate_short_payload(valid_payload(videoUrl=url))
    assert not result.ok
    assert list(result.errors) == ["videoUrl"]


@pytest.mark.parametrize(
    "field,value",
    [
        ("title", ""),
        ("title", 12),
        ("tags", []),
        ("tags", "sample"),
        ("tags", ["ok", ""]),
        ("tags", ["ok", 3]),
        ("videoUrl", 42),
    ],
)
def test_field_errors(field, value):
    result = validate_short_payload(valid_payload(**{field: value}))
    assert not result.ok
    assert field in result.errors
    assert result.value is None


def test_missing_fields_all_reported():
    result = validate_short_payload({})
    assert not result.ok
    assert set(result.errors) == {"videoUrl", "title", "tags"}


@pytest.mark.parametrize("body", [None, [], "text", 5])
def test_non_object_body(body):
    result = validate_short_payload(body)
    assert not result.ok
    assert result.errors == {"body": ["must be a JSON object"]}


def test_url_error_message():
    result = validate_short_payload(valid_payload(videoUrl="not-a-url"))
    assert result.errors["videoUrl"] == ["must be a valid URL"]


@pytest.mark.parametrize("url", ["http://localhost:3000/clip.mp4", "http://localhost/clip.mp4"])
def test_localhost_urls_accepted(url):
    result = validate_short_payload(valid_payload(videoUrl=url))
    assert result.ok
    assert result.value.video_url == url


@pytest.mark.parametrize("url", ["ftp://example.com/clip.mp4", "file:///tmp/clip.mp4"])
def test_non_http_schemes_rejected(url):
    result = validate_short_payload(valid_payload(videoUrl=url))
    assert not result.ok
    assert result.errors["videoUrl"] == ["must be a valid URL"]
