from unittest.mock import MagicMock

import pytest
import requests

from tests.conftest import make_settings
from utils.clients.firecrawl import INCLUDE_TAGS, FirecrawlClient


def fake_response(status_code=200, body=None, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = body
    return response


def client_with(response=None, error=None, **settings_overrides):
    session = MagicMock()
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value = response
    return FirecrawlClient(make_settings(**settings_overrides), session=session), session


def test_successful_scrape_returns_page():
    body = {
        "success": True,
        "data": {
            "markdown": "# Welcome",
            "html": "<h1>Welcome</h1>",
            "metadata": {"title": "Welcome", "statusCode": 200},
        },
    }
    client, _ = client_with(fake_response(body=body))

    result = client.scrape("https://example.com")

    assert result.success
    assert result.data.markdown == "# Welcome"
    assert result.data.html == "<h1>Welcome</h1>"
    assert result.data.metadata == {"title": "Welcome", "statusCode": 200}
    assert result.data.source_url == "https://example.com"


def test_request_asks_for_markdown_and_html_with_timeout():
    client, session = client_with(fake_response(body={"success": True, "data": {}}))

    client.scrape("https://example.com")

    args, kwargs = session.post.call_args
    assert args[0] == "https://api.firecrawl.dev/v1/scrape"
    assert kwargs["headers"]["Authorization"] == "Bearer fc-test"
    assert kwargs["json"] == {
        "url": "https://example.com",
        "formats": ["markdown", "html"],
        "includeTags": INCLUDE_TAGS,
        "onlyMainContent": True,
        "timeout": 30000,
    }
    assert kwargs["timeout"] == 35


def test_missing_fields_default_to_empty():
    client, _ = client_with(fake_response(body={"success": True, "data": {"markdown": None}}))

    page = client.scrape("https://example.com").data

    assert (page.markdown, page.html, page.metadata) == ("", "", {})


def test_provider_error_is_surfaced():
    body = {"success": False, "error": "URL is blocked"}
    client, _ = client_with(fake_response(status_code=403, body=body))

    result = client.scrape("https://blocked.example")

    assert not result.success
    assert result.error == "URL is blocked"


def test_http_error_without_json_reports_status():
    client, _ = client_with(fake_response(status_code=502, json_error=True))

    result = client.scrape("https://example.com")

    assert result.error == "Request failed with status 502"


def test_unsuccessful_body_with_200_status():
    client, _ = client_with(fake_response(body={"success": False}))

    result = client.scrape("https://example.com")

    assert not result.success
    assert result.error == "Failed to scrape website"


def test_timeout_is_reported():
    client, _ = client_with(error=requests.Timeout("read timed out"))

    result = client.scrape("https://slow.example")

    assert result.error == "Scrape timed out after 30s"


def test_transport_error_is_reported():
    client, _ = client_with(error=requests.ConnectionError("Name or service not known"))

    result = client.scrape("https://nowhere.example")

    assert not result.success
    assert "Name or service not known" in result.error


def test_missing_key_skips_network_call():
    client, session = client_with(fake_response(), FIRECRAWL_API_KEY="")

    result = client.scrape("https://example.com")

    assert result.error == "Firecrawl API key not found"
    session.post.assert_not_called()


def test_structured_provider_error_becomes_text():
    body = {"success": False, "error": {"code": "BLOCKED", "message": "Site is blocked"}}
    client, _ = client_with(fake_response(status_code=403, body=body))

    result = client.scrape("https://blocked.example")

    assert not result.success
    assert "BLOCKED" in result.error


def test_structured_error_in_unsuccessful_body():
    client, _ = client_with(fake_response(body={"success": False, "error": ["timeout"]}))

    result = client.scrape("https://example.com")

    assert result.error == "['timeout']"


@pytest.mark.parametrize(
    "data",
    [
        ["x"],
        "markdown text",
        {"markdown": ["not", "a", "string"]},
        {"html": 42},
        {"metadata": "title"},
    ],
)
def test_malformed_page_data_is_reported(data):
    client, _ = client_with(fake_response(body={"success": True, "data": data}))

    result = client.scrape("https://example.com")

    assert not result.success
    assert result.error == "Unexpected response from Firecrawl"


def test_close_releases_session():
    client, session = client_with(fake_response())

    client.close()

    session.close.assert_called_once_with()
