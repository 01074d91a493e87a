"""Pytest configuration and fixtures."""

import os
from unittest.mock import MagicMock

import pytest

# Set test environment before importing application code
os.environ["BGP_BASE_URL"] = "https://bgp.he.net"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "console"
os.environ.pop("BGP_TIMEOUT", None)


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging():
    """Route structlog through stdlib logging so caplog can see events."""
    from bgp_query.config.settings import LoggingSettings
    from bgp_query.utils.logger import configure_logging

    configure_logging(LoggingSettings(level="DEBUG", format="console"))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset them around each test."""
    from bgp_query.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def asn_page_html():
    """ASN page with one IPv4 prefix and one IPv6 prefix."""
    return """<!DOCTYPE html>
<html>
<head><title>AS37100 SEACOM-AS - bgp.he.net</title></head>
<body>
<div id="prefixes">
  <table id="table_prefixes4" class="w100p">
    <thead>
      <tr><th>Prefix</th><th>Description</th></tr>
    </thead>
    <tbody>
      <tr>
        <td class="nowrap"><a href="/net/102.23.0.0/16">102.23.0.0/16</a></td>
        <td>Example Net</td>
      </tr>
    </tbody>
  </table>
</div>
<div id="prefixes6">
  <table id="table_prefixes6" class="w100p">
    <tbody>
      <tr><td><a href="/net/2c0f:fe38::/32">2c0f:fe38::/32</a></td><td>Example Net v6</td></tr>
    </tbody>
  </table>
</div>
</body>
</html>"""


@pytest.fixture
def ip_page_html():
    """IP page listing two announcing routes."""
    return """<html>
<body>
<div id="ipinfo">
  <table class="w100p">
    <thead>
      <tr><th>ASN</th><th>IP</th><th>Description</th></tr>
    </thead>
    <tbody>
      <tr>
        <td><a href="/AS13335">AS13335</a></td>
        <td><a href="/net/1.1.1.0/24">1.1.1.0/24</a></td>
        <td>
          <img alt="United States" src="/images/flags/us.gif"> Cloudflare, Inc.
        </td>
      </tr>
      <tr>
        <td><a href="/AS13335">AS13335</a></td>
        <td><a href="/net/1.0.0.0/24">1.0.0.0/24</a></td>
        <td>APNIC Research and Development</td>
      </tr>
    </tbody>
  </table>
</div>
</body>
</html>"""


@pytest.fixture
def net_page_html():
    """Network block page with an unrelated table before the netinfo table."""
    return """<html>
<body>
<div id="whois">
  <table><tbody><tr><td>netname</td><td>SEACOM</td><td>ignored</td></tr></tbody></table>
</div>
<div id="netinfo">
  <table class="w100p">
    <thead>
      <tr><th>Origin AS</th><th>Announcement</th><th>Description</th></tr>
    </thead>
    <tbody>
      <tr>
        <td><a href="/AS37100">AS37100</a></td>
        <td><a href="/net/41.223.108.0/22">41.223.108.0/22</a></td>
        <td>SEACOM Limited</td>
      </tr>
    </tbody>
  </table>
</div>
</body>
</html>"""


@pytest.fixture
def org_page_html():
    """Organization search results."""
    return """<html>
<body>
<table class="w100p">
  <thead>
    <tr><th>Result</th><th>Type</th><th>Description</th></tr>
  </thead>
  <tbody>
    <tr><td><a href="/AS32934">AS32934</a></td><td>ASN</td><td>Facebook, Inc.</td></tr>
    <tr><td><a href="/net/31.13.24.0/21">31.13.24.0/21</a></td><td>Route</td><td>Facebook, Inc.</td></tr>
  </tbody>
</table>
</body>
</html>"""


@pytest.fixture
def empty_search_html():
    """Organization search with no matches."""
    return """<html>
<body>
<table class="w100p">
  <thead><tr><th>Result</th><th>Type</th><th>Description</th></tr></thead>
  <tbody></tbody>
</table>
</body>
</html>"""


@pytest.fixture
def make_response():
    """Factory for mock requests responses usable as context managers."""

    def _make(content="", status_code=200, url="https://bgp.he.net/"):
        response = MagicMock()
        response.status_code = status_code
        response.content = content.encode("utf-8") if isinstance(content, str) else content
        response.url = url
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        return response

    return _make


@pytest.fixture
def mock_session(make_response):
    """Mock requests session returning an empty page by default."""
    session = MagicMock()
    session.headers = {}
    session.get.return_value = make_response("<html><body></body></html>")
    return session
