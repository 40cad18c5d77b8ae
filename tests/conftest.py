"""
Shared fixtures: config files on disk, a fake HTTP layer and a buffered console.
"""

import io
import json
import urllib.error
import urllib.request

import pytest
from rich.console import Console

CONFIG_TOML = """\
default_server = "home"

[server.home]
server_name = "ex.org"
server_url = "https://ex.org"
pass_access_token = "mx/home"

[server.work]
server_name = "work.example.com"
server_url = "https://matrix.work.example.com/"
pass_access_token = "mx/work"
"""


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep the developer's real config and pass store out of every test."""
    monkeypatch.delenv("MATRIXAPI_CONFIG", raising=False)
    monkeypatch.delenv("MATRIXAPI_PASS_COMMAND", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-home"))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "xdg-dirs"))


@pytest.fixture
def write_config(tmp_path, monkeypatch):
    """Write a config.toml under XDG_CONFIG_HOME and return its path."""

    def _write(content: str = CONFIG_TOML):
        config_dir = tmp_path / "xdg-home" / "matrixapi"
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_config):
    return write_config()


class FakeResponse:
    def __init__(self, status: int, body: bytes):
        self.status = status
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class FakeServer:
    """Stands in for urllib.request.urlopen and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, url: str, payload, status: int = 200):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        self.routes[url] = (status, body)

    def urlopen(self, request, *args, **kwargs):
        self.requests.append(request)
        url = request.full_url
        if url not in self.routes:
            raise urllib.error.URLError(f"no route to {url}")
        status, body = self.routes[url]
        if status >= 400:
            raise urllib.error.HTTPError(url, status, "error", {}, io.BytesIO(body))
        return FakeResponse(status, body)


@pytest.fixture
def fake_server(monkeypatch):
    server = FakeServer()
    monkeypatch.setattr(urllib.request, "urlopen", server.urlopen)
    return server


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)
