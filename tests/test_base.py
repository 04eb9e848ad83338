import socket
import threading
import urllib.request
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from retroapi import request as detail
from retroapi.base import (
    RETRO_ACHIEVEMENTS_HOST,
    BaseClient,
    EndpointError,
    default_user_agent,
)
from retroapi.response import Response, ResponseError

DENIED = b'{"message":"test","errors":[]}'
SERVER_FAULT = b'{"message":"","errors":null}'


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.server.seen.append((self.path, self.headers.get("User-Agent")))
        status, body = self.server.reply
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    srv = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    srv.seen = []
    srv.reply = (200, b"{}")
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()


def _direct_opener():
    return urllib.request.build_opener(urllib.request.ProxyHandler({}))


def _client(host, agent="agent/v1"):
    return BaseClient(host, agent, "secret", _direct_opener())


def _url(srv):
    return f"http://127.0.0.1:{srv.server_address[1]}"


def test_init_stores_settings():
    opener = _direct_opener()
    client = BaseClient(RETRO_ACHIEVEMENTS_HOST, "newUserAgent", "secret", opener)
    assert (client.host, client.user_agent, client.secret) == (
        RETRO_ACHIEVEMENTS_HOST,
        "newUserAgent",
        "secret",
    )
    assert client.opener is opener


def test_default_opener_is_created():
    client = BaseClient(RETRO_ACHIEVEMENTS_HOST, "agent", "secret")
    assert isinstance(client.opener, urllib.request.OpenerDirector)
    assert client.host == RETRO_ACHIEVEMENTS_HOST


def test_equality_compares_settings():
    opener = _direct_opener()
    first, same, other = (
        BaseClient(host, "agent", "secret", opener)
        for host in ("http://a.example.com", "http://a.example.com", "http://b.example.com")
    )
    assert first == same
    assert first != other


def test_default_user_agent_names_library():
    agent = default_user_agent()
    assert agent.startswith("retroapi/v")
    assert default_user_agent() == agent


def test_do_sends_sorted_query_and_user_agent(server):
    server.reply = (200, b'{"ok": 1}')
    resp = _client(_url(server))._do(
        detail.method("GET"),
        detail.user_agent("agent/v1"),
        detail.path("/API/Thing.php"),
        detail.api_token("secret"),
        detail.c(5),
    )
    assert resp == Response(status_code=200, data=b'{"ok": 1}')
    assert server.seen == [("/API/Thing.php?c=5&y=secret", "agent/v1")]


def test_do_returns_error_status_instead_of_raising(server):
    server.reply = (401, DENIED)
    resp = _client(_url(server))._do(detail.method("GET"), detail.path("/API/Thing.php"))
    assert (resp.status_code, resp.data) == (401, DENIED)


def test_do_merges_query_already_in_host(server):
    client = _client(_url(server) + "/API/Thing.php?b=2")
    client._do(detail.method("GET"), detail.api_token("secret"), detail.a(1))
    assert server.seen[0][0] == "/API/Thing.php?a=1&b=2&y=secret"


def test_do_rejects_missing_scheme():
    with pytest.raises(ValueError) as info:
        _client("")._do(
            detail.method("GET"),
            detail.path("/API/Thing.php"),
            detail.api_token("secret"),
        )
    assert str(info.value) == 'Get "/API/Thing.php?y=secret": unsupported protocol scheme ""'


def test_do_reports_connection_failure():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    with pytest.raises(ConnectionError) as info:
        _client(f"http://127.0.0.1:{port}")._do(detail.method("GET"), detail.path("/x"))
    assert str(info.value).startswith(f'Get "http://127.0.0.1:{port}/x": ')


def test_endpoint_error_message_and_cause():
    cause = ValueError("boom")
    err = EndpointError("calling endpoint", cause)
    assert str(err) == "calling endpoint: boom"
    assert err.cause is cause
    assert err.context == "calling endpoint"


@pytest.mark.parametrize(
    ("fetch", "context"),
    [("_fetch_object", "parsing response object"), ("_fetch_list", "parsing response list")],
)
def test_fetch_wraps_response_error(server, fetch, context):
    server.reply = (500, SERVER_FAULT)
    client = _client(_url(server))
    with pytest.raises(EndpointError) as info:
        getattr(client, fetch)(client._details("/API/Thing.php"))
    assert str(info.value) == f"{context}: error code 500 returned: {SERVER_FAULT.decode()}"
    assert isinstance(info.value.cause, ResponseError)


def test_fetch_list_decodes(server):
    server.reply = (200, b'[{"id": "1"}]')
    client = _client(_url(server))
    assert client._fetch_list(client._details("/API/Thing.php")) == [{"id": "1"}]


def test_fetch_object_wraps_call_failure():
    client = _client("")
    with pytest.raises(EndpointError) as info:
        client._fetch_object(client._details("/API/Thing.php"))
    assert str(info.value) == (
        'calling endpoint: Get "/API/Thing.php?y=secret": unsupported protocol scheme ""'
    )