import pytest

from ginlet.messages import Request, Response


def test_query_values_keep_blank_and_repeated():
    req = Request("GET", "http://example.com/?foo=bar&page=10&id=&arr=a&arr=b")
    values = req.query_values()
    assert values["foo"] == ["bar"]
    assert values["page"] == ["10"]
    assert values["id"] == [""]
    assert values["arr"] == ["a", "b"]
    assert "missing" not in values


def test_query_values_empty_query():
    assert Request("GET", "/path").query_values() == {}


def test_path_and_url_round_trip():
    req = Request("POST", "/hola?x=1")
    assert req.path == "/hola"
    assert req.raw_query == "x=1"
    assert req.url == "/hola?x=1"
    assert req.method == "POST"


def test_headers_are_case_insensitive():
    req = Request("GET", "/", headers={"Gin-Version": "1.0.0"})
    assert req.get_header("gin-version") == "1.0.0"
    assert req.get_header("Connection") == ""


def test_set_header_replaces_and_del_removes():
    req = Request()
    req.set_header("X-Real-IP", "first")
    req.set_header("x-real-ip", "second")
    assert req.headers.get_all("X-Real-IP") == ["second"]
    req.del_header("X-Real-IP")
    assert req.get_header("X-Real-IP") == ""


def test_body_from_bytes_and_str():
    assert Request("POST", "/", body=b"Fetch binary post data").body.read() == b"Fetch binary post data"
    assert Request("POST", "/", body="text").body.read() == b"text"


def test_cookie_found_and_missing():
    req = Request("GET", "/get", headers={"Cookie": "user=gin; other=x"})
    assert req.cookie("user") == "gin"
    assert req.cookie("other") == "x"
    with pytest.raises(KeyError):
        req.cookie("nokey")


def test_response_defaults():
    resp = Response()
    assert resp.status == 200
    assert not resp.written()
    assert resp.body == b""


def test_response_write_header_before_commit():
    resp = Response()
    resp.write_header(401)
    assert resp.status == 401
    assert not resp.written()
    resp.write_header_now()
    assert resp.written()
    assert resp.size == 0


def test_response_status_fixed_after_commit():
    resp = Response()
    resp.write_header(201)
    resp.write_header_now()
    resp.write_header(500)
    assert resp.status == 201


def test_response_write_round_trip():
    resp = Response()
    assert resp.write("test") == 4
    resp.write(b"test")
    assert resp.text() == "testtest"
    assert resp.size == len(resp.body)
    assert resp.written()


def test_response_ignores_non_positive_status():
    resp = Response()
    resp.write_header(-1)
    assert resp.status == 200