import pytest

from cprkit.util import parse_header, split, url_encode, write_function


def test_basic_parse():
    header_string = (
        "HTTP/1.1 200 OK\r\n"
        "Server: nginx\r\n"
        "Date: Sun, 05 Mar 2017 00:34:54 GMT\r\n"
        "Content-Type: application/json\r\n"
        "Content-Length: 351\r\n"
        "Connection: keep-alive\r\n"
        "Access-Control-Allow-Origin: *\r\n"
        "Access-Control-Allow-Credentials: true\r\n"
        "\r\n"
    )
    header = parse_header(header_string)
    assert header["Server"] == "nginx"
    assert header["Date"] == "Sun, 05 Mar 2017 00:34:54 GMT"
    assert header["Content-Type"] == "application/json"
    assert header["Content-Length"] == "351"
    assert header["Connection"] == "keep-alive"
    assert header["Access-Control-Allow-Origin"] == "*"
    assert header["Access-Control-Allow-Credentials"] == "true"


@pytest.mark.parametrize(
    "header_string",
    [
        "HTTP/1.1 200 OK\r\nAuth:\nAccess-Control-Allow-Credentials: true\r\n\r\n",
        "HTTP/1.1 200 OK\r\nAuth: \nAccess-Control-Allow-Credentials: true\r\n\r\n",
        "HTTP/1.1 200 OK\nAuth:\r\nAccess-Control-Allow-Credentials: true\r\n\r\n",
        "HTTP/1.1 200 OK\nAuth: \r\nAccess-Control-Allow-Credentials: true\r\n\r\n",
    ],
)
def test_empty_values_and_line_endings(header_string):
    header = parse_header(header_string)
    assert header.get("Server", "") == ""
    assert header["Auth"] == ""
    assert header["Access-Control-Allow-Credentials"] == "true"


def test_status_line_resets_headers():
    header_string = (
        "HTTP/1.1 302 Found\r\n"
        "Location: /next\r\n"
        "\r\n"
        "HTTP/1.1 200 OK\r\n"
        "Server: nginx\r\n"
        "\r\n"
    )
    header = parse_header(header_string)
    assert header == {"Server": "nginx"}


def test_split_matches_line_reading():
    assert split("a,b,c", ",") == ["a", "b", "c"]
    assert split("a,b,", ",") == ["a", "b"]
    assert split("a,,b", ",") == ["a", "", "b"]
    assert split("", ",") == []


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_write_function_appends():
    data = bytearray(b"Hello")
    taken = write_function(data, b" world!")
    assert taken == len(b" world!")
    assert data == bytearray(b"Hello world!")


def test_url_encode_keeps_unreserved():
    assert url_encode("abcXYZ019-_.~") == "abcXYZ019-_.~"


def test_url_encode_escapes_lowercase_hex():
    assert url_encode(" ") == "%20"
    assert url_encode("a/b") == "a%2fb"