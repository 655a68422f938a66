# cprkit

Small building blocks for an HTTP client. The package has no dependencies
beyond the standard library.

## Modules

- `cprkit.util`
  - `parse_header(headers)` turns a raw header block into a `dict`. Each line
    that contains a colon gives one entry. Leading spaces and tabs are removed
    from the value, and trailing whitespace as well. A line that starts with
    `HTTP/` throws away everything collected up to that point. After a
    redirect, only the headers of the last response are left.
  - `split(to_split, delimiter)` splits on a one-character delimiter and
    drops a single trailing empty field. Any other delimiter length raises
    `ValueError`.
  - `write_function(data, chunk)` appends `chunk` to the `bytearray` `data`
    and returns the number of bytes it appended.
  - `url_encode(value)` encodes the string as UTF-8. ASCII letters, digits and
    `-_.~` are kept as they are; every other byte becomes a lower-case `%xx`.
- `cprkit.timeout`
  - `Timeout(duration)` takes whole milliseconds or a `datetime.timedelta`
    and keeps the value in `ms`. `Timeout.milliseconds()` returns that value.
    It raises `OverflowError` when the value does not fit in a signed 64-bit
    integer. Timeouts compare equal and hash by `ms`.
- `cprkit.ssl_options`
  - `VerifySsl(verify=True)` is a frozen flag for certificate checking. Its
    truth value is `verify`.
- `cprkit.error`
  - `ErrorCode` is an `IntEnum` of failure kinds, starting at `OK`
    (`CONNECTION_FAILURE`, `HOST_RESOLUTION_FAILURE`, `OPERATION_TIMEDOUT`,
    `SSL_CONNECT_ERROR`, `UNSUPPORTED_PROTOCOL`, ..., `UNKNOWN_ERROR`).
  - `Error(code=ErrorCode.OK, message="")` is false while its code is `OK`
    and true otherwise.
- `cprkit.response`
  - `Response` is a dataclass with `status_code`, `text`, `header`, `url`,
    `elapsed`, `cookies` and `error`. By default it holds an empty response
    with status 0 and no error.

## Installation

```
pip install cprkit
```

## Usage

```python
from cprkit.util import parse_header, url_encode
from cprkit.timeout import Timeout
from cprkit.ssl_options import VerifySsl
from cprkit.error import Error, ErrorCode
from cprkit.response import Response

headers = parse_header(
    "HTTP/1.1 200 OK\r\n"
    "Content-Type: application/json\r\n"
    "Content-Length: 351\r\n"
    "\r\n"
)
headers["Content-Type"]          # 'application/json'

url_encode("a b&c")              # 'a%20b%26c'

Timeout(1500).milliseconds()     # 1500

bool(VerifySsl())                # True
bool(VerifySsl(False))           # False

bool(Error())                    # False
bool(Error(ErrorCode.OPERATION_TIMEDOUT, "timed out"))  # True

response = Response(status_code=200, text="Hello world!", header=headers)
bool(response.error)             # False
```

## What it does not do

The package does not send requests. It has no sessions and no networking, and
it does not handle cookies, authentication, proxies or redirects itself.
`Response`, `Timeout`, `VerifySsl` and `Error` hold values for code that
performs the transfer. The helpers in `cprkit.util` work on data that such
code has already received.

## Running the tests

```
pip install -e ".[test]"
pytest
```