# ginlet

`ginlet` provides building blocks for an HTTP framework. It has no dependencies
outside the standard library.

- `ginlet.errors`: request errors with type flags, and lists of them that can
  be turned into JSON.
- `ginlet.store`: a thread-safe key/value store for each request, which also
  collects errors.
- `ginlet.messages`: in-memory `Request` and `Response` objects.
- `ginlet.proxies`: IP and CIDR parsing, trusted-proxy checks and client
  address extraction from forwarding headers.
- `ginlet.fs`: a file system view rooted at a directory, with directory
  listings optionally hidden.

## Installation

```
pip install ginlet
```

To include the test dependencies:

```
pip install "ginlet[test]"
```

## Errors

`Error` wraps an exception and adds an `ErrorType` flag (`PRIVATE`, `PUBLIC`,
`BIND`, `RENDER`, `ANY`) and optional metadata. `set_type` and `set_meta` both
return the error, so calls can be chained.

```python
from ginlet.errors import Error, ErrorList, ErrorType

err = Error(ValueError("bad input"), ErrorType.PUBLIC).set_meta({"field": "name"})
err.to_json()        # {'field': 'name', 'error': 'bad input'}
err.is_type(ErrorType.PUBLIC)   # True
```

`to_json` builds its result from the metadata:

- A mapping is merged into the result.
- A dataclass is returned as it is.
- Any other value is stored under `"meta"`.
- `"error"` is set to the message, unless the metadata already provides that key.

`ErrorList` is a `list` of errors. It has these methods:

- `by_type(flags)` filters the errors by type.
- `last()` returns the last error.
- `messages()` returns the messages in order.
- `to_json()` returns `None` for an empty list, a single object for one error, and a list of objects otherwise.
- `dumps()` returns compact JSON with sorted keys, and escapes `<`, `>` and `&`.

`str()` of the list gives numbered lines:

```python
errs = ErrorList([Error(ValueError("first")), Error(ValueError("second"), meta="some data")])
str(errs)
# 'Error #01: first\nError #02: second\n     Meta: some data\n'
```

## Key store

```python
from ginlet.store import KeyStore

store = KeyStore()
store.set("count", 3)
store.get("count")       # (3, True)
store.get("missing")     # (None, False)
store.get_int("count")   # 3
store.get_string("count")  # '' (wrong type gives the zero value)
store.must_get("missing")  # raises KeyError
```

The typed getters are `get_string`, `get_bool`, `get_int`, `get_float`,
`get_string_list` and `get_string_map`. `error(exc)` records an exception in
`store.errors`:

- If an `Error` is found in the exception's cause chain, that `Error` is recorded.
- Otherwise the exception is wrapped as a private `Error`.
- Passing `None` raises `ValueError`.

## Requests and responses

```python
from ginlet.messages import Request, Response

req = Request("GET", "/items?id=1&id=2", headers={"Cookie": "session=placeholder"},
              remote_addr="40.40.40.40:42123")
req.query_values()      # {'id': ['1', '2']}
req.cookie("session")   # 'placeholder'; a missing cookie raises KeyError
req.get_header("Accept")  # '' when absent

resp = Response()
resp.write_header(201)
resp.write("created")
resp.status, resp.text()  # (201, 'created')
```

Once the response has been committed, the status cannot be changed. It is
committed by `write_header_now()` or by the first `write()`.

## Trusted proxies

```python
from ginlet.proxies import prepare_trusted_cidrs, is_trusted, validate_header

cidrs = prepare_trusted_cidrs(["40.40.40.40", "192.168.0.0/16"])
is_trusted(cidrs, "192.168.1.7")                       # True
validate_header(cidrs, "20.20.20.20, 30.30.30.30")     # '30.30.30.30'
```

`prepare_trusted_cidrs` accepts plain addresses (as /32 or /128 networks) and
CIDRs. It returns `None` for `None` and raises `ValueError` on an invalid entry.

`validate_header` reads the entries from right to left. It returns the first
untrusted address, or the leftmost entry if every address is trusted. It
returns `None` when an entry is not an IP address. `parse_ip` folds
IPv4-mapped IPv6 addresses to IPv4.

## File system view

```python
from ginlet.fs import directory

fs = directory("public", list_directory=False)
with fs.open("index.html") as f:
    data = f.read()
```

If `list_directory` is false, every opened file reports an empty directory
listing. Names are cleaned so that they cannot leave the root.

## What it does not do

`ginlet` has no router, no handler chains, no server and no response
rendering (JSON, HTML, XML and so on). It provides only the pieces listed
above. Serving requests is left to the code that uses it.

## Running the tests

```
pytest
```