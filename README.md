# dnsprobe

dnsprobe is a small DNS client. It builds an RFC 1035 query and sends it
to one name server over UDP or TCP. It then decodes the reply, including
compressed names. It decodes A, AAAA and NS record data. The data of any
other record type is kept as a `GenericRecord`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
dnsprobe example.com
dnsprobe --server 9.9.9.9:53 example.com
```

The command sends a query for the A records of the domain and prints the
decoded reply. By default the query goes to 198.41.0.4 on port 53, over
UDP, with recursion desired. Use `-s`/`--server HOST:PORT` to pick another
name server. Errors are logged to standard error and the command exits with
status 1. The same errors are an invalid domain or configuration, a network
failure, or a reply that cannot be decoded.

## Library use

```python
from dnsprobe.client import Client, QueryError
from dnsprobe.config import default_config
from dnsprobe.types import QType

config = default_config()
config.name_server = "9.9.9.9:53"
config.protocol = "tcp"

client = Client(config)
try:
    message = client.query("example.com", QType.A)
except (QueryError, ValueError) as exc:
    print("lookup failed:", exc)
else:
    print(message)
    for record in message.answers:
        print(record.rdata)
```

`Client(config)` raises `ConfigError` if the configuration does not
validate. `Client.query` raises `DomainError` for an invalid domain name.
For a failed send, or a reply that cannot be decoded or whose ID does not
match the query, it raises `QueryError`. Both `DomainError` and
`ConfigError` are subclasses of `ValueError`.

`Client.build_query(domain, qtype)` returns the query `Message` without
sending it. `Client.parse_response(data, expected_id)` decodes a reply you
already have. With the TCP protocol, the reply must begin with its 2-byte
length prefix.

### Modules

- `dnsprobe.types` holds the `QType`, `QClass` and `HeaderFlag` enumerations. It also has `qtype_name` and `qclass_name`, which return `"UNKNOWN"` for values they do not know.
- `dnsprobe.labels` holds `Label`, `string_to_labels`, `labels_to_string`, `validate_domain` and `DomainError`.
- `dnsprobe.message` holds `Header`, `Question`, `ResourceRecord` and `Message`, and the `ResourceData` protocol. Each of the four classes has a `to_bytes()` method that gives its wire format, and a `str()` form for reading. A `Message` keeps its sections in `questions`, `answers`, `authority` and `additional`.
- `dnsprobe.records` holds the record data types `ARecord`, `AAAARecord`, `NSRecord` and `GenericRecord`. The first three can be built with `from_string`.
- `dnsprobe.config` holds `Config`, `default_config()` and `ConfigError`.
- `dnsprobe.client` holds `Client`, `QueryError` and the name decoder `parse_labels`. The decoder follows compression pointers and rejects pointer loops.
- `dnsprobe.cli` holds `main`, the command above.

### Configuration and limits

`Config.validate()` raises `ConfigError` in these cases:

- the name server is empty or is not a `host:port` address, or its port is empty;
- the name server's host is not an IP address and cannot be resolved;
- the protocol is neither `udp` nor `tcp`;
- the timeout, in seconds, is zero or negative;
- the retry count is negative;
- the log level is not one of `debug`, `info`, `warn` or `error`.

`Config.max_message_size()` gives the largest reply the client reads:

| Protocol | Size in bytes |
|----------|---------------|
| UDP      | 512           |
| TCP      | 65535         |

## What it does not do

- It sends each query once. `retry_count` is validated but no retries are made.
- It does not resolve recursively or follow referrals. It prints whatever the one server returns, and the default root server usually returns a referral.
- `debug`, `dump_files` and `log_level` are validated settings only. The client does not act on them.
- For TCP it reads the reply with a single receive call. A reply that arrives in pieces fails the length check.
- It decodes no record data beyond A, AAAA and NS.

## Running the tests

```
pytest
```