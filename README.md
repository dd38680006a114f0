# blink

A small structured logger. Every log call builds a record holding a level, a
message, key/value fields, the calling file and line, and a timestamp. Hooks
look at each record first, and handlers then write it out through a formatter.

It needs nothing beyond the Python standard library (3.10 or later).

## Install

```
pip install .
```

## Usage

```python
from blink.formatters import TextFormatter, JsonFormatter
from blink.handlers import ConsoleHandler
from blink.hooks import DefaultHook
from blink.logger import new_logger, with_level, with_field, with_handler, with_hook
from blink.models import Level, string_field, int_field, bool_field

logger = new_logger(
    with_level(Level.DEBUG),
    with_field(string_field("key", "value")),
    with_handler(ConsoleHandler(TextFormatter())),
    with_hook(DefaultHook()),
)

logger.debug("hello world", bool_field("bool", True), int_field("number", 1))
logger.info("hello world", bool_field("bool", False), int_field("number", 2))
```

## Modules

### `blink.models`

- `Level` is an `IntEnum` with `DEBUG`, `INFO`, `WARN` and `ERROR`, in that
  order. `str(level)` gives `debug`, `info`, `warn` or `error`.
- `Field(key, value)` is a frozen key/value pair. `string_field`, `int_field`,
  `bool_field` and `map_field` build one.
- `Record` is a frozen record with `level`, `message`, `caller`,
  `reference_id`, `fields` (a tuple) and `timestamp`.
- `RecordBuilder` builds a record step by step. It is immutable: `level`,
  `message`, `reference_id`, `caller`, `fields` and `timestamp` each return a
  new builder, and `build()` returns the record. A fresh builder stamps the
  record with the current local time.

### `blink.logger`

`new_logger(*options)` creates a `Logger` and applies each option in turn:

- `with_level(level)` sets the minimum level; records below it are dropped.
- `with_field(field)` and `with_fields(*fields)` replace the logger's fields.
- `with_handler(handler)` replaces the logger's handlers with that one handler.
- `with_hook(hook)` replaces the logger's hooks with that one hook.

A `Logger` has `log(level, message, *fields)` and the shortcuts `debug`,
`info`, `warn` and `error`. Each call joins the logger's own fields with the
ones passed, records the file and line of the call, runs the hooks and then
the handlers. `Logger.with_field(field)` and `Logger.with_fields(fields)`
return a new logger carrying the extra fields and leave the original as it was.

Since the options set a single handler or hook, use the builders for several:

```python
from blink.handlers import HandlerMuxBuilder
from blink.logger import Logger

logger = Logger(
    handler_mux=HandlerMuxBuilder()
    .with_handler(ConsoleHandler(TextFormatter()))
    .with_handler(ConsoleHandler(JsonFormatter()))
    .build(),
)
```

### `blink.formatters`

A formatter turns a record into bytes through `format(record)`.

- `TextFormatter` writes one line:
  `<RFC 3339 time> <level> <reference id> <file:line> [ key=value ... ] - <message>`
- `JsonFormatter` writes one compact JSON object per line with sorted keys:
  `caller`, `level`, `message`, `referenceId`, `timestamp` and, when there are
  any fields, `fields`. It returns empty bytes if a field value cannot be
  encoded as JSON.

Timestamps are given to the second, with the UTC offset or `Z`.

### `blink.handlers`

A handler is any object with a `handle(record)` method; the abstract base is
`Handler`. `ConsoleHandler(formatter, stream=None)` formats each record and
writes it to standard output, or to the text or binary stream given, flushing
after every record under a lock. `HandlerMuxBuilder().with_handler(...).build()`
makes a `HandlerMux`, whose `apply(record)` calls each handler in order.
Objects without a `handle` method are ignored.

### `blink.hooks`

A hook is any object with one or more of the methods `on_all`, `on_debug`,
`on_info`, `on_warn` and `on_error`. `HookMuxBuilder` sorts hooks by the
methods they have; the resulting `HookMux.apply(record)` runs the `on_all`
hooks first, then those for the record's level. `DefaultHook(stream=None)`
writes a line such as
`hook triggered: OnInfo | level=info | caller=app.py:12 | ref= | msg="hello"`
for each call, to the given stream or to standard output.

### `blink.tooling`

- `caller(skip)` returns `"file:line"` of the frame `skip` levels up, or
  `"unknown:0"` when the stack is not that deep.
- `env_or_default(key, default_value)` returns the environment variable, or
  the default when it is unset or empty.
- `env_or_key(key)` returns the environment variable, or `"$" + key` when it
  is unset or empty.

## Demo

```
blink-demo
```

This logs two example records to the console, each preceded by its hook output.

## What it does not do

The only output is `ConsoleHandler`; there is no file handler, rotation,
network output or configuration file. The logger never sets a record's
reference id, so it is empty unless you build records yourself with
`RecordBuilder.reference_id`.