import json
from datetime import datetime, timedelta, timezone

import pytest

from blink.formatters import Formatter, JsonFormatter, TextFormatter
from blink.models import (
    Level,
    RecordBuilder,
    bool_field,
    int_field,
    map_field,
    string_field,
)

TS = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_record(fields=(), level=Level.INFO, message="hello world", ts=TS):
    return (
        RecordBuilder()
        .level(level)
        .message(message)
        .reference_id("ref-1")
        .caller("main.go:10")
        .fields(fields)
        .timestamp(ts)
        .build()
    )


def parse_ts(text):
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


def test_formatter_is_abstract():
    with pytest.raises(TypeError):
        Formatter()


# Text formatter


def test_text_full_line():
    record = make_record(
        [string_field("key", "value"), bool_field("bool", True), int_field("number", 1)]
    )
    out = TextFormatter().format(record)
    assert out == (
        b"2024-01-02T03:04:05Z info ref-1 main.go:10"
        b" [ key=value bool=true number=1 ] - hello world\n"
    )


def test_text_is_single_line_of_bytes():
    out = TextFormatter().format(make_record([string_field("k", "v")]))
    assert out.endswith(b"\n")
    assert out.count(b"\n") == 1


def test_text_timestamp_round_trips_with_offset():
    ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=3, minutes=30)))
    out = TextFormatter().format(make_record(ts=ts)).decode()
    assert parse_ts(out.split(" ")[0]) == ts


def test_text_without_fields():
    out = TextFormatter().format(make_record()).decode()
    assert out.endswith(" [ ] - hello world\n")


def test_text_level_name():
    out = TextFormatter().format(make_record(level=Level.WARN)).decode()
    assert out.split(" ")[1] == str(Level.WARN)


def test_text_unknown_level():
    out = TextFormatter().format(make_record(level=7)).decode()
    assert out.split(" ")[1] == "unknown"


def test_text_map_value_sorted():
    out = TextFormatter().format(make_record([map_field("m", {"b": 2, "a": 1})]))
    assert b" m=map[a:1 b:2] " in out


def test_text_uses_str_of_objects():
    class Custom:
        def __str__(self):
            return "custom"

    out = TextFormatter().format(make_record([("obj" and string_field("s", "x")), int_field("n", 5)]))
    assert b" s=x n=5 ]" in out
    out = TextFormatter().format(make_record([bool_field("flag", False)]))
    assert out.decode().split("[")[1].split("]")[0].strip().startswith("flag=")
    from blink.models import Field

    out = TextFormatter().format(make_record([Field("obj", Custom())]))
    assert f" obj={Custom()} ".encode() in out


# JSON formatter


def test_json_payload_contents():
    record = make_record([string_field("key", "value"), bool_field("bool", True), int_field("number", 1)])
    payload = json.loads(JsonFormatter().format(record))
    timestamp = payload.pop("timestamp")
    assert parse_ts(timestamp) == TS
    assert payload == {
        "level": str(Level.INFO),
        "referenceId": "ref-1",
        "caller": "main.go:10",
        "message": "hello world",
        "fields": {"key": "value", "bool": True, "number": 1},
    }


def test_json_keys_sorted():
    out = JsonFormatter().format(make_record([string_field("z", "1"), string_field("a", "2")]))
    payload = json.loads(out)
    assert list(payload) == sorted(payload)
    assert list(payload["fields"]) == sorted(payload["fields"])


def test_json_single_line():
    out = JsonFormatter().format(make_record([string_field("k", "v")]))
    assert out.endswith(b"\n")
    assert out.count(b"\n") == 1


def test_json_omits_empty_fields():
    payload = json.loads(JsonFormatter().format(make_record()))
    assert "fields" not in payload


def test_json_escapes_html_characters():
    out = JsonFormatter().format(make_record(message="<a&b>"))
    assert b"<" not in out
    assert b"&" not in out
    assert b">" not in out
    assert json.loads(out)["message"] == "<a&b>"


def test_json_duplicate_keys_last_wins():
    out = JsonFormatter().format(make_record([string_field("k", "a"), string_field("k", "b")]))
    assert json.loads(out)["fields"] == {"k": "b"}


def test_json_unencodable_value_yields_empty():
    from blink.models import Field

    assert JsonFormatter().format(make_record([Field("obj", object())])) == b""
    assert JsonFormatter().format(make_record([Field("f", float("nan"))])) == b""


def test_json_unknown_level():
    payload = json.loads(JsonFormatter().format(make_record(level=9)))
    assert payload["level"] == "unknown"