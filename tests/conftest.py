"""
Pytest configuration and shared fixtures for jsonfizz tests.

Provides immutable test data fixtures for documents that must parse, must
fail, and must survive an encode/decode round trip.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jsonfizz


@dataclass(frozen=True)
class FizzTestCase:
    """
    Immutable container for serialization test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: Any
    should_fail: bool = False
    expected_output: Any = None


@pytest.fixture
def fizz() -> jsonfizz.JSONFizz:
    """A facade using the query-string friendly delimiter preset."""
    return jsonfizz.JSONFizz(jsonfizz.FIZZ_CONFIG)


@pytest.fixture
def malformed_documents() -> list[FizzTestCase]:
    """
    Provides documents that must fail parsing with default delimiters.

    Adapted from the json.org JSON_checker failures that still apply to a
    grammar without unicode escapes or control character checks.
    """
    fail_docs = [
        '["Unclosed array"',
        '{unquoted_key: "keys must be quoted"}',
        '["extra comma",]',
        '["double extra comma",,]',
        '[   , "<-- missing value"]',
        '["Comma after the close"],',
        '["Extra close"]]',
        '{"Extra comma": true,}',
        '{"Extra value after close": true} "misplaced quoted value"',
        '{"Illegal expression": 1 + 2}',
        '{"Illegal invocation": alert()}',
        '{"Numbers cannot have leading zeroes": 013}',
        '{"Numbers cannot be hex": 0x14}',
        "[\\naked]",
        '{"Missing colon" null}',
        '{"Double colon":: null}',
        '{"Comma instead of colon", null}',
        '["Colon instead of comma": false]',
        '["Bad value", truth]',
        "['single quote']",
        "[0e]",
        "[0e+]",
        "[0e+-1]",
        '{"Comma instead if closing brace": true,',
        '["mismatch"}',
        '"unterminated',
        "[1,2,",
        "",
        "   ",
        "-",
        "+1",
        ".5",
        "NaN",
        "Infinity",
    ]
    return [
        FizzTestCase(description=f"fail{idx + 1}", input_data=doc, should_fail=True)
        for idx, doc in enumerate(fail_docs)
    ]


@pytest.fixture
def basic_values() -> list[FizzTestCase]:
    """
    Provides basic documents and the values they decode to.

    Covers every value type and the empty containers.
    """
    return [
        FizzTestCase("null value", "null", False, None),
        FizzTestCase("true boolean", "true", False, True),
        FizzTestCase("false boolean", "false", False, False),
        FizzTestCase("integer", "42", False, 42.0),
        FizzTestCase("negative integer", "-17", False, -17.0),
        FizzTestCase("zero", "0", False, 0.0),
        FizzTestCase("float", "3.14", False, 3.14),
        FizzTestCase("exponent", "1e3", False, 1000.0),
        FizzTestCase("signed exponent", "-2.5E-2", False, -0.025),
        FizzTestCase("empty string", '""', False, ""),
        FizzTestCase("simple string", '"hello"', False, "hello"),
        FizzTestCase("empty array", "[]", False, []),
        FizzTestCase("empty object", "{}", False, {}),
        FizzTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        FizzTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]


@pytest.fixture
def round_trip_values() -> list[FizzTestCase]:
    """
    Provides values built only from the encodable types.

    Numbers are floats or ints with exact float representations so that
    decoded values compare equal.
    """
    return [
        FizzTestCase("null", None),
        FizzTestCase("booleans", [True, False]),
        FizzTestCase("numbers", [0, -1, 2.5, 1e-7, 1.5e300, -0.125]),
        FizzTestCase("plain string", "hello world"),
        FizzTestCase("escapes", 'quote " backslash \\ \b\f\n\r\t end'),
        FizzTestCase("delimiter characters", "a;b_c`d<e>f(g)h,i:j[k]l{m}"),
        FizzTestCase("nested empties", {"a": [], "b": {}, "c": [[], {}]}),
        FizzTestCase(
            "document",
            {
                "id": 12345,
                "name": "Alice Johnson",
                "active": True,
                "balance": 1234.5,
                "tags": ["admin", "beta"],
                "address": {"city": "Springfield", "zip": None},
                "history": [{"n": 1}, {"n": 2, "ok": False}],
            },
        ),
    ]
