"""
Test data generators for serialization benchmarks.

Builds Python values of different shapes and renders them either as JSON
(readable by every library under comparison) or with a custom jsonfizz
configuration:
- small and large objects
- mixed-type arrays
- deeply nested structures
- string-heavy content with escape sequences
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

import jsonfizz

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
)

_ESCAPE_PROBABILITY = 0.3
_ESCAPABLE = "\"\\\b\f\n\r\t`"


def generate_test_value(data_type: str, seed: int = 1234) -> Any:
    """Generates a reproducible Python value of the given shape."""
    generators: dict[str, Callable[[random.Random], Any]] = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(seed))


def generate_test_data(
    data_type: str, config: jsonfizz.FizzConfig | None = None
) -> str:
    """Renders a generated value as JSON, or with ``config`` when given."""
    value = generate_test_value(data_type)
    if config is None:
        return json.dumps(value)
    encoded = jsonfizz.dumps(value, config=config)
    assert encoded is not None
    return encoded


def _small_object(rng: random.Random) -> dict[str, Any]:
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _large_object(rng: random.Random) -> dict[str, Any]:
    return {
        "user_id": rng.randint(1000000, 9999999),
        "profile": {
            "first_name": _word(rng, 10),
            "last_name": _word(rng, 12),
            "address": {
                "street": f"{rng.randint(1, 9999)} {_word(rng, 8)} St",
                "city": _word(rng, 12),
                "zip": f"{rng.randint(10000, 99999)}",
            },
            "notifications": {
                channel: rng.choice([True, False])
                for channel in ("email", "sms", "push")
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "status": rng.choice(["completed", "pending", "failed"]),
                "description": f"Payment for {_word(rng, 20)}",
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "action": rng.choice(["login", "logout", "purchase", "view"]),
                "ip_address": ".".join(
                    str(rng.randint(1, 255)) for _ in range(4)
                ),
                "session_time": rng.randint(1, 3600),
            }
            for _ in range(30)
        ],
    }


def _mixed_array(rng: random.Random) -> list[Any]:
    makers: list[Callable[[int], Any]] = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _word(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _word(rng, 10)},
    ]
    return [rng.choice(makers)(i) for i in range(200)]


def _nested_structure(rng: random.Random) -> dict[str, Any]:
    def level(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _word(rng, 10)}
        return {
            "level": depth,
            "data": _word(rng, 15),
            "items": [level(depth - 1) for _ in range(3)],
            "nested": level(depth - 1),
        }

    return level(6)


def _string_heavy(rng: random.Random) -> dict[str, Any]:
    def escaped_text() -> str:
        return "".join(
            rng.choice(_ESCAPABLE)
            if rng.random() < _ESCAPE_PROBABILITY
            else rng.choice(string.ascii_letters + string.digits + " ")
            for _ in range(50)
        )

    return {
        "strings": [escaped_text() for _ in range(100)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_word(rng, 8)}\\file_{i}.txt"
            for i in range(20)
        },
    }


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
