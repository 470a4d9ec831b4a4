"""
Hook pipeline tests.

Validates registration semantics, ordering, and that encoder and decoder
pipelines stay independent.
"""

from typing import Any

import pytest

import jsonfizz
from jsonfizz import HookPipeline
from jsonfizz import HookKey


def _double_numbers(key: HookKey, value: Any) -> Any:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value * 2
    return value


def _add_one(key: HookKey, value: Any) -> Any:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value + 1
    return value


def test_add_returns_true_once() -> None:
    """
    Validates that re-adding the same hook is a no-op returning False.
    """
    pipeline = HookPipeline()
    assert pipeline.add(_double_numbers) is True
    assert pipeline.add(_double_numbers) is False
    assert len(pipeline) == 1


@pytest.mark.parametrize("not_a_hook", [None, 42, "hook", [], {}])
def test_add_rejects_non_callables(not_a_hook: Any) -> None:
    """
    Validates InvalidHookError for non-callable hooks.
    """
    pipeline = HookPipeline()
    with pytest.raises(jsonfizz.InvalidHookError) as exc_info:
        pipeline.add(not_a_hook)

    assert exc_info.value.hook is not_a_hook
    assert isinstance(exc_info.value, TypeError)
    assert len(pipeline) == 0


def test_remove_absent_hook() -> None:
    """
    Validates that removing an unknown hook returns False and changes nothing.
    """
    pipeline = HookPipeline()
    pipeline.add(_add_one)
    assert pipeline.remove(_double_numbers) is False
    assert list(pipeline) == [_add_one]


def test_remove_then_re_add() -> None:
    """
    Validates that a removed hook can be registered again.
    """
    pipeline = HookPipeline()
    pipeline.add(_double_numbers)
    assert pipeline.remove(_double_numbers) is True
    assert _double_numbers not in pipeline
    assert pipeline.add(_double_numbers) is True
    assert _double_numbers in pipeline


def test_reset_behaves_as_fresh_pipeline() -> None:
    """
    Validates that reset clears every hook and allows new registrations.
    """
    pipeline = HookPipeline()
    pipeline.add(_double_numbers)
    pipeline.add(_add_one)
    pipeline.reset()

    assert len(pipeline) == 0
    assert pipeline.apply("x", 5) == 5
    assert pipeline.add(_double_numbers) is True
    assert pipeline.apply("x", 5) == 10


def test_reset_on_empty_pipeline() -> None:
    """
    Validates that reset always succeeds.
    """
    pipeline = HookPipeline()
    pipeline.reset()
    assert len(pipeline) == 0


def test_apply_folds_in_insertion_order() -> None:
    """
    Validates that each hook sees the previous hook's output.
    """
    pipeline = HookPipeline()
    pipeline.add(_double_numbers)
    pipeline.add(_add_one)
    assert pipeline.apply(None, 5) == 11

    reversed_pipeline = HookPipeline()
    reversed_pipeline.add(_add_one)
    reversed_pipeline.add(_double_numbers)
    assert reversed_pipeline.apply(None, 5) == 12


def test_apply_passes_current_key() -> None:
    """
    Validates that every hook receives the same contextual key.
    """
    seen: list[HookKey] = []

    def first(key: HookKey, value: Any) -> Any:
        seen.append(key)
        return value

    def second(key: HookKey, value: Any) -> Any:
        seen.append(key)
        return value

    pipeline = HookPipeline()
    pipeline.add(first)
    pipeline.add(second)
    pipeline.apply("name", "value")
    assert seen == ["name", "name"]


def test_hook_errors_propagate() -> None:
    """
    Validates that a failing hook aborts the whole call.
    """

    def explode(key: HookKey, value: Any) -> Any:
        raise RuntimeError(f"bad value at {key}")

    pipeline = HookPipeline()
    pipeline.add(explode)
    with pytest.raises(RuntimeError, match="bad value at k"):
        pipeline.apply("k", 1)


def test_bound_methods_match_by_instance() -> None:
    """
    Validates that bound methods of the same instance deduplicate.
    """

    class Scaler:
        def __init__(self, factor: int) -> None:
            self.factor = factor

        def scale(self, key: HookKey, value: Any) -> Any:
            return value * self.factor

    triple = Scaler(3)
    pipeline = HookPipeline()
    assert pipeline.add(triple.scale) is True
    assert pipeline.add(triple.scale) is False
    assert pipeline.add(Scaler(3).scale) is True
    assert pipeline.remove(triple.scale) is True
    assert len(pipeline) == 1


def test_encoder_and_decoder_pipelines_are_independent() -> None:
    """
    Validates that encoder replacers never run during decoding.
    """
    fizz = jsonfizz.JSONFizz()
    assert fizz.encoder.add_hook(_double_numbers) is True
    assert fizz.decoder.add_hook(_double_numbers) is True

    assert fizz.stringify({"x": 5}) == '{"x":10}'
    assert fizz.parse('{"x":5}') == {"x": 10}

    fizz.encoder.reset_hooks()
    assert fizz.stringify({"x": 5}) == '{"x":5}'
    assert fizz.parse('{"x":5}') == {"x": 10}

    assert fizz.decoder.remove_hook(_double_numbers) is True
    assert fizz.decoder.remove_hook(_double_numbers) is False
    assert fizz.parse('{"x":5}') == {"x": 5}


def test_callable_objects_match_by_identity() -> None:
    """
    Validates that a permissive __eq__ does not make hooks duplicates.
    """

    class Offset:
        def __init__(self, amount: int) -> None:
            self.amount = amount

        def __eq__(self, other: object) -> bool:
            return True

        __hash__ = object.__hash__

        def __call__(self, key: HookKey, value: Any) -> Any:
            return value + self.amount

    first, second = Offset(1), Offset(10)
    pipeline = HookPipeline()
    assert pipeline.add(first) is True
    assert pipeline.add(second) is True
    assert pipeline.apply(None, 0) == 11

    assert pipeline.remove(second) is True
    assert len(pipeline) == 1
    assert next(iter(pipeline)) is first
    assert second not in pipeline
