"""Tests for retry policies and outcomes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from actionretry import (
    NO_RETRY,
    ExponentialBackoff,
    Immediate,
    LinearBackoff,
    NoRetry,
    Outcome,
    dump_policy,
    validate_policy,
)
from actionretry.runtime.retry import first_delay, next_delay


# ─────────────────────────────────────────────────────────────────────────────
# Outcome
# ─────────────────────────────────────────────────────────────────────────────


def test_outcome_constructors() -> None:
    ok = Outcome.ok("Tapped", is_done=True, node="7")
    fail = Outcome.fail("Click failed")
    
    assert ok.succeeded and not ok.failed
    assert ok.is_done
    assert ok.data == {"node": "7"}
    assert fail.failed
    assert fail.message == "Click failed"
    assert fail.data == {}


def test_outcome_is_immutable() -> None:
    outcome = Outcome.fail("Click failed")
    
    with pytest.raises(ValidationError):
        outcome.message = "other"  # type: ignore[misc]


def test_outcomes_with_equal_fields_are_interchangeable() -> None:
    a = Outcome.fail("Click failed", node="1")
    b = Outcome(succeeded=False, message="Click failed", data={"node": "1"})
    
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_outcome_data_is_read_only() -> None:
    outcome = Outcome.fail("Click failed", node="1")
    seen = {outcome}
    before = hash(outcome)
    
    with pytest.raises(TypeError):
        outcome.data["node"] = "2"  # type: ignore[index]
    with pytest.raises(TypeError):
        Outcome.ok().data["extra"] = "x"  # type: ignore[index]
    
    assert hash(outcome) == before
    assert outcome in seen


def test_outcome_data_is_copied_from_input() -> None:
    source = {"node": "1"}
    outcome = Outcome(succeeded=True, data=source)
    source["node"] = "2"
    
    assert outcome.data == {"node": "1"}
    assert outcome.model_dump()["data"] == {"node": "1"}
    assert type(outcome.model_dump()["data"]) is dict


# ─────────────────────────────────────────────────────────────────────────────
# Policy Validation
# ─────────────────────────────────────────────────────────────────────────────


def test_no_retry_permits_one_attempt() -> None:
    assert NO_RETRY.max_attempts == 1
    assert NO_RETRY == NoRetry()


@pytest.mark.parametrize("factory", [
    lambda: Immediate(max_attempts=0),
    lambda: LinearBackoff(delay=1.0, max_attempts=0),
    lambda: ExponentialBackoff(initial_delay=1.0, max_attempts=-1),
    lambda: LinearBackoff(delay=-0.1, max_attempts=3),
    lambda: ExponentialBackoff(initial_delay=-2.0, max_attempts=3),
])
def test_invalid_parameters_rejected(factory) -> None:
    with pytest.raises(ValidationError):
        factory()


def test_policies_are_immutable_and_hashable() -> None:
    policy = LinearBackoff(delay=1.0, max_attempts=3)
    
    with pytest.raises(ValidationError):
        policy.max_attempts = 5  # type: ignore[misc]
    assert hash(policy) == hash(LinearBackoff(delay=1.0, max_attempts=3))


def test_labels() -> None:
    assert NO_RETRY.label == "no_retry"
    assert Immediate(max_attempts=3).label == "immediate(x3)"
    assert LinearBackoff(delay=1.0, max_attempts=3).label == "linear(1s x3)"
    assert ExponentialBackoff(initial_delay=2.0, max_attempts=5).label == "exponential(2s x5)"


# ─────────────────────────────────────────────────────────────────────────────
# Serialization
# ─────────────────────────────────────────────────────────────────────────────


def test_dump_policy_is_tagged() -> None:
    assert dump_policy(NO_RETRY) == {"kind": "no_retry"}
    assert dump_policy(ExponentialBackoff(initial_delay=2.0, max_attempts=5)) == {
        "kind": "exponential", "initial_delay": 2.0, "max_attempts": 5,
    }


def test_validate_policy_selects_variant_by_kind() -> None:
    assert validate_policy({"kind": "linear", "delay": 1, "max_attempts": 3}) == LinearBackoff(delay=1.0, max_attempts=3)
    assert validate_policy({"kind": "no_retry"}) == NO_RETRY
    
    existing = Immediate(max_attempts=2)
    assert validate_policy(existing) is existing


def test_validate_policy_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        validate_policy({"kind": "fibonacci", "max_attempts": 3})
    with pytest.raises(ValidationError):
        validate_policy({"kind": "immediate", "max_attempts": 3, "delay": 1.0})


# ─────────────────────────────────────────────────────────────────────────────
# Delay Progression
# ─────────────────────────────────────────────────────────────────────────────


def test_delay_progression() -> None:
    linear = LinearBackoff(delay=1.0, max_attempts=3)
    exp = ExponentialBackoff(initial_delay=2.0, max_attempts=5)
    
    assert first_delay(Immediate(max_attempts=3)) == 0.0
    assert first_delay(NO_RETRY) == 0.0
    assert (first_delay(linear), next_delay(linear, 1.0)) == (1.0, 1.0)
    assert first_delay(exp) == 2.0
    assert next_delay(exp, 2.0) == 4.0
    assert next_delay(exp, 8.0) == 16.0


def test_delay_rejects_foreign_policy() -> None:
    with pytest.raises(TypeError):
        first_delay(object())  # type: ignore[arg-type]
