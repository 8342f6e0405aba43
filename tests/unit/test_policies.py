"""
Unit tests for failure policies.

Tests cover:
- RandomFailurePolicy probability bounds and seeding
- AlwaysSucceed / AlwaysFail
- ScriptedFailurePolicy replay and exhaustion
- Protocol conformance
"""

import random

import pytest

from orderflow.policies import (
    DEFAULT_FAILURE_PROBABILITY,
    AlwaysFail,
    AlwaysSucceed,
    FailurePolicy,
    RandomFailurePolicy,
    ScriptedFailurePolicy,
)


class TestRandomFailurePolicy:
    def test_default_probability_is_one_in_twenty(self) -> None:
        assert DEFAULT_FAILURE_PROBABILITY == pytest.approx(0.05)
        assert RandomFailurePolicy().probability == pytest.approx(0.05)

    @pytest.mark.parametrize("probability", [-0.01, 1.01])
    def test_probability_out_of_range(self, probability: float) -> None:
        with pytest.raises(ValueError, match="between 0 and 1"):
            RandomFailurePolicy(probability)

    def test_zero_probability_never_fails(self) -> None:
        policy = RandomFailurePolicy(0.0, seed=1)
        assert not any(policy.should_fail() for _ in range(500))

    def test_full_probability_always_fails(self) -> None:
        policy = RandomFailurePolicy(1.0, seed=1)
        assert all(policy.should_fail() for _ in range(500))

    def test_same_seed_same_outcomes(self) -> None:
        first = RandomFailurePolicy(0.5, seed=42)
        second = RandomFailurePolicy(0.5, seed=42)
        assert [first.should_fail() for _ in range(50)] == [
            second.should_fail() for _ in range(50)
        ]

    def test_rng_takes_precedence_over_seed(self) -> None:
        expected = random.Random(7)
        policy = RandomFailurePolicy(0.5, rng=random.Random(7), seed=99)
        assert [policy.should_fail() for _ in range(20)] == [
            expected.random() < 0.5 for _ in range(20)
        ]

    def test_failure_rate_roughly_matches_probability(self) -> None:
        policy = RandomFailurePolicy(0.05, seed=2024)
        failures = sum(policy.should_fail() for _ in range(10_000))
        assert 350 < failures < 650


class TestFixedPolicies:
    def test_always_succeed(self) -> None:
        assert AlwaysSucceed().should_fail() is False

    def test_always_fail(self) -> None:
        assert AlwaysFail().should_fail() is True

    @pytest.mark.parametrize(
        "policy",
        [AlwaysSucceed(), AlwaysFail(), RandomFailurePolicy(), ScriptedFailurePolicy([])],
    )
    def test_satisfy_protocol(self, policy: object) -> None:
        assert isinstance(policy, FailurePolicy)


class TestScriptedFailurePolicy:
    def test_replays_outcomes_in_order(self) -> None:
        policy = ScriptedFailurePolicy([False, True, False])
        assert [policy.should_fail() for _ in range(3)] == [False, True, False]

    def test_tracks_calls_and_remaining(self) -> None:
        policy = ScriptedFailurePolicy([True, True])
        policy.should_fail()
        assert policy.calls == 1
        assert policy.remaining == 1

    def test_exhaustion_raises(self) -> None:
        policy = ScriptedFailurePolicy([False])
        policy.should_fail()
        with pytest.raises(RuntimeError, match="exhausted"):
            policy.should_fail()

    def test_accepts_any_iterable(self) -> None:
        policy = ScriptedFailurePolicy(iter([True]))
        assert policy.should_fail() is True
