"""Tests for poll_until."""

import pytest

from ui_automation.core.errors import PollTimeoutError
from ui_automation.core.poller import poll_until
from ui_automation.models.poll import PollConfig, PollMode


class CountingCondition:
    """Condition that becomes true on a given evaluation."""

    def __init__(self, true_on: int | None = None, raise_until: int = 0) -> None:
        self.true_on = true_on
        self.raise_until = raise_until
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        if self.calls <= self.raise_until:
            raise RuntimeError(f"not ready on call {self.calls}")
        return self.true_on is not None and self.calls >= self.true_on


class TestIntervalMode:
    def test_already_true_returns_immediately(self, clock) -> None:
        outcome = poll_until(lambda: True, PollConfig.fixed(timeout_ms=1000, interval_ms=250))
        assert outcome.attempts == 1
        assert outcome.elapsed_ms == 0
        assert outcome.mode == PollMode.INTERVAL
        assert clock.sleeps == []

    def test_repeated_calls_start_fresh(self, clock) -> None:
        config = PollConfig.fixed(timeout_ms=1000, interval_ms=250)
        first = poll_until(lambda: True, config)
        second = poll_until(lambda: True, config)
        assert first.attempts == second.attempts == 1
        assert clock.sleeps == []

    @pytest.mark.parametrize("k", [1, 2, 3, 4])
    def test_succeeds_after_exactly_k_evaluations(self, clock, k: int) -> None:
        condition = CountingCondition(true_on=k)
        outcome = poll_until(condition, PollConfig.fixed(timeout_ms=1000, interval_ms=250))
        assert condition.calls == k
        assert outcome.attempts == k
        assert outcome.elapsed_ms == (k - 1) * 250

    @pytest.mark.parametrize(
        "timeout_ms,interval_ms",
        [(1000, 250), (1000, 375), (2000, 500), (500, 125)],
    )
    def test_always_false_times_out_within_one_interval(
        self, clock, timeout_ms: int, interval_ms: int
    ) -> None:
        with pytest.raises(PollTimeoutError) as exc_info:
            poll_until(lambda: False, PollConfig.fixed(timeout_ms=timeout_ms, interval_ms=interval_ms))
        assert timeout_ms <= clock.elapsed_ms < timeout_ms + interval_ms
        assert exc_info.value.elapsed_ms == clock.elapsed_ms

    def test_interval_at_least_timeout_evaluates_once(self, clock) -> None:
        condition = CountingCondition()
        with pytest.raises(PollTimeoutError) as exc_info:
            poll_until(condition, PollConfig.fixed(timeout_ms=500, interval_ms=1000))
        assert condition.calls == 1
        assert exc_info.value.attempts == 1

    def test_zero_timeout_evaluates_once_without_sleeping(self, clock) -> None:
        condition = CountingCondition()
        with pytest.raises(PollTimeoutError):
            poll_until(condition, PollConfig.fixed(timeout_ms=0, interval_ms=250))
        assert condition.calls == 1
        assert clock.sleeps == []

    def test_zero_timeout_true_condition_succeeds(self, clock) -> None:
        outcome = poll_until(lambda: True, PollConfig.fixed(timeout_ms=0, interval_ms=250))
        assert outcome.attempts == 1

    def test_never_sleeps_past_deadline(self, clock) -> None:
        with pytest.raises(PollTimeoutError):
            poll_until(lambda: False, PollConfig.fixed(timeout_ms=1000, interval_ms=375))
        assert clock.sleeps_ms == [375, 375, 250]

    def test_slow_condition_counts_toward_timeout(self, clock) -> None:
        def slow() -> bool:
            clock.advance_ms(600)
            return False

        with pytest.raises(PollTimeoutError) as exc_info:
            poll_until(slow, PollConfig.fixed(timeout_ms=1000, interval_ms=250))
        assert exc_info.value.attempts == 2

    def test_timeout_message_names_condition(self, clock) -> None:
        with pytest.raises(PollTimeoutError, match="login button to be visible"):
            poll_until(
                lambda: False,
                PollConfig.fixed(timeout_ms=500, interval_ms=250),
                description="login button to be visible",
            )

    def test_truthy_values_count_as_satisfied(self, clock) -> None:
        outcome = poll_until(lambda: ["element"], PollConfig.fixed(timeout_ms=500, interval_ms=250))
        assert outcome.attempts == 1

    def test_default_config_is_interval_mode(self, clock) -> None:
        with pytest.raises(PollTimeoutError) as exc_info:
            poll_until(lambda: False)
        assert exc_info.value.mode == "interval"
        assert clock.elapsed_ms == 10000


class TestErrorPolicy:
    def test_errors_swallowed_by_default(self, clock) -> None:
        condition = CountingCondition(true_on=3, raise_until=2)
        outcome = poll_until(condition, PollConfig.fixed(timeout_ms=1000, interval_ms=250))
        assert outcome.attempts == 3

    def test_timeout_keeps_last_swallowed_error(self, clock) -> None:
        condition = CountingCondition(raise_until=100)
        with pytest.raises(PollTimeoutError) as exc_info:
            poll_until(condition, PollConfig.fixed(timeout_ms=500, interval_ms=250))
        error = exc_info.value
        assert isinstance(error.last_error, RuntimeError)
        assert str(error.last_error) == f"not ready on call {condition.calls}"
        assert error.__cause__ is error.last_error
        assert "last error" in str(error)

    def test_errors_propagate_when_configured(self, clock) -> None:
        condition = CountingCondition(raise_until=1)
        with pytest.raises(RuntimeError, match="not ready on call 1"):
            poll_until(
                condition,
                PollConfig.fixed(timeout_ms=1000, interval_ms=250, propagate_errors=True),
            )
        assert condition.calls == 1
        assert clock.sleeps == []


class TestBackoffMode:
    def test_delays_double(self, clock) -> None:
        with pytest.raises(PollTimeoutError) as exc_info:
            poll_until(lambda: False, PollConfig.backoff(max_attempts=5, base_delay_ms=1000))
        assert clock.sleeps_ms == [1000, 2000, 4000, 8000]
        assert exc_info.value.attempts == 5
        assert exc_info.value.mode == "backoff"
        assert "5 attempts with exponential backoff" in str(exc_info.value)

    def test_custom_multiplier(self, clock) -> None:
        with pytest.raises(PollTimeoutError):
            poll_until(
                lambda: False,
                PollConfig.backoff(max_attempts=3, base_delay_ms=100, backoff_base=3.0),
            )
        assert clock.sleeps_ms == [100, 300]

    def test_success_stops_early(self, clock) -> None:
        condition = CountingCondition(true_on=3)
        outcome = poll_until(condition, PollConfig.backoff(max_attempts=5, base_delay_ms=1000))
        assert outcome.attempts == 3
        assert outcome.mode == PollMode.BACKOFF
        assert clock.sleeps_ms == [1000, 2000]
        assert outcome.elapsed_ms == 3000

    def test_single_attempt_never_sleeps(self, clock) -> None:
        with pytest.raises(PollTimeoutError):
            poll_until(lambda: False, PollConfig.backoff(max_attempts=1))
        assert clock.sleeps == []

    def test_swallowed_errors_count_as_attempts(self, clock) -> None:
        condition = CountingCondition(raise_until=100)
        with pytest.raises(PollTimeoutError) as exc_info:
            poll_until(condition, PollConfig.backoff(max_attempts=3, base_delay_ms=10))
        assert condition.calls == 3
        assert isinstance(exc_info.value.last_error, RuntimeError)
