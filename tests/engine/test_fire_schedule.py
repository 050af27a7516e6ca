"""Tests for fire schedules."""

from datetime import datetime, timedelta
from itertools import islice

import pytest

from quickscheduler.engine import (
    CronFireSchedule,
    CronTriggerDescriptor,
    IntervalFireSchedule,
    IntervalTriggerDescriptor,
    TriggerDescriptor,
    TriggerKey,
    build_fire_schedule,
)
from quickscheduler.errors import InvalidTriggerError

START = datetime(2024, 1, 1, 8, 0, 0)
KEY = TriggerKey("DefaultInterval", "group")


class TestIntervalFireSchedule:
    """Test cases for IntervalFireSchedule."""

    def test_fires_now_then_every_interval(self) -> None:
        """Test the first fire time is the start and the period is constant."""
        fire_times = list(islice(IntervalFireSchedule(5).fire_times(START), 3))

        assert fire_times == [
            START,
            START + timedelta(seconds=5),
            START + timedelta(seconds=10),
        ]

    def test_repeat_count(self) -> None:
        """Test that repeat_count bounds the number of repeats after the first firing."""
        fire_times = list(IntervalFireSchedule(1, repeat_count=2).fire_times(START))

        assert len(fire_times) == 3

    def test_start_at(self) -> None:
        """Test that an explicit start time overrides the schedule time."""
        start_at = START + timedelta(hours=1)

        first = next(IntervalFireSchedule(60, start_at=start_at).fire_times(START))

        assert first == start_at

    def test_zero_interval_rejected(self) -> None:
        """Test that a zero interval can never fire."""
        with pytest.raises(InvalidTriggerError, match="greater than zero"):
            IntervalFireSchedule(0)


class TestCronFireSchedule:
    """Test cases for CronFireSchedule."""

    def test_daily_at_noon(self) -> None:
        """Test a daily schedule with the seconds field first."""
        fire_times = list(islice(CronFireSchedule("0 0 12 * * *").fire_times(START), 2))

        assert fire_times == [datetime(2024, 1, 1, 12, 0, 0), datetime(2024, 1, 2, 12, 0, 0)]

    def test_every_five_seconds(self) -> None:
        """Test a seconds-level schedule."""
        start = datetime(2024, 1, 1, 0, 0, 2)

        first = next(CronFireSchedule("*/5 * * * * *").fire_times(start))

        assert first == datetime(2024, 1, 1, 0, 0, 5)

    def test_start_at_later_than_schedule_time(self) -> None:
        """Test that fire times begin after start_at."""
        schedule = CronFireSchedule("0 0 12 * * *", start_at=datetime(2024, 2, 1))

        assert next(schedule.fire_times(START)) == datetime(2024, 2, 1, 12, 0, 0)

    def test_malformed_expression(self) -> None:
        """Test that croniter errors surface at construction."""
        with pytest.raises(ValueError):
            CronFireSchedule("not a cron")


class TestBuildFireSchedule:
    """Test building schedules from descriptors."""

    def test_interval_descriptor(self) -> None:
        """Test that start_now ignores start_at."""
        trigger = IntervalTriggerDescriptor(
            key=KEY,
            start_at=START + timedelta(days=1),
            interval_seconds=10,
            start_now=True,
        )

        schedule = build_fire_schedule(trigger)

        assert isinstance(schedule, IntervalFireSchedule)
        assert next(schedule.fire_times(START)) == START

    def test_cron_descriptor(self) -> None:
        """Test building a cron schedule."""
        trigger = CronTriggerDescriptor(key=KEY, cron_expression="0 0 12 * * *")

        assert isinstance(build_fire_schedule(trigger), CronFireSchedule)

    def test_unsupported_descriptor(self) -> None:
        """Test that a bare descriptor cannot be scheduled."""
        with pytest.raises(InvalidTriggerError, match="Unsupported trigger type"):
            build_fire_schedule(TriggerDescriptor(key=KEY))
