"""
In-process scheduling engine.
Fires job bodies from asyncio tasks, one task per active trigger.
"""

import asyncio
import contextlib
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from quickscheduler.engine.domain.engine_port import EnginePort
from quickscheduler.engine.domain.job_descriptor import JobDescriptor
from quickscheduler.engine.domain.job_result import JobResult
from quickscheduler.engine.domain.keys import JobKey, TriggerKey
from quickscheduler.engine.domain.trigger_descriptor import TriggerDescriptor
from quickscheduler.engine.infrastructure.fire_schedule import build_fire_schedule
from quickscheduler.engine.infrastructure.job_runner import execute_job
from quickscheduler.errors import (
    InvalidTriggerError,
    JobAlreadyExistsError,
    TriggerAlreadyExistsError,
    TriggerNotFoundError,
)

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class _TriggerState:
    trigger: TriggerDescriptor
    job_key: JobKey
    fire_times: Iterator[datetime]
    first_fire_time: datetime
    next_fire_time: datetime | None


class AsyncioEngine(EnginePort):
    """
    A scheduling engine running on the current asyncio event loop.

    Example:
        engine = AsyncioEngine("reports")
        await engine.start()

        await engine.schedule_job(job, trigger)

        # Later, swap the trigger without touching the job
        await engine.reschedule_job(trigger.key, faster_trigger)

        await engine.stop()
    """

    def __init__(self, instance_name: str) -> None:
        """
        Initialize the engine.

        Args:
            instance_name: Name the engine is registered under.
        """
        self._instance_name = instance_name
        self._jobs: dict[JobKey, JobDescriptor] = {}
        self._triggers: dict[TriggerKey, _TriggerState] = {}
        self._tasks: dict[TriggerKey, asyncio.Task[None]] = {}
        self._last_results: dict[JobKey, JobResult] = {}
        self._fire_counts: dict[JobKey, int] = {}
        self._running = False

    @property
    def instance_name(self) -> str:
        return self._instance_name

    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the engine and every trigger scheduled so far."""
        if self._running:
            logger.warning(f"Engine '{self._instance_name}' is already running")
            return

        self._running = True
        for trigger_key in self._triggers:
            self._start_trigger(trigger_key)

        logger.info(
            f"Engine '{self._instance_name}' started with {len(self._triggers)} triggers"
        )

    async def stop(self) -> None:
        """Stop the engine and cancel every trigger task."""
        if not self._running:
            return

        self._running = False
        for task in self._tasks.values():
            if not task.done():
                task.cancel()

        if self._tasks:
            await asyncio.gather(*self._tasks.values(), return_exceptions=True)

        self._tasks.clear()
        logger.info(f"Engine '{self._instance_name}' stopped")

    async def schedule_job(self, job: JobDescriptor, trigger: TriggerDescriptor) -> datetime:
        if job.key in self._jobs:
            raise JobAlreadyExistsError(job.key)
        if trigger.key in self._triggers:
            raise TriggerAlreadyExistsError(trigger.key)

        state = self._build_state(trigger, job.key)
        self._jobs[job.key] = job
        self._triggers[trigger.key] = state
        self._fire_counts[job.key] = 0

        if self._running:
            self._start_trigger(trigger.key)

        logger.info(
            f"Scheduled job '{job.key}' with trigger '{trigger.key}' "
            f"(first fire: {state.first_fire_time})"
        )
        return state.first_fire_time

    async def reschedule_job(self, trigger_key: TriggerKey, trigger: TriggerDescriptor) -> datetime:
        old_state = self._triggers.get(trigger_key)
        if old_state is None:
            raise TriggerNotFoundError(trigger_key)
        if trigger.key != trigger_key and trigger.key in self._triggers:
            raise TriggerAlreadyExistsError(trigger.key)

        state = self._build_state(trigger, old_state.job_key)
        await self._cancel_trigger(trigger_key)
        del self._triggers[trigger_key]
        self._triggers[trigger.key] = state

        if self._running:
            self._start_trigger(trigger.key)

        logger.info(
            f"Rescheduled job '{old_state.job_key}': trigger '{trigger_key}' "
            f"replaced by '{trigger.key}' (next fire: {state.first_fire_time})"
        )
        return state.first_fire_time

    def get_job(self, job_key: JobKey) -> JobDescriptor | None:
        return self._jobs.get(job_key)

    def get_trigger(self, trigger_key: TriggerKey) -> TriggerDescriptor | None:
        state = self._triggers.get(trigger_key)
        return state.trigger if state else None

    def get_job_keys(self) -> list[JobKey]:
        return list(self._jobs)

    def get_trigger_keys(self) -> list[TriggerKey]:
        return list(self._triggers)

    def get_next_fire_time(self, trigger_key: TriggerKey) -> datetime | None:
        """
        Get the next time a trigger fires.

        Returns:
            The next fire time, or None if the trigger is unknown or exhausted.
        """
        state = self._triggers.get(trigger_key)
        return state.next_fire_time if state else None

    def get_last_result(self, job_key: JobKey) -> JobResult | None:
        """Get the result of the latest execution of a job, or None."""
        return self._last_results.get(job_key)

    def get_fire_count(self, job_key: JobKey) -> int:
        """Get how many times a job has been executed."""
        return self._fire_counts.get(job_key, 0)

    def _build_state(self, trigger: TriggerDescriptor, job_key: JobKey) -> _TriggerState:
        schedule = build_fire_schedule(trigger)
        fire_times = schedule.fire_times(_now())
        next_fire_time = next(fire_times, None)
        if next_fire_time is None:
            raise InvalidTriggerError(f"Trigger '{trigger.key}' will never fire")
        return _TriggerState(trigger, job_key, fire_times, next_fire_time, next_fire_time)

    def _start_trigger(self, trigger_key: TriggerKey) -> None:
        self._tasks[trigger_key] = asyncio.create_task(
            self._run_trigger(trigger_key, self._triggers[trigger_key])
        )

    async def _cancel_trigger(self, trigger_key: TriggerKey) -> None:
        task = self._tasks.pop(trigger_key, None)
        if task and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _run_trigger(self, trigger_key: TriggerKey, state: _TriggerState) -> None:
        """
        Fire a trigger until it is exhausted, cancelled or the engine stops.

        Args:
            trigger_key: Key of the trigger.
            state: Trigger state, advanced after each firing.
        """
        try:
            while self._running and state.next_fire_time is not None:
                wait_seconds = (state.next_fire_time - _now()).total_seconds()
                if wait_seconds > 0:
                    await asyncio.sleep(wait_seconds)

                if not self._running:
                    break

                fire_time = state.next_fire_time
                job = self._jobs[state.job_key]
                logger.debug(f"Trigger '{trigger_key}' fired at {fire_time.isoformat()}")

                result = await execute_job(job, fire_time)
                self._last_results[job.key] = result
                self._fire_counts[job.key] += 1

                state.next_fire_time = next(state.fire_times, None)

            if state.next_fire_time is None:
                logger.info(f"Trigger '{trigger_key}' completed")

        except asyncio.CancelledError:
            logger.debug(f"Trigger processing cancelled for '{trigger_key}'")
            raise
        except Exception as e:
            logger.error(f"Error in trigger '{trigger_key}' processing: {e}")
