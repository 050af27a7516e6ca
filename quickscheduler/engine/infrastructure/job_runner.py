"""
Job body invocation.
Runs one job body and turns its outcome into a JobResult.
"""

import asyncio
import inspect
import logging
import time
from datetime import datetime

from quickscheduler.engine.domain.job_descriptor import JobDescriptor
from quickscheduler.engine.domain.job_result import JobResult

logger = logging.getLogger(__name__)


async def execute_job(job: JobDescriptor, fire_time: datetime) -> JobResult:
    """
    Invoke a job body with its payload.

    Async bodies are awaited on the running loop; sync bodies run in a worker
    thread so they do not block other triggers. Any exception raised by the
    body is logged and returned as a failed result, never raised.

    Args:
        job: Job to run.
        fire_time: Fire time that caused this execution.

    Returns:
        JobResult describing the execution.
    """
    start_time = time.perf_counter()
    try:
        if inspect.iscoroutinefunction(job.body):
            value = await job.body(job.payload)
        else:
            value = await asyncio.to_thread(job.body, job.payload)
    except Exception as e:
        execution_time = time.perf_counter() - start_time
        logger.error(f"Job '{job.key}' failed at {fire_time.isoformat()}: {e}")
        return JobResult.failure(job.key, fire_time, execution_time, e)

    execution_time = time.perf_counter() - start_time
    logger.debug(f"Job '{job.key}' completed in {execution_time:.3f}s")
    return JobResult.success(job.key, fire_time, execution_time, value)
