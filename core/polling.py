# core/polling.py
import asyncio
import logging
from typing import Awaitable, Callable, Optional
from model.job import JobStatus, PENDING_STATUSES, TERMINAL_STATUSES
from model.transcript import Transcript
from util.errors import JobFailed, JobTimeout, MalformedResponse, UnknownState

logger = logging.getLogger(__name__)

StatusFetcher = Callable[[str], Awaitable[Transcript]]
Sleeper = Callable[[float], Awaitable[object]]

DEFAULT_INTERVAL_SECONDS = 3.0


class JobPoller:
    """
    Drives a remote job to a terminal status by fixed-interval polling.

    - queued / processing: sleep `interval`, fetch again
    - completed: return the snapshot
    - error: raise JobFailed with the provider's detail
    - anything else: raise UnknownState (never retried)

    Fetch errors propagate untouched and end the loop. Fetches for one job are
    strictly sequential. With `timeout` set, the whole loop is bounded and the
    in-flight fetch is cancelled on expiry.
    """

    def __init__(
        self,
        fetch_status: StatusFetcher,
        *,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        timeout: Optional[float] = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be >= 0")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be > 0")
        self._fetch_status = fetch_status
        self._interval = interval
        self._timeout = timeout
        self._sleep = sleep

    async def wait_for(self, job_id: str) -> Transcript:
        if self._timeout is None:
            return await self._poll(job_id)
        try:
            return await asyncio.wait_for(self._poll(job_id), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("poll.timeout job=%s after=%.1fs", job_id, self._timeout)
            raise JobTimeout(job_id, self._timeout)

    async def _poll(self, job_id: str) -> Transcript:
        attempt = 0
        while True:
            attempt += 1
            snapshot = await self._fetch_status(job_id)
            if snapshot.id != job_id:
                logger.error("poll.id_mismatch job=%s got=%s", job_id, snapshot.id)
                raise MalformedResponse(
                    f"Provider returned job {snapshot.id!r} while polling {job_id!r}"
                )

            status = snapshot.status
            logger.debug("poll.tick job=%s attempt=%d status=%s", job_id, attempt, status)

            if status in PENDING_STATUSES:
                await self._sleep(self._interval)
                continue

            if status not in TERMINAL_STATUSES:
                logger.error("poll.unknown_status job=%s status=%r", job_id, status)
                raise UnknownState(status)

            if status == JobStatus.completed.value:
                logger.info("poll.completed job=%s attempts=%d", job_id, attempt)
                return snapshot

            logger.warning("poll.failed job=%s attempts=%d error=%s", job_id, attempt, snapshot.error)
            raise JobFailed(job_id, snapshot.error)
