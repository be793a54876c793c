from enum import Enum
from typing import Final


class JobStatus(str, Enum):
    queued = "queued"
    processing = "processing"
    completed = "completed"
    error = "error"


PENDING_STATUSES: Final[frozenset[str]] = frozenset(
    {JobStatus.queued.value, JobStatus.processing.value}
)
TERMINAL_STATUSES: Final[frozenset[str]] = frozenset(
    {JobStatus.completed.value, JobStatus.error.value}
)
