import time
from contextlib import contextmanager
from typing import Iterator, Any
import logging


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Any) -> Iterator[None]:
    """
    Usage:
      with timed(logger, "transcript.submit", audio=url):
          ...
    Emits one INFO "<name>.done ms=<int> key=val ..." on success,
    or one WARNING "<name>.failed ..." when the block raises.
    """
    t0 = time.perf_counter()
    outcome = "failed"
    try:
        yield
        outcome = "done"
    finally:
        dt_ms = int((time.perf_counter() - t0) * 1000)
        suffix = "".join(f" {k}={v}" for k, v in kv.items())
        level = logging.INFO if outcome == "done" else logging.WARNING
        logger.log(level, "%s.%s ms=%d%s", name, outcome, dt_ms, suffix)
