"""Sinks that receive tag state changes from the bridge.

The bridge treats every sink as fire-and-forget: it never waits on the
returned acknowledgement and never lets a sink failure reach the board.
"""

from __future__ import annotations

import json
import logging
import queue
import random
import threading
import time
import uuid
from typing import Any, Dict, Optional, Protocol

import requests

from .models import TagStateNotice

logger = logging.getLogger(__name__)


class TagStateSink(Protocol):
    def notify_tag_state(self, notice: TagStateNotice) -> Any:
        ...


class NullTagStateSink:
    """Acknowledges every notice and does nothing else."""

    def notify_tag_state(self, notice: TagStateNotice) -> bool:
        return True


def safe_post(
    url: str,
    payload: Dict[str, Any],
    retries: int = 3,
    session: Optional[requests.Session] = None,
    delay: float = 1.0,
) -> requests.Response:
    """POST *payload* as JSON with retries, jittered backoff and JSON logging."""
    sess = session or requests.Session()
    backoff = delay
    for attempt in range(retries):
        request_id = uuid.uuid4().hex[:8]
        start = time.time()
        try:
            response = sess.post(url, json=payload, timeout=15)
            latency = time.time() - start
            logger.info(
                json.dumps(
                    {
                        "event": "notify",
                        "url": url,
                        "status": response.status_code,
                        "attempt": attempt + 1,
                        "latency": round(latency, 2),
                        "request_id": request_id,
                    }
                )
            )
            if response.status_code == 429:
                time.sleep(backoff + random.uniform(0, delay))
                backoff *= 2
                continue
            response.raise_for_status()
            return response
        except requests.RequestException as e:
            latency = time.time() - start
            logger.warning(
                json.dumps(
                    {
                        "event": "notify_error",
                        "url": url,
                        "attempt": attempt + 1,
                        "error": str(e),
                        "latency": round(latency, 2),
                        "request_id": request_id,
                    }
                )
            )
            if attempt == retries - 1:
                raise
            time.sleep(backoff + random.uniform(0, delay))
            backoff *= 2
    raise requests.RequestException(f"Failed to notify {url} after {retries} attempts")


class HttpTagStateSink:
    """Posts notices to ``url`` from a single background worker.

    Notices are delivered one at a time in the order they were raised, so a
    retried POST can never land after a newer state for the same tag.
    """

    def __init__(
        self,
        url: str,
        retries: int = 3,
        session: Optional[requests.Session] = None,
        record_id: Optional[str] = None,
    ) -> None:
        self.url = url
        self.retries = retries
        self.session = session or requests.Session()
        self.record_id = record_id
        self._queue: "queue.Queue[Dict[str, Any]]" = queue.Queue()
        self._worker: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def notify_tag_state(self, notice: TagStateNotice) -> int:
        """Queue *notice* for delivery and return its sequence number."""
        if notice.record_id is None and self.record_id is not None:
            notice = notice.model_copy(update={"record_id": self.record_id})
        self._queue.put(notice.model_dump())
        self._ensure_worker()
        return notice.seq

    def join(self) -> None:
        """Block until every queued notice was delivered or given up on."""
        self._queue.join()

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(target=self._run, daemon=True)
                self._worker.start()

    def _run(self) -> None:
        while True:
            payload = self._queue.get()
            try:
                safe_post(self.url, payload, retries=self.retries, session=self.session)
            except requests.RequestException as e:
                logger.error(
                    "Giving up on tag notice %s (seq %s): %s",
                    payload["index"],
                    payload["seq"],
                    e,
                )
            finally:
                self._queue.task_done()
