"""Background execution for notification tasks.

There is no retry queue: a failed task is logged with its correlation ID,
operation and trip ID so it can be replayed by hand.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import cache
from typing import Any

from django.conf import settings
from django.db import connections, transaction
from django.utils.module_loading import import_string

from trips.notifications.interfaces import Dispatcher, NotificationTask

logger = logging.getLogger(__name__)


def run_task(task: NotificationTask) -> bool:
    """Run a task, logging instead of raising on failure.

    Returns True if the task completed.
    """
    logger.debug(
        "running %s notification trip_id=%s correlation_id=%s",
        task.operation,
        task.trip_id,
        task.correlation_id,
    )
    try:
        task.send(task.trip_id)
    except Exception:
        logger.exception(
            "failed to send %s notification trip_id=%s correlation_id=%s",
            task.operation,
            task.trip_id,
            task.correlation_id,
        )
        return False
    return True


class InlineDispatcher(Dispatcher):
    """Runs tasks immediately in the calling thread."""

    def submit(self, task: NotificationTask) -> None:
        run_task(task)


class ThreadPoolDispatcher(Dispatcher):
    """Runs tasks on a bounded pool of worker threads.

    Submission waits for the current transaction to commit so workers never
    read rows the request has not committed yet.
    """

    def __init__(self, max_workers: int = 4) -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="trip-notifications"
        )

    def submit(self, task: NotificationTask) -> None:
        transaction.on_commit(lambda: self._executor.submit(self._work, task))

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    @staticmethod
    def _work(task: NotificationTask) -> bool:
        try:
            return run_task(task)
        finally:
            connections.close_all()


@cache
def _load_dispatcher(path: str, options: tuple[tuple[str, Any], ...]) -> Dispatcher:
    return import_string(path)(**dict(options))


def get_dispatcher() -> Dispatcher:
    """Return the dispatcher configured in settings.TRIPS.

    One instance is built per distinct DISPATCHER and DISPATCHER_OPTIONS pair.
    """
    config = settings.TRIPS
    options = tuple(sorted(config.get("DISPATCHER_OPTIONS", {}).items()))
    return _load_dispatcher(config["DISPATCHER"], options)
