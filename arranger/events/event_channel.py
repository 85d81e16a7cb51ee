"""Synchronous progress and log notifications for the arranger core.

The analyze and organize phases write to an EventChannel; the presentation
layer registers listeners on it. Listeners run on the caller's thread, in
registration order, before the phase moves on to the next file.

Example:
    >>> channel = EventChannel()
    >>> channel.add_log_listener(print)
    >>> channel.emit_log("Created folder: Images")
    Created folder: Images
"""

import logging
from typing import Callable, List

from arranger.models import ProgressEvent

logger = logging.getLogger(__name__)

ProgressListener = Callable[[ProgressEvent], None]
LogListener = Callable[[str], None]


class EventChannel:
    """Fan-out of progress events and free-text log messages to listeners."""

    def __init__(self) -> None:
        self._progress_listeners: List[ProgressListener] = []
        self._log_listeners: List[LogListener] = []

    def add_progress_listener(self, listener: ProgressListener) -> None:
        self._progress_listeners.append(listener)

    def remove_progress_listener(self, listener: ProgressListener) -> None:
        """Unregister a progress listener; unknown listeners are ignored."""
        if listener in self._progress_listeners:
            self._progress_listeners.remove(listener)

    def add_log_listener(self, listener: LogListener) -> None:
        self._log_listeners.append(listener)

    def remove_log_listener(self, listener: LogListener) -> None:
        """Unregister a log listener; unknown listeners are ignored."""
        if listener in self._log_listeners:
            self._log_listeners.remove(listener)

    def emit_progress(self, event: ProgressEvent) -> None:
        """Deliver a progress event to every registered listener.

        Args:
            event: The ProgressEvent describing the file just processed.
        """
        logger.debug(str(event))
        for listener in list(self._progress_listeners):
            listener(event)

    def emit_log(self, message: str) -> None:
        """Deliver a log message to every listener and the Python logger.

        Args:
            message: Free-text message for the presentation layer.
        """
        logger.debug(message)
        for listener in list(self._log_listeners):
            listener(message)
