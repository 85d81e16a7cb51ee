"""Event package for the file arranger.

Provides EventChannel, the synchronous observer used by the analyze and
organize phases to report progress and log messages.
"""

from .event_channel import EventChannel, LogListener, ProgressListener

__all__ = ["EventChannel", "LogListener", "ProgressListener"]
