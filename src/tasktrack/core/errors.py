# src/tasktrack/core/errors.py

"""
Error taxonomy.

Remote-call rejections carry their human-readable detail in the message;
callers that only want "it failed" catch TaskTrackerError.
"""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for every error raised by tasktrack."""


class NotFoundError(TaskTrackerError):
    """A project or task id has no match."""


class InvalidTransitionError(TaskTrackerError):
    """The requested status equals the task's current status."""


class TransportFailureError(TaskTrackerError):
    """Simulated network failure (only produced through the fault-injection hook)."""


class OperationFailedError(TaskTrackerError):
    """Generic failure re-raised by the wrapping calls after logging."""


class DuplicateProjectError(TaskTrackerError, ValueError):
    """A project with the same id is already registered."""
