"""
Errors raised by the planning engine.
"""


class InvalidInput(ValueError):
    """Caller data breaks an integrity rule; no assignment was attempted."""


class SchedulingInProgress(RuntimeError):
    """Another scheduling pass already holds the planning lock."""
