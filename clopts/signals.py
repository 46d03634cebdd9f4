# clopts — MIT Licensed
"""
Defines flow control signals raised once help or version output has been rendered.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they bypass
standard `except Exception` blocks and reach the command-line entry point, which
exits with status 0.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in clopts.

    These are not errors. They tell the caller that the user asked for
    informational output and that normal execution should stop.
    """


class HelpSignal(FlowSignal):
    """Raised after help was rendered for an explicit `--help`."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised after the version was rendered for an explicit `--version`."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
