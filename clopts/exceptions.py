# clopts — MIT Licensed
"""
Defines all custom exception classes raised while declaring and resolving options.

All exceptions inherit from `ClOptsError`, so a command-line entry point can catch
one type, report the message and exit.

Exception Hierarchy:
- ClOptsError
    ├── RegistrationError
    ├── CastError
    ├── BindingError
    ├── ValidationError
    ├── NameResolutionError
    └── ConfigFileError
"""


class ClOptsError(Exception):
    """Base exception for clopts."""


class RegistrationError(ClOptsError):
    """Raised when option declarations conflict or a config file holds an unknown key."""


class CastError(ClOptsError):
    """Raised when raw tokens cannot be converted to the option type."""


class BindingError(ClOptsError):
    """Raised when command-line tokens cannot be bound to declared options."""


class ValidationError(ClOptsError):
    """Raised when required options were not given on the command line."""


class NameResolutionError(ClOptsError):
    """Raised when a token or name does not match any declared option."""


class ConfigFileError(ClOptsError):
    """Raised when a configuration file has an unsupported format or shape."""
