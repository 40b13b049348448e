"""Custom exception hierarchy for hangul-drill.

The Hangul core itself never raises for string input; absence is reported
with ``None``. These exceptions cover the layers around it: configuration
and unit selection. Each carries the ``error_code`` and HTTP ``status_code``
the API reports it with; configuration faults are server errors.
"""


class HangulDrillException(Exception):  # noqa: N818
    """Base exception for hangul-drill.

    All custom exceptions in hangul-drill should inherit from this class.
    This allows callers to catch all hangul-drill specific exceptions with
    a single except clause if needed.
    """

    error_code = "HANGUL_DRILL_ERROR"
    status_code = 400

    def __init__(self, message: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message


class ConfigurationError(HangulDrillException):
    """Configuration is invalid.

    Raised when the application configuration is invalid or missing
    required values.
    """

    error_code = "CONFIGURATION_ERROR"
    status_code = 500

    def __init__(self, message: str = "Invalid configuration") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)


class UnknownMatchUnitError(HangulDrillException):
    """Match unit name is not recognised.

    Raised when a caller asks for a comparison unit other than
    ``jamo`` or ``keystroke``.
    """

    error_code = "UNKNOWN_MATCH_UNIT"

    def __init__(self, message: str = "Unknown match unit") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
