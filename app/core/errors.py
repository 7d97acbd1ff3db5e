class InvalidTimeFormat(ValueError):
    """@brief Raised when a local datetime input cannot be turned into an instant."""


class InvalidInterval(ValueError):
    """@brief Raised when an aggregation interval is outside the supported set."""


class InvalidTimeWindow(ValueError):
    """@brief Raised when window bounds do not parse or are inverted."""


class FetchFailure(Exception):
    """@brief Base class for every terminal outcome of a failed segment fetch.

    @details Fetch failures are never retried; the dashboard surfaces them
    through `DashboardState.error`.
    """


class TransportFailure(FetchFailure):
    def __init__(self, message: str) -> None:
        """@brief Network-level failure or an unreadable response envelope.

        @param message Human-readable description of the failure.
        """
        super().__init__(message)
        self.message = message


class HttpFailure(FetchFailure):
    def __init__(self, status_code: int, body: str) -> None:
        """@brief Non-2xx answer from the aggregation service.

        @param status_code HTTP status returned by the service.
        @param body Raw response body text.
        """
        super().__init__(f"API request failed: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class BusinessFailure(FetchFailure):
    def __init__(self, message: str) -> None:
        """@brief 2xx answer whose envelope carries a non-zero business code.

        @param message Message reported by the service in the envelope.
        """
        super().__init__(f"API error: {message}")
        self.message = message
