from enum import Enum

from app.core.errors import InvalidInterval


class Interval(str, Enum):
    """@brief Aggregation bucket sizes accepted by the aggregation service.

    @details Values are the exact strings sent on the wire and used in the
    dashboard query string.
    """

    TEN_MINUTES = "10m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    ONE_DAY = "1d"

    @classmethod
    def default(cls) -> "Interval":
        """@brief Return the interval used when none is requested."""
        return cls.ONE_HOUR

    @classmethod
    def parse(cls, value: object) -> "Interval":
        """@brief Convert a raw query value into an `Interval`.

        @param value Raw interval value (e.g. `"30m"`).
        @return Matching `Interval` member.
        @throws InvalidInterval If the value is not one of `10m`, `30m`, `1h`, `1d`.
        """
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).strip())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidInterval(
                f"interval must be one of {allowed}; got '{value}'."
            ) from exc
