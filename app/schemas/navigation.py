from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict


class Navigation(BaseModel):
    """@brief Query parameters of a dashboard request issued by the page itself.

    @details Produced by auto-submission and by manual form submission; the
    bounds are always canonical UTC strings.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    interval: str
    start: str
    end: str
    tz: str | None = None

    def to_query(self) -> dict[str, str]:
        query = {
            "identifier": self.identifier,
            "interval": self.interval,
            "start": self.start,
            "end": self.end,
        }
        if self.tz:
            query["tz"] = self.tz
        return query

    def to_url(self, path: str = "/") -> str:
        """@brief Build the dashboard URL this navigation points to."""
        return f"{path}?{urlencode(self.to_query())}"


class SubmittedForm(BaseModel):
    """@brief Raw values of a manually submitted dashboard form.

    @var start_local: Start as `YYYY-MM-DDTHH:MM` in the page time zone.
    @var end_local: End as `YYYY-MM-DDTHH:MM` in the page time zone.
    """

    identifier: str = ""
    interval: str = "1h"
    start_local: str = ""
    end_local: str = ""
