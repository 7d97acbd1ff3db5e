import logging
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Callable

from app.core.default_window import default_local_inputs
from app.core.errors import InvalidTimeFormat
from app.core.time_converter import format_utc, local_input_to_utc
from app.schemas.dashboard_state import DashboardState
from app.schemas.navigation import Navigation, SubmittedForm

_LOGGER = logging.getLogger(__name__)


class AutoSubmitState(str, Enum):
    AWAITING_MOUNT = "awaiting_mount"
    IDLE = "idle"
    SUBMITTING = "submitting"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AutoSubmitController:
    def __init__(
        self, tz: tzinfo, clock: Callable[[], datetime] | None = None
    ) -> None:
        """@brief Create a controller for one page load.

        @param tz Time zone of the page; default windows follow its calendar day.
        @param clock Callable returning the current aware datetime.
        """
        self._tz = tz
        self._clock = clock or _utc_now
        self._state = AutoSubmitState.AWAITING_MOUNT
        self._mounted = False
        self._fired = False

    @property
    def state(self) -> AutoSubmitState:
        return self._state

    @property
    def tz_name(self) -> str | None:
        return getattr(self._tz, "key", None)

    @staticmethod
    def _needs_default(view: DashboardState) -> bool:
        """@brief Check the auto-submit trigger: no window, no data, no error."""
        return not view.has_window and not view.segments and not view.error

    def mount(self, view: DashboardState) -> Navigation | None:
        """@brief Attach the form and evaluate the trigger for the first time.

        @param view State currently displayed by the page.
        @return Default-window navigation when the trigger holds, otherwise None.
        """
        self._mounted = True
        return self.observe(view)

    def observe(self, view: DashboardState) -> Navigation | None:
        """@brief Re-evaluate the trigger after a render.

        @description Fires at most once per controller. Any observation where
        the trigger no longer holds moves the controller to `IDLE`.

        @param view State currently displayed by the page.
        @return Navigation to issue, or None.
        """
        if not self._mounted:
            return None

        if not self._needs_default(view):
            self._state = AutoSubmitState.IDLE
            return None

        if self._fired:
            return None

        self._fired = True
        start_local, end_local = default_local_inputs(self._clock(), self._tz)
        try:
            navigation = self._build_navigation(
                view.identifier, view.interval, start_local, end_local
            )
        except InvalidTimeFormat as exc:
            _LOGGER.warning("Default window could not be converted: %s", exc)
            self._state = AutoSubmitState.IDLE
            return None

        self._state = AutoSubmitState.SUBMITTING
        _LOGGER.info("Auto-submitting default window %s - %s", navigation.start, navigation.end)
        return navigation

    def submit(self, form: SubmittedForm, fallback_identifier: str) -> Navigation | None:
        """@brief Convert a manually submitted form into a navigation.

        @param form Raw form values with local start/end inputs.
        @param fallback_identifier Identifier used when the form field is blank.
        @return Navigation with UTC bounds, or None when a bound does not parse
        (the submission is dropped and nothing is requested).
        """
        identifier = form.identifier.strip() or fallback_identifier
        try:
            return self._build_navigation(
                identifier, form.interval, form.start_local, form.end_local
            )
        except InvalidTimeFormat as exc:
            _LOGGER.info("Submission aborted: %s", exc)
            return None

    def _build_navigation(
        self, identifier: str, interval: str, start_local: str, end_local: str
    ) -> Navigation:
        start = local_input_to_utc(start_local, self._tz)
        end = local_input_to_utc(end_local, self._tz)
        return Navigation(
            identifier=identifier,
            interval=interval,
            start=format_utc(start),
            end=format_utc(end),
            tz=self.tz_name,
        )
