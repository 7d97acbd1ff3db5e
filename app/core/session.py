import logging
from datetime import datetime, tzinfo
from typing import Callable, Mapping, Protocol

from app.core.auto_submit import AutoSubmitController
from app.core.request_gate import RequestGate
from app.schemas.dashboard_state import DashboardState
from app.schemas.navigation import Navigation, SubmittedForm

_LOGGER = logging.getLogger(__name__)


class StateLoader(Protocol):
    def load(self, params: Mapping[str, str]) -> DashboardState: ...


class DashboardSession:
    def __init__(
        self, tz: tzinfo, clock: Callable[[], datetime] | None = None
    ) -> None:
        """@brief Represent one mounted dashboard page.

        @description The HTTP views build one session per request and load it
        once; the gate only discards results when a session is loaded again
        before an earlier load is applied.

        @param tz Time zone of the page.
        @param clock Optional clock forwarded to the auto-submit controller.
        """
        self.tz = tz
        self.controller = AutoSubmitController(tz, clock=clock)
        self._gate = RequestGate()
        self._state: DashboardState | None = None
        self.pending_navigation: Navigation | None = None

    @property
    def state(self) -> DashboardState | None:
        return self._state

    def begin(self) -> int:
        """@brief Register a new load and return its token."""
        return self._gate.issue()

    def apply(self, token: int, state: DashboardState) -> bool:
        """@brief Display `state` if `token` belongs to the latest load.

        @return True when applied, False when the result was stale.
        """
        if not self._gate.is_current(token):
            _LOGGER.warning("Discarding stale dashboard result for token %s", token)
            return False

        self._state = state
        navigation = self.controller.observe(state)
        if navigation is not None:
            self.pending_navigation = navigation
        return True

    def load(self, loader: StateLoader, params: Mapping[str, str]) -> DashboardState:
        """@brief Load and display state for `params`.

        @return The state produced by this load.
        """
        token = self.begin()
        state = loader.load(params)
        self.apply(token, state)
        return state

    def mount(self) -> Navigation | None:
        """@brief Mount the page form against the displayed state."""
        if self._state is None:
            raise RuntimeError("DashboardSession.mount() called before any state was loaded.")
        navigation = self.controller.mount(self._state)
        if navigation is not None:
            self.pending_navigation = navigation
        return navigation

    def submit(self, form: SubmittedForm, fallback_identifier: str) -> Navigation | None:
        return self.controller.submit(form, fallback_identifier)
