from datetime import tzinfo
from pathlib import Path
from typing import Sequence

import plotly.express as px
from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.core.chart import to_chart_points
from app.core.time_converter import (
    INVALID_DATE_LABEL,
    utc_to_local_hhmm,
    utc_to_local_input_string,
)
from app.schemas.catalog import IdentifierCatalog
from app.schemas.chart_point import ChartPoint
from app.schemas.dashboard_state import DashboardState
from app.schemas.interval import Interval

_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

_INTERVAL_LABELS = {
    Interval.TEN_MINUTES: "10 Minutes",
    Interval.THIRTY_MINUTES: "30 Minutes",
    Interval.ONE_HOUR: "1 Hour",
    Interval.ONE_DAY: "1 Day",
}

EMPTY_CHART_MESSAGE = (
    "No data available to display the chart. Please adjust your filters "
    "or wait for data to be collected."
)


def _template_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
    )


def _local_date(value: str, tz: tzinfo) -> str:
    try:
        return utc_to_local_input_string(value, tz)[:10]
    except (TypeError, ValueError):
        return INVALID_DATE_LABEL


def _form_value(value: str | None, tz: tzinfo) -> str:
    """@brief Pre-fill a datetime-local input; unparseable values are echoed back."""
    if not value:
        return ""
    try:
        return utc_to_local_input_string(value, tz)
    except ValueError:
        return value


class PlotService:
    def __init__(self, tz: tzinfo, tz_name: str) -> None:
        """@brief Initialize the renderer for one page time zone.

        @param tz Time zone used for labels, details and form values.
        @param tz_name IANA name of `tz`, echoed into the form.
        """
        self.tz = tz
        self.tz_name = tz_name

    def render_series(self, identifier: str, points: Sequence[ChartPoint]) -> str:
        """@brief Render a Plotly line chart of watched duration over time.

        @param identifier Video identifier used in the chart title.
        @param points Chart points in display order.
        @return HTML fragment containing the chart.
        """
        figure = px.line(
            x=[point.time_label for point in points],
            y=[point.duration for point in points],
            markers=True,
            labels={"x": f"Time ({self.tz_name})", "y": "Watch Duration (seconds)"},
            title=f"Watched duration for {identifier}",
        )

        figure.update_traces(
            name="Watched Duration",
            customdata=[
                [
                    utc_to_local_hhmm(point.original_start_time, self.tz),
                    _local_date(point.original_start_time, self.tz),
                    utc_to_local_hhmm(point.original_end_time, self.tz),
                    _local_date(point.original_end_time, self.tz),
                ]
                for point in points
            ],
            hovertemplate=(
                "Start: %{customdata[0]} (%{customdata[1]})<br>"
                "End: %{customdata[2]} (%{customdata[3]})<br>"
                "Duration: %{y} seconds<extra></extra>"
            ),
        )
        figure.update_layout(template="plotly_white")

        return figure.to_html(full_html=False, include_plotlyjs="cdn")

    def render_page(self, state: DashboardState, catalog: IdentifierCatalog) -> str:
        """@brief Render the full dashboard page.

        @description The chart area shows an explicit empty-state message when
        there are no segments, whether or not a window was selected.

        @param state Client-visible dashboard state.
        @param catalog Identifiers offered as suggestions in the form.
        @return Full HTML document.
        """
        points = to_chart_points(state.segments, self.tz)
        chart_html = self.render_series(state.identifier, points) if points else None

        template = _template_env().get_template("dashboard.html.j2")
        return template.render(
            state=state,
            identifiers=catalog.identifiers,
            intervals=list(_INTERVAL_LABELS.items()),
            start_local=_form_value(state.start, self.tz),
            end_local=_form_value(state.end, self.tz),
            tz_name=self.tz_name,
            chart_html=chart_html,
            empty_message=EMPTY_CHART_MESSAGE,
        )
