"""
VehicleAnalytics - Dashboard Application

Dash/Plotly dashboard for vehicle registration analytics.
Provides KPI cards, trend and market share charts, YoY/QoQ growth views,
statistics tables with CSV exports, and mock data initialization.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import dash
from dash import dcc, html, dash_table, Input, Output, State
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc  # type: ignore[import-untyped]
import plotly.graph_objects as go

from vehicle_analytics.dashboard.data_provider import DashboardDataProvider
from vehicle_analytics.utils.export import csv_download


logger = logging.getLogger(__name__)


class VehicleAnalyticsDashboard:
    """
    Single-page dashboard for vehicle registration analytics.

    Features:
    - Filter bar (date range, vehicle type, manufacturer, fuel type, year, period)
    - KPI cards (vehicles, registrations, manufacturers, period change)
    - Registration trend chart and market share pie
    - YoY and QoQ growth charts and tables
    - Statistics table with CSV export
    - Mock data initialization
    """

    # Refresh interval in milliseconds
    REFRESH_INTERVAL_MS = 300000  # 5 minutes

    COLORS = {
        "primary": "#375a7f",
        "positive": "#00bc8c",
        "negative": "#e74c3c",
        "neutral": "#adb5bd",
        "info": "#3498db",
        "warning": "#f39c12"
    }

    PIE_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8", "#82CA9D", "#FFC658", "#FF6B6B", "#6c757d"]

    PERIOD_OPTIONS = [
        {"label": "Daily", "value": "daily"},
        {"label": "Weekly", "value": "weekly"},
        {"label": "Monthly", "value": "monthly"},
        {"label": "Quarterly", "value": "quarterly"},
        {"label": "Yearly", "value": "yearly"}
    ]

    TABLE_STYLE = {
        "style_cell": {"backgroundColor": "#303030", "color": "white", "textAlign": "left"},
        "style_header": {"backgroundColor": "#444", "fontWeight": "bold"}
    }

    GROWTH_CONDITIONAL_STYLE = [
        {
            "if": {"filter_query": "{growth_type} = positive", "column_id": "growth_percentage"},
            "color": "#00bc8c"
        },
        {
            "if": {"filter_query": "{growth_type} = negative", "column_id": "growth_percentage"},
            "color": "#e74c3c"
        }
    ]

    STATS_COLUMNS = [
        "vehicle_type", "manufacturer", "fuel_type", "total_registrations",
        "total_vehicles", "first_registration", "last_registration"
    ]
    YOY_COLUMNS = [
        "vehicle_type", "manufacturer", "previous_year", "current_year", "previous_vehicles",
        "current_vehicles", "absolute_change", "growth_percentage", "growth_type"
    ]
    QOQ_COLUMNS = [
        "vehicle_type", "manufacturer", "year", "previous_quarter", "current_quarter",
        "previous_vehicles", "current_vehicles", "absolute_change", "growth_percentage", "growth_type"
    ]

    def __init__(
        self,
        data_provider: DashboardDataProvider,
        app_name: str = "Vehicle Registration Analytics",
        server: Any = True
    ):
        """
        Initialize the dashboard.

        Args:
            data_provider: Provider that runs the analytics views
            app_name: Application name for title
            server: Flask server to attach to (True creates a new one)
        """
        self.app_name = app_name
        self.data_provider = data_provider

        self.app = dash.Dash(
            __name__,
            server=server,
            external_stylesheets=[dbc.themes.DARKLY],
            title=app_name,
            suppress_callback_exceptions=True
        )

        self.app.layout = self._build_layout()
        self._register_callbacks()

        logger.info(f"[OK] Dashboard initialized: {app_name}")

    @property
    def server(self):
        """Underlying Flask server (for WSGI and API blueprints)."""
        return self.app.server

    def _build_layout(self) -> dbc.Container:
        """
        Build the dashboard layout.

        Returns:
            Dash Bootstrap Container with all components
        """
        return dbc.Container([
            # Incremented after each data initialization to force a refresh
            dcc.Store(id="data-version", data=0),

            # Header
            dbc.Row([
                dbc.Col([
                    html.H1(self.app_name, className="text-primary"),
                    html.P(
                        "Registration totals, market share and growth across manufacturers",
                        className="text-muted"
                    )
                ], width=7),
                dbc.Col([
                    dbc.Button(
                        "Initialize Mock Data",
                        id="init-data-btn",
                        color="primary",
                        size="sm",
                        className="float-end mb-2"
                    ),
                    html.Div(id="init-status", className="text-end text-muted small clearfix"),
                    html.Div(id="last-updated", className="text-end text-muted"),
                    dcc.Interval(
                        id="refresh-interval",
                        interval=self.REFRESH_INTERVAL_MS,
                        n_intervals=0
                    )
                ], width=5)
            ], className="mb-4 mt-3"),

            self._build_filter_card(),

            # KPI Cards Row
            dbc.Row([
                dbc.Col(self._build_kpi_card("kpi-total-vehicles", "Total Vehicles"), width=3),
                dbc.Col(self._build_kpi_card("kpi-total-registrations", "Registrations"), width=3),
                dbc.Col(self._build_kpi_card("kpi-manufacturers", "Manufacturers"), width=3),
                dbc.Col(self._build_kpi_card("kpi-period-change", "Period Change", "kpi-period-label"), width=3),
            ], className="mb-4"),

            # Charts Row
            dbc.Row([
                dbc.Col([
                    dbc.Card([
                        dbc.CardHeader("Registration Trends"),
                        dbc.CardBody([dcc.Graph(id="trends-chart", style={"height": "320px"})])
                    ])
                ], width=8),
                dbc.Col([
                    dbc.Card([
                        dbc.CardHeader("Market Share by Manufacturer"),
                        dbc.CardBody([dcc.Graph(id="market-share-chart", style={"height": "320px"})])
                    ])
                ], width=4)
            ], className="mb-4"),

            # Growth Charts Row
            dbc.Row([
                dbc.Col([
                    dbc.Card([
                        dbc.CardHeader("Year-over-Year Growth"),
                        dbc.CardBody([dcc.Graph(id="yoy-chart", style={"height": "320px"})])
                    ])
                ], width=6),
                dbc.Col([
                    dbc.Card([
                        dbc.CardHeader("Quarter-over-Quarter Growth"),
                        dbc.CardBody([dcc.Graph(id="qoq-chart", style={"height": "320px"})])
                    ])
                ], width=6)
            ], className="mb-4"),

            # Tables
            self._build_table_card("stats", "Registration Statistics", self.STATS_COLUMNS),
            self._build_table_card("yoy", "YoY Growth Detail", self.YOY_COLUMNS, growth=True),
            self._build_table_card("qoq", "QoQ Growth Detail", self.QOQ_COLUMNS, growth=True)
        ], fluid=True)

    def _build_filter_card(self) -> dbc.Card:
        """Build the filter bar."""
        return dbc.Card([
            dbc.CardHeader("Filters"),
            dbc.CardBody([
                dbc.Row([
                    dbc.Col([
                        html.Label("Registration Date", className="text-muted small"),
                        dcc.DatePickerRange(id="date-range", clearable=True, display_format="YYYY-MM-DD")
                    ], width=3),
                    dbc.Col([
                        html.Label("Vehicle Type", className="text-muted small"),
                        dcc.Dropdown(id="vehicle-type-filter", placeholder="All Types")
                    ], width=2),
                    dbc.Col([
                        html.Label("Manufacturer", className="text-muted small"),
                        dcc.Dropdown(id="manufacturer-filter", placeholder="All Manufacturers")
                    ], width=2),
                    dbc.Col([
                        html.Label("Fuel Type", className="text-muted small"),
                        dcc.Dropdown(id="fuel-type-filter", placeholder="All Fuel Types")
                    ], width=2),
                    dbc.Col([
                        html.Label("QoQ Year", className="text-muted small"),
                        dcc.Dropdown(id="year-filter", placeholder="All Years")
                    ], width=1),
                    dbc.Col([
                        html.Label("Trend Period", className="text-muted small"),
                        dcc.Dropdown(
                            id="period-filter",
                            options=self.PERIOD_OPTIONS,
                            value="monthly",
                            clearable=False
                        )
                    ], width=2)
                ])
            ])
        ], className="mb-4")

    def _build_kpi_card(self, card_id: str, title: str, subtitle_id: Optional[str] = None) -> dbc.Card:
        """Build a KPI overview card."""
        body = [
            html.H4(id=card_id, children="0", style={"color": self.COLORS["info"]}),
            html.P(title, className="text-muted mb-0")
        ]
        if subtitle_id:
            body.append(html.Small(id=subtitle_id, className="text-muted"))

        return dbc.Card([dbc.CardBody(body)], className="text-center")

    def _build_table_card(self, name: str, title: str, columns: List[str], growth: bool = False) -> dbc.Card:
        """Build a data table card with a CSV export button."""
        return dbc.Card([
            dbc.CardHeader([
                html.Span(title),
                dbc.Button(
                    "Export CSV",
                    id=f"export-{name}-btn",
                    color="secondary",
                    size="sm",
                    className="float-end"
                ),
                dcc.Download(id=f"download-{name}-csv")
            ]),
            dbc.CardBody([
                dash_table.DataTable(
                    id=f"{name}-table",
                    columns=[{"name": column.replace("_", " ").title(), "id": column} for column in columns],
                    style_data_conditional=self.GROWTH_CONDITIONAL_STYLE if growth else [],  # type: ignore[arg-type]
                    sort_action="native",
                    page_size=10,
                    **self.TABLE_STYLE
                )
            ])
        ], className="mb-4")

    def _register_callbacks(self):
        """Register all dashboard callbacks including initialization and exports."""

        @self.app.callback(
            [
                Output("init-status", "children"),
                Output("data-version", "data")
            ],
            [Input("init-data-btn", "n_clicks")],
            [State("data-version", "data")],
            prevent_initial_call=True
        )
        def initialize_data(n_clicks, version):
            """Replace the record store with fresh mock data."""
            if not n_clicks:
                raise PreventUpdate

            result = self.data_provider.views.data.initialize()
            return (
                f"{result['records_fetched']} records loaded from {result['data_source']}",
                (version or 0) + 1
            )

        @self.app.callback(
            [
                Output("vehicle-type-filter", "options"),
                Output("manufacturer-filter", "options"),
                Output("fuel-type-filter", "options"),
                Output("year-filter", "options")
            ],
            [Input("data-version", "data"), Input("refresh-interval", "n_intervals")]
        )
        def update_filter_options(version, n_intervals):
            """Populate filter dropdowns from the current records."""
            options = self.data_provider.get_filter_options()
            return (
                options["vehicle_types"],
                options["manufacturers"],
                options["fuel_types"],
                options["years"]
            )

        @self.app.callback(
            [
                Output("last-updated", "children"),
                Output("kpi-total-vehicles", "children"),
                Output("kpi-total-registrations", "children"),
                Output("kpi-manufacturers", "children"),
                Output("kpi-period-change", "children"),
                Output("kpi-period-change", "style"),
                Output("kpi-period-label", "children"),
                Output("trends-chart", "figure"),
                Output("market-share-chart", "figure"),
                Output("yoy-chart", "figure"),
                Output("qoq-chart", "figure"),
                Output("stats-table", "data"),
                Output("yoy-table", "data"),
                Output("qoq-table", "data")
            ],
            [
                Input("refresh-interval", "n_intervals"),
                Input("data-version", "data"),
                Input("date-range", "start_date"),
                Input("date-range", "end_date"),
                Input("vehicle-type-filter", "value"),
                Input("manufacturer-filter", "value"),
                Input("fuel-type-filter", "value"),
                Input("year-filter", "value"),
                Input("period-filter", "value")
            ]
        )
        def update_dashboard(n_intervals, version, start_date, end_date, vehicle_type,
                             manufacturer, fuel_type, year, period):
            """Update all dashboard components for the current filters."""
            data = self.data_provider.get_dashboard_data({
                "start_date": start_date,
                "end_date": end_date,
                "vehicle_type": vehicle_type,
                "manufacturer": manufacturer,
                "fuel_type": fuel_type,
                "year": year,
                "period": period
            })

            kpis = data["kpis"]
            change_text, change_style, change_label = self._format_period_change(kpis)
            timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
            record_count = data["status"]["data_status"]["total_records"]

            return [
                f"Last updated: {timestamp} ({record_count} records)",
                f"{kpis['total_vehicles']:,}",
                f"{kpis['total_registrations']:,}",
                str(kpis["unique_manufacturers"]),
                change_text,
                change_style,
                change_label,
                self._build_trends_chart(data["trend_series"]),
                self._build_market_share_chart(data["market_share"]),
                self._build_growth_chart(data["yoy"], "current_year", "previous_year"),
                self._build_growth_chart(data["qoq"], "current_quarter", "previous_quarter"),
                data["stats"],
                data["yoy"],
                data["qoq"]
            ]

        for name, columns in (
            ("stats", self.STATS_COLUMNS),
            ("yoy", self.YOY_COLUMNS),
            ("qoq", self.QOQ_COLUMNS)
        ):
            self._register_export_callback(name, columns)

    def _register_export_callback(self, name: str, columns: List[str]):
        """Register the CSV export callback for one table."""

        @self.app.callback(
            Output(f"download-{name}-csv", "data"),
            [Input(f"export-{name}-btn", "n_clicks")],
            [State(f"{name}-table", "data")],
            prevent_initial_call=True
        )
        def export_table_csv(n_clicks, rows):
            if not n_clicks or not rows:
                raise PreventUpdate
            return csv_download(rows, f"{name}_{datetime.now(timezone.utc):%Y-%m-%d}.csv", columns)

    def _format_period_change(self, kpis: Dict[str, Any]):
        """Format the period change KPI text, color and label."""
        change = kpis.get("period_change_pct")
        if change is None:
            return "n/a", {"color": self.COLORS["neutral"]}, "needs two periods"

        color = self.COLORS["positive"] if change >= 0 else self.COLORS["negative"]
        sign = "+" if change >= 0 else ""
        label = f"{kpis['latest_period']} vs {kpis['previous_period']}"
        return f"{sign}{change}%", {"color": color}, label

    def _empty_figure(self, message: str = "No data - initialize mock data to begin") -> go.Figure:
        """Build a placeholder figure."""
        fig = go.Figure()
        fig.add_annotation(text=message, showarrow=False, font=dict(color=self.COLORS["neutral"]))
        fig.update_layout(
            template="plotly_dark",
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            margin=dict(l=20, r=20, t=20, b=20)
        )
        return fig

    def _build_trends_chart(self, series: List[Dict]) -> go.Figure:
        """Build registration trend line chart."""
        if not series:
            return self._empty_figure()

        periods = [point["period"] for point in series]

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=periods,
            y=[point["total_vehicles"] for point in series],
            mode="lines+markers",
            name="Vehicles",
            line=dict(color=self.COLORS["info"])
        ))
        fig.add_trace(go.Scatter(
            x=periods,
            y=[point["total_registrations"] for point in series],
            mode="lines+markers",
            name="Registrations",
            line=dict(color=self.COLORS["positive"]),
            yaxis="y2"
        ))

        fig.update_layout(
            template="plotly_dark",
            margin=dict(l=40, r=40, t=20, b=40),
            xaxis=dict(title="Period", type="category"),
            yaxis=dict(title="Vehicles"),
            yaxis2=dict(title="Registrations", overlaying="y", side="right"),
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
        )
        return fig

    def _build_market_share_chart(self, shares: List[Dict]) -> go.Figure:
        """Build market share pie chart."""
        if not shares:
            return self._empty_figure()

        fig = go.Figure(data=[
            go.Pie(
                labels=[entry["manufacturer"] for entry in shares],
                values=[entry["total_vehicles"] for entry in shares],
                customdata=[entry["market_share_percentage"] for entry in shares],
                hovertemplate="<b>%{label}</b><br>Vehicles: %{value:,}<br>Share: %{customdata}%<extra></extra>",
                marker=dict(colors=self.PIE_COLORS),
                hole=0.4
            )
        ])
        fig.update_layout(
            template="plotly_dark",
            margin=dict(l=20, r=20, t=20, b=20),
            showlegend=True
        )
        return fig

    def _build_growth_chart(self, rows: List[Dict], current_key: str, previous_key: str) -> go.Figure:
        """Build a horizontal bar chart of the largest growth movements."""
        if not rows:
            return self._empty_figure("Not enough periods to compare")

        top_rows = rows[:DashboardDataProvider.GROWTH_ROWS]
        labels = [self._growth_label(row, current_key, previous_key) for row in top_rows]
        values = [row["growth_percentage"] for row in top_rows]

        fig = go.Figure(data=[
            go.Bar(
                x=values,
                y=labels,
                orientation="h",
                marker_color=[
                    self.COLORS["positive"] if value >= 0 else self.COLORS["negative"]
                    for value in values
                ],
                hovertemplate="<b>%{y}</b><br>Growth: %{x}%<extra></extra>"
            )
        ])
        fig.update_layout(
            template="plotly_dark",
            margin=dict(l=20, r=20, t=20, b=40),
            xaxis_title="Growth %",
            yaxis=dict(autorange="reversed", automargin=True)
        )
        return fig

    @staticmethod
    def _growth_label(row: Dict, current_key: str, previous_key: str) -> str:
        """Bar label, e.g. "Kia / Four Wheeler (2024 Q2->Q3)" for QoQ rows."""
        if row.get("year"):
            span = f"{row['year']} Q{row[previous_key]}->Q{row[current_key]}"
        else:
            span = f"{row[previous_key]}->{row[current_key]}"
        return f"{row['manufacturer']} / {row['vehicle_type']} ({span})"

    def run(self, host: str = "127.0.0.1", port: int = 8050, debug: bool = False):
        """
        Run the dashboard server.

        Args:
            host: Host address to bind
            port: Port number
            debug: Enable debug mode
        """
        logger.info(f"[...] Starting dashboard on http://{host}:{port}")
        self.app.run(host=host, port=port, debug=debug, use_reloader=False, threaded=True)
