from __future__ import annotations

import logging
from typing import List

import dash
import dash_bootstrap_components as dbc
from dash import Dash, Input, Output, dcc, html

from ..config import AppConfig
from ..core.transforms import TRANSFORMS, run_all
from .chart import COLORS, build_figure


logger = logging.getLogger(__name__)


class DashboardApp:
    def __init__(self, config: AppConfig, app: Dash | None = None) -> None:
        self.config = config
        if app is None:
            self.app: Dash = dash.Dash(__name__, external_stylesheets=[dbc.themes.COSMO])
        else:
            self.app = app
        self._layout()
        self._callbacks()

    def _layout(self) -> None:
        runtime = self.config.runtime
        self.app.layout = dbc.Container([
            html.H2("Zipper transforms", style={'color': COLORS['text_primary']}),
            dcc.Checklist(
                id="transform-select",
                options=[{"label": spec.label, "value": key} for key, spec in TRANSFORMS.items()],
                value=list(runtime.transforms),
                inline=True,
                style={'color': COLORS['text_primary']},
            ),
            dcc.Graph(id="series-chart", figure=self.figure(runtime.transforms)),
        ], fluid=True, style={'backgroundColor': COLORS['bg_dark'], 'minHeight': '100vh'})

    def _callbacks(self) -> None:
        @self.app.callback(Output("series-chart", "figure"), Input("transform-select", "value"))
        def update_chart(selected: List[str]):
            return self.figure(selected or [])

    def figure(self, keys: List[str]):
        runtime = self.config.runtime
        derived = run_all(runtime, keys)
        logger.debug("rendered transforms", extra={"transforms": list(derived)})
        return build_figure(runtime.samples, derived, title="Zipper transforms")


def build_dash_app(config: AppConfig) -> Dash:
    return DashboardApp(config).app
