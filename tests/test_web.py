from __future__ import annotations

from typing import Any, Dict, List

import pytest
from dash import Dash

from listzipper.config import AppConfig, EnvSettings, RuntimeConfig
from listzipper.web.chart import build_figure
from listzipper.web.dashboard import DashboardApp, build_dash_app
from listzipper.web.server import serve


def make_config() -> AppConfig:
    runtime = RuntimeConfig(samples=[1.0, 3.0, 2.0, 5.0, 4.0])
    return AppConfig(env=EnvSettings(DASH_HOST="127.0.0.1", DASH_PORT=0, LOG_LEVEL="INFO"), runtime=runtime)


def test_build_figure_traces() -> None:
    fig = build_figure([1.0, 3.0, 2.0], {"running_max": [1.0, 3.0, 3.0], "peaks": [0.0, 10.0, 0.0]})
    assert [t.name for t in fig.data] == ["Samples", "Running max", "Peaks"]
    assert fig.data[1].type == "scatter"
    assert fig.data[2].type == "bar"
    assert list(fig.data[0].x) == [0, 1, 2]
    assert list(fig.data[2].y) == [0.0, 10.0, 0.0]


def test_build_figure_unknown_key_uses_key_as_label() -> None:
    fig = build_figure([1.0], {"custom": [2.0]})
    assert fig.data[1].name == "custom"


def test_dashboard_figure_follows_selection() -> None:
    dashboard = DashboardApp(make_config())
    fig = dashboard.figure(["moving_max"])
    assert [t.name for t in fig.data] == ["Samples", "Moving max"]
    assert list(fig.data[1].y) == [1.0, 3.0, 3.0, 5.0, 5.0]
    assert len(dashboard.figure([]).data) == 1


def test_build_dash_app() -> None:
    app = build_dash_app(make_config())
    assert isinstance(app, Dash)
    assert app.layout is not None


def test_serve_binds_env_settings_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: List[Dict[str, Any]] = []
    monkeypatch.setattr(Dash, "run", lambda self, **kwargs: calls.append(kwargs))
    cfg = make_config()
    cfg.env.DASH_HOST = "0.0.0.0"
    cfg.env.DASH_PORT = 8123

    serve(config=cfg)
    serve(host="localhost", port=0, config=cfg)
    assert calls == [
        {"host": "0.0.0.0", "port": 8123, "debug": False},
        {"host": "localhost", "port": 0, "debug": False},
    ]
