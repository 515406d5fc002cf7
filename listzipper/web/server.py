from __future__ import annotations

import logging
from typing import Optional

from ..config import AppConfig, load_config
from .dashboard import build_dash_app


logger = logging.getLogger(__name__)


def serve(host: Optional[str] = None, port: Optional[int] = None, config: Optional[AppConfig] = None) -> None:
    cfg = config or load_config()
    app = build_dash_app(cfg)
    bind_host = host or cfg.env.DASH_HOST
    bind_port = cfg.env.DASH_PORT if port is None else port
    logger.info("starting dashboard", extra={"host": bind_host, "port": bind_port})
    app.run(host=bind_host, port=bind_port, debug=False)

if __name__ == "__main__":  # pragma: no cover
    serve()
