"""PyView web adapter for displaying the station traffic map."""

from __future__ import annotations

import logging
from typing import Any

from markupsafe import escape

from bike_traffic_map.adapters.config import AppConfig
from bike_traffic_map.domain.models import TrafficDataset
from bike_traffic_map.domain.ports import DisplayAdapter

from .servers import StaticFileServer
from .views.traffic_map import create_traffic_map_live_view

logger = logging.getLogger(__name__)

MAPBOX_GL_VERSION = "v3.7.0"


def build_head_content(config: AppConfig) -> str:
    """Stylesheets and scripts placed in the page head."""
    mapbox = f"https://api.mapbox.com/mapbox-gl-js/{MAPBOX_GL_VERSION}"
    return (
        f'<link rel="stylesheet" href="{mapbox}/mapbox-gl.css">'
        f'<script src="{mapbox}/mapbox-gl.js"></script>'
        '<link rel="stylesheet" href="/assets/traffic_map.css">'
        '<script defer src="/assets/traffic_map.js"></script>'
        f'<meta name="description" content="{escape(config.title)}">'
    )


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter serving the traffic map."""

    def __init__(self, dataset: TrafficDataset, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            dataset: Stations and trips loaded at startup.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not isinstance(dataset, TrafficDataset):
            raise TypeError("dataset must be a TrafficDataset instance")

        self.dataset = dataset
        self.config = config
        self._server: Any | None = None

    def create_app(self) -> Any:
        """Build the PyView application with the map route and health check."""
        from markupsafe import Markup
        from pyview import PyView
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()
        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=Markup(build_head_content(self.config)),
        )

        app.add_live_view("/", create_traffic_map_live_view(self.dataset, self.config))
        logger.info(
            f"Registered traffic map at '/' with {len(self.dataset.stations)} stations "
            f"and {len(self.dataset.trips)} trips"
        )

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))

        StaticFileServer().register_routes(app)
        return app

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        config = uvicorn.Config(
            self.create_app(),
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(config)
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
