"""Static file server implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.responses import FileResponse, Response
from starlette.routing import Route
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from pyview import PyView

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
CACHE_CONTROL = "public, max-age=60, must-revalidate"


class StaticFileServer:
    """Serves the map's CSS/JS and pyview's client JavaScript."""

    def __init__(self, static_dir: Path = STATIC_DIR) -> None:
        self.static_dir = static_dir

    def register_routes(self, app: PyView) -> None:
        """Register static file routes with the PyView app.

        Args:
            app: The PyView application instance.
        """
        # Specific routes go first so they take precedence over pyview's own mount
        app.routes.insert(0, Route("/static/assets/app.js", self._serve_app_js))

        if self.static_dir.exists():
            app.mount("/assets", StaticFiles(directory=str(self.static_dir)), name="assets")
            logger.info(f"Mounted static files from {self.static_dir}")
        else:
            logger.warning(f"Static directory not found at {self.static_dir}")

    async def _serve_app_js(self, _request: Any) -> Response:
        """Serve pyview's client JavaScript."""
        import pyview

        pyview_path = Path(pyview.__file__).parent
        for client_js_path in (
            pyview_path / "static" / "assets" / "app.js",
            pyview_path / "assets" / "js" / "app.js",
        ):
            if client_js_path.exists():
                response = FileResponse(str(client_js_path), media_type="application/javascript")
                response.headers["Cache-Control"] = CACHE_CONTROL
                return response

        logger.error(f"Could not find pyview client JS under {pyview_path}")
        return Response(
            content="// PyView client not found",
            media_type="application/javascript",
            status_code=404,
        )
