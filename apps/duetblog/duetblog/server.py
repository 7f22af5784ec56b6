"""HTTP server - routes requests to the renderer and maps errors to status codes.

    GET /client.js        client script, if one is configured
    GET /<path>?jsx       wire tree as JSON
    GET /<path>           server-rendered HTML document
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, Response

from duet import DuetError, dumps_wire, h, render_page, render_wire_only

from .components import Router
from .lib.config import BlogConfig, load_config
from .lib.shell import PageShell
from .lib.store import ContentStore

log = logging.getLogger(__name__)


def create_app(
    config: BlogConfig | None = None,
    store: ContentStore | None = None,
) -> FastAPI:
    """Build the blog app.

    Args:
        config: Blog configuration. Loaded from ./duetblog.yaml if omitted.
        store: Content store. Built from the config if omitted.
    """
    config = config or load_config()
    store = store or ContentStore(config.posts_dir, config.post_suffix)
    shell = PageShell(
        client_script=config.client_script is not None,
        import_map=config.import_map,
    )

    app = FastAPI(title="duetblog")

    @app.get("/client.js")
    async def client_script() -> Response:
        script = config.client_script
        if script is None:
            return Response(status_code=404)
        try:
            source = await asyncio.to_thread(script.read_text, encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, PermissionError):
            log.warning(f"Client script {script} is not readable")
            return Response(status_code=404)
        return Response(source, media_type="text/javascript")

    @app.get("/{path:path}")
    async def page(path: str, request: Request) -> Response:
        """Render a page, or its wire tree when ?jsx is present."""
        root = h(Router, {"path": f"/{path}", "store": store, "config": config})
        try:
            if "jsx" in request.query_params:
                wire = await render_wire_only(root)
                return Response(dumps_wire(wire), media_type="application/json")

            rendered = await render_page(root)
            return HTMLResponse(shell.render(rendered))
        except DuetError as e:
            if e.status_code >= 500:
                log.exception(f"Failed to render {request.url.path}")
            else:
                log.info(f"{request.url.path}: {e}")
            return Response(status_code=e.status_code)
        except Exception:
            log.exception(f"Failed to render {request.url.path}")
            return Response(status_code=500)

    return app
