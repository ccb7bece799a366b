"""Run the HTTP server."""

import cyclopts
import uvicorn

from brainapi.config import Config

app = cyclopts.App(name="serve", help="Run the API server in the foreground")


@app.default
def serve(host: str | None = None, port: int | None = None, *, reload: bool = False) -> None:
    """Start uvicorn on the application factory.

    Args:
        host: Interface to bind. Defaults to server.host from config.
        port: Port to listen on. Defaults to server.port from config.
        reload: Restart on code changes (development only).
    """
    config = Config()  # type: ignore[call-arg]
    uvicorn.run(
        "brainapi.application.api.rest.app:create_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
        reload=reload,
    )
