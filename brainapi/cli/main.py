"""Main CLI application using Cyclopts."""

import cyclopts

from brainapi.cli.commands import fetch, server

app = cyclopts.App(
    name="brain",
    help="Brain API - analytics proxy for Trading Economics Comtrade data",
)

app.command(server.app, name="serve")
app.command(fetch.app, name="fetch")
