"""FastAPI application serving the live-render form."""

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .. import __version__

FORM_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Markdown to HTML</title>
</head>
<body>
<form>
  <label for="source">Markdown</label>
  <textarea id="source" rows="12" cols="80"></textarea>
  <label for="destination">HTML</label>
  <textarea id="destination" rows="12" cols="80" readonly></textarea>
</form>
<div id="preview"></div>
<script>
document.getElementById("source").addEventListener("change", async (event) => {
  const response = await fetch("convert", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify({text: event.target.value}),
  });
  const data = await response.json();
  document.getElementById("destination").value = data.html;
  document.getElementById("preview").innerHTML = data.html;
});
</script>
</body>
</html>
"""


class ConvertRequest(BaseModel):
    text: str


class ConvertResponse(BaseModel):
    html: str


def create_app(runtime: Any, enable_cors: bool = False) -> FastAPI:
    """
    Create FastAPI application with runtime injected.

    Args:
        runtime: Runtime instance with converter and config
        enable_cors: Enable CORS middleware

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="mdhtml",
        description="Live Markdown to HTML form",
        version=__version__,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")  # type: ignore[misc]
    async def health() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    @app.get("/", response_class=HTMLResponse)  # type: ignore[misc]
    async def form() -> str:
        """Markdown input form with rendered preview."""
        return FORM_PAGE

    @app.post("/convert", response_model=ConvertResponse)  # type: ignore[misc]
    async def convert(request: ConvertRequest) -> ConvertResponse:
        """Convert a Markdown document to an HTML fragment."""
        return ConvertResponse(html=runtime.converter.convert(request.text))

    return app
