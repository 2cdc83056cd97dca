from pathlib import Path
from fastapi import FastAPI
from fastapi.responses import FileResponse

from app.core.logger import logger

def register_client_routes(app: FastAPI, dist_dir: str):
    """
    Serves the pre-built client from dist_dir.
    Existing files are returned as-is; every other path gets index.html so
    the client-side router can take over.
    Must be called after the API routers, the catch-all route swallows everything.
    """
    dist_path = Path(dist_dir).resolve()
    if not dist_path.is_dir():
        raise FileNotFoundError(
            f"Could not find the build directory: {dist_path}, make sure to build the client first"
        )

    index_file = dist_path / "index.html"
    logger.info(f"📦 Serving client from {dist_path}")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_client(full_path: str):
        candidate = (dist_path / full_path).resolve()
        if candidate.is_file() and candidate.is_relative_to(dist_path):
            return FileResponse(candidate)
        return FileResponse(index_file)
