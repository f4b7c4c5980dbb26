"""
CompHub API - FastAPI backend for the compensation operations task hub
"""

from typing import Optional

from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from comphub import __version__
from comphub.settings import get_settings
from comphub.utils.logging_config import LogFiles, Logger, clear_trace_id, set_trace_id
from comphub.utils.network import get_local_ip

# Load local .env before routes resolve settings (data dir, catalog path).
load_dotenv(find_dotenv(usecwd=True), override=False)

from .routes import activity, tasks  # noqa: E402

app = FastAPI(
    title="CompHub API",
    description="Task boards, activity trail and template seeding for compensation operations",
    version=__version__,
)

# Clients on the local network poll this API directly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def _trace_requests(request: Request, call_next):
    trace_id = set_trace_id(request.headers.get("X-Trace-Id"))
    try:
        response = await call_next(request)
        Logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}", file=LogFiles.API
        )
        response.headers["X-Trace-Id"] = trace_id
        return response
    finally:
        clear_trace_id()


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": __version__}


app.include_router(tasks.router, prefix="/api", tags=["Tasks"])
app.include_router(activity.router, prefix="/api", tags=["Activity"])


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Seed on first run, print the local/network URLs and run uvicorn."""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    print("")
    print("  CompHub - Compensation Operations Hub")
    print("  ======================================")
    print(f"  Local:     http://localhost:{port}")
    print(f"  Network:   http://{get_local_ip()}:{port}")
    print("")
    print("  Share the Network URL with colleagues on your network.")
    print("")

    service = tasks._task_service
    loaded, seeded = service.ensure_seeded()
    if seeded:
        print(f"  First run detected. Seeded {len(loaded)} tasks across {len(service.catalog.boards)} boards.")
    else:
        print(f"  Loaded {len(loaded)} tasks from {settings.data_dir / 'tasks.json'}")
    print("")

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    serve()
