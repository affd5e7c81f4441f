from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from fravia.config import get_settings
from fravia.mcp.service import FraviaService
from fravia.models import ExecuteRequest, HygieneRequest, StopRequest

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.service = FraviaService(settings)
    yield


app = FastAPI(title="fravia-mcp", version="0.1.0", lifespan=lifespan)


@app.get("/healthz")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/fravia/index")
async def phase_index():
    return app.state.service.phase_index()


@app.get("/fravia/menu/{phase}")
async def phase_menu(phase: int):
    return app.state.service.get_menu(phase)


@app.post("/fravia/execute")
async def execute(request: ExecuteRequest):
    return app.state.service.execute(request.phase, request.topics, request.codes)


@app.post("/fravia/hygiene")
async def hygiene(request: HygieneRequest):
    return app.state.service.resolve_hygiene(request.codes, request.engine)


@app.get("/fravia/engines")
async def engines():
    return app.state.service.engines()


@app.post("/fravia/stop")
async def stop(request: StopRequest):
    signal = app.state.service.stop(request.continue_to_phase, request.reason)
    return {"continue_to_phase": signal.continue_to_phase, "text": signal.text}
