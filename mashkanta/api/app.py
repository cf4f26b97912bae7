"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mashkanta.config import settings
from mashkanta.api.routes import mixes, scenarios, tracks

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Mashkanta",
    description="Mortgage mix calculator: tracks, schedules, comparisons and scenarios",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tracks.router)
app.include_router(mixes.router)
app.include_router(scenarios.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
