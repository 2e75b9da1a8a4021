"""FastAPI application entrypoint."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nautical_helper import __version__
from nautical_helper.api.endpoints import router as calc_router


app = FastAPI(title="Nautical Helper", version=__version__)

# Enable CORS for all origins (adjust in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calc_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
