"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import mortgage
from src.config import settings
from src.logging_setup import configure_logging

configure_logging()

app = FastAPI(
    title="Mortgage Calculator",
    description="Fixed-rate mortgage repayment calculator",
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

app.include_router(mortgage.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
