# FastAPI entry point; wires the trivia router and the CORS header middleware
# trivia_proxy/main.py
from fastapi import FastAPI, Request
from contextlib import asynccontextmanager

from trivia_proxy.endpoints import trivia as trivia_router
from trivia_proxy.utils.config import settings
from trivia_proxy.utils.logger import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("Trivia Proxy API starting up...")
    logger.info(f"Upstream provider: {settings.upstream_url}")
    logger.info(f"CORS origin: {settings.cors_allow_origin}")
    yield
    logger.info("Trivia Proxy API shutting down...")

# --- FastAPI App Initialization ---
app = FastAPI(
    title="Trivia Proxy API",
    description="Normalizing proxy for an upstream trivia question provider.",
    version="1.0.0",
    lifespan=lifespan
)

# --- CORS Headers ---
# Set unconditionally on every response, preflight included.
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
    response.headers["Access-Control-Allow-Methods"] = settings.cors_allow_methods
    response.headers["Access-Control-Allow-Headers"] = settings.cors_allow_headers
    return response

# --- API Routers ---
app.include_router(trivia_router.router, prefix="/api/trivia", tags=["Trivia"])

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {"message": "Welcome to the Trivia Proxy API"}

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Serving on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
