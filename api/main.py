import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core import config, db, errors, http
from v1 import router as v1_router
from v2 import router as v2_router

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # The DB pool is created lazily on first query; only teardown lives here.
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Word Game DB API", version="2.0.0", lifespan=lifespan)

# v1 clients depend on this global layer for cross-origin access.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    max_age=86400,
)

# Error boundary sits inside the security-header middleware.
errors.install_exception_handlers(app)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for key, value in http.SECURITY_HEADERS.items():
        response.headers.setdefault(key, value)
    return response


app.include_router(v1_router.router, prefix="/api/v1", tags=["v1"])
app.include_router(v2_router.router, prefix="/api/v2", tags=["v2"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "word game db api", "versions": ["/api/v1", "/api/v2"]}
