from __future__ import annotations
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from batting_board.config import settings
from batting_board.errors import DomainError, StoreError
from batting_board.logging_setup import configure_logging
from batting_board.routes.system import router as system_router
from batting_board.routes.submissions import router as submissions_router
from batting_board.routes.roster import router as roster_router
from batting_board.routes.admin import router as admin_router
import structlog

configure_logging()
log = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    log.info("startup", env=settings.environment, version=settings.app_version, git_sha=settings.git_sha)
    yield
    # Shutdown
    log.info("shutdown")

app = FastAPI(
    title=f"{settings.app_display_name} API",
    version=settings.app_version,
    lifespan=lifespan,
    description="Submit, vote on and discuss batting orders for the team",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.environment == "dev" else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(system_router)
app.include_router(submissions_router)
app.include_router(roster_router)
app.include_router(admin_router)

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    log.error("store_error", path=request.url.path, method=request.method, error=exc.message, cause=repr(exc.__cause__))
    return JSONResponse(status_code=500, content={"detail": "Storage is unavailable, please try again"})

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    log.info("request_rejected", path=request.url.path, status=exc.status_code, reason=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    log.info("request_invalid", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": "Invalid request data"})

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = rid
    structlog.contextvars.bind_contextvars(request_id=rid)
    try:
        response: Response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()
    response.headers["X-Request-ID"] = rid
    return response

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
