# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
MailChimp Proxy Service
=======================
Keeps a local copy of MailChimp lists and list members and mirrors every
create / update / delete to the MailChimp Marketing API.

    create:  validate ─► save locally ─► POST to MailChimp ─► store remote id
    update:  validate ─► save locally ─► PATCH on MailChimp
    remove:  DELETE on MailChimp ─► delete locally
    show:    local copy only
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mailchimp_proxy import __version__
from mailchimp_proxy.controllers import list_controller, member_controller, system_controller
from mailchimp_proxy.core.database import engine
from mailchimp_proxy.core.errors import ServiceError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.middleware import MetricsMiddleware, RequestIDMiddleware
from mailchimp_proxy.repositories import create_schema

logger = get_logger("mailchimp-proxy")


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    try:
        create_schema(engine)
        logger.info("Database schema ready")
    except Exception:
        logger.exception("Could not create schema — DB may not be ready yet")
    yield
    engine.dispose()
    logger.info("Shutting down — connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="MailChimp Proxy Service",
    description="Local CRUD over MailChimp lists and members, mirrored to the MailChimp API.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"][1:]) or err["loc"][0]
        errors.setdefault(field, []).append(err["msg"])
    return JSONResponse(status_code=400, content={"message": "Invalid data given", "errors": errors})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "internal_server_error", "detail": str(exc)})


app.include_router(system_controller.router)
app.include_router(list_controller.router)
app.include_router(member_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
