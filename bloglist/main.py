# bloglist/main.py

"""Bloglist Backend - a small blog list REST API with token authentication."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from bloglist.configs import settings
from bloglist.db import ping_db
from bloglist.errors import (
    BadRequestError,
    BaseAppError,
    BlogPermissionError,
    DatabaseError,
    UserAuthenticationError,
    app_exception_handler,
    auth_exception_handler,
    bad_request_exception_handler,
    blog_exception_handler,
    database_exception_handler,
    validation_exception_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import auth_router, blog_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version=settings.VERSION,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    auth_router,
    user_router,
    blog_router,
]

_ = [app.include_router(router) for router in routes]

# most specific first; Starlette resolves handlers along the exception's MRO
errors = [
    (UserAuthenticationError, auth_exception_handler),
    (BadRequestError, bad_request_exception_handler),
    (BlogPermissionError, blog_exception_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, app_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (Exception, app_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "ok",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns
    -------
    HealthCheckResponse
        Service version, current time and database reachability. The
        status is "degraded" when the database does not answer.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "2025-01-01 12:00:00", "database": "ok"}
    """
    database_ok = await ping_db()
    return HealthCheckResponse(
        status="ok" if database_ok else "degraded",
        version=app.version,
        timestamp=today_str(),
        database="ok" if database_ok else "unavailable",
    )
