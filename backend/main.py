from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from dotenv import load_dotenv

load_dotenv()

from checkin_app.core.config import settings
from checkin_app.core.exceptions import SocialError
from checkin_app.routes import users, venues, checkins, friends, feed
from checkin_app.utils.logger import logger, safe_print, safe_repr
from init_db import create_missing_tables


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_missing_tables()
    yield


app = FastAPI(
    title="Check-in API",
    description="Venues, check-ins, friendships and a friends' activity feed",
    version="1.0.0",
    openapi_tags=[
        {"name": "Users", "description": "User management endpoints"},
        {"name": "Venues", "description": "Venue creation and geo search endpoints"},
        {"name": "Checkins", "description": "Check-in endpoints"},
        {"name": "Friends", "description": "Friendship requests and friend lists"},
        {"name": "Feed", "description": "Friends' activity feed"},
    ],
    lifespan=lifespan
)

# Add request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming API requests"""
    method = request.method
    path = request.url.path
    query_params = str(request.query_params) if request.query_params else ""

    safe_print(f"[{method}] {path}" + (f" ?{query_params}" if query_params else ""))
    response = await call_next(request)
    safe_print(f"[{method}] {path} - Status: {response.status_code}")

    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


def cors_headers(request: Request) -> dict:
    """CORS headers for error responses produced outside the middleware"""
    origin = request.headers.get("origin")
    headers = {}
    if origin in settings.ALLOWED_ORIGINS:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Access-Control-Allow-Credentials"] = "true"
    return headers


@app.exception_handler(SocialError)
async def social_error_handler(request: Request, exc: SocialError):
    """Map domain errors to their HTTP status with a machine-readable code"""
    logger.warning(f"{request.method} {request.url.path} -> {exc.code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
        headers=cors_headers(request)
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=cors_headers(request)
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with CORS headers"""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
        headers=cors_headers(request)
    )

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all other exceptions and ensure CORS headers are included"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {safe_repr(exc)}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
        headers=cors_headers(request)
    )


# Include routers
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(venues.router, prefix="/api/venues", tags=["Venues"])
app.include_router(checkins.router, prefix="/api/checkins", tags=["Checkins"])
app.include_router(friends.router, prefix="/api", tags=["Friends"])
app.include_router(feed.router, prefix="/api/feed", tags=["Feed"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Check-in API"}

@app.get("/api/health")
async def health_check():
    return {"status": "healthy"}

# Run uvicorn server when file is executed directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
