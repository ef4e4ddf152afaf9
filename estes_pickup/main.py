import logging
import traceback
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from estes_pickup.routers import estes_pickup
from estes_pickup.core.exceptions import PickupException

app = FastAPI(
    title="Estes Pickup API"
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ============================================================================
# GLOBAL EXCEPTION HANDLERS
# ============================================================================

@app.exception_handler(PickupException)
async def pickup_exception_handler(request: Request, exc: PickupException):
    """Handler for pickup request failures"""
    logger.error(f"Pickup exception: {exc.error_code} - {exc.message}", extra={
        "error_code": exc.error_code,
        "path": str(request.url),
        "method": request.method
    })

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Handler for FastAPI validation errors"""
    logger.warning(f"Request validation error: {exc.errors()}", extra={
        "path": str(request.url),
        "method": request.method
    })

    return JSONResponse(
        status_code=422,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
            "status_code": 422
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handler for unhandled errors"""
    logger.error(f"Unhandled exception: {str(exc)}", extra={
        "path": str(request.url),
        "method": request.method,
        "traceback": traceback.format_exc()
    })

    return JSONResponse(
        status_code=500,
        content={
            "error_code": "INTERNAL_SERVER_ERROR",
            "message": "Internal server error",
            "details": {},
            "status_code": 500
        }
    )


def jsonable_errors(exc: RequestValidationError):
    # ctx may hold exception instances
    return [{k: v for k, v in error.items() if k != "ctx"} for error in exc.errors()]


app.include_router(estes_pickup.router)
