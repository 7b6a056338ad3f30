from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .catalog import seed_regions
from .database import get_sessionmaker, init_db
from .errors import InputValidationError, NotFoundError
from .routes.catalog import router as catalog_router
from .routes.region_parameters import router as region_parameters_router
from .routes.risk import router as risk_router
from .routes.scenarios import router as scenarios_router
from .utils.logging import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    with get_sessionmaker()() as db:
        added = seed_regions(db)
    if added:
        logger.info("Seeded %d reference regions", added)
    yield

app = FastAPI(title="RiskMap Backend",
              description="Outbreak risk scoring and intervention scenario projection",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json",
    lifespan=lifespan)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        # inputs are not echoed back; a NaN input would not serialize
        content={"message": "Invalid request", "errors": jsonable_encoder(
            [{k: e[k] for k in ("loc", "msg", "type") if k in e} for e in exc.errors()]
        )},
    )

@app.exception_handler(InputValidationError)
async def input_validation_handler(request: Request, exc: InputValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": [exc.to_dict()]},
    )

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": str(exc)})

@app.exception_handler(Exception)
async def unhandled_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Failed to process request"})

app.include_router(catalog_router)
app.include_router(risk_router)
app.include_router(scenarios_router)
app.include_router(region_parameters_router)

@app.get("/health")
def health():
    return {"ok": True}
