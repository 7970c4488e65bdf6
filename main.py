import os
import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from dotenv import load_dotenv
load_dotenv()

from app.api.routes import router
from app.core.config import settings
from app.core.exceptions import ValidationError
from app.db.database import engine
from app.db.base import Base


logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Jobotics Backend")

logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies are client errors like any other failed field check
    fields = [str(err["loc"][-1]) for err in exc.errors() if err.get("loc")]
    logger.info(f"Rejected request to {request.url.path}: invalid fields {fields}")
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "fields": fields, "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(ValidationError)
async def field_validation_exception_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail, "fields": exc.fields})


@app.on_event("startup")
async def on_startup():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

app.include_router(router)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/")
async def root():
    return {"status": "healthy", "message": "Jobotics Backend is running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
