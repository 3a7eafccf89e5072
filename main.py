import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from app.config.database import SessionLocal, init_db
from app.config.logging_config import configure_logging
from app.config.settings import settings
from app.features.auth.router import router as auth_router
from app.features.auth.sessions import purge_expired_sessions
from app.features.users.router import router as users_router
from app.features.products.router import router as products_router
from app.features.blog.router import router as blog_router
from app.features.orders.router import router as orders_router
from app.features.contact.router import router as contact_router
from app.features.newsletter.router import router as newsletter_router
from app.features.uploads.router import router as uploads_router
from app.features.settings.router import router as settings_router
from app.features.audit.router import router as audit_router
from app.utils.errors import AppError

configure_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create Database Tables
    init_db()
    db = SessionLocal()
    try:
        purge_expired_sessions(db)
    finally:
        db.close()
    logger.info("%s started (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
    yield

app = FastAPI(title=settings.PROJECT_NAME, root_path=settings.ROOT_PATH or "", lifespan=lifespan)

# Session cookies need credentials, so origins should be explicit in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": errors},
    )

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(products_router)
app.include_router(blog_router)
app.include_router(orders_router)
app.include_router(contact_router)
app.include_router(newsletter_router)
app.include_router(uploads_router)
app.include_router(settings_router)
app.include_router(audit_router)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

@app.get("/")
def read_root():
    return {"message": f"{settings.PROJECT_NAME} API is running"}
