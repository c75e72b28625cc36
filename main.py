import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from starlette.middleware.cors import CORSMiddleware

from catalog.diagnostics import log_backend_call_failure
from catalog.errors import StoreError
from utils.app_logger import get_logger
from utils.database import init_db

# router module
from routes.school_route import school_router
from routes.review_route import review_router
from routes.teacher_route import teacher_router
from routes.training_route import training_router
from routes.user_route import user_router
from routes.directory_route import directory_router

# .env 로드
load_dotenv()

log = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if os.getenv("DB_AUTO_CREATE", "false").lower() == "true":
        log.info("creating missing tables")
        init_db()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Yoga School Directory API",
    version="1.0.0",
    description="Catalog of yoga teacher-training schools, teachers, trainings and reviews.",
)

origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    log_backend_call_failure(exc.method or request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/")
async def root():
    return {"message": "Yoga School Directory API"}

app.include_router(school_router, prefix="/schools", tags=["schools"])
app.include_router(review_router, prefix="/schools", tags=["reviews"])
app.include_router(teacher_router, prefix="/teachers", tags=["teachers"])
app.include_router(training_router, prefix="/trainings", tags=["trainings"])
app.include_router(user_router, prefix="/users", tags=["users"])
app.include_router(directory_router, prefix="/directory", tags=["directory"])
