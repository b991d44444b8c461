import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from applications import router as applications_router
from auth import dependencies as auth_dependencies
from boards import router as boards_router
from core import config, db, trello
from leetcode import router as leetcode_router

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(trello.TrelloError, boards_router.trello_error_handler)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Same {"error": ...} shape as Trello failures.
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


protected = [Depends(auth_dependencies.require_api_key)]

app.include_router(applications_router.router, tags=["applications"], dependencies=protected)
app.include_router(leetcode_router.router, tags=["leetcode"], dependencies=protected)
app.include_router(boards_router.router, tags=["boards"], dependencies=protected)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "job-hunt api"}
