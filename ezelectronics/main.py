# ezelectronics/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ezelectronics.config import API_PREFIX, CORS_ORIGINS
from ezelectronics.db.init_db import init_db
from ezelectronics.logger import get_logger
from ezelectronics.routes import users, sessions, products, carts, reviews

_logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    await init_db()
    _logger.info("Database initialized")
    yield


app = FastAPI(title="EZElectronics", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (users, sessions, products, carts, reviews):
    app.include_router(module.router, prefix=API_PREFIX)


@app.get("/")
async def health_check():
    """Health check endpoint."""
    return {"status": "ezelectronics running"}
