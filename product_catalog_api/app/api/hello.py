"""
Plain-text greeting routes.

Mounted at the application root rather than under ``/api/v1``; handy
as a liveness check.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello, FastAPI!"


@router.get("/welcome", response_class=PlainTextResponse)
async def welcome() -> str:
    return "Welcome to the Product Catalog API!"
