from fastapi import FastAPI

from . import __version__
from .api import actions, health
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

setup_logging()

app = FastAPI(
    title="txintent",
    description=settings.toolkit_description,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router, tags=["Health"])
app.include_router(actions.router, tags=["Actions"])


@app.get("/")
async def root():
    """Toolkit info"""
    return {
        "name": settings.toolkit_name,
        "description": settings.toolkit_description,
        "version": __version__,
        "actions": "/actions",
        "health": "/healthz"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "txintent.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
