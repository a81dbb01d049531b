"""Order Browser FastAPI Application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orderbrowser.api.config import get_settings
from orderbrowser.api.routers import orders, presets
from orderbrowser.api.services import get_order_store
from orderbrowser.config import config, setup_logging

settings = get_settings()

setup_logging(log_level="DEBUG" if settings.debug else config.app.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for browsing, filtering and exporting order records",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(presets.router, prefix="/api/presets", tags=["Presets"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "orders": "/api/orders",
            "presets": "/api/presets",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    store = get_order_store()
    return {
        "status": "healthy",
        "source": store.source,
        "total_orders": len(store),
    }
