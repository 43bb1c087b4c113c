"""
FreshCut Storefront - Main FastAPI Application

Single entry point for the storefront API (catalog, device cart, checkout,
pincode serviceability).
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from freshcut.logging import get_logger
from freshcut.routers import cart_router, catalog_router, orders_router, pincode_router
from freshcut.services.database import close_database, init_database

logger = get_logger(__name__)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:4028,http://localhost:5173").split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info("Startup: connecting to Supabase...")
    try:
        await init_database()
    except Exception as e:
        logger.error(f"Startup: Supabase initialization failed: {e}")
        raise
    yield
    await close_database()


app = FastAPI(
    title="FreshCut Storefront API",
    description="Custom-cut fresh meat and fish ordering",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router, prefix="/api")
app.include_router(cart_router, prefix="/api")
app.include_router(orders_router, prefix="/api")
app.include_router(pincode_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "freshcut"}
