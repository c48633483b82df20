# shopcart/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from shopcart.data.database import Base, engine
from shopcart.data.seed import seed
from shopcart.api.routers import health, users, products, cart, orders
from shopcart.utils.settings import SEED_DEMO_DATA
from shopcart.utils.logging import get_logger

# import wszystkich modeli przed create_all
import shopcart.data.models  # noqa: F401

logger = get_logger(__name__)


def init_db():
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables ready")

    if SEED_DEMO_DATA:
        seed()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shopping Cart Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(orders.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
