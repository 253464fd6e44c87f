# app/main.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .config import load_settings
from .core import ProductIn, ProductPatch, supplied_fields
from .database import ProductNotFound, ProductStore, parse_product_id
from .models import DeleteConfirmation, Product

logger = logging.getLogger(__name__)

settings = load_settings()
STORE = ProductStore(id_policy=settings.id_policy)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Server running at %s", settings.base_url)
    logger.info("API docs: %s/api-docs", settings.base_url)
    logger.info("Images: %s/images/placeholder.svg", settings.base_url)
    yield

app = FastAPI(
    title="Online Store API",
    version="1.0.0",
    description="CRUD operations over the product catalog",
    docs_url="/api-docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Images are served as-is from disk.
if settings.images_dir.is_dir():
    app.mount("/images", StaticFiles(directory=settings.images_dir), name="images")
else:
    logger.warning("Images directory %s not found, /images disabled", settings.images_dir)

@app.exception_handler(ProductNotFound)
async def product_not_found_handler(request: Request, exc: ProductNotFound):
    return PlainTextResponse("Product not found", status_code=status.HTTP_404_NOT_FOUND)

NOT_FOUND = {404: {"description": "Product not found", "content": {"text/plain": {}}}}

# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/api/products", response_model=List[Product], response_model_exclude_unset=True, tags=["Products"])
def list_products():
    return STORE.list()

# Ids come in as raw strings; one that does not start with an integer is
# simply an unknown product.
@app.get("/api/products/{product_id}", response_model=Product, response_model_exclude_unset=True,
         responses=NOT_FOUND, tags=["Products"])
def get_product(product_id: str):
    return STORE.get(parse_product_id(product_id))

@app.post("/api/products", status_code=201, response_model=Product, response_model_exclude_unset=True,
          tags=["Products"])
def create_product(payload: Optional[ProductIn] = None):
    return STORE.create(supplied_fields(payload))

@app.patch("/api/products/{product_id}", response_model=Product, response_model_exclude_unset=True,
           responses=NOT_FOUND, tags=["Products"])
def update_product(product_id: str, payload: Optional[ProductPatch] = None):
    return STORE.update(parse_product_id(product_id), supplied_fields(payload))

@app.delete("/api/products/{product_id}", response_model=DeleteConfirmation, responses=NOT_FOUND,
            tags=["Products"])
def delete_product(product_id: str):
    STORE.delete(parse_product_id(product_id))
    return {"message": "Product deleted"}

# ---------------------------
# Utility
# ---------------------------
@app.get("/health")
def health():
    return {"status": "ok"}

# Restores the seed catalog (for tests/demo)
@app.post("/reset")
def reset_all():
    STORE.reset()
    return {"status": "reset"}
