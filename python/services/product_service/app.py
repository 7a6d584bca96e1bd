"""Product Service — FastAPI application for managing products."""

from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from common.models import DeleteResponse, HealthResponse, Product, ProductBase, ProductPage, ProductStats

from product_service.auth import require_api_key
from product_service.config import Settings, get_settings
from product_service.errors import NotFoundError, install_error_handlers
from product_service.logs import log_requests
from product_service.store import DEFAULT_LIMIT, DEFAULT_PAGE, PRODUCT_NOT_FOUND, SEED_PRODUCTS, ProductStore
from product_service.validation import validated_product

WELCOME = "Welcome to the Product API! Go to /api/products to see all products."

router = APIRouter(prefix="/api/products")


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def _positive_int(raw: str | None, default: int) -> int:
    """Coerce a query value, falling back to the default when invalid or < 1."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value >= 1 else default


@router.get("", response_model=ProductPage)
@router.get("/", response_model=ProductPage, include_in_schema=False)
def list_products(
    category: str | None = None,
    search: str | None = None,
    page: str | None = None,
    limit: str | None = None,
    store: ProductStore = Depends(get_store),
):
    return store.query(
        category=category,
        search=search,
        page=_positive_int(page, DEFAULT_PAGE),
        limit=_positive_int(limit, DEFAULT_LIMIT),
    )


@router.get("/stats/count", response_model=ProductStats)
def product_stats(store: ProductStore = Depends(get_store)):
    return store.stats()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    product = store.find(product_id)
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product


@router.post("", response_model=Product, status_code=201, dependencies=[Depends(require_api_key)])
@router.post(
    "/",
    response_model=Product,
    status_code=201,
    dependencies=[Depends(require_api_key)],
    include_in_schema=False,
)
def create_product(
    fields: ProductBase = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    return store.create(fields)


@router.put("/{product_id}", response_model=Product, dependencies=[Depends(require_api_key)])
def update_product(
    product_id: str,
    fields: ProductBase = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    return store.replace(product_id, fields)


@router.delete("/{product_id}", response_model=DeleteResponse, dependencies=[Depends(require_api_key)])
def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    deleted = store.remove(product_id)
    return DeleteResponse(message="Product deleted successfully", deleted=[deleted])


def create_app(store: ProductStore | None = None, settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="Product Service", version="0.3.0")
    app.state.store = store if store is not None else ProductStore(SEED_PRODUCTS)
    if settings is not None:
        app.dependency_overrides[get_settings] = lambda: settings

    install_error_handlers(app)
    app.middleware("http")(log_requests)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return WELCOME

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok", service="product-service")

    app.include_router(router)
    return app


app = create_app()
