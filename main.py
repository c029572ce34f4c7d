from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings
from logs import configure_logging, get_logger
from schemas import Error, Product, ProductInput
from seed import seed_catalog
from store import CatalogStore, ProductNotFound, ProductValidationError

logger = get_logger("api")

NOT_FOUND = {404: {"model": Error, "description": "Product not found"}}
BAD_REQUEST = {400: {"model": Error, "description": "Invalid payload"}}


# ---------- Helpers ----------

def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ---------- Error handlers ----------

async def handle_not_found(request: Request, exc: ProductNotFound):
    return error_response(404, exc.message)


async def handle_validation(request: Request, exc: ProductValidationError):
    return error_response(400, exc.message)


async def handle_bad_body(request: Request, exc: RequestValidationError):
    logger.debug("Rejected body for {} {}: {}", request.method, request.url.path, exc.errors())
    return error_response(400, "Invalid request body")


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods both look like a missing route.
    if exc.status_code in (404, 405):
        return error_response(404, "Not found")
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return error_response(500, "Internal server error")


# ---------- Product Routes ----------

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("/", response_model=List[Product], include_in_schema=False)
@router.get("", response_model=List[Product], summary="List all products")
def list_products(store: CatalogStore = Depends(get_store)):
    return store.list()


@router.post("/", response_model=Product, status_code=201, include_in_schema=False)
@router.post("", response_model=Product, status_code=201, responses=BAD_REQUEST, summary="Create a product")
def create_product(data: Optional[ProductInput] = None, store: CatalogStore = Depends(get_store)):
    fields = data.model_dump(exclude_unset=True) if data is not None else {}
    product = store.create(fields)
    logger.info("Created product {} ({})", product.id, product.name)
    return product


@router.get("/{product_id}", response_model=Product, responses=NOT_FOUND, summary="Get a product by id")
def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
    return store.get(product_id)


@router.patch(
    "/{product_id}",
    response_model=Product,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Update product fields",
)
def update_product(
    product_id: str,
    data: Optional[ProductInput] = None,
    store: CatalogStore = Depends(get_store),
):
    fields = data.model_dump(exclude_unset=True) if data is not None else {}
    product = store.update(product_id, fields)
    logger.info("Updated product {}: {}", product_id, sorted(fields))
    return product


@router.delete(
    "/{product_id}",
    status_code=204,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a product",
)
def delete_product(product_id: str, store: CatalogStore = Depends(get_store)):
    store.delete(product_id)
    logger.info("Deleted product {}", product_id)
    return Response(status_code=204)


# ---------- App ----------

def create_app(settings: Optional[Settings] = None, store: Optional[CatalogStore] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings)

    if store is None:
        store = CatalogStore()
        if settings.seed:
            seed_catalog(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server running on http://{}:{}", settings.host, settings.port)
        logger.info("API docs at http://{}:{}/api-docs", settings.host, settings.port)
        logger.info("Products in catalog: {}", len(app.state.store))
        yield

    app = FastAPI(
        title="TechStore API",
        version="1.0.0",
        description="Product catalog management for an electronics store",
        docs_url="/api-docs",
        redoc_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info("[{}] {} {}", request.method, response.status_code, request.url.path)
        return response

    app.add_exception_handler(ProductNotFound, handle_not_found)
    app.add_exception_handler(ProductValidationError, handle_validation)
    app.add_exception_handler(RequestValidationError, handle_bad_body)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected)

    app.include_router(router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
