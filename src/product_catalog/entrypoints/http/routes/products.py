from fastapi import APIRouter, Depends, Response, status

from product_catalog.entrypoints.http.dependencies import (
    get_create_product_use_case,
    get_delete_product_use_case,
    get_get_product_by_id_use_case,
    get_list_products_use_case,
    get_update_product_use_case,
)
from product_catalog.entrypoints.http.dtos.products import (
    ProductCreateDTO,
    ProductListQueryDTO,
    ProductListResponseDTO,
    ProductResponseDTO,
    ProductUpdateDTO,
)
from product_catalog.entrypoints.http.error_responses import ErrorResponse
from product_catalog.entrypoints.http.mappers.product_mapper import ProductMapper
from product_catalog.use_cases.create_product import CreateProduct, CreateProductRequest
from product_catalog.use_cases.delete_product import DeleteProduct, DeleteProductRequest
from product_catalog.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from product_catalog.use_cases.list_products import ListProducts
from product_catalog.use_cases.update_product import UpdateProduct, UpdateProductRequest


router = APIRouter(prefix="/products", tags=["Products"])

_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Validation error"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductResponseDTO,
    summary="Create a product",
    description="""
    Create a product. `name`, `price` and `category` are all required.

    - `name`/`category` are trimmed before validation and storage
    - `price` must be greater than 0
    - Every violated rule is reported in a single 400 response
    """,
    responses=_BAD_REQUEST,
)
def create_product(
    payload: ProductCreateDTO,
    use_case: CreateProduct = Depends(get_create_product_use_case),
) -> ProductResponseDTO:
    """Create product endpoint following parse → execute → map → return pattern."""
    request = CreateProductRequest(data=ProductMapper.to_product_input(payload))

    result = use_case.execute(request)

    return ProductMapper.to_product_response(result.product)


@router.get(
    "",
    response_model=ProductListResponseDTO,
    summary="List products",
    description="""
    List products, newest first, with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - `category`: exact match (trimmed)
    - `minPrice`/`maxPrice`: inclusive; a malformed bound is a 400

    ## Pagination
    - `page` defaults to 1; a page past the end returns the last page
    - `limit` defaults to 10 and is clamped to 1-100

    ## Example
    ```
    GET /api/products?category=Electronics&minPrice=10&page=2&limit=20
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "data": [
                            {
                                "id": "550e8400-e29b-41d4-a716-446655440000",
                                "name": "Wireless Mouse",
                                "price": 24.99,
                                "category": "Electronics",
                                "createdAt": "2026-01-15T10:30:00Z",
                                "updatedAt": "2026-01-15T10:30:00Z",
                            }
                        ],
                        "total": 42,
                        "page": 1,
                        "pages": 5,
                    }
                }
            },
        },
        **_BAD_REQUEST,
    },
)
def list_products(
    query: ProductListQueryDTO = Depends(ProductListQueryDTO.from_query),
    use_case: ListProducts = Depends(get_list_products_use_case),
) -> ProductListResponseDTO:
    request = ProductMapper.to_list_request(query)

    result = use_case.execute(request)

    return ProductMapper.to_list_response(result.page)


@router.get(
    "/{product_id}",
    response_model=ProductResponseDTO,
    summary="Get a product",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_get_product_by_id_use_case),
) -> ProductResponseDTO:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id))
    return ProductMapper.to_product_response(result.product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponseDTO,
    summary="Partially update a product",
    description="""
    Update any subset of `name`, `price` and `category`.

    - Fields not sent keep their stored values
    - `""` for name/category and `0` for price are treated as not sent
    - At least one field must remain after that, otherwise 400
    """,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def update_product(
    product_id: str,
    payload: ProductUpdateDTO,
    use_case: UpdateProduct = Depends(get_update_product_use_case),
) -> ProductResponseDTO:
    request = UpdateProductRequest(
        product_id=product_id,
        data=ProductMapper.to_product_input(payload),
    )

    result = use_case.execute(request)

    return ProductMapper.to_product_response(result.product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a product",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def delete_product(
    product_id: str,
    use_case: DeleteProduct = Depends(get_delete_product_use_case),
) -> Response:
    use_case.execute(DeleteProductRequest(product_id=product_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
