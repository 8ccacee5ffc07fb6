"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Request data is bound and validated by the binding engine through
``bound(...)`` dependencies; error mapping is handled by the
centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, Response

from app.application.catalog.dtos import (
    ListSummariesQuery,
    ListUsersQuery,
    SaveCategoryCommand,
    SaveSubcategoryCommand,
    SaveSummaryCommand,
    SaveUserCommand,
)
from app.application.catalog.manage_categories import (
    ManageCategoriesUseCase,
    ManageSubcategoriesUseCase,
)
from app.application.catalog.manage_summaries import ManageSummariesUseCase
from app.application.catalog.manage_users import ManageUsersUseCase
from app.interfaces.binding import bound
from app.interfaces.catalog.dependencies import (
    get_categories_use_case,
    get_subcategories_use_case,
    get_summaries_use_case,
    get_users_use_case,
)
from app.interfaces.catalog.requests import (
    CATEGORY_ID,
    LIST_SUBCATEGORIES,
    LIST_SUMMARIES,
    LIST_USERS,
    SAVE_CATEGORY,
    SAVE_SUBCATEGORY,
    SAVE_SUMMARY,
    SAVE_USER,
    SUBCATEGORY_ID,
    SUMMARY_ID,
    USER_ID,
    CategoryIdRequest,
    ListSubcategoryRequest,
    ListSummaryRequest,
    ListUserRequest,
    SaveCategoryRequest,
    SaveSubcategoryRequest,
    SaveSummaryRequest,
    SaveUserRequest,
    SubcategoryIdRequest,
    SummaryIdRequest,
    UserIdRequest,
)
from app.interfaces.catalog.schemas import (
    BindingErrorResponse,
    CategoryDetailResponse,
    CategoryItem,
    CategoryListResponse,
    ErrorResponse,
    SaveCategoryResponse,
    SaveSubcategoryResponse,
    SaveSummaryResponse,
    SaveUserResponse,
    SubcategoryDetailResponse,
    SubcategoryItem,
    SubcategoryListResponse,
    SummaryDetailResponse,
    SummaryItem,
    SummaryListResponse,
    UserDetailResponse,
    UserItem,
    UserListResponse,
)

router = APIRouter(tags=["catalog"])

HTTP_204 = 204
SAVE_METHODS = ["POST", "PUT"]
BAD_REQUEST = {400: {"model": BindingErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}


def _is_update(request: Request) -> bool:
    return request.method == "PUT"


# ── Users ────────────────────────────────────────────────────────


@router.api_route(
    "/users",
    methods=SAVE_METHODS,
    response_model=SaveUserResponse,
    responses=BAD_REQUEST,
    summary="Create or update a user",
)
@router.put("/users/{id}", response_model=SaveUserResponse, responses=BAD_REQUEST)
def save_user(
    request: Request,
    payload: SaveUserRequest = Depends(bound(SAVE_USER)),
    use_case: ManageUsersUseCase = Depends(get_users_use_case),
) -> SaveUserResponse:
    """Create a user, or update it when the request is a PUT."""
    user_id = use_case.save(
        SaveUserCommand(
            id=payload.id,
            name=payload.name,
            email=payload.email,
            user_type=payload.user_type,
            is_update=_is_update(request),
        )
    )
    return SaveUserResponse(user_id=user_id)


@router.get(
    "/users",
    response_model=UserListResponse,
    responses=BAD_REQUEST,
    summary="List users",
    description="Pass both page and limit to page through users.",
)
def list_users(
    payload: ListUserRequest = Depends(bound(LIST_USERS)),
    use_case: ManageUsersUseCase = Depends(get_users_use_case),
) -> UserListResponse:
    users = use_case.list(ListUsersQuery(page=payload.page, limit=payload.limit))
    return UserListResponse(
        users=[UserItem.from_entity(u) for u in users], total=len(users)
    )


@router.get("/users/{id}", response_model=UserDetailResponse, responses=NOT_FOUND)
def get_user(
    payload: UserIdRequest = Depends(bound(USER_ID)),
    use_case: ManageUsersUseCase = Depends(get_users_use_case),
) -> UserDetailResponse:
    return UserDetailResponse(user=UserItem.from_entity(use_case.detail(payload.id)))


@router.delete(
    "/users/{id}", status_code=HTTP_204, response_class=Response, responses=NOT_FOUND
)
def delete_user(
    payload: UserIdRequest = Depends(bound(USER_ID)),
    use_case: ManageUsersUseCase = Depends(get_users_use_case),
) -> Response:
    use_case.delete(payload.id)
    return Response(status_code=HTTP_204)


# ── Categories ───────────────────────────────────────────────────


@router.api_route(
    "/categories",
    methods=SAVE_METHODS,
    response_model=SaveCategoryResponse,
    responses=BAD_REQUEST,
    summary="Create or update a category",
)
@router.put(
    "/categories/{id}", response_model=SaveCategoryResponse, responses=BAD_REQUEST
)
def save_category(
    request: Request,
    payload: SaveCategoryRequest = Depends(bound(SAVE_CATEGORY)),
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> SaveCategoryResponse:
    """Create a category, or update it when the request is a PUT."""
    category_id = use_case.save(
        SaveCategoryCommand(
            id=payload.id or None, name=payload.name, is_update=_is_update(request)
        )
    )
    return SaveCategoryResponse(category_id=category_id)


@router.get("/categories", response_model=CategoryListResponse)
def list_categories(
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> CategoryListResponse:
    return CategoryListResponse(
        categories=[CategoryItem.from_entity(c) for c in use_case.list()]
    )


@router.get(
    "/categories/{id}", response_model=CategoryDetailResponse, responses=NOT_FOUND
)
def get_category(
    payload: CategoryIdRequest = Depends(bound(CATEGORY_ID)),
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> CategoryDetailResponse:
    return CategoryDetailResponse(
        category=CategoryItem.from_entity(use_case.detail(payload.id))
    )


@router.delete(
    "/categories/{id}",
    status_code=HTTP_204,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_category(
    payload: CategoryIdRequest = Depends(bound(CATEGORY_ID)),
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> Response:
    use_case.delete(payload.id)
    return Response(status_code=HTTP_204)


# ── Subcategories ────────────────────────────────────────────────


@router.api_route(
    "/subcategories",
    methods=SAVE_METHODS,
    response_model=SaveSubcategoryResponse,
    responses=BAD_REQUEST,
    summary="Create or update a subcategory",
)
@router.put(
    "/subcategories/{id}",
    response_model=SaveSubcategoryResponse,
    responses=BAD_REQUEST,
)
def save_subcategory(
    request: Request,
    payload: SaveSubcategoryRequest = Depends(bound(SAVE_SUBCATEGORY)),
    use_case: ManageSubcategoriesUseCase = Depends(get_subcategories_use_case),
) -> SaveSubcategoryResponse:
    """Create a subcategory, or update it when the request is a PUT."""
    subcategory_id = use_case.save(
        SaveSubcategoryCommand(
            id=payload.id or None,
            category_id=payload.category_id,
            name=payload.name,
            is_update=_is_update(request),
        )
    )
    return SaveSubcategoryResponse(subcategory_id=subcategory_id)


@router.get(
    "/subcategories",
    response_model=SubcategoryListResponse,
    summary="List subcategories",
    description="Optionally filtered by the category_id query parameter.",
)
def list_subcategories(
    payload: ListSubcategoryRequest = Depends(bound(LIST_SUBCATEGORIES)),
    use_case: ManageSubcategoriesUseCase = Depends(get_subcategories_use_case),
) -> SubcategoryListResponse:
    subcategories = use_case.list(category_id=payload.category_id or None)
    return SubcategoryListResponse(
        subcategories=[SubcategoryItem.from_entity(s) for s in subcategories]
    )


@router.get(
    "/subcategories/{id}",
    response_model=SubcategoryDetailResponse,
    responses=NOT_FOUND,
)
def get_subcategory(
    payload: SubcategoryIdRequest = Depends(bound(SUBCATEGORY_ID)),
    use_case: ManageSubcategoriesUseCase = Depends(get_subcategories_use_case),
) -> SubcategoryDetailResponse:
    return SubcategoryDetailResponse(
        subcategory=SubcategoryItem.from_entity(use_case.detail(payload.id))
    )


@router.delete(
    "/subcategories/{id}",
    status_code=HTTP_204,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_subcategory(
    payload: SubcategoryIdRequest = Depends(bound(SUBCATEGORY_ID)),
    use_case: ManageSubcategoriesUseCase = Depends(get_subcategories_use_case),
) -> Response:
    use_case.delete(payload.id)
    return Response(status_code=HTTP_204)


# ── Summaries ────────────────────────────────────────────────────


@router.api_route(
    "/summaries",
    methods=SAVE_METHODS,
    response_model=SaveSummaryResponse,
    responses=BAD_REQUEST,
    summary="Create or update a summary",
)
@router.put(
    "/summaries/{id}", response_model=SaveSummaryResponse, responses=BAD_REQUEST
)
def save_summary(
    request: Request,
    payload: SaveSummaryRequest = Depends(bound(SAVE_SUMMARY)),
    use_case: ManageSummariesUseCase = Depends(get_summaries_use_case),
) -> SaveSummaryResponse:
    """Create a summary, or update it when the request is a PUT."""
    summary_id = use_case.save(
        SaveSummaryCommand(
            id=payload.id,
            title=payload.title,
            description=payload.description,
            content=payload.content,
            user_id=payload.user_id,
            category_id=payload.category_id,
            subcategory_id=payload.subcategory_id,
            is_update=_is_update(request),
        )
    )
    return SaveSummaryResponse(summary_id=summary_id)


@router.get(
    "/summaries",
    response_model=SummaryListResponse,
    responses=BAD_REQUEST,
    summary="List summaries",
    description=(
        "Newest first. Filter by category_id and subcategory_id; "
        "page with limit (1-100, default 20) and offset."
    ),
)
def list_summaries(
    payload: ListSummaryRequest = Depends(bound(LIST_SUMMARIES)),
    use_case: ManageSummariesUseCase = Depends(get_summaries_use_case),
) -> SummaryListResponse:
    page = use_case.list(
        ListSummariesQuery(
            category_id=payload.category_id,
            subcategory_id=payload.subcategory_id,
            limit=payload.limit,
            offset=payload.offset,
        )
    )
    return SummaryListResponse(
        summaries=[SummaryItem.from_entity(s) for s in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
        has_next=page.has_next,
    )


@router.get(
    "/summaries/{id}", response_model=SummaryDetailResponse, responses=NOT_FOUND
)
def get_summary(
    payload: SummaryIdRequest = Depends(bound(SUMMARY_ID)),
    use_case: ManageSummariesUseCase = Depends(get_summaries_use_case),
) -> SummaryDetailResponse:
    return SummaryDetailResponse(
        summary=SummaryItem.from_entity(use_case.detail(payload.id))
    )


@router.delete(
    "/summaries/{id}",
    status_code=HTTP_204,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_summary(
    payload: SummaryIdRequest = Depends(bound(SUMMARY_ID)),
    use_case: ManageSummariesUseCase = Depends(get_summaries_use_case),
) -> Response:
    use_case.delete(payload.id)
    return Response(status_code=HTTP_204)
