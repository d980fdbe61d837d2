"""Rutas del back-office para administrar el catálogo de lugares."""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from discovery.application.use_cases.categories import (
    create_category as create_category_uc,
    create_feature as create_feature_uc,
    create_subcategory as create_subcategory_uc,
    delete_category as delete_category_uc,
    delete_feature as delete_feature_uc,
    delete_subcategory as delete_subcategory_uc,
    list_categories as list_categories_uc,
    list_features as list_features_uc,
    list_subcategories as list_subcategories_uc,
    update_category as update_category_uc,
)
from discovery.application.use_cases.places import (
    create_place as create_place_uc,
    delete_place as delete_place_uc,
    get_place as get_place_uc,
    list_places as list_places_uc,
    update_place as update_place_uc,
)
from discovery.domain.entities import User
from discovery.infrastructure.database import get_db
from discovery.interfaces.api.dependencies import require_admin
from discovery.interfaces.api.schemas import (
    CategoryCreate,
    CategoryListResponse,
    CategoryRead,
    CategoryResponse,
    CategoryUpdate,
    FeatureCreate,
    FeatureListResponse,
    FeatureRead,
    FeatureResponse,
    PlaceCreate,
    PlaceListResponse,
    PlaceRead,
    PlaceResponse,
    PlaceUpdate,
    SubcategoryCreate,
    SubcategoryListResponse,
    SubcategoryRead,
    SubcategoryResponse,
)

router = APIRouter(prefix="/api/admin", tags=["admin-catalog"])

_LINK_FIELDS = {"category_ids", "subcategory_ids", "feature_ids"}


def _raise_for(exc: ValueError) -> NoReturn:
    """Translate a use case error into the matching HTTP status."""

    message = str(exc)
    status_code = status.HTTP_400_BAD_REQUEST
    if message.endswith("no encontrado") or message.endswith("no encontrada"):
        status_code = status.HTTP_404_NOT_FOUND
    raise HTTPException(status_code=status_code, detail=message) from exc


# Places


@router.get("/places", response_model=PlaceListResponse)
def list_places(
    search: str | None = Query(None, max_length=255),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> PlaceListResponse:
    places = list_places_uc(db, search=search)
    return PlaceListResponse(places=[PlaceRead.model_validate(place) for place in places])


@router.get("/places/{place_id}", response_model=PlaceResponse)
def read_place(
    place_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> PlaceResponse:
    try:
        place = get_place_uc(db, place_id)
    except ValueError as exc:
        _raise_for(exc)
    return PlaceResponse(place=PlaceRead.model_validate(place))


@router.post("/places/add", response_model=PlaceResponse, status_code=status.HTTP_201_CREATED)
def create_place(
    place_in: PlaceCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> PlaceResponse:
    """Crea un lugar y lo asocia a las categorías, subcategorías y características indicadas."""

    try:
        place = create_place_uc(
            db,
            data=place_in.model_dump(exclude=_LINK_FIELDS),
            category_ids=place_in.category_ids,
            subcategory_ids=place_in.subcategory_ids,
            feature_ids=place_in.feature_ids,
        )
    except ValueError as exc:
        _raise_for(exc)
    return PlaceResponse(place=PlaceRead.model_validate(place))


@router.put("/places/{place_id}", response_model=PlaceResponse)
def update_place(
    place_id: int,
    place_in: PlaceUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> PlaceResponse:
    """Actualiza parcialmente un lugar; las listas omitidas no se modifican."""

    changes = place_in.model_dump(exclude_unset=True)
    links = {key: changes.pop(key) for key in _LINK_FIELDS if key in changes}
    try:
        place = update_place_uc(db, place_id, changes=changes, **links)
    except ValueError as exc:
        _raise_for(exc)
    return PlaceResponse(place=PlaceRead.model_validate(place))


@router.delete("/places/{place_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_place(
    place_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> Response:
    try:
        delete_place_uc(db, place_id)
    except ValueError as exc:
        _raise_for(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Categories


@router.get("/categories", response_model=CategoryListResponse)
def list_categories(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> CategoryListResponse:
    return CategoryListResponse(
        categories=[CategoryRead.model_validate(item) for item in list_categories_uc(db)]
    )


@router.post(
    "/categories/add", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED
)
def create_category(
    category_in: CategoryCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> CategoryResponse:
    try:
        category = create_category_uc(db, data=category_in.model_dump())
    except ValueError as exc:
        _raise_for(exc)
    return CategoryResponse(category=CategoryRead.model_validate(category))


@router.put("/categories/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category_in: CategoryUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> CategoryResponse:
    try:
        category = update_category_uc(
            db, category_id, changes=category_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        _raise_for(exc)
    return CategoryResponse(category=CategoryRead.model_validate(category))


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> Response:
    """Elimina la categoría junto con sus subcategorías."""

    try:
        delete_category_uc(db, category_id)
    except ValueError as exc:
        _raise_for(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Subcategories


@router.get("/subcategories", response_model=SubcategoryListResponse)
def list_subcategories(
    category_id: int | None = Query(None, alias="categoryId", ge=1),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> SubcategoryListResponse:
    items = list_subcategories_uc(db, category_id=category_id)
    return SubcategoryListResponse(
        subcategories=[SubcategoryRead.model_validate(item) for item in items]
    )


@router.post(
    "/subcategories/add",
    response_model=SubcategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_subcategory(
    subcategory_in: SubcategoryCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> SubcategoryResponse:
    try:
        subcategory = create_subcategory_uc(
            db,
            category_id=subcategory_in.category_id,
            name=subcategory_in.name,
            description=subcategory_in.description,
        )
    except ValueError as exc:
        _raise_for(exc)
    return SubcategoryResponse(subcategory=SubcategoryRead.model_validate(subcategory))


@router.delete("/subcategories/{subcategory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subcategory(
    subcategory_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> Response:
    try:
        delete_subcategory_uc(db, subcategory_id)
    except ValueError as exc:
        _raise_for(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Features


@router.get("/features", response_model=FeatureListResponse)
def list_features(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> FeatureListResponse:
    return FeatureListResponse(
        features=[FeatureRead.model_validate(item) for item in list_features_uc(db)]
    )


@router.post(
    "/features/add", response_model=FeatureResponse, status_code=status.HTTP_201_CREATED
)
def create_feature(
    feature_in: FeatureCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> FeatureResponse:
    try:
        feature = create_feature_uc(db, name=feature_in.name, icon=feature_in.icon)
    except ValueError as exc:
        _raise_for(exc)
    return FeatureResponse(feature=FeatureRead.model_validate(feature))


@router.delete("/features/{feature_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_feature(
    feature_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> Response:
    try:
        delete_feature_uc(db, feature_id)
    except ValueError as exc:
        _raise_for(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
