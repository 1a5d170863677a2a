"""Class type endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.class_type import ClassTypeCreate, ClassTypeResponse, ClassTypeUpdate
from app.schemas.common import MessageResponse
from app.services.class_type import ClassTypeService

router = APIRouter()


@router.get("", response_model=list[ClassTypeResponse])
def list_class_types(db: Annotated[Session, Depends(get_db)]):
    """List all class types ordered by id."""
    service = ClassTypeService(db)
    return [ClassTypeResponse.model_validate(ct) for ct in service.list_class_types()]


@router.post("", response_model=ClassTypeResponse, status_code=201)
def create_class_type(
    request: ClassTypeCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a class type."""
    service = ClassTypeService(db)
    return ClassTypeResponse.model_validate(service.create_class_type(request))


@router.get("/{class_type_id}", response_model=ClassTypeResponse)
def get_class_type(
    class_type_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    service = ClassTypeService(db)
    return ClassTypeResponse.model_validate(service.get_class_type(class_type_id))


@router.patch("/{class_type_id}", response_model=ClassTypeResponse)
def update_class_type(
    class_type_id: int,
    request: ClassTypeUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    """Rename or recolor a class type."""
    service = ClassTypeService(db)
    return ClassTypeResponse.model_validate(service.update_class_type(class_type_id, request))


@router.delete("/{class_type_id}", response_model=MessageResponse)
def delete_class_type(
    class_type_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Delete a class type.
    All entries scheduled for it are deleted too.
    """
    service = ClassTypeService(db)
    service.delete_class_type(class_type_id)
    return MessageResponse(message="Class type deleted successfully")
