"""Class type service."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.models.class_type import ClassType
from app.schemas.class_type import ClassTypeCreate, ClassTypeUpdate


class ClassTypeService:
    """Class type management service."""

    def __init__(self, db: Session):
        self.db = db

    def list_class_types(self) -> list[ClassType]:
        result = self.db.execute(select(ClassType).order_by(ClassType.id))
        return list(result.scalars().all())

    def get_class_type(self, class_type_id: int) -> ClassType:
        class_type = self.db.get(ClassType, class_type_id)
        if not class_type:
            raise NotFoundError("Class type", str(class_type_id))
        return class_type

    def create_class_type(self, request: ClassTypeCreate) -> ClassType:
        self._ensure_name_free(request.name)
        class_type = ClassType(name=request.name, color=request.color)
        self.db.add(class_type)
        self.db.flush()
        self.db.refresh(class_type)
        return class_type

    def update_class_type(self, class_type_id: int, request: ClassTypeUpdate) -> ClassType:
        class_type = self.get_class_type(class_type_id)

        update_data = request.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in update_data and update_data["name"] != class_type.name:
            self._ensure_name_free(update_data["name"])
        for field, value in update_data.items():
            setattr(class_type, field, value)

        self.db.flush()
        self.db.refresh(class_type)
        return class_type

    def delete_class_type(self, class_type_id: int) -> None:
        """Delete a class type together with its entries."""
        class_type = self.get_class_type(class_type_id)
        self.db.delete(class_type)
        self.db.flush()

    def _ensure_name_free(self, name: str) -> None:
        existing = self.db.execute(
            select(ClassType.id).where(ClassType.name == name)
        ).scalar_one_or_none()
        if existing is not None:
            raise ConflictError(f"Class type '{name}' already exists")
