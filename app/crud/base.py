from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
import logging
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session
from app.core.database import Base
from app.core.exceptions import ConflictError
from app.models.mixins import utcnow

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def query(self, db: Session, *, include_deleted: bool = False) -> Query:
        """Entry point for every read. Soft-deleted rows are hidden unless an
        audit path asks for them explicitly."""
        query = db.query(self.model)
        if not include_deleted and hasattr(self.model, "deleted_at"):
            query = query.filter(self.model.deleted_at.is_(None))
        return query

    def get(self, db: Session, id: Any, *, include_deleted: bool = False) -> Optional[ModelType]:
        return self.query(db, include_deleted=include_deleted).filter(self.model.id == id).first()

    def get_multi(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        query = self.query(db).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(
        self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], commit: bool = True
    ) -> ModelType:
        obj_in_data = obj_in if isinstance(obj_in, dict) else jsonable_encoder(obj_in)
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        db.flush() # Populate ID
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    def create_unique(
        self,
        db: Session,
        *,
        obj_in: Union[CreateSchemaType, Dict[str, Any]],
        conflict_message: str,
        commit: bool = True
    ) -> ModelType:
        """Insert inside a SAVEPOINT, turning a unique-constraint violation into ConflictError."""
        obj_in_data = obj_in if isinstance(obj_in, dict) else jsonable_encoder(obj_in)
        db_obj = self.model(**obj_in_data)
        try:
            with db.begin_nested():
                db.add(db_obj)
                db.flush()
        except IntegrityError as exc:
            logger.warning(f"{self.model.__name__} insert rejected by a unique constraint")
            raise ConflictError(conflict_message) from exc
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
        commit: bool = True
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    def soft_delete(self, db: Session, *, db_obj: ModelType, commit: bool = True) -> ModelType:
        db_obj.deleted_at = utcnow()
        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj
