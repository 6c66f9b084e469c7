from typing import Generic, Optional, Type, TypeVar

from django.db import models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Plain ORM access for a single model; subclasses add query helpers."""

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def update_fields(self, obj: T, **fields) -> T:
        if not fields:
            return obj
        for name, value in fields.items():
            setattr(obj, name, value)
        obj.save(update_fields=list(fields))
        return obj

    def delete(self, obj: T) -> None:
        obj.delete()
