from typing import Type, TypeVar, Generic, Optional
from django.db import models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def update_scalar(self, obj: T, **fields) -> T:
        """Apply only the fields that were provided (None means untouched)."""
        dirty = [k for k, v in fields.items() if v is not None]
        for k in dirty:
            setattr(obj, k, fields[k])
        if dirty:
            obj.save()
        return obj

    def delete(self, obj: T):
        obj.delete()
