from typing import Optional

from apps.common.repository import GenericRepository
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def username_taken(self, username: str, *, exclude_id: Optional[int] = None) -> bool:
        qs = self.model.objects.filter(username=username)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()
