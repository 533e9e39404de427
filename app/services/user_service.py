import logging
from datetime import datetime
from typing import Callable, List, Optional

from app.domain.user import User
from app.exceptions import NotFoundError
from app.repositories.user_repository import UserStore
from app.schemas.user import UserCreate, UserUpdate
from app.services.filters import UserCriteria, apply_filters
from app.services.merge import merge_update, utcnow

logger = logging.getLogger(__name__)


class UserService:
    """
    Service class for User operations.

    Username and email uniqueness is enforced by the store (ConflictError);
    exists_by_username / exists_by_email let callers check availability first.
    """

    def __init__(self, store: UserStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def list(self, criteria: Optional[UserCriteria] = None) -> List[User]:
        users = self.store.find_all()
        if criteria is None:
            return users
        return apply_filters(users, criteria.predicates())

    def get_by_id(self, user_id: int) -> User:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", "id", user_id)
        return user

    def get_by_username(self, username: str) -> User:
        user = self.store.find_by_username(username)
        if user is None:
            raise NotFoundError("User", "username", username)
        return user

    def get_by_email(self, email: str) -> User:
        user = self.store.find_by_email(email)
        if user is None:
            raise NotFoundError("User", "email", email)
        return user

    def get_by_country(self, country: str) -> List[User]:
        return self.list(UserCriteria(country=country))

    def get_by_city(self, city: str) -> List[User]:
        return self.list(UserCriteria(city=city))

    def get_by_status(self, status: str) -> List[User]:
        return self.list(UserCriteria(status=status))

    def search_by_name(self, name: str) -> List[User]:
        """Case-insensitive substring search on full name."""
        return self.list(UserCriteria(search=name))

    def create(self, user_data: UserCreate) -> User:
        now = self.clock()
        user = User(**user_data.model_dump(), created_at=now, updated_at=now)
        created = self.store.create(user)
        logger.info(f"User #{created.id} created (username={created.username})")
        return created

    def update(self, user_id: int, user_data: UserUpdate) -> User:
        """
        Replace the fields of an existing user.

        Raises:
            NotFoundError: If no user has this id
            ConflictError: If the new username or email belongs to another user
        """
        existing = self.get_by_id(user_id)
        merged = merge_update(existing, user_data.model_dump(), now=self.clock())
        updated = self.store.update(merged)
        logger.info(f"User #{user_id} updated")
        return updated

    def delete(self, user_id: int) -> bool:
        if not self.store.exists_by_id(user_id):
            return False

        self.store.delete_by_id(user_id)
        logger.info(f"User #{user_id} deleted")
        return True

    def exists_by_username(self, username: str) -> bool:
        return self.store.exists_by_username(username)

    def exists_by_email(self, email: str) -> bool:
        return self.store.exists_by_email(email)

    def all_countries(self) -> List[str]:
        return self.store.find_all_countries()

    def all_cities(self) -> List[str]:
        return self.store.find_all_cities()
