from typing import List, Optional, Protocol

from app.domain.user import User
from app.models.user import UserRow
from app.repositories.base import EntityStore, SqlAlchemyStore


class UserStore(EntityStore[User], Protocol):
    def find_by_username(self, username: str) -> Optional[User]: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def exists_by_username(self, username: str) -> bool: ...

    def exists_by_email(self, email: str) -> bool: ...

    def find_all_countries(self) -> List[str]: ...

    def find_all_cities(self) -> List[str]: ...


class UserRepository(SqlAlchemyStore[User]):
    """SQLAlchemy store for users."""

    model = UserRow
    entity_name = "User"

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(
            id=row.id,
            username=row.username,
            email=row.email,
            full_name=row.full_name,
            phone=row.phone,
            address=row.address,
            city=row.city,
            country=row.country,
            status=row.status,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_row(self, user: User) -> UserRow:
        row = UserRow()
        self._apply(row, user)
        return row

    @staticmethod
    def _apply(row: UserRow, user: User) -> None:
        row.username = user.username
        row.email = user.email
        row.full_name = user.full_name
        row.phone = user.phone
        row.address = user.address
        row.city = user.city
        row.country = user.country
        row.status = user.status
        row.created_at = user.created_at
        row.updated_at = user.updated_at

    def find_by_username(self, username: str) -> Optional[User]:
        return self._find_one_by(UserRow.username, username)

    def find_by_email(self, email: str) -> Optional[User]:
        return self._find_one_by(UserRow.email, email)

    def exists_by_username(self, username: str) -> bool:
        return self._exists_by(UserRow.username, username)

    def exists_by_email(self, email: str) -> bool:
        return self._exists_by(UserRow.email, email)

    def find_all_countries(self) -> List[str]:
        return self._distinct_values(UserRow.country)

    def find_all_cities(self) -> List[str]:
        return self._distinct_values(UserRow.city)
