from sqlalchemy import Column, Integer, String, DateTime

from app.database import Base


class UserRow(Base):
    """Table mapping for users. username and email carry unique constraints."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(100), nullable=False, unique=True)
    full_name = Column(String(100))
    phone = Column(String(20))
    address = Column(String(255))
    city = Column(String(50))
    country = Column(String(50))
    status = Column(String(20))
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<UserRow(id={self.id}, username='{self.username}')>"
