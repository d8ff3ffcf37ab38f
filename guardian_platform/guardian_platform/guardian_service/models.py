from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime
from .db import Base


class Guardian(Base):
    __tablename__ = "guardian"
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    access_token = Column(String, nullable=True)
    # Forget password flow, the token is stored hashed
    verification_token = Column(String, nullable=True)
    verification_token_created_at = Column(DateTime, nullable=True)


class ErrorLog(Base):
    __tablename__ = "error_log"

    id = Column(Integer, primary_key=True, index=True)
    stack = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self) -> dict:
        """
        Serialize ErrorLog to dictionary for the dev monitor.

        Returns:
            Dictionary with all fields, datetimes in ISO 8601 format
        """
        return {
            "id": self.id,
            "stack": self.stack,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
