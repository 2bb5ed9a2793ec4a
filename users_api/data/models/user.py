from sqlalchemy import Column, Integer, Text
from users_api.data.database import Base

class UserModel(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"UserModel(id={self.id!r}, email={self.email!r})"
