# users_api/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict


class UserCreate(BaseModel):
    """Schema dla tworzenia użytkownika."""

    name: str = Field(..., min_length=1, description="Imię użytkownika")
    email: str = Field(..., min_length=1, description="Unikalny adres email")


class UserUpdate(UserCreate):
    """
    Schema dla pełnej aktualizacji użytkownika.
    ID pochodzi ze ścieżki; jeśli podane w body, musi się z nią zgadzać.
    """

    id: int | None = Field(None, description="Opcjonalne ID, musi być równe ID ze ścieżki")


class UserRead(BaseModel):
    """Schema dla użytkownika (response)."""

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class MessageOut(BaseModel):
    message: str
