# import wszystkich modeli zeby SQLAlchemy zarejestrowal je w Base.metadata

from users_api.data.models.user import UserModel

__all__ = ["UserModel"]
