# users_api/api/middleware.py
from fastapi import Request

from users_api.utils import settings
from users_api.utils.deadline import Deadline


async def request_deadline(request: Request, call_next):
    """Budzet czasu liczony od odebrania requestu, przed czytaniem body."""
    request.state.deadline = Deadline(settings.REQUEST_TIMEOUT_SECONDS)
    return await call_next(request)
