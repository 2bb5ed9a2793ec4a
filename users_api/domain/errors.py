# users_api/domain/errors.py


class UserNotFoundError(LookupError):
    """Brak wiersza o podanym ID (select zwrócił 0 wierszy lub update/delete nic nie zmienił)."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class StoreError(RuntimeError):
    """
    Dowolny błąd bazy: naruszenie unikalności, połączenie, timeout.
    `detail` trzyma oryginalny komunikat backendu do logów.
    """

    def __init__(self, operation: str, detail: str):
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation
        self.detail = detail
