class PhoneNotFound(LookupError):
    """Телефона с таким id нет."""

    def __init__(self, phone_id: int) -> None:
        super().__init__(f"Phone {phone_id} not found")
        self.phone_id = phone_id


class StoreError(RuntimeError):
    """Ошибка БД при записи (после rollback)."""
