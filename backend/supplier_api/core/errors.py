# backend/supplier_api/core/errors.py
from fastapi import status


class ServiceError(Exception):
    """Zarfa (data/message) çevrilen uygulama hatalarının tabanı."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InputError(ServiceError):
    """İstek gövdesi çözülemedi."""

    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class PersistenceError(ServiceError):
    """Transaction / sorgu hatası; tekrar denenmez."""

    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
