from enum import Enum


class ErrorKind(str, Enum):
    """Вид ошибки сервисного слоя"""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"


class ServiceError(ValueError):
    """Базовая ошибка сервисного слоя с видом и сообщением"""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class InvalidArgumentError(ServiceError):
    """Некорректные данные сущности или пустой обязательный параметр"""
    kind = ErrorKind.INVALID_ARGUMENT


class EntityNotFoundError(ServiceError):
    """Сущность с указанным ID не найдена"""
    kind = ErrorKind.NOT_FOUND
