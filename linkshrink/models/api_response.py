"""Uniform result envelope returned by LinkService operations"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from linkshrink.constants import UNKNOWN_INTERNAL_SERVER_ERROR


def _serialize(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    return value


T = TypeVar('T')


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Outcome of a LinkService operation.

    Attributes:
        success (bool):
            True if the operation completed.
        data (T | None):
            Operation result on success.
        error (str | None):
            Human-readable failure message.
        error_code (str | None):
            Machine-readable failure kind (the raised exception's `error_code`).

    Example:
        >>> ApiResponse.ok(3).to_dict()
        {'success': True, 'data': 3}
        >>> ApiResponse.fail(LinkNotFoundError('URL not found')).to_dict()
        {'success': False, 'error': 'URL not found', 'errorCode': 'link:not_found'}
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> 'ApiResponse[T]':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: Exception) -> 'ApiResponse[T]':
        return cls(
            success=False,
            error=str(error),
            error_code=getattr(error, 'error_code', UNKNOWN_INTERNAL_SERVER_ERROR),
        )

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {'success': True, 'data': _serialize(self.data)}
        return {'success': False, 'error': self.error, 'errorCode': self.error_code}
