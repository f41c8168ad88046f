from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from fastapi import status


@dataclass(eq=False)
class MiniBlogError(Exception):
    message: str
    code: ClassVar[str] = "error"

    def __str__(self) -> str:
        return self.message


class ValidationError(MiniBlogError):
    code = "validation_error"


class NotFoundError(MiniBlogError):
    code = "not_found"


class PersistenceError(MiniBlogError):
    code = "persistence_error"


class FatalProvisioningError(MiniBlogError):
    """Schema setup failed; the process must not serve traffic."""

    code = "fatal_provisioning_error"


EXC_TO_STATUS: dict[type[MiniBlogError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def map_exception_to_status(exc: MiniBlogError) -> int:
    for typ, st in EXC_TO_STATUS.items():
        if isinstance(exc, typ):
            return st
    return status.HTTP_400_BAD_REQUEST
