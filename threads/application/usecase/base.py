"""Base use case."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

import logfire
from pydantic import ValidationError as PydanticValidationError

from threads.domain.error import DomainError, OperationError, ValidationError
from threads.util.jwt import JWTError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


@contextmanager
def operation(description: str) -> Iterator[None]:
    """Run a data-access operation, wrapping unexpected failures.

    Domain errors and token errors are expected outcomes and propagate
    unchanged. Entity validation failures become domain ``ValidationError``.
    Anything else is re-raised as ``OperationError`` whose message is
    ``"<description>: <original message>"``.

    Args:
        description: What the operation does, e.g. "Error creating thread"
    """
    try:
        yield
    except (DomainError, JWTError):
        raise
    except PydanticValidationError as e:
        logfire.warn(f"{description}: invalid data", error=str(e))
        raise ValidationError(str(e)) from e
    except Exception as e:
        logfire.error(description, error=str(e), error_type=type(e).__name__)
        raise OperationError(description, e) from e
