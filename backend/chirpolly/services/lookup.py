"""Primary-key lookups shared by the services."""

from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.errors import ResourceNotFoundError
from chirpolly.db.base import Base

M = TypeVar("M", bound=Base)


async def get_or_404(
    db: AsyncSession, model: type[M], resource_id: str, resource_type: str,
) -> M:
    """Load a row by id or raise ResourceNotFoundError."""
    obj = await db.get(model, resource_id)
    if obj is None:
        raise ResourceNotFoundError(resource_type, resource_id)
    return obj
