"""
Pagination dependency.
"""

from typing import Annotated

from fastapi import Depends, Query

from gamevault.shared.schemas.common import PaginationParams


async def get_pagination(
    limit: int = Query(20, ge=1, description="Number of items to return"),
    offset: int = Query(0, ge=0, description="Number of items to skip"),
) -> PaginationParams:
    """Pagination parameters dependency."""
    return PaginationParams(limit=limit, offset=offset)


Pagination = Annotated[PaginationParams, Depends(get_pagination)]
