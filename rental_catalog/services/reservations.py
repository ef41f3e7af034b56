from structlog import get_logger
from typing import List, Optional

from rental_catalog.config import settings
from rental_catalog.db.executor import QueryExecutor
from rental_catalog.db.queries import build_guest_reservations
from rental_catalog.schemas.property import ReservedProperty

logger = get_logger()

async def list_reservations_for_guest(
    executor: QueryExecutor,
    guest_id: int,
    limit: Optional[int] = None
) -> List[ReservedProperty]:
    """
    Properties the guest has reserved, one entry per reservation, earliest start date first.
    Each carries the property's average rating over all of its reviews.
    """
    if limit is None:
        limit = settings.DEFAULT_RESULT_LIMIT
    query = build_guest_reservations(guest_id, limit)
    rows = await executor.execute(query.statement, query.values)
    results = [ReservedProperty.model_validate(row) for row in rows]
    logger.info("Listed guest reservations", guest_id=guest_id, result_count=len(results))
    return results
