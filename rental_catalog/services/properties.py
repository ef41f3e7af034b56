from structlog import get_logger
from typing import Any, List, Mapping, Optional, Union

from rental_catalog.config import settings
from rental_catalog.db.executor import QueryExecutor
from rental_catalog.db.queries import build_property_insert, build_property_search
from rental_catalog.schemas.property import PropertyCreate, PropertyRecord
from rental_catalog.schemas.search import PropertySearchCriteria

logger = get_logger()

async def search_properties(
    executor: QueryExecutor,
    criteria: Union[PropertySearchCriteria, Mapping[str, Any], None] = None,
    limit: Optional[int] = None
) -> List[PropertyRecord]:
    """
    Find properties matching the given filters, each with its average rating,
    cheapest first. Properties with the same price come back in storage order,
    which the database does not guarantee.
    """
    if criteria is None:
        criteria = PropertySearchCriteria()
    elif not isinstance(criteria, PropertySearchCriteria):
        criteria = PropertySearchCriteria.model_validate(dict(criteria))
    if limit is None:
        limit = settings.DEFAULT_RESULT_LIMIT

    query = build_property_search(criteria, limit)
    filters = sorted(criteria.model_dump(exclude_none=True))
    logger.info("Searching properties", filters=filters, limit=limit)

    rows = await executor.execute(query.statement, query.values)
    results = [PropertyRecord.model_validate(row) for row in rows]
    logger.info("Property search completed", filters=filters, result_count=len(results))
    return results

async def create_property(
    executor: QueryExecutor,
    attributes: Union[PropertyCreate, Mapping[str, Any]]
) -> PropertyRecord:
    """
    Insert a property. cost_per_night is given in major units and stored in cents;
    new properties are always active.
    """
    if not isinstance(attributes, PropertyCreate):
        attributes = PropertyCreate.model_validate(dict(attributes))

    query = build_property_insert(attributes)
    rows = await executor.execute(query.statement, query.values)
    record = PropertyRecord.model_validate(rows[0])
    logger.info("Created property", property_id=record.id, owner_id=record.owner_id)
    return record
