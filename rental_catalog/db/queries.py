"""
SQL statements for the rental catalog.

Every statement is returned as a Query(statement, values) pair whose ``$N``
placeholders are produced by a ParameterBinder, so user input only ever reaches
the database as bound values.
"""

from typing import Any, List, NamedTuple, Tuple

from rental_catalog.db.binder import ParameterBinder
from rental_catalog.schemas.property import PropertyCreate
from rental_catalog.schemas.search import PropertySearchCriteria


class Query(NamedTuple):
    statement: str
    values: List[Any]


# Insert order for properties; `active` is always written as true.
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)

PROPERTY_SEARCH_BASE = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    LEFT JOIN property_reviews ON properties.id = property_reviews.property_id"""


def to_cents(amount: float) -> int:
    return int(round(amount * 100))


def _check_limit(limit: int):
    if limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit}")


def property_search_predicates(criteria: PropertySearchCriteria, binder: ParameterBinder) -> Tuple[List[str], List[str]]:
    """
    Turn the active filters into WHERE and HAVING fragments, binding each value.

    The rating filter goes to HAVING because it compares against the average
    computed after grouping.
    """
    where: List[str] = []
    having: List[str] = []

    if criteria.owner_id is not None:
        where.append(f"properties.owner_id = {binder.bind(criteria.owner_id)}")
    if criteria.city is not None:
        where.append(f"properties.city LIKE {binder.bind(f'%{criteria.city}%')}")
    if criteria.minimum_price_per_night is not None:
        where.append(f"properties.cost_per_night >= {binder.bind(to_cents(criteria.minimum_price_per_night))}")
    if criteria.maximum_price_per_night is not None:
        where.append(f"properties.cost_per_night <= {binder.bind(to_cents(criteria.maximum_price_per_night))}")
    if criteria.minimum_rating is not None:
        having.append(f"avg(property_reviews.rating) >= {binder.bind(criteria.minimum_rating)}")

    return where, having


def build_property_search(criteria: PropertySearchCriteria, limit: int) -> Query:
    """
    Assemble the property search statement.

    Segments are always emitted in the order WHERE?, GROUP BY, HAVING?, ORDER BY,
    LIMIT, and the limit is always the last bound value.
    """
    _check_limit(limit)
    binder = ParameterBinder()
    where, having = property_search_predicates(criteria, binder)

    parts = [PROPERTY_SEARCH_BASE]
    if where:
        parts.append("    WHERE " + " AND ".join(where))
    parts.append("    GROUP BY properties.id")
    if having:
        parts.append("    HAVING " + " AND ".join(having))
    parts.append("    ORDER BY properties.cost_per_night")
    parts.append(f"    LIMIT {binder.bind(limit)}")

    return Query("\n".join(parts), binder.values)


def build_guest_reservations(guest_id: int, limit: int) -> Query:
    _check_limit(limit)
    binder = ParameterBinder()
    statement = f"""
    SELECT properties.*,
        reservations.id AS reservation_id,
        reservations.start_date,
        reservations.end_date,
        avg(property_reviews.rating) AS average_rating
    FROM reservations
    JOIN properties ON properties.id = reservations.property_id
    LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
    WHERE reservations.guest_id = {binder.bind(guest_id)}
    GROUP BY properties.id, reservations.id
    ORDER BY reservations.start_date
    LIMIT {binder.bind(limit)}"""
    return Query(statement, binder.values)


def build_user_by_email(email: str) -> Query:
    # Callers pass an already normalized address; lower() covers rows stored before normalization.
    return Query("SELECT * FROM users WHERE lower(users.email) = $1", [email])


def build_user_by_id(user_id: int) -> Query:
    return Query("SELECT * FROM users WHERE users.id = $1", [user_id])


def build_user_insert(name: str, email: str, password_hash: str) -> Query:
    binder = ParameterBinder()
    placeholders = ", ".join(binder.bind(value) for value in (name, email, password_hash))
    return Query(f"INSERT INTO users (name, email, password) VALUES ({placeholders}) RETURNING *", binder.values)


def build_property_insert(prop: PropertyCreate) -> Query:
    binder = ParameterBinder()
    placeholders = []
    for column in PROPERTY_COLUMNS:
        value = getattr(prop, column)
        if column == "cost_per_night":
            value = to_cents(value)
        placeholders.append(binder.bind(value))
    statement = (
        f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)}, active)"
        f" VALUES ({', '.join(placeholders)}, true) RETURNING *"
    )
    return Query(statement, binder.values)
