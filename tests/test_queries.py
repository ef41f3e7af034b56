import re

import pytest
from pydantic import ValidationError

from rental_catalog.db.queries import (
    PROPERTY_COLUMNS,
    build_guest_reservations,
    build_property_insert,
    build_property_search,
    build_user_by_email,
    build_user_insert,
    to_cents,
)
from rental_catalog.schemas.property import PropertyCreate
from rental_catalog.schemas.search import PropertySearchCriteria

ALL_FILTERS = {
    "owner_id": 850,
    "city": "Vancouver",
    "minimum_price_per_night": 50,
    "maximum_price_per_night": 250,
    "minimum_rating": 4,
}

FILTER_SETS = [{}] + [{name: value} for name, value in ALL_FILTERS.items()] + [ALL_FILTERS]

def placeholder_indices(statement):
    return [int(n) for n in re.findall(r"\$(\d+)", statement)]

@pytest.mark.parametrize("filters", FILTER_SETS, ids=lambda f: "+".join(f) or "none")
def test_placeholders_match_bound_values(filters):
    query = build_property_search(PropertySearchCriteria(**filters), 10)
    indices = placeholder_indices(query.statement)
    assert indices == list(range(1, len(query.values) + 1))
    assert len(query.values) == len(filters) + 1
    assert query.values[-1] == 10
    assert query.statement.rstrip().endswith(f"LIMIT ${len(query.values)}")

def test_minimum_price_is_bound_in_cents():
    query = build_property_search(PropertySearchCriteria(minimum_price_per_night=50), 10)
    assert query.values == [5000, 10]
    assert isinstance(query.values[0], int)
    assert "properties.cost_per_night >= $1" in query.statement

def test_maximum_price_is_bound_in_cents():
    query = build_property_search(PropertySearchCriteria(maximum_price_per_night=19.99), 10)
    assert query.values == [1999, 10]
    assert "properties.cost_per_night <= $1" in query.statement

def test_no_filters():
    query = build_property_search(PropertySearchCriteria(), 10)
    assert "WHERE" not in query.statement
    assert query.statement.count("GROUP BY") == 1
    assert "HAVING" not in query.statement
    assert query.values == [10]
    assert "LIMIT $1" in query.statement

def test_minimum_rating_goes_to_having():
    query = build_property_search(PropertySearchCriteria(minimum_rating=4), 10)
    assert "WHERE" not in query.statement
    assert "HAVING avg(property_reviews.rating) >= $1" in query.statement
    assert query.values == [4, 10]

def test_zero_is_a_real_filter():
    query = build_property_search(PropertySearchCriteria(minimum_price_per_night=0, minimum_rating=0), 5)
    assert "WHERE properties.cost_per_night >= $1" in query.statement
    assert "HAVING avg(property_reviews.rating) >= $2" in query.statement
    assert query.values == [0, 0, 5]

def test_where_filters_are_joined_with_and():
    query = build_property_search(PropertySearchCriteria(owner_id=850, city="Van"), 10)
    assert "WHERE properties.owner_id = $1 AND properties.city LIKE $2" in query.statement
    assert query.values == [850, "%Van%", 10]

def test_clause_order_with_all_filters():
    statement = build_property_search(PropertySearchCriteria(**ALL_FILTERS), 10).statement
    positions = [statement.index(keyword) for keyword in ("WHERE", "GROUP BY", "HAVING", "ORDER BY", "LIMIT")]
    assert positions == sorted(positions)
    assert statement.count("WHERE") == 1
    assert statement.count("HAVING") == 1

def test_full_filter_values_in_binding_order():
    query = build_property_search(PropertySearchCriteria(**ALL_FILTERS), 3)
    assert query.values == [850, "%Vancouver%", 5000, 25000, 4, 3]

def test_city_input_never_reaches_statement():
    city = "x'; DROP TABLE users; --"
    query = build_property_search(PropertySearchCriteria(city=city), 10)
    assert "DROP TABLE" not in query.statement
    assert query.values[0] == f"%{city}%"

def test_assembly_is_deterministic():
    criteria = PropertySearchCriteria(**ALL_FILTERS)
    assert build_property_search(criteria, 10) == build_property_search(criteria, 10)

@pytest.mark.parametrize("limit", [0, -1])
def test_limit_must_be_positive(limit):
    with pytest.raises(ValueError):
        build_property_search(PropertySearchCriteria(), limit)

def test_criteria_rejects_inverted_price_range():
    with pytest.raises(ValidationError):
        PropertySearchCriteria(minimum_price_per_night=300, maximum_price_per_night=100)

def test_criteria_rejects_unknown_filter():
    with pytest.raises(ValidationError):
        PropertySearchCriteria(minimum_price=50)

def test_criteria_rejects_rating_out_of_range():
    with pytest.raises(ValidationError):
        PropertySearchCriteria(minimum_rating=6)

def test_guest_reservations_binds_guest_and_limit():
    query = build_guest_reservations(7, 10)
    assert query.values == [7, 10]
    assert "reservations.guest_id = $1" in query.statement
    assert "LIMIT $2" in query.statement
    assert "ORDER BY reservations.start_date" in query.statement

def test_user_lookup_by_email_compares_lowercase():
    query = build_user_by_email("x@y.com")
    assert "lower(users.email) = $1" in query.statement
    assert query.values == ["x@y.com"]

def test_user_insert():
    query = build_user_insert("Eva", "eva@example.com", "$2a$10$hash")
    assert query.values == ["Eva", "eva@example.com", "$2a$10$hash"]
    assert placeholder_indices(query.statement) == [1, 2, 3]
    assert "RETURNING *" in query.statement

def test_property_insert_converts_price_and_sets_active():
    prop = PropertyCreate(
        owner_id=1, title="Cabin", thumbnail_photo_url="t", cover_photo_url="c", cost_per_night=120,
        country="Canada", street="1 Main", city="Banff", province="Alberta", post_code="T1L"
    )
    query = build_property_insert(prop)
    assert len(query.values) == len(PROPERTY_COLUMNS)
    assert query.values[PROPERTY_COLUMNS.index("cost_per_night")] == 12000
    assert placeholder_indices(query.statement) == list(range(1, len(PROPERTY_COLUMNS) + 1))
    assert query.statement.rstrip().endswith(", true) RETURNING *")

def test_to_cents_rounds_float_noise():
    assert to_cents(19.99) == 1999
    assert to_cents(0.1 + 0.2) == 30
