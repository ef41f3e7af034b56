import pytest
import pytest_asyncio
from unittest.mock import AsyncMock
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from rental_catalog.db.executor import SQLAlchemyExecutor
from rental_catalog.models import Base

def make_property_attrs(owner_id: int, **overrides) -> dict:
    attrs = {
        "owner_id": owner_id,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
        "cover_photo_url": "https://images.example.com/cover.jpg",
        "cost_per_night": 120,
        "parking_spaces": 1,
        "number_of_bathrooms": 2,
        "number_of_bedrooms": 3,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
    }
    attrs.update(overrides)
    return attrs

@pytest.fixture
def mock_executor():
    executor = AsyncMock()
    executor.execute.return_value = []
    return executor

@pytest_asyncio.fixture
async def sqlite_executor():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    executor = SQLAlchemyExecutor(engine)
    yield executor
    await engine.dispose()

@pytest.fixture
def property_attrs():
    return make_property_attrs
