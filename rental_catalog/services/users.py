from structlog import get_logger
from typing import Optional

from rental_catalog.core.errors import ConstraintViolationError, EmailAlreadyRegisteredError
from rental_catalog.db.executor import QueryExecutor
from rental_catalog.db.queries import build_user_by_email, build_user_by_id, build_user_insert
from rental_catalog.schemas.user import User

logger = get_logger()

# Unique constraint on users.email as named by PostgreSQL and reported by SQLite.
EMAIL_CONSTRAINT_MARKERS = ("users_email_key", "users.email")

def normalize_email(email: str) -> str:
    return email.strip().lower()

def is_duplicate_email(error: ConstraintViolationError) -> bool:
    message = str(error)
    return any(marker in message for marker in EMAIL_CONSTRAINT_MARKERS)

async def find_user_by_email(executor: QueryExecutor, email: str) -> Optional[User]:
    query = build_user_by_email(normalize_email(email))
    rows = await executor.execute(query.statement, query.values)
    if not rows:
        logger.debug("User not found by email")
        return None
    return User.model_validate(rows[0])

async def find_user_by_id(executor: QueryExecutor, user_id: int) -> Optional[User]:
    query = build_user_by_id(user_id)
    rows = await executor.execute(query.statement, query.values)
    if not rows:
        logger.debug("User not found by id", user_id=user_id)
        return None
    return User.model_validate(rows[0])

async def create_user(executor: QueryExecutor, name: str, email: str, password_hash: str) -> User:
    """
    Insert a user and return the stored row.
    The credential must already be hashed; this layer stores it as given.
    """
    email = normalize_email(email)
    query = build_user_insert(name, email, password_hash)
    try:
        rows = await executor.execute(query.statement, query.values)
    except ConstraintViolationError as e:
        if is_duplicate_email(e):
            logger.warning("Email already registered")
            raise EmailAlreadyRegisteredError(email, statement=e.statement, original=e.original) from e
        raise
    user = User.model_validate(rows[0])
    logger.info("Created user", user_id=user.id)
    return user
