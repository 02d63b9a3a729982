"""Sequential transport request numbers (``OTD00042``).

The counter lives in a single ``request_counter`` row and is bumped with one
``INSERT ... ON CONFLICT DO UPDATE ... RETURNING`` statement, so concurrent
callers always read distinct values without any application-side locking.
"""
import logging

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.request_counter import TRANSPORT_COUNTER_ID, RequestCounter

logger = logging.getLogger(__name__)

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def format_request_number(number: int) -> str:
    return f"{settings.request_number_prefix}{number:0{settings.request_number_width}d}"


async def next_request_number(session: AsyncSession, counter_id: str = TRANSPORT_COUNTER_ID) -> int:
    """Increment and return the counter. The caller owns the transaction."""
    dialect = session.get_bind().dialect.name
    try:
        insert = _INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"Request numbers are not supported on {dialect}") from None

    stmt = (
        insert(RequestCounter)
        .values(id=counter_id, last_number=1)
        .on_conflict_do_update(
            index_elements=[RequestCounter.id],
            set_={"last_number": RequestCounter.last_number + 1},
        )
        .returning(RequestCounter.last_number)
    )
    result = await session.execute(stmt)
    number = result.scalar_one()
    logger.debug("Allocated request number %s from %s", number, counter_id)
    return number
