from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(UTC)


def _epoch_ms() -> int:
    """Return current UTC time as integer epoch milliseconds."""
    return int(_utc_now().timestamp() * 1000)


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire.

    Attributes stay snake_case in Python; either spelling is accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
