from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel

# Signed 64-bit and 32-bit column ranges
BIGINT_MIN, BIGINT_MAX = -(2**63), 2**63 - 1
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


class Entity(BaseModel):
    """Base domain entity with a store-assigned integer identifier.

    Serialized with camelCase keys; snake_case names are accepted on input too.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = PydanticField(
        default=None,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        description="Identifier assigned by the database; null until persisted",
    )


class EntityTable(SQLModel, table=False):
    """Base table with an autoincrement primary key and bookkeeping timestamps."""

    id: int | None = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
