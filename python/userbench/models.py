"""
Value records returned by the userbench endpoints.
Field names are snake_case in Python and PascalCase on the wire.
"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class Record(BaseModel):
    """Base for all immutable records. Accepts field names or wire aliases."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )


class Address(Record):
    street: str
    city: str
    state: str
    zip_code: str
    country: str = "USA"


class Company(Record):
    name: str
    department: str
    position: str
    salary: int
    start_date: datetime


class Preferences(Record):
    theme: str
    language: str
    notifications_enabled: bool
    newsletter: bool
    two_factor_enabled: bool


class User(Record):
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    date_of_birth: datetime
    address: Address
    company: Company
    preferences: Preferences
    metadata: Dict[str, str]
    tags: List[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class BenchmarkResult(Record):
    execution_time_ms: int
    primes_found: int
    process_id: int
    working_set_mb: float = Field(alias="WorkingSetMB")
