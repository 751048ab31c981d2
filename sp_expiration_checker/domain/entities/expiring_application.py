"""A credential that is due for an expiration warning."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExpiringApplication:
    """One application credential falling on the warning schedule."""

    id: str
    display_name: str
    key_id: str
    key_type: str
    days_to_expire: int
    end_date_time: str
