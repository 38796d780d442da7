"""Data models for the token top-up report."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from utils.validators import fetch_field


class UserEntry(BaseModel):
    """An active user with the balance it ends up with after its company's top up."""
    record: Dict[str, Any]
    new_token_balance: int

    @property
    def last_name(self) -> Any:
        return fetch_field(self.record, "last_name", "User missing last_name")

    @property
    def first_name(self) -> Any:
        return fetch_field(self.record, "first_name", "User missing first_name")

    @property
    def email(self) -> Any:
        return fetch_field(self.record, "email", "User missing email")

    @property
    def tokens(self) -> Any:
        """Previous token balance, or None when the record has no tokens field."""
        return self.record.get("tokens")


class CompanyAggregate(BaseModel):
    """A company together with the active users it tops up.

    The accumulators start empty and are filled while users are processed.
    `record` is a copy of the input company, so the loaded data stays untouched.
    """
    id: Any
    record: Dict[str, Any]
    users_emailed: List[UserEntry] = Field(default_factory=list)
    users_not_emailed: List[UserEntry] = Field(default_factory=list)
    total_top_up_amount: int = 0

    model_config = ConfigDict(validate_assignment=True)

    @property
    def name(self) -> Any:
        return fetch_field(self.record, "name", "Company is missing name")

    @property
    def user_count(self) -> int:
        return len(self.users_emailed) + len(self.users_not_emailed)

    def has_users(self) -> bool:
        """Return True if at least one active user belongs to the company."""
        return self.user_count > 0
