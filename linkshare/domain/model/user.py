"""User entity."""

from pydantic import Field

from linkshare.domain.model.common import DomainModel
from linkshare.domain.value import UserId


class User(DomainModel):
    """Registered user.

    Business rules:
    - Email is unique across users (enforced by database unique constraint)
    - Only the bcrypt hash of the password is ever stored
    """

    id: UserId
    email: str = Field(min_length=1, max_length=255)
    password_hash: str = Field(repr=False)
    name: str = Field(min_length=1, max_length=255)
