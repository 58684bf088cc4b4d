"""Repository for the User aggregate."""

from protean.exceptions import ObjectNotFoundError

from identity.domain import identity
from identity.user.user import User


@identity.repository(part_of=User)
class UserRepository:
    def find(self, user_id) -> User | None:
        """Return the user, or None when the id is blank or unknown."""
        if not user_id:
            return None
        try:
            return self.get(str(user_id))
        except ObjectNotFoundError:
            return None


def find_user(user_id) -> User | None:
    """Look up a user from any domain context."""
    with identity.domain_context():
        return identity.repository_for(User).find(user_id)
