"""Password hashing — bcrypt through passlib."""

from passlib.context import CryptContext


class PasswordHasher:
    """One-way salted hashing with an adaptive cost factor."""

    def __init__(self, rounds: int = 10):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """False for any password bcrypt refuses (e.g. NUL bytes), same as a mismatch."""
        try:
            return self.context.verify(password, password_hash)
        except ValueError:
            # Rejected before hashing; spend the bcrypt time anyway
            self.context.dummy_verify()
            return False

    def dummy_verify(self) -> bool:
        """Burn the same time as a real verification when there is no user."""
        return self.context.dummy_verify()
