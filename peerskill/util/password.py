"""Password hashing with bcrypt."""

import bcrypt

# bcrypt refuses longer input
MAX_PASSWORD_BYTES = 72


def password_fits(password: str) -> bool:
    """Whether bcrypt accepts the password as is."""
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a plaintext password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash.

    Malformed hashes count as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
