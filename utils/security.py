import bcrypt

BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh salt

    Args:
        password: Plaintext password

    Returns:
        bcrypt hash string, safe to persist
    """
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(candidate: str, hashed: str) -> bool:
    """
    Check a candidate password against a stored bcrypt hash

    Args:
        candidate: Plaintext password supplied at login
        hashed: Stored hash

    Returns:
        True if the password matches, False otherwise (including a malformed hash)
    """
    try:
        return bcrypt.checkpw(_encode(candidate), hashed.encode("utf-8"))
    except ValueError:
        return False
