"""Short opaque id generation."""

import secrets
import string

# URL-safe alphabet, 64 symbols
ID_ALPHABET = string.ascii_letters + string.digits + "_-"
ID_LENGTH = 6


def generate_id(length: int = ID_LENGTH) -> str:
    """Generate a random id from the URL-safe alphabet.

    Six symbols give 64**6 (about 6.9e10) values, so collisions are
    negligible for collections in the hundreds.
    """
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))
