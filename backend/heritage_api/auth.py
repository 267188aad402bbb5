import secrets

import bcrypt

from heritage_api.config import settings

ACCESS_TOKEN_BYTES = 128
# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _bcrypt_input(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(_bcrypt_input(plain), hashed.encode())


def generate_access_token() -> str:
    """Opaque bearer token: 128 random bytes, hex encoded."""
    return secrets.token_hex(ACCESS_TOKEN_BYTES)
