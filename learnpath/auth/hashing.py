## Password + reset-code hashing

import secrets

import bcrypt

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72

def _secret_bytes(secret: str) -> bytes:
    return secret.encode("utf-8")[:BCRYPT_MAX_BYTES]

def hash_password(password: str) -> str:
    return bcrypt.hashpw(_secret_bytes(password), bcrypt.gensalt()).decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_secret_bytes(password), password_hash.encode("utf-8"))

def new_reset_code() -> str:
    # 3 random bytes -> 6 uppercase hex chars, e.g. "4F0A9C"
    return secrets.token_hex(3).upper()
