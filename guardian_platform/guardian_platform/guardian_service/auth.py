from passlib.context import CryptContext
from datetime import datetime, timedelta
from typing import Optional
import jwt


class PasslibAdapter:
    """Hashes passwords and verification tokens."""

    def __init__(self, rounds: int):
        # Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
        self.context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, value: str) -> str:
        return self.context.hash(value)

    def compare(self, value: str, hashed: str) -> bool:
        return self.context.verify(value, hashed)


class JwtAdapter:
    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def encrypt(self, subject: str) -> str:
        expire = datetime.utcnow() + timedelta(minutes=self.expire_minutes)
        payload = {"sub": subject, "exp": expire}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decrypt(self, token: str) -> Optional[str]:
        """
        Decode an access token.

        Returns:
            The token subject, or None when the token is malformed, expired or
            signed with another key.
        """
        try:
            data = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            return None
        return data.get("sub")
