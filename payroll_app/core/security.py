from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Union

import bcrypt
from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer


class Role(str, Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"


@dataclass(frozen=True)
class AdminClaims:
    id: int
    username: str
    role: Role = Role.ADMIN


@dataclass(frozen=True)
class EmployeeClaims:
    id: int
    email: str
    role: Role = Role.EMPLOYEE


Principal = Union[AdminClaims, EmployeeClaims]


class TokenInvalid(Exception):
    pass


class TokenExpired(TokenInvalid):
    pass


# ---- passwords ----

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash or oversized input
        return False


# ---- tokens ----

class TokenCodec:
    """Issues and validates signed, time-bounded bearer tokens.

    The payload carries the principal id, its role and the identifying field
    for that role (username for admins, email for employees). Expiry is
    enforced at validation time against the timestamp signed into the token.
    """

    salt = "payroll-access-token"

    def __init__(self, secret_key: str, ttl: timedelta = timedelta(days=7)):
        self._serializer = URLSafeTimedSerializer(secret_key, salt=self.salt)
        self.ttl = ttl

    def issue(self, claims: Principal) -> str:
        payload = {"id": claims.id, "role": claims.role.value}
        if isinstance(claims, AdminClaims):
            payload["username"] = claims.username
        else:
            payload["email"] = claims.email
        return self._serializer.dumps(payload)

    def validate(self, token: str) -> Principal:
        try:
            payload = self._serializer.loads(token, max_age=self.ttl.total_seconds())
        except SignatureExpired as exc:
            raise TokenExpired("token expired") from exc
        except BadData as exc:
            raise TokenInvalid("bad token") from exc

        if not isinstance(payload, dict):
            raise TokenInvalid("bad token payload")

        try:
            role = Role(payload.get("role"))
            if role is Role.ADMIN:
                return AdminClaims(id=int(payload["id"]), username=str(payload["username"]))
            return EmployeeClaims(id=int(payload["id"]), email=str(payload["email"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise TokenInvalid("bad token payload") from exc
