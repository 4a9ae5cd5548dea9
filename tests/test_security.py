from __future__ import annotations

from datetime import timedelta

import pytest

from payroll_app.core.security import (
    AdminClaims,
    EmployeeClaims,
    Role,
    TokenCodec,
    TokenExpired,
    TokenInvalid,
    hash_password,
    verify_password,
)


def test_password_roundtrip_and_mismatch():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_malformed_hash_is_a_mismatch():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_admin_token_decodes_to_admin_claims():
    codec = TokenCodec("k")
    principal = codec.validate(codec.issue(AdminClaims(id=3, username="root")))
    assert principal == AdminClaims(id=3, username="root")
    assert principal.role is Role.ADMIN


def test_employee_token_decodes_to_employee_claims():
    codec = TokenCodec("k")
    principal = codec.validate(codec.issue(EmployeeClaims(id=9, email="e@x.com")))
    assert isinstance(principal, EmployeeClaims)
    assert principal.email == "e@x.com"
    assert principal.role is Role.EMPLOYEE


def test_token_signed_with_other_secret_is_invalid():
    token = TokenCodec("one").issue(AdminClaims(id=1, username="a"))
    with pytest.raises(TokenInvalid) as exc:
        TokenCodec("two").validate(token)
    assert not isinstance(exc.value, TokenExpired)


def test_garbage_token_is_invalid():
    with pytest.raises(TokenInvalid):
        TokenCodec("k").validate("not.a.token")


def test_token_past_ttl_is_expired():
    token = TokenCodec("k").issue(EmployeeClaims(id=1, email="e@x.com"))
    with pytest.raises(TokenExpired):
        TokenCodec("k", ttl=timedelta(seconds=-1)).validate(token)


def test_unknown_role_in_payload_is_invalid():
    codec = TokenCodec("k")
    token = codec._serializer.dumps({"id": 1, "role": "superuser", "username": "x"})
    with pytest.raises(TokenInvalid):
        codec.validate(token)
