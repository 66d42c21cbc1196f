import pytest

from utils.exceptions import AuthError
from utils.security import create_access_token, decode_access_token, hash_password, verify_password


def test_password_hash_roundtrip():
    hashed = hash_password("secret", rounds=4)

    assert hashed != "secret"
    assert verify_password("secret", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_against_non_bcrypt_value():
    assert not verify_password("secret", "plain-text-password")


def test_token_carries_teacher_id():
    token = create_access_token(42, "s3cret")

    assert decode_access_token(token, "s3cret") == 42


def test_expired_token():
    token = create_access_token(42, "s3cret", expires_hours=-1)

    with pytest.raises(AuthError, match="expired"):
        decode_access_token(token, "s3cret")


def test_token_signed_with_other_secret():
    token = create_access_token(42, "other")

    with pytest.raises(AuthError, match="Invalid token"):
        decode_access_token(token, "s3cret")
