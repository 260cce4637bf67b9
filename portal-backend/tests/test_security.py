# File: tests/test_security.py

from authportal.core.security import hash_password, verify_password


def test_hash_is_salted_and_verifiable():
    first = hash_password("secret123")
    second = hash_password("secret123")

    assert first != "secret123"
    assert first != second
    assert verify_password("secret123", first)
    assert verify_password("secret123", second)
    assert not verify_password("wrong", first)


def test_hash_uses_configured_cost_factor():
    assert hash_password("secret123").startswith("$2b$10$")
    assert hash_password("secret123", rounds=11).startswith("$2b$11$")


def test_long_passwords_are_hashed():
    password = "p" * 100

    password_hash = hash_password(password)

    assert verify_password(password, password_hash)
