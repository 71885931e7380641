"""Tests des adaptateurs de securite (argon2 et JWT)."""

from datetime import datetime, timedelta, timezone

from src.adapters.security import Argon2PasswordHasher, JWTTokenCodec


class TestArgon2PasswordHasher:
    """Tests du hachage argon2."""

    def test_hash_and_verify(self):
        hasher = Argon2PasswordHasher()
        password_hash = hasher.hash("s3cret")

        assert password_hash != "s3cret"
        assert password_hash.startswith("$argon2")
        assert hasher.verify("s3cret", password_hash)
        assert not hasher.verify("wrong", password_hash)

    def test_unreadable_hash(self):
        assert not Argon2PasswordHasher().verify("s3cret", "not-a-hash")


class TestJWTTokenCodec:
    """Tests des jetons d'acces."""

    def test_round_trip_claims(self):
        codec = JWTTokenCodec("secret")
        payload = codec.decode(codec.encode("u1", {"role": "user"}))
        assert payload["sub"] == "u1"
        assert payload["role"] == "user"
        assert "exp" in payload

    def test_expired_token(self):
        codec = JWTTokenCodec("secret", expire_minutes=1)
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        assert codec.decode(codec.encode("u1", now=past)) is None

    def test_wrong_secret(self):
        token = JWTTokenCodec("secret").encode("u1")
        assert JWTTokenCodec("other").decode(token) is None

    def test_garbage(self):
        assert JWTTokenCodec("secret").decode("garbage") is None
