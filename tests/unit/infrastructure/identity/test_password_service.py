"""Tests for password hashing."""

from company_manager.infrastructure.identity.services import password_service
from company_manager.infrastructure.identity.services.password_service_adapter import (
    PasswordServiceAdapter,
)


class TestPasswordService:
    def test_hash_and_verify(self) -> None:
        hashed = password_service.hash_password("Secret123")

        assert hashed != "Secret123"
        assert password_service.verify_password("Secret123", hashed)
        assert not password_service.verify_password("secret123", hashed)

    def test_unknown_hash_format_never_matches(self) -> None:
        assert not password_service.verify_password("Secret123", "not-a-hash")

    def test_dummy_hash_is_a_real_hash(self) -> None:
        assert not password_service.verify_password("anything", password_service.get_dummy_hash())

    def test_adapter_delegates(self) -> None:
        adapter = PasswordServiceAdapter()

        hashed = adapter.hash_password("Secret123")

        assert adapter.verify_password("Secret123", hashed)
        assert adapter.get_dummy_hash() == password_service.DUMMY_HASH
