"""Tests for the DocumentNumber (CPF) value object."""

import pytest

from company_manager.domain.common.exceptions import InvalidFormatError
from company_manager.domain.common.value_objects import DocumentNumber
from company_manager.domain.common.value_objects.document_number import is_valid_cpf


class TestDocumentNumber:
    def test_masked_input(self) -> None:
        document = DocumentNumber("111.444.777-35")

        assert document.digits == "11144477735"
        assert document.formatted == "111.444.777-35"
        assert document.raw == "111.444.777-35"

    def test_masked_and_plain_are_equal(self) -> None:
        masked = DocumentNumber("529.982.247-25")
        plain = DocumentNumber("52998224725")

        assert masked.digits == plain.digits
        assert masked == plain
        assert hash(masked) == hash(plain)

    def test_input_is_trimmed(self) -> None:
        assert DocumentNumber("  11144477735 ").raw == "11144477735"

    @pytest.mark.parametrize("raw", ["", "  "])
    def test_blank_is_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidFormatError, match="Document number cannot be null or empty"):
            DocumentNumber(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "1114447773",
            "111444777350",
            "111.444.77735",
            "111-444-777.35",
            "abc.def.ghi-jk",
            "11144477736",
            "11144477725",
        ],
    )
    def test_invalid_shape_or_check_digit(self, raw: str) -> None:
        with pytest.raises(InvalidFormatError, match="Invalid document number format"):
            DocumentNumber(raw)

    @pytest.mark.parametrize("digit", "0123456789")
    def test_repeated_digits_are_rejected(self, digit: str) -> None:
        with pytest.raises(InvalidFormatError, match="Invalid document number format"):
            DocumentNumber(digit * 11)


class TestIsValidCpf:
    def test_check_digits_follow_mod_11(self) -> None:
        # 39053344705: first digit remainder < 2 gives 0
        assert is_valid_cpf("39053344705")
        assert not is_valid_cpf("39053344715")

    def test_requires_eleven_digits(self) -> None:
        assert not is_valid_cpf("123")
        assert not is_valid_cpf("1114447773a")
