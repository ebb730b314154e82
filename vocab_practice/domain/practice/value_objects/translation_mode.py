from enum import StrEnum

from vocab_practice.domain.common.errors import ValidationError


class TranslationMode(StrEnum):
    """Direction of translation."""

    EN_TO_PL = "EN_TO_PL"
    PL_TO_EN = "PL_TO_EN"

    @property
    def is_from_english(self) -> bool:
        return self is TranslationMode.EN_TO_PL

    def reverse(self) -> "TranslationMode":
        if self.is_from_english:
            return TranslationMode.PL_TO_EN
        return TranslationMode.EN_TO_PL

    @classmethod
    def parse(cls, value: str) -> "TranslationMode":
        """
        Validate an untrusted mode string.

        Raises:
            ValidationError: If value is not EN_TO_PL or PL_TO_EN
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(
                f"Invalid translation mode: {value}. Must be EN_TO_PL or PL_TO_EN",
                field="mode",
                value=value,
            ) from e
