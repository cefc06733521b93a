"""
Purpose: Guardrails for inputs.
Content: early, predictable failures; prevent empty role titles and
non-text answers from reaching the store.
"""

from ..errors import ValidationError


class DefaultSecurity:
    def validate_role_title(self, text: str) -> str:
        """Return the trimmed role title or raise ValidationError."""
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Please enter a job title to continue.")
        return self.sanitize(text)

    def validate_answer(self, text: str) -> str:
        """Answers are stored as typed; only the type is checked."""
        if not isinstance(text, str):
            raise ValidationError("Answer must be text.")
        return text

    def sanitize(self, text: str) -> str:
        return (text or "").replace("\x00", "").strip()
