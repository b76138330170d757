import re
import unicodedata


class InvalidInput(ValueError):
    """Raised when a search is asked to run on input it is not defined for."""


# ---------------------- Validation ----------------------
def validate_inputs(base, pattern):
    """Checks the (base, pattern) pair and returns their lengths (n, m)."""
    if not isinstance(base, str) or not isinstance(pattern, str):
        raise InvalidInput(
            f"base and pattern must be str, got {type(base).__name__} and {type(pattern).__name__}"
        )
    if not pattern:
        raise InvalidInput("pattern must not be empty")
    return len(base), len(pattern)


# ---------------------- Cleaning ----------------------
def normalize_text(text: str, lowercase: bool = False) -> str:
    if not text or not isinstance(text, str):
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = re.sub(r'\s+', ' ', text)
    if lowercase:
        text = text.lower()
    return text.strip()
