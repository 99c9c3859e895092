from typing import Optional

from email_validator import EmailNotValidError, validate_email


def clean_required_text(value: Optional[str]) -> Optional[str]:
    """Trimmed value, or None when it is missing or blank."""
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    return cleaned or None


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Lower-cased, trimmed email, or None when it is not a valid address."""
    cleaned = clean_required_text(value)
    if cleaned is None or "@" not in cleaned:
        return None
    try:
        validated = validate_email(cleaned, check_deliverability=False)
    except EmailNotValidError:
        return None
    return validated.normalized.lower()
