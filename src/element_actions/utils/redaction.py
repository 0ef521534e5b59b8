"""Masking of typed values for safe logging."""

REDACTED = "***REDACTED***"


def mask_value(value: str, redact: bool = True) -> str:
    """Mask a value before it reaches the logs.

    Args:
        value: Value that would be typed into an element
        redact: When False the value is returned quoted and unchanged

    Returns:
        Printable form of the value ("" stays visible so clears are obvious)
    """
    if not value:
        return "''"
    if redact:
        return REDACTED
    return repr(value)
