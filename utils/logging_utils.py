from typing import Any, Dict, Iterable

SENSITIVE_KEYS = ("password", "access_token", "refresh_token", "pan_no", "aadhaar_no")


def mask_value(value: Any) -> Any:
    """Obscure emails, tokens and identifiers before they reach a log line."""
    if not isinstance(value, str):
        return value
    if "@" in value:  # email
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"


def sanitize_payload(payload: Dict, allowed_keys: Iterable[str]) -> Dict:
    """Return a filtered copy of payload with only allowed keys; sensitive and email values are masked."""
    result = {}
    for key in allowed_keys:
        if key not in payload:
            continue
        value = payload[key]
        if key in SENSITIVE_KEYS or (isinstance(value, str) and "@" in value):
            value = mask_value(value)
        result[key] = value
    return result
