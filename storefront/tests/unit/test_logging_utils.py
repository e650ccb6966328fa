import pytest

from utils.logging_utils import mask_value, sanitize_payload


@pytest.mark.unit
class TestMasking:
    def test_email(self):
        assert mask_value("buyer@example.com") == "bu***@example.com"

    def test_long_token(self):
        assert mask_value("abcdefghijklmnopqrstuvwxyz") == "abcd...wxyz"

    def test_short_value(self):
        assert mask_value("1234") == "***"

    def test_non_string_is_untouched(self):
        assert mask_value(42) == 42

    def test_sanitize_keeps_only_allowed_keys(self):
        payload = {"id": "u-1", "email": "dev@example.com", "pan_no": "ABCDE1234F", "address": "Somewhere"}

        result = sanitize_payload(payload, ("id", "email", "pan_no", "missing"))

        assert result == {"id": "u-1", "email": "de***@example.com", "pan_no": "***"}
