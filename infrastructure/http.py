"""Helpers shared by the hosted (HTTP) adapters."""

import requests


def error_message(response: requests.Response) -> str:
    """Extract a human readable error from a backend-as-a-service error response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        for key in ("msg", "message", "error_description", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, dict) and value.get("message"):
                return value["message"]

    text = (response.text or "").strip()
    return text or f"Request failed with status {response.status_code}"
