from __future__ import annotations

import os

DEFAULT_API_BASE_URL = "https://dummyjson.com"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_PRODUCT_LIMIT = 100
DEFAULT_CART_STORAGE_KEY = "cart"
DEFAULT_LOG_LEVEL = "INFO"


def api_base_url() -> str:
    return os.getenv("STOREFRONT_API_BASE_URL") or DEFAULT_API_BASE_URL


def request_timeout_seconds() -> float:
    raw = os.getenv("STOREFRONT_REQUEST_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"STOREFRONT_REQUEST_TIMEOUT_SECONDS must be a number, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("STOREFRONT_REQUEST_TIMEOUT_SECONDS must be > 0")

    return timeout


def product_limit() -> int:
    raw = os.getenv("STOREFRONT_PRODUCT_LIMIT")
    if not raw:
        return DEFAULT_PRODUCT_LIMIT

    try:
        limit = int(raw)
    except ValueError:
        raise RuntimeError(f"STOREFRONT_PRODUCT_LIMIT must be an integer, got {raw!r}")

    if limit <= 0:
        raise RuntimeError("STOREFRONT_PRODUCT_LIMIT must be > 0")

    return limit


def cart_storage_key() -> str:
    return os.getenv("STOREFRONT_CART_STORAGE_KEY") or DEFAULT_CART_STORAGE_KEY


def log_level() -> str:
    return (os.getenv("STOREFRONT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
