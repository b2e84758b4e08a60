"""Helpers for reading loosely typed admin form data."""

from starlette.datastructures import FormData


def optional_int(form: FormData, key: str) -> int | None:
    value = str(form.get(key) or "").strip()
    try:
        return int(value) if value else None
    except ValueError:
        return None


def parse_float(value: str) -> float | None:
    try:
        return float(value) if value else None
    except ValueError:
        return None


def optional_float(form: FormData, key: str) -> float | None:
    return parse_float(str(form.get(key) or "").strip())


def optional_str(form: FormData, key: str) -> str | None:
    value = str(form.get(key) or "").strip()
    return value or None


def int_list(form: FormData, key: str) -> list[int]:
    return [int(v) for v in form.getlist(key) if str(v).strip().isdigit()]


def checkbox(form: FormData, key: str) -> bool:
    return str(form.get(key) or "").lower() in ("1", "on", "true", "yes")
