"""
Environment value helpers used by ``storeadmin.config``.
"""

from __future__ import annotations


def sanitize_env_value(raw: str | None, fallback: str = "") -> str:
    value = (raw if raw is not None else fallback).strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        value = value[1:-1]
    # Hosting dashboards sometimes leak literal "\n" into pasted values.
    return value.replace("\\n", "").replace("\\r", "").strip()


def split_env_list(raw: str | None) -> list[str]:
    """Split a comma-separated env value, dropping blanks."""
    return [item.strip() for item in sanitize_env_value(raw).split(",") if item.strip()]


def parse_token_pairs(raw: str | None) -> dict[str, str]:
    """Parse ``caller:token,caller:token`` into a ``{token: caller}`` map.

    Entries without a caller part are ignored.
    """
    tokens: dict[str, str] = {}
    for entry in split_env_list(raw):
        caller, sep, token = entry.partition(":")
        caller, token = caller.strip(), token.strip()
        if not sep or not caller or not token:
            continue
        tokens[token] = caller
    return tokens
