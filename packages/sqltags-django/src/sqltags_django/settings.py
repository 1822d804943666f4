"""Settings reader for Django sqltags adapter."""

from typing import Any

from sqltags.domain.exceptions import SQLTagsConfigError
from sqltags.domain.settings import SQLTagsSettings

# Map UPPER_CASE Django keys to snake_case domain fields
_FIELD_MAPPING = {
    "ENABLED": "enabled",
    "VERIFY_STATEMENT_TEXT": "verify_statement_text",
    "TABLE_MARKERS": "table_markers",
    "CRUD_MARKERS": "crud_markers",
    "METRICS_ENABLED": "metrics_enabled",
    "METRICS_PREFIX": "metrics_prefix",
}

_BOOLEAN_FIELDS = ("ENABLED", "VERIFY_STATEMENT_TEXT", "METRICS_ENABLED")
_MARKER_FIELDS = ("TABLE_MARKERS", "CRUD_MARKERS")


def get_sqltags_settings(django_settings: dict[str, Any] | None) -> SQLTagsSettings:
    """Convert Django SQLTAGS settings dict to SQLTagsSettings domain object.

    Maps UPPER_CASE Django keys to snake_case domain fields. Every key is
    optional; missing keys keep the domain defaults.

    Args:
        django_settings: Django settings dict with UPPER_CASE keys, or None

    Returns:
        SQLTagsSettings domain object

    Raises:
        SQLTagsConfigError: If settings contain unknown keys or invalid values
    """
    if django_settings is None:
        return SQLTagsSettings()

    if not isinstance(django_settings, dict):
        raise SQLTagsConfigError(
            f"SQLTAGS must be a dict, got: {type(django_settings).__name__}"
        )

    unknown = [key for key in django_settings if key not in _FIELD_MAPPING]
    if unknown:
        raise SQLTagsConfigError(
            f"Unknown SQLTAGS settings: {', '.join(sorted(unknown))}"
        )

    kwargs: dict[str, Any] = {}
    for django_key, domain_field in _FIELD_MAPPING.items():
        if django_key not in django_settings:
            continue

        value = django_settings[django_key]
        if django_key in _BOOLEAN_FIELDS and not isinstance(value, bool):
            raise SQLTagsConfigError(
                f"SQLTAGS {django_key} must be a bool, got: {value!r}"
            )
        if django_key in _MARKER_FIELDS:
            # Lists are accepted in settings files; the domain keeps tuples
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise SQLTagsConfigError(
                    f"SQLTAGS {django_key} must be a list of strings, got: {value!r}"
                )
            value = tuple(value)

        kwargs[domain_field] = value

    # Create domain object (validation happens in __post_init__)
    return SQLTagsSettings(**kwargs)

