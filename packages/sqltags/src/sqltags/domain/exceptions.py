"""Domain exceptions.

Exception hierarchy:
- SQLTagsConfigError: Base domain exception for configuration errors.
  Raised by domain entities (e.g., SQLTagsSettings) and by framework
  settings readers when configuration validation fails.

Statement text is never validated, so there is no exception for malformed
SQL. Failures raised while enumerating a schema context come from the ORM
boundary and are propagated unchanged, not wrapped.
"""


class SQLTagsConfigError(Exception):
    """Raised when sqltags configuration is invalid.

    This is the base exception for all domain-level configuration errors.
    Framework adapters (Django) may catch this and log it, but the domain
    layer always uses this.
    """

    pass
