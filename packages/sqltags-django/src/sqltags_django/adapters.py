"""Adapter implementations for the sqltags Django package.

Contains adapter classes that implement ports defined in sqltags.adapters.ports
on top of the Django ORM.
"""

from __future__ import annotations

from typing import Any, Iterator

from sqltags.adapters.ports import SchemaCatalogPort
from sqltags.domain.table_entity import TableEntityRef


class DjangoSchemaCatalogAdapter(SchemaCatalogPort):
    """Schema catalog backed by Django's model registry.

    A schema context is anything exposing Django's
    ``get_models(include_auto_created=..., include_swapped=...)``: the global
    ``django.apps.apps`` registry (all installed models) or a single
    ``AppConfig`` (that app's models).

    Each model becomes one TableEntityRef bound to ``_meta.db_table``.
    Auto-created many-to-many through models are included, since writes to
    them change the relation seen from both ends. Swapped-out models (for
    example ``auth.User`` replaced by AUTH_USER_MODEL) have no table.

    Catalogs are cached per context type. Apps without their own AppConfig
    subclass all share ``django.apps.AppConfig`` as their type, so pass
    such apps' models through the global registry instead.

    Thread safety:
        Read-only access to the app registry; safe once Django is set up.

    Example:
        >>> from django.apps import apps
        >>> adapter = DjangoSchemaCatalogAdapter()
        >>> [str(ref) for ref in adapter.list_table_bindings(apps)][:1]
        ["<class 'django.contrib.auth.models.Permission'>::auth_permission"]
    """

    def __init__(self, include_auto_created: bool = True) -> None:
        """Initialize the adapter.

        Args:
            include_auto_created: Include auto-created models such as
                                 many-to-many through tables.
        """
        self._include_auto_created = include_auto_created

    def list_table_bindings(self, context: Any) -> Iterator[TableEntityRef]:
        """List entity-to-table bindings for a Django app registry or app config.

        Args:
            context: ``django.apps.apps`` or an ``AppConfig`` instance.

        Yields:
            TableEntityRef per model, in registry order.

        Raises:
            AppRegistryNotReady: If the app registry is not fully loaded.
        """
        models = context.get_models(
            include_auto_created=self._include_auto_created,
            include_swapped=True,
        )
        for model in models:
            meta = model._meta
            table_name = None if meta.swapped else meta.db_table
            yield TableEntityRef(entity_type=model, table_name=table_name)
