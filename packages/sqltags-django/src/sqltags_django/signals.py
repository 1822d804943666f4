"""Django signals for statement tracking events.

Signals allow applications to react to writes without wrapping cursors
themselves. Use by connecting a receiver function:

    from sqltags_django.signals import tables_mutated

    def invalidate(sender, alias, statement, tables, models, **kwargs):
        # tables is a frozenset of table names referenced by the statement
        # models is a list of model classes bound to those tables
        cache.delete_many([f"model:{m._meta.label}" for m in models])

    tables_mutated.connect(invalidate)
"""

from django.dispatch import Signal

# Signal sent after a mutating statement executed successfully
# Provides alias, statement, tables (frozenset[str]) and models (list[type])
tables_mutated: Signal = Signal()
