"""Step definitions for table name extraction and entity resolution feature."""

import pytest
from pytest_bdd import scenario, given, when, then, parsers

from sqltags.adapters.fakes import FakeMetricsAdapter, FakeSchemaCatalog
from sqltags.usecases.sql_commands_processor import SQLCommandsProcessor


class ShopSchema:
    """Schema context handle used by the scenarios."""


FEATURE = "../../features/core/table_extraction.feature"


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.TableNameExtractor")
@scenario(FEATURE, "Bracketed schema-qualified name and JOIN")
def test_bracketed_join():
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.TableNameExtractor")
@scenario(FEATURE, "Double-quoted INSERT target")
def test_double_quoted_insert():
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.TableNameExtractor")
@scenario(FEATURE, "Statement without markers has no tables")
def test_no_markers():
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.TableNameExtractor")
@scenario(FEATURE, "Marker at the end of the statement")
def test_trailing_marker():
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.EntityResolver")
@scenario(FEATURE, "Affected entities follow catalog order")
def test_catalog_order():
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.EntityResolver")
@scenario(FEATURE, "Unmapped tables affect no entity")
def test_unmapped_tables():
    pass


@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.SQLCommandsProcessor")
@scenario(FEATURE, "Repeated statements are tokenized once")
def test_repeated_statements():
    """Test both caches are consulted instead of recomputing."""
    pass


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def context():
    """Shared context for passing state between steps."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------


@given("a schema catalog with bindings:")
def schema_catalog(context: dict, datatable):
    """Create a processor over a fake catalog built from the datatable.

    Note: datatable is a list of lists where first row is headers. An
    empty table cell means the entity has no table mapping.
    """
    bindings = [(row[0], row[1] or None) for row in datatable[1:]]

    port = FakeSchemaCatalog()
    port.register(ShopSchema, bindings)
    metrics = FakeMetricsAdapter()

    context["port"] = port
    context["metrics"] = metrics
    context["processor"] = SQLCommandsProcessor(port, metrics=metrics)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------


@when(parsers.parse('I extract tables from "{sql}"'))
def extract_tables(context: dict, sql: str):
    context["tables"] = context["processor"].table_names_for(sql)


@when(parsers.parse('I resolve entities for "{sql}" {times:d} times'))
def resolve_entities_repeatedly(context: dict, sql: str, times: int):
    for _ in range(times):
        context["entities"] = context["processor"].affected_entity_types_for(
            sql, ShopSchema()
        )


@when(parsers.parse('I resolve entities for "{sql}"'))
def resolve_entities(context: dict, sql: str):
    context["entities"] = context["processor"].affected_entity_types_for(
        sql, ShopSchema()
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------


@then(parsers.parse('the table names should be "{names}"'))
def tables_are(context: dict, names: str):
    expected = [name.strip() for name in names.split(",")]
    assert sorted(context["tables"]) == expected


@then("the table names should be empty")
def tables_empty(context: dict):
    assert context["tables"] == frozenset()


@then(parsers.parse('the affected entities should be "{entities}"'))
def entities_are(context: dict, entities: str):
    expected = [entity.strip() for entity in entities.split(",")]
    assert context["entities"] == expected


@then("the affected entities should be empty")
def entities_empty(context: dict):
    assert context["entities"] == []


@then("the statement should have been tokenized once")
def tokenized_once(context: dict):
    metrics = context["metrics"]
    assert metrics.statement_misses == 1
    assert metrics.statement_hits == 2


@then("the catalog should have been enumerated once")
def enumerated_once(context: dict):
    assert context["port"].call_count(ShopSchema) == 1
