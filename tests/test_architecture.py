"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
- Only the entry point wires adapters and services together
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("station_locator.domain.models*")
        .should_not_import("station_locator.adapters*")
        .should_not_import("station_locator.application*")
        .should_not_import("station_locator.domain.ports*")
        .may_import("station_locator.domain.models*")
        .check("station_locator")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("station_locator.domain.ports*")
        .should_not_import("station_locator.adapters*")
        .should_not_import("station_locator.application*")
        .may_import("station_locator.domain.ports*")
        .may_import("station_locator.domain.models*")
        .check("station_locator")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("station_locator.application*")
        .should_not_import("station_locator.adapters*")
        .should_not_import("station_locator.main")
        .may_import("station_locator.domain*")
        .may_import("station_locator.application*")
        .check("station_locator")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("station_locator.adapters*")
        .should_not_import("station_locator.application*")
        .should_not_import("station_locator.main")
        .may_import("station_locator.domain*")
        .may_import("station_locator.adapters*")
        .check("station_locator", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("station_locator.domain*")
        .should_not_import("station_locator.adapters*")
        .should_not_import("station_locator.application*")
        .may_import("station_locator.domain*")
        .check("station_locator", only_direct_imports=True)
    )


def test_web_adapter_doesnt_import_store_or_push_adapters() -> None:
    """The HTTP surface should reach the store and push client only through ports."""
    (
        archrule("web independence", comment="Web adapter should only talk to domain ports")
        .match("station_locator.adapters.web*")
        .should_not_import("station_locator.adapters.firestore*")
        .should_not_import("station_locator.adapters.line_api*")
        .should_not_import("station_locator.adapters.gcp*")
        .may_import("station_locator.domain*")
        .may_import("station_locator.adapters.web*")
        .check("station_locator")
    )
