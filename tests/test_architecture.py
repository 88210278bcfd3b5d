"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters can depend on domain and application
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and each other."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("bike_traffic_map.domain.models*")
        .should_not_import("bike_traffic_map.adapters*")
        .should_not_import("bike_traffic_map.application*")
        .should_not_import("bike_traffic_map.domain.contracts*")
        .should_not_import("bike_traffic_map.domain.ports*")
        .may_import("bike_traffic_map.domain.models*")
        .check("bike_traffic_map")
    )


def test_domain_ports_and_contracts_have_no_outward_dependencies() -> None:
    """Domain ports and contracts should not import adapters or application."""
    (
        archrule("domain interfaces", comment="Ports and contracts should be independent")
        .match("bike_traffic_map.domain.ports*")
        .match("bike_traffic_map.domain.contracts*")
        .should_not_import("bike_traffic_map.adapters*")
        .should_not_import("bike_traffic_map.application*")
        .check("bike_traffic_map")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("bike_traffic_map.application*")
        .should_not_import("bike_traffic_map.adapters*")
        .should_not_import("bike_traffic_map.main")
        .should_not_import("bike_traffic_map.cli")
        .check("bike_traffic_map")
    )


def test_application_core_does_not_import_web_stack() -> None:
    """The windowing, aggregation and encoding core should not import web frameworks."""
    (
        archrule("core is framework free", comment="Core logic must run without a web server")
        .match("bike_traffic_map.application*")
        .match("bike_traffic_map.domain*")
        .should_not_import("pyview*")
        .should_not_import("starlette*")
        .should_not_import("aiohttp*")
        .should_not_import("uvicorn*")
        .check("bike_traffic_map")
    )


def test_cli_dont_import_web_adapters() -> None:
    """CLI should not import web adapters to allow running CLI without web server."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("bike_traffic_map.cli")
        .should_not_import("bike_traffic_map.adapters.web*")
        .may_import("bike_traffic_map.domain*")
        .may_import("bike_traffic_map.application*")
        .may_import("bike_traffic_map.adapters.config*")
        .may_import("bike_traffic_map.adapters.data*")
        .may_import("bike_traffic_map.adapters.formatters*")
        .check("bike_traffic_map")
    )
