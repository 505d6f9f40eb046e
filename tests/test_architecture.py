"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
- No circular dependencies
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("sncf_departures.domain.models*")
        .should_not_import("sncf_departures.adapters*")
        .should_not_import("sncf_departures.application*")
        .should_not_import("sncf_departures.domain.contracts*")
        .should_not_import("sncf_departures.domain.ports*")
        .may_import("sncf_departures.domain.models*")
        .check("sncf_departures")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("sncf_departures.domain.contracts*")
        .should_not_import("sncf_departures.adapters*")
        .should_not_import("sncf_departures.application*")
        .may_import("sncf_departures.domain.contracts*")
        .may_import("sncf_departures.domain.models*")
        .may_import("sncf_departures.domain.ports*")
        .check("sncf_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("sncf_departures.domain.ports*")
        .should_not_import("sncf_departures.adapters*")
        .should_not_import("sncf_departures.application*")
        .may_import("sncf_departures.domain*")
        .check("sncf_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("sncf_departures.application*")
        .should_not_import("sncf_departures.adapters*")
        .should_not_import("aiohttp*")
        .may_import("sncf_departures.domain*")
        .may_import("sncf_departures.application*")
        .check("sncf_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles).

    The console renderer only reads the App session for type checking.
    """
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("sncf_departures.adapters*")
        .exclude("sncf_departures.adapters.console*")
        .should_not_import("sncf_departures.application*")
        .may_import("sncf_departures.domain*")
        .may_import("sncf_departures.adapters*")
        .check("sncf_departures", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("sncf_departures.domain*")
        .should_not_import("sncf_departures.adapters*")
        .should_not_import("sncf_departures.application*")
        .may_import("sncf_departures.domain*")
        .check("sncf_departures", only_direct_imports=True)
    )


def test_cli_dont_import_http_adapters() -> None:
    """CLI should go through the App wiring instead of talking to Navitia directly."""
    (
        archrule("CLI independence", comment="CLI should not depend on the Navitia adapter")
        .match("sncf_departures.cli")
        .should_not_import("sncf_departures.adapters.navitia_api*")
        .may_import("sncf_departures.domain*")
        .may_import("sncf_departures.application*")
        .may_import("sncf_departures.adapters.config*")
        .may_import("sncf_departures.adapters.console*")
        .check("sncf_departures", only_direct_imports=True)
    )


def test_session_logic_does_not_depend_on_console_rendering() -> None:
    """The session and its services should work without the text renderer used by watch."""
    (
        archrule("session without console", comment="Rendering reads the session, not the reverse")
        .match("sncf_departures.application*")
        .should_not_import("sncf_departures.adapters.console*")
        .should_not_import("sncf_departures.main")
        .should_not_import("sncf_departures.cli")
        .check("sncf_departures")
    )


def test_only_the_navitia_adapter_talks_http() -> None:
    """aiohttp stays behind the Navitia adapter and the process wiring."""
    (
        archrule("http confinement", comment="HTTP belongs to the Navitia adapter")
        .match("sncf_departures*")
        .exclude("sncf_departures.adapters.navitia_api*")
        .exclude("sncf_departures.main")
        .should_not_import("aiohttp*")
        .check("sncf_departures", only_direct_imports=True)
    )


def test_route_persistence_stays_in_the_config_adapter() -> None:
    """Only the TOML route store reads or writes the saved route file format."""
    (
        archrule("toml confinement", comment="TOML is an adapter concern")
        .match("sncf_departures*")
        .exclude("sncf_departures.adapters.config*")
        .should_not_import("tomllib")
        .should_not_import("tomli_w")
        .check("sncf_departures", only_direct_imports=True)
    )
