"""Port contracts of the in-memory adapters and the composition root.

Production adapters are exercised through the CLI integration tests; static
conformance to the Protocols is checked by pyright.
"""

from __future__ import annotations

import dataclasses

import lib_log_rich.runtime
import pytest
from lib_layered_config import Config

from syntax_snippets.adapters.memory import (
    UserNameStub,
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
)
from syntax_snippets.adapters.system import get_user_name
from syntax_snippets.composition import AppServices, build_production, build_testing
from syntax_snippets.domain.enums import OutputFormat
from syntax_snippets.domain.singletons import ID_FACTORY, IdFactory


@pytest.mark.os_agnostic
def test_in_memory_config_holds_tour_defaults() -> None:
    """The in-memory loader answers with the tour defaults only."""
    config = get_config_in_memory(profile="ignored")

    assert isinstance(config, Config)
    assert config.get("tour.audience") == "Scala developer"
    assert config.get("tour.show_titles") is True


@pytest.mark.os_agnostic
def test_in_memory_display_and_logging_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    """Neither adapter prints anything."""
    config = get_config_in_memory()

    display_config_in_memory(config, output_format=OutputFormat.JSON, section="tour")
    init_logging_in_memory(config)

    assert capsys.readouterr() == ("", "")


@pytest.mark.os_agnostic
def test_in_memory_logging_starts_a_runtime_for_bind_scopes() -> None:
    """Commands can open ``bind`` scopes once the in-memory adapter ran."""
    init_logging_in_memory(get_config_in_memory())

    assert lib_log_rich.runtime.is_initialised()
    with lib_log_rich.runtime.bind(job_id="test-bind", extra={"command": "test"}):
        pass


@pytest.mark.os_agnostic
def test_in_memory_logging_keeps_a_running_runtime() -> None:
    """A second call leaves the first runtime in place."""
    init_logging_in_memory(get_config_in_memory())
    init_logging_in_memory(get_config_in_memory())

    assert lib_log_rich.runtime.is_initialised()


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    """Production uses the system lookup and the process-wide counter."""
    services = build_production()

    assert services.get_user_name is get_user_name
    assert services.id_factory is ID_FACTORY


@pytest.mark.os_agnostic
def test_build_testing_gives_every_container_its_own_counter() -> None:
    """Two testing containers never share counter state."""
    first = build_testing()
    second = build_testing()

    assert first.id_factory is not second.id_factory
    assert first.id_factory.create() == 1
    assert second.id_factory.create() == 1


@pytest.mark.os_agnostic
def test_build_testing_defaults_to_tester_stub() -> None:
    """Without a stub the user is called ``tester``."""
    assert build_testing().get_user_name() == "tester"


@pytest.mark.os_agnostic
def test_build_testing_uses_the_given_stub() -> None:
    """Lookups go to the caller's stub."""
    stub = UserNameStub(name="ada")

    services = build_testing(user=stub)

    assert services.get_user_name() == "ada"
    assert stub.calls == 1


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """Wired services cannot be swapped after construction."""
    services = build_testing()

    with pytest.raises(dataclasses.FrozenInstanceError):
        services.id_factory = IdFactory()  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_app_services_accepts_any_conforming_callables() -> None:
    """Ports are structural; plain callables fit."""
    services = AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        get_user_name=lambda: "lambda-user",
        id_factory=IdFactory(),
    )

    assert services.get_user_name() == "lambda-user"
