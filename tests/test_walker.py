"""
tests.test_walker

Tree walk behaviour: precedence, inheritance, unresolved profiles, idempotence.
"""

from __future__ import annotations

from structlog.testing import capture_logs

from profile_binding.deployment.manifest import Manifest
from profile_binding.deployment.unit import DeploymentUnit, ResourceRoot
from profile_binding.processor.walker import LoggingProfileProcessor
from profile_binding.profiles.registry import InMemoryProfileRegistry
from tests.conftest import FakeRegistry, make_unit


def _snapshot(unit: DeploymentUnit) -> list[tuple[str, object, object]]:
    return [(n.path, n.log_context, n.configuration_handle) for n in unit.walk()]


def test_child_profile_binds_child_and_grandchild_only(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    g1 = make_unit("g1")
    c1 = make_unit("c1", "alpha", g1)
    root = make_unit("app", None, c1)

    processor.resolve(root)

    alpha = registry.contexts["alpha"]
    assert root.log_context is None
    assert root.configuration_handle is None
    assert c1.log_context is alpha
    assert g1.log_context is alpha
    assert c1.configuration_handle is not None
    assert c1.configuration_handle.label == "profile-alpha"
    assert g1.configuration_handle is c1.configuration_handle


def test_nested_profile_takes_precedence_over_parent(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    c2_child = make_unit("c2-lib")
    c2 = make_unit("c2", "gamma", c2_child)
    sibling_child = make_unit("web-lib")
    sibling = make_unit("web", None, sibling_child)
    root = make_unit("ear", "beta", c2, sibling)

    processor.resolve(root)

    beta, gamma = registry.contexts["beta"], registry.contexts["gamma"]
    assert root.log_context is beta
    assert sibling.log_context is beta
    assert sibling_child.log_context is beta
    assert c2.log_context is gamma
    assert c2_child.log_context is gamma

    assert root.configuration_handle.label == "profile-beta"
    assert sibling.configuration_handle is root.configuration_handle
    assert sibling_child.configuration_handle is root.configuration_handle
    assert c2.configuration_handle.label == "profile-gamma"
    assert c2_child.configuration_handle is c2.configuration_handle


def test_nearest_resolved_ancestor_wins(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    leaf = make_unit("leaf")
    middle = make_unit("middle", None, leaf)
    inner = make_unit("inner", "gamma", middle)
    root = make_unit("root", "alpha", make_unit("outer", None, inner))

    processor.resolve(root)

    assert leaf.log_context is registry.contexts["gamma"]
    assert middle.log_context is registry.contexts["gamma"]
    assert leaf.configuration_handle is inner.configuration_handle


def test_unresolved_profile_stops_branch_and_warns(processor: LoggingProfileProcessor) -> None:
    c3 = make_unit("c3", "alpha")
    root = make_unit("app", "missing", c3)

    with capture_logs() as logs:
        processor.resolve(root)

    assert root.log_context is None
    assert root.configuration_handle is None
    # c3 declares a resolvable profile but is never visited.
    assert c3.log_context is None
    assert c3.configuration_handle is None

    warnings = [e for e in logs if e["log_level"] == "warning"]
    assert len(warnings) == 1
    assert warnings[0]["event"] == "logging_profile_not_found"
    assert warnings[0]["profile"] == "missing"
    assert warnings[0]["resource"] == "app.jar"


def test_unresolved_child_does_not_affect_siblings(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    orphan = make_unit("orphan")
    broken = make_unit("broken", "missing", orphan)
    healthy_child = make_unit("healthy-lib")
    healthy = make_unit("healthy", "gamma", healthy_child)
    plain = make_unit("plain")
    root = make_unit("app", None, broken, healthy, plain)

    processor.resolve(root)

    assert broken.log_context is None
    assert orphan.log_context is None
    assert healthy.log_context is registry.contexts["gamma"]
    assert healthy_child.log_context is registry.contexts["gamma"]
    assert plain.log_context is None


def test_unresolved_child_under_resolved_parent_gets_parent_context_only(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    orphan = make_unit("orphan")
    broken = make_unit("broken", "missing", orphan)
    root = make_unit("app", "beta", broken)

    processor.resolve(root)

    assert broken.log_context is registry.contexts["beta"]
    assert broken.configuration_handle is root.configuration_handle
    assert orphan.log_context is None
    assert orphan.configuration_handle is None


def test_children_without_root_inherit_but_are_not_visited(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    hidden = make_unit("hidden", "gamma")
    rootless = make_unit("rootless", None, hidden, root=False)
    root = make_unit("app", "alpha", rootless)

    processor.resolve(root)

    assert rootless.log_context is registry.contexts["alpha"]
    assert rootless.configuration_handle is root.configuration_handle
    assert hidden.log_context is None
    assert ("exists", "gamma") not in registry.lookups


def test_rootless_children_are_skipped_without_a_profile(processor: LoggingProfileProcessor) -> None:
    rootless = make_unit("rootless", root=False)
    root = make_unit("app", None, rootless)

    processor.resolve(root)

    assert rootless.log_context is None
    assert rootless.configuration_handle is None


def test_second_pass_changes_nothing(processor: LoggingProfileProcessor) -> None:
    root = make_unit(
        "ear",
        "beta",
        make_unit("c2", "gamma", make_unit("c2-lib")),
        make_unit("web", None, make_unit("web-lib")),
        make_unit("broken", "missing"),
    )

    processor.resolve(root)
    first = _snapshot(root)
    processor.resolve(root)

    second = _snapshot(root)
    assert len(first) == len(second)
    for (path_a, ctx_a, handle_a), (path_b, ctx_b, handle_b) in zip(first, second):
        assert path_a == path_b
        assert ctx_a is ctx_b
        assert handle_a is handle_b


def test_explicit_binding_is_not_clobbered_by_ancestor(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    child = make_unit("child", "gamma")
    root = make_unit("app", "alpha", child)

    processor.resolve(root)

    assert child.log_context is registry.contexts["gamma"]
    assert child.configuration_handle.label == "profile-gamma"


def test_binding_diagnostics_are_emitted(processor: LoggingProfileProcessor) -> None:
    root = make_unit("app", "alpha", make_unit("lib"))

    with capture_logs() as logs:
        processor.resolve(root)

    found = [e for e in logs if e["event"] == "logging_profile_found"]
    registered = [e for e in logs if e["event"] == "log_context_registered"]
    assert [e["profile"] for e in found] == ["alpha"]
    assert {e["unit"] for e in registered} == {"app", "app/lib"}
    assert all(e["log_level"] == "debug" for e in registered)


def test_deploy_skips_units_without_resource_root(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    child = make_unit("child", "alpha")
    root = make_unit("app", None, child, root=False)

    processor.deploy(root)

    assert child.log_context is None
    assert registry.lookups == []


def test_deploy_resolves_top_level_unit(processor: LoggingProfileProcessor, registry: FakeRegistry) -> None:
    root = make_unit("app", "alpha", make_unit("lib"))

    processor.deploy(root)

    assert all(n.log_context is registry.contexts["alpha"] for n in root.walk())


def test_custom_profile_attribute() -> None:
    registry = InMemoryProfileRegistry.from_profiles({"audit": {"level": "DEBUG"}})
    processor = LoggingProfileProcessor(registry, attribute="X-Log-Profile")
    root = DeploymentUnit(
        name="app",
        root=ResourceRoot(name="app.war", manifest=Manifest({"x-log-profile": "audit"})),
    )

    processor.resolve(root)

    assert root.log_context is registry.get("audit")
    assert root.configuration_handle.label == "profile-audit"


def test_blank_profile_is_unresolved_and_stops_branch(
    processor: LoggingProfileProcessor, registry: FakeRegistry
) -> None:
    child = make_unit("child", "alpha")
    root = make_unit("app", "", child)

    with capture_logs() as logs:
        processor.resolve(root)

    assert ("exists", "") in registry.lookups
    assert root.log_context is None
    assert child.log_context is None
    assert child.configuration_handle is None
    assert ("exists", "alpha") not in registry.lookups
    warnings = [e for e in logs if e["event"] == "logging_profile_not_found"]
    assert [w["profile"] for w in warnings] == [""]
