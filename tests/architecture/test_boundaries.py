from pytest_archon import archrule


def test_core_independent_of_contrib() -> None:
    """
    The engine must not depend on framework adapters.
    Contrib packages are optional extras and may be absent at runtime.
    """
    (
        archrule("core_is_independent")
        .match("fluentcheck*")
        .exclude("fluentcheck.contrib*")
        .should_not_import("fluentcheck.contrib*")
        .check("fluentcheck", only_direct_imports=True)
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from params, entity, registry, binding, or contrib.
    """
    (
        archrule("primitives_isolation")
        .match("fluentcheck.primitives*")
        .should_not_import("fluentcheck.params*")
        .should_not_import("fluentcheck.entity*")
        .should_not_import("fluentcheck.registry*")
        .should_not_import("fluentcheck.binding*")
        .should_not_import("fluentcheck.contrib*")
        .check("fluentcheck", skip_type_checking=True, only_direct_imports=True)
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on their implementations.
    """
    (
        archrule("ports_layering")
        .match("fluentcheck.ports*")
        .should_not_import("fluentcheck.entity*")
        .should_not_import("fluentcheck.registry*")
        .should_not_import("fluentcheck.binding*")
        .should_not_import("fluentcheck.params.chain*")
        .should_not_import("fluentcheck.params.validator*")
        .check("fluentcheck", only_direct_imports=True)
    )


def test_parameter_and_entity_paths_are_separate() -> None:
    """
    Request-parameter chains and entity validators share only the
    result and config types; neither reaches into the other.
    """
    (
        archrule("params_entity_separation")
        .match("fluentcheck.params*")
        .should_not_import("fluentcheck.entity*")
        .should_not_import("fluentcheck.registry*")
        .check("fluentcheck", only_direct_imports=True)
    )
    (
        archrule("entity_params_separation")
        .match("fluentcheck.entity*")
        .should_not_import("fluentcheck.params.chain*")
        .should_not_import("fluentcheck.params.aggregator*")
        .check("fluentcheck", only_direct_imports=True)
    )
