"""
Unit tests for the Registry aggregate.
"""

from allocator import ErrorKind, Registry
from models import ResourceState, ResourceType


class TestRegistration:
    """Test registering resources and projects."""

    def test_register_resource(self, registry):
        assert registry.register_resource("R1", ResourceType.EQUIPMENT) is None

        resource = registry.find_resource("R1")[0]
        assert resource.id == "R1"
        assert resource.type == ResourceType.EQUIPMENT
        assert resource.state == ResourceState.IDLE

    def test_duplicate_resource(self, registry):
        registry.register_resource("R1", ResourceType.EQUIPMENT)

        error = registry.register_resource("R1", ResourceType.WORKER)

        assert error.kind == ErrorKind.DUPLICATE_ID
        assert error.entity_id == "R1"
        # Original registration untouched
        assert registry.find_resource("R1")[0].type == ResourceType.EQUIPMENT

    def test_duplicate_project(self, registry):
        registry.register_project("P1", "Alpha")

        error = registry.register_project("P1", "Beta")

        assert error.kind == ErrorKind.DUPLICATE_ID
        assert registry.find_project("P1")[0].name == "Alpha"

    def test_id_spaces_are_independent(self, registry):
        assert registry.register_resource("X", ResourceType.WORKER) is None
        assert registry.register_project("X", "Shared id") is None

        assert registry.find_resource("X")[0].type == ResourceType.WORKER
        assert registry.find_project("X")[0].name == "Shared id"
        assert len(registry) == 2


class TestLookup:
    """Test lookups and read-only views."""

    def test_unknown_ids(self, registry):
        resource, error = registry.find_resource("missing")

        assert resource is None
        assert error.kind == ErrorKind.NOT_FOUND
        assert error.entity_id == "missing"
        assert error.reason == "Resource not found"

        project, error = registry.find_project("missing")

        assert project is None
        assert error.kind == ErrorKind.NOT_FOUND
        assert error.reason == "Project not found"

    def test_found_entity_has_no_error(self, registry):
        registry.register_project("P1", "Alpha")

        project, error = registry.find_project("P1")

        assert error is None
        assert project.name == "Alpha"

    def test_find_returns_shared_reference(self, registry):
        registry.register_resource("R1", ResourceType.WORKER)

        assert registry.find_resource("R1")[0] is registry.find_resource("R1")[0]

    def test_resources_for_project_keeps_order(self, registry):
        registry.register_project("P1", "Alpha")
        registry.register_resource("R1", ResourceType.WORKER)
        registry.register_resource("R2", ResourceType.EQUIPMENT)
        registry.find_project("P1")[0].resource_ids.extend(["R2", "R1", "R2"])

        ids = [r.id for r in registry.resources_for_project("P1")]

        assert ids == ["R2", "R1", "R2"]

    def test_resources_for_unknown_project(self, registry):
        assert registry.resources_for_project("missing") == []

    def test_views_are_copies(self):
        registry = Registry()
        registry.register_resource("R1", ResourceType.WORKER)

        registry.resources.clear()

        assert len(registry.resources) == 1


class TestPrepare:
    """Test the validate-then-insert registration steps."""

    def test_prepared_resource_is_not_visible(self, registry):
        resource, error = registry.prepare_resource("R1", ResourceType.EQUIPMENT)

        assert error is None
        assert resource.state == ResourceState.IDLE
        assert registry.find_resource("R1")[0] is None

        registry.add_resource(resource)

        assert registry.find_resource("R1")[0] is resource

    def test_prepare_rejects_taken_id(self, registry):
        registry.register_project("P1", "Alpha")

        project, error = registry.prepare_project("P1", "Beta")

        assert project is None
        assert error.kind == ErrorKind.DUPLICATE_ID

    def test_unknown_type(self, registry):
        error = registry.register_resource("R1", "vehicle")

        assert error.kind == ErrorKind.INVALID_INPUT
        assert error.entity_id == "R1"
        assert registry.find_resource("R1")[0] is None
