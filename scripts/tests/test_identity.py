"""Tests for identity.py — artifactId, name and groupId resolution."""

import os

import pytest

from pomgen.errors import ValidationError
from pomgen.identity import (
    fully_qualified_module_name,
    last_segment,
    resolve_artifact_id,
    resolve_identity,
    resolve_project_name,
    validate_namespace,
)
from pomgen.models import GAV, PackagingProvider


@pytest.fixture
def provider():
    return PackagingProvider(id="jar", display_name="jar", template="jar-pom-template.xml")


class TestResolveArtifactId:
    def test_root_module_uses_last_package_segment(self):
        assert resolve_artifact_id(None, "", "com.example.app") == "app"

    def test_module_dashes_become_dots(self):
        assert resolve_artifact_id(None, "my-module", "com.example.app") == "my.module"

    def test_project_name_lowercased_without_whitespace(self):
        assert resolve_artifact_id("My Cool\tApp", "", "com.example") == "mycoolapp"

    def test_project_name_wins_over_module(self):
        assert resolve_artifact_id("Web", "my-module", "com.example") == "web"

    def test_blank_module_falls_back_to_last_segment(self):
        assert resolve_artifact_id(None, "   ", "com.example.app") == "app"

    def test_empty_project_name_is_not_absent(self):
        assert resolve_artifact_id("", "my-module", "com.example") == ""


class TestResolveProjectName:
    def test_project_name_kept_verbatim(self):
        assert resolve_project_name("My App", "", "com.example.app") == "My App"

    def test_empty_project_name_falls_back_to_module(self):
        assert resolve_project_name("", "my-module", "com.example.app") == "my.module"

    def test_blank_module_name_falls_back(self):
        assert resolve_project_name(None, " \t", "com.example.app") == "app"

    def test_falls_back_to_last_segment(self):
        assert resolve_project_name(None, None, "com.example.app") == "app"


class TestNamespace:
    def test_last_segment(self):
        assert last_segment("com.example.app") == "app"
        assert last_segment("app") == "app"

    def test_validate_strips(self):
        assert validate_namespace("  com.example ") == "com.example"

    @pytest.mark.parametrize("namespace", [None, "", "   ", "com.example."])
    def test_invalid_namespace(self, namespace):
        with pytest.raises(ValidationError):
            validate_namespace(namespace)


class TestFullyQualifiedModuleName:
    def test_blank_module_is_root(self):
        assert fully_qualified_module_name("", "web") == ""

    def test_no_focus(self):
        assert fully_qualified_module_name("core", "") == "core"

    def test_nested_under_focus(self):
        assert fully_qualified_module_name("core", "parent") == f"parent{os.sep}core"


class TestResolveIdentity:
    def test_root_group_id_is_namespace(self, provider):
        group_id, artifact_id, name = resolve_identity(
            provider, "com.example.app", None, "", None, is_module=False
        )
        assert (group_id, artifact_id, name) == ("com.example.app", "app", "app")

    def test_module_inherits_parent_group_id(self, provider):
        parent = GAV("org.acme", "acme-parent", "2.0")
        group_id, artifact_id, _ = resolve_identity(
            provider, "com.example.app", None, "my-module", parent, is_module=True
        )
        assert group_id == "org.acme"
        assert artifact_id == "my.module"

    def test_module_without_parent_rejected(self, provider):
        with pytest.raises(ValidationError, match="Parent POM required"):
            resolve_identity(provider, "com.example", None, "core", None, is_module=True)

    def test_blank_artifact_id_rejected(self, provider):
        with pytest.raises(ValidationError, match="artifactIds cannot be blank"):
            resolve_identity(provider, "com.example", "   ", "", None, is_module=False)

    def test_provider_overrides(self):
        provider = PackagingProvider(
            id="custom",
            display_name="jar",
            template="t.xml",
            artifact_id_resolver=lambda name, module, ns: f"{ns.split('.')[-1]}-lib",
            group_id_resolver=lambda ns: ns.rsplit(".", 1)[0],
            project_name_resolver=lambda name, module, ns: "",
        )
        assert resolve_identity(provider, "com.example.app", None, "", None, False) == (
            "com.example", "app-lib", ""
        )
