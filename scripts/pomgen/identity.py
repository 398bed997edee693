"""Identity resolution for new POMs.

Pure string logic with no XML handling and no file I/O. Derives the
artifactId, project name and groupId from the top-level Java package, the
optional user-supplied project name and the module being created.
"""

import os
import re
from typing import Optional

from .errors import ValidationError
from .models import GAV, PackagingProvider

_WHITESPACE = re.compile(r"\s+")


def validate_namespace(namespace: str) -> str:
    """Check that a top-level package is usable and return it stripped.

    Raises:
        ValidationError: If the package is blank or ends with an empty segment
            (e.g. ``com.example.``).
    """
    if namespace is None or not namespace.strip():
        raise ValidationError("Top level package required")
    namespace = namespace.strip()
    if not namespace.split(".")[-1]:
        raise ValidationError(f"Top level package '{namespace}' has an empty last segment")
    return namespace


def last_segment(namespace: str) -> str:
    """Return the last element of a dotted package, e.g. ``app`` for ``com.example.app``."""
    return namespace.split(".")[-1]


def _module_as_package(module: Optional[str]) -> str:
    return (module or "").strip().replace("-", ".")


def resolve_artifact_id(project_name: Optional[str], module: Optional[str], namespace: str) -> str:
    """Compute the ``<artifactId>`` text.

    Without a project name the module name is used with ``-`` replaced by
    ``.``, falling back to the last package segment for the root module.
    A user-supplied project name is lower-cased with all whitespace removed.

    Examples:
        (None, "", "com.example.app")        → app
        (None, "my-module", "com.example")   → my.module
        ("My Cool App", "", "com.example")   → mycoolapp
    """
    if project_name is None:
        return _module_as_package(module) or last_segment(namespace)
    return _WHITESPACE.sub("", project_name.lower())


def resolve_project_name(project_name: Optional[str], module: Optional[str], namespace: str) -> str:
    """Compute the ``<name>`` text; a blank result means the element is omitted."""
    return project_name or _module_as_package(module) or last_segment(namespace)


def resolve_group_id(namespace: str) -> str:
    """Return the groupId of a root or only module: the fully-qualified package."""
    return namespace


def fully_qualified_module_name(module: Optional[str], focused_module: Optional[str]) -> str:
    """Return a module's path relative to the currently focused module.

    A blank module is the root module and always resolves to ``""``.
    """
    if not module or not module.strip():
        return ""
    if not focused_module or not focused_module.strip():
        return module
    return f"{focused_module}{os.sep}{module}"


def resolve_identity(
    provider: PackagingProvider,
    namespace: str,
    project_name: Optional[str],
    module: Optional[str],
    parent: Optional[GAV],
    is_module: bool,
) -> tuple[str, str, str]:
    """Resolve ``(group_id, artifact_id, project_name)`` for one POM.

    Provider resolver overrides take precedence over the defaults above.
    Module POMs inherit the parent's groupId unconditionally.

    Raises:
        ValidationError: If a module POM has no parent, or the artifactId
            resolves to a blank string.
    """
    if is_module:
        if parent is None:
            raise ValidationError(f"Parent POM required for module '{module}'")
        group_id = parent.group_id
    else:
        group_id = (provider.group_id_resolver or resolve_group_id)(namespace)

    artifact_id = (provider.artifact_id_resolver or resolve_artifact_id)(project_name, module, namespace)
    if not artifact_id or not artifact_id.strip():
        raise ValidationError("Maven artifactIds cannot be blank")

    name = (provider.project_name_resolver or resolve_project_name)(project_name, module, namespace)
    return group_id, artifact_id.strip(), (name or "").strip()
