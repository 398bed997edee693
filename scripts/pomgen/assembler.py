"""POM descriptor assembly.

Turns a packaging provider's template plus a handful of identity inputs
into a finished ``pom.xml``. Each call runs once through:

    load template → substitute placeholders (root only) → name, groupId,
    parent, artifactId → default version (root only) → packaging and
    provider stamp → write

All mutation happens on an in-memory tree; the file is written once, at
the end, and only if its content changed.
"""

import shutil
import sys
from typing import Optional, Union

from .errors import PersistenceError, ValidationError
from .identity import fully_qualified_module_name, resolve_identity, validate_namespace
from .models import GAV, PackagingProvider
from .placeholders import substitute_placeholders
from .pom_document import (
    TEMPLATES_DIR,
    _find,
    get_or_create_child,
    load_template,
    remove_children,
    remove_whitespace_text,
    serialize,
)
from .registry import PROVIDER_PROPERTY, get_provider
from .store import POM_FILE_NAME, FileStore, PathResolver

DEFAULT_VERSION = "0.1.0.BUILD-SNAPSHOT"

LOGGING_CONFIG_TEMPLATE = "log4j.properties-template"
LOGGING_CONFIG_FILE = "log4j.properties"


def is_module_descriptor(provider: PackagingProvider, module: Optional[str]) -> bool:
    """A POM is built from the module template only if there is a module and a module template."""
    return bool(module and module.strip()) and bool(provider.module_template)


def set_group_id_and_parent(root, project_group_id: str, parent: Optional[GAV]):
    """Set the parent coordinates and the project groupId.

    Both ``<parent>`` and ``<groupId>`` are created if the template lacks
    them. When the project's groupId equals the parent's, the project-level
    ``<groupId>`` is removed so it is inherited, as Maven recommends.
    Without a parent the ``<parent>`` element is left as the template has it.

    Args:
        root: Root ``<project>`` element; modified in place.
        project_group_id: The resolved groupId of the POM being created.
        parent: Parent POM coordinates, or ``None``.
    """
    parent_el = get_or_create_child(root, "parent")
    group_id_el = get_or_create_child(root, "groupId")

    if parent is None:
        group_id_el.text = project_group_id
        return

    get_or_create_child(parent_el, "groupId").text = parent.group_id
    get_or_create_child(parent_el, "artifactId").text = parent.artifact_id
    get_or_create_child(parent_el, "version").text = parent.version

    if project_group_id == parent.group_id:
        root.remove(group_id_el)
        remove_whitespace_text(root)
    else:
        group_id_el.text = project_group_id


def set_packaging_provider_id(root, provider: PackagingProvider):
    """Record which provider produced the POM as a ``<properties>`` entry."""
    properties_el = get_or_create_child(root, "properties")
    get_or_create_child(properties_el, PROVIDER_PROPERTY).text = provider.id


def _resolve_provider(provider: Union[PackagingProvider, str, None]) -> PackagingProvider:
    if isinstance(provider, PackagingProvider):
        return provider
    return get_provider(provider)


def build_descriptor(
    provider: Union[PackagingProvider, str, None],
    namespace: str,
    project_name: Optional[str] = None,
    java_version: Optional[str] = None,
    parent: Optional[GAV] = None,
    module: str = "",
) -> tuple[bool, str]:
    """Assemble a POM in memory without writing it.

    Args:
        provider: A provider, or the ID of a registered one (``None`` for the default).
        namespace: Top-level Java package, e.g. ``com.example.app``.
        project_name: User-supplied project name, or ``None``.
        java_version: Target Java version; required unless a module template is used.
        parent: Parent POM coordinates, or ``None``.
        module: Unqualified module name; blank for the root or only module.

    Returns:
        ``(is_module, xml_text)``.

    Raises:
        ValidationError: For blank or missing identity inputs.
        TemplateLoadError: If the template cannot be loaded.
    """
    provider = _resolve_provider(provider)
    is_module = is_module_descriptor(provider, module)
    if not is_module and (not java_version or not java_version.strip()):
        raise ValidationError("Java version required")
    namespace = validate_namespace(namespace)
    group_id, artifact_id, maven_name = resolve_identity(
        provider, namespace, project_name, module, parent, is_module
    )

    tree = load_template(provider.module_template if is_module else provider.template)
    root = tree.getroot()

    if not is_module:
        substitute_placeholders(root, java_version)

    if maven_name:
        get_or_create_child(root, "name").text = maven_name
    else:
        remove_children(root, "name")

    set_group_id_and_parent(root, group_id, parent)
    get_or_create_child(root, "artifactId").text = artifact_id

    if not is_module and _find(root, "version") is None:
        get_or_create_child(root, "version").text = DEFAULT_VERSION

    get_or_create_child(root, "packaging").text = provider.display_name
    set_packaging_provider_id(root, provider)

    return is_module, serialize(tree)


def create_descriptor(
    provider: Union[PackagingProvider, str, None],
    namespace: str,
    project_name: Optional[str] = None,
    java_version: Optional[str] = None,
    parent: Optional[GAV] = None,
    module: str = "",
    store: Optional[FileStore] = None,
    path_resolver: Optional[PathResolver] = None,
) -> Optional[str]:
    """Assemble a POM and write it to the module's ``pom.xml``.

    The file is only touched if its content differs from what is generated,
    so repeating a call with the same inputs is a no-op.

    Returns:
        The path of the POM, or ``None`` if no store or path resolver was
        supplied (a warning is printed).

    Raises:
        ValidationError: For blank or missing identity inputs.
        TemplateLoadError: If the template cannot be loaded.
        PersistenceError: If the POM cannot be written.
    """
    _, content = build_descriptor(provider, namespace, project_name, java_version, parent, module)
    if store is None or path_resolver is None:
        missing = "file store" if store is None else "path resolver"
        print(f"WARNING: No {missing} available, {POM_FILE_NAME} not written", file=sys.stderr)
        return None
    module_path = fully_qualified_module_name(module, path_resolver.focused_module)
    pom_path = path_resolver.resolve_identifier(module_path, POM_FILE_NAME)
    store.create_or_update_if_different(pom_path, content)
    return pom_path


def set_up_logging_configuration(store: Optional[FileStore], path_resolver: Optional[PathResolver]) -> Optional[str]:
    """Copy the bundled log4j configuration into the focused module's resources.

    Best effort: any failure is reported as a warning and ``None`` returned.
    """
    if store is None or path_resolver is None:
        print("WARNING: Unable to install log4j logging configuration (no file store)", file=sys.stderr)
        return None
    target = path_resolver.resolve_focused("SRC_MAIN_RESOURCES", LOGGING_CONFIG_FILE)
    try:
        with open(TEMPLATES_DIR / LOGGING_CONFIG_TEMPLATE, "rb") as src, store.open_for_write(target) as dst:
            shutil.copyfileobj(src, dst)
    except (OSError, PersistenceError) as e:
        print(f"WARNING: Unable to install log4j logging configuration: {e}", file=sys.stderr)
        return None
    return target


def create_artifacts(
    provider: Union[PackagingProvider, str, None],
    namespace: str,
    project_name: Optional[str] = None,
    java_version: Optional[str] = None,
    parent: Optional[GAV] = None,
    module: str = "",
    store: Optional[FileStore] = None,
    path_resolver: Optional[PathResolver] = None,
    scaffold_logging: bool = False,
) -> Optional[str]:
    """Create the POM and, optionally, the other files a new project needs.

    Only the root module gets a logging configuration. Returns the POM path
    as :func:`create_descriptor` does.
    """
    pom_path = create_descriptor(
        provider, namespace, project_name, java_version, parent, module, store, path_resolver
    )
    if scaffold_logging and not (module and module.strip()):
        set_up_logging_configuration(store, path_resolver)
    return pom_path
