"""POM generation data model classes.

Pure data structures describing packaging providers, Maven coordinates and
the identity fields read back from a generated ``pom.xml``.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from .errors import ValidationError


@dataclass(frozen=True)
class GAV:
    """Maven coordinates of a POM, used as the ``<parent>`` reference.

    Attributes:
        group_id: Maven groupId (e.g. ``com.example``).
        artifact_id: Maven artifactId (e.g. ``parent-pom``).
        version: Version string (e.g. ``1.0.0``).
    """
    group_id: str
    artifact_id: str
    version: str

    def __post_init__(self):
        for label, value in (
            ("groupId", self.group_id),
            ("artifactId", self.artifact_id),
            ("version", self.version),
        ):
            if not value or not value.strip():
                raise ValidationError(f"Parent {label} is required")

    @classmethod
    def parse(cls, coordinates: str) -> "GAV":
        """Parse a ``groupId:artifactId:version`` string.

        Raises:
            ValidationError: If the string does not have exactly three parts.
        """
        parts = (coordinates or "").split(":")
        if len(parts) != 3:
            raise ValidationError(
                f"Expected coordinates as groupId:artifactId:version, got '{coordinates}'"
            )
        return cls(*(p.strip() for p in parts))

    def __str__(self):
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class PackagingProvider:
    """A registered strategy producing the POM for one kind of packaging.

    Providers are plain records; behaviour differences between packaging
    kinds come from the optional resolver callables, which replace the
    default identity resolution when set.

    Attributes:
        id: Unique provider ID, stamped into the POM's properties.
        display_name: Value written to the ``<packaging>`` element.
        template: Bundled template name or filesystem path of the project template.
        module_template: Template used for module POMs, or ``None`` to reuse ``template``.
        artifact_id_resolver: ``(project_name, module, namespace) -> str`` override.
        group_id_resolver: ``(namespace) -> str`` override.
        project_name_resolver: ``(project_name, module, namespace) -> str`` override.
    """
    id: str
    display_name: str
    template: str
    module_template: Optional[str] = None
    artifact_id_resolver: Optional[Callable] = field(default=None, compare=False)
    group_id_resolver: Optional[Callable] = field(default=None, compare=False)
    project_name_resolver: Optional[Callable] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise ValidationError("Packaging provider ID is required")
        if not self.display_name or not self.display_name.strip():
            raise ValidationError("Packaging name is required")
        if not self.template or not self.template.strip():
            raise ValidationError("POM template path is required")


@dataclass
class DescriptorSummary:
    """Identity fields read back from an existing ``pom.xml``.

    Attributes:
        group_id: Declared groupId, or ``None`` when inherited from the parent.
        artifact_id: Maven artifactId.
        version: Declared version, or ``None``.
        packaging: Text of ``<packaging>``, or ``None``.
        name: Text of ``<name>``, or ``None``.
        parent: Parent coordinates when all three are declared.
        properties: ``<properties>`` as a dict.
        modules: Child module directory names from ``<modules>``.
    """
    artifact_id: str
    group_id: Optional[str] = None
    version: Optional[str] = None
    packaging: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[GAV] = None
    properties: dict = field(default_factory=dict)
    modules: list = field(default_factory=list)

    @property
    def effective_group_id(self) -> Optional[str]:
        """The groupId Maven would use: declared, else the parent's."""
        if self.group_id:
            return self.group_id
        return self.parent.group_id if self.parent else None
