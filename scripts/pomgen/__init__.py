"""Maven POM generation from packaging-specific templates."""

from .assembler import build_descriptor, create_artifacts, create_descriptor
from .errors import PersistenceError, PomGenError, TemplateLoadError, ValidationError
from .models import GAV, DescriptorSummary, PackagingProvider
from .pom_document import parse_pom
from .registry import get_provider, identify_provider, register_provider
from .store import FileStore, PathResolver

__all__ = [
    "build_descriptor", "create_artifacts", "create_descriptor",
    "PomGenError", "ValidationError", "TemplateLoadError", "PersistenceError",
    "GAV", "DescriptorSummary", "PackagingProvider",
    "parse_pom", "get_provider", "identify_provider", "register_provider",
    "FileStore", "PathResolver",
]
