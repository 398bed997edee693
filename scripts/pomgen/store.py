"""Filesystem collaborators: path resolution and idempotent file writes."""

from pathlib import Path
from typing import Optional

from .errors import PersistenceError, ValidationError

POM_FILE_NAME = "pom.xml"

# Resource kind → directory relative to a module root.
RESOURCE_PATHS = {
    "ROOT": "",
    "SRC_MAIN_JAVA": "src/main/java",
    "SRC_MAIN_RESOURCES": "src/main/resources",
    "SRC_MAIN_WEBAPP": "src/main/webapp",
    "SRC_TEST_JAVA": "src/test/java",
    "SRC_TEST_RESOURCES": "src/test/resources",
}


class PathResolver:
    """Resolves file identifiers inside a project tree.

    Args:
        root: Project root directory (where the root ``pom.xml`` lives).
        focused_module: Module path that "focused" lookups are relative to;
            blank means the root module.
    """

    def __init__(self, root: Path, focused_module: str = ""):
        self.root = Path(root)
        self.focused_module = focused_module or ""

    def resolve_identifier(self, module: Optional[str], file_name: str) -> str:
        """Return the path of ``file_name`` in the root directory of ``module``."""
        return str(self.root / (module or "") / file_name)

    def resolve_focused(self, resource_kind: str, file_name: str) -> str:
        """Return the path of ``file_name`` under a resource directory of the focused module.

        Raises:
            ValidationError: If ``resource_kind`` is not in ``RESOURCE_PATHS``.
        """
        if resource_kind not in RESOURCE_PATHS:
            raise ValidationError(f"Unknown resource kind '{resource_kind}'")
        return str(self.root / self.focused_module / RESOURCE_PATHS[resource_kind] / file_name)


class FileStore:
    """Writes text files, skipping writes whose content would not change."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def create_or_update_if_different(self, path: str, content: str) -> bool:
        """Write ``content`` to ``path`` unless the file already holds exactly that.

        Parent directories are created as needed.

        Returns:
            ``True`` if the file was written, ``False`` if it was already up to date.

        Raises:
            PersistenceError: If the file cannot be read or written.
        """
        target = Path(path)
        data = content.encode("utf-8")
        try:
            if target.is_file() and target.read_bytes() == data:
                if self.verbose:
                    print(f"  ⏭ {target} (unchanged)")
                return False
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            raise PersistenceError(target, str(e)) from e
        if self.verbose:
            print(f"  ✓ {target}")
        return True

    def open_for_write(self, path: str):
        """Open ``path`` for binary writing, creating parent directories.

        Raises:
            PersistenceError: If the file cannot be opened.
        """
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            return open(target, "wb")
        except OSError as e:
            raise PersistenceError(target, str(e)) from e
