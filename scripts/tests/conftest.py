"""Shared test fixtures for the POM generation test suite."""

import textwrap
from pathlib import Path

import pytest

from pomgen.models import GAV, PackagingProvider
from pomgen.store import FileStore, PathResolver


@pytest.fixture
def tmp_template(tmp_path):
    """Factory fixture that writes a POM template to a temp directory and returns its path."""
    def _write(content: str, name: str = "template.xml") -> str:
        template_dir = tmp_path / "templates"
        template_dir.mkdir(exist_ok=True)
        path = template_dir / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Empty directory standing in for the new project's root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def store():
    return FileStore(verbose=False)


@pytest.fixture
def resolver(project_dir):
    return PathResolver(project_dir)


@pytest.fixture
def parent_gav():
    return GAV("com.example", "parent-pom", "1.0.0")


@pytest.fixture
def bare_provider(tmp_template):
    """A provider whose template has an empty parent and no version."""
    template = tmp_template("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <project>
            <modelVersion>4.0.0</modelVersion>
            <parent/>
            <properties>
                <java.version>JAVA_PRODUCT_VERSION</java.version>
            </properties>
        </project>
    """)
    return PackagingProvider(id="bare", display_name="jar", template=template)
