"""CLI entry point for generating a POM from a packaging template.

Wires together the provider registry, the assembler and the filesystem
collaborators.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .assembler import build_descriptor, create_artifacts
from .errors import PomGenError
from .models import GAV
from .registry import DEFAULT_PROVIDER_ID, get_provider, identify_provider, list_providers
from .store import FileStore, PathResolver


def generate(
    namespace: str,
    output_path: Path,
    project_name: Optional[str] = None,
    java_version: Optional[str] = None,
    parent: Optional[str] = None,
    module: str = "",
    packaging: str = DEFAULT_PROVIDER_ID,
    focused_module: str = "",
    scaffold_logging: bool = False,
    dry_run: bool = False,
) -> Optional[str]:
    """Generate one POM.

    Args:
        namespace: Top-level Java package of the new project or module.
        output_path: Project root directory.
        project_name: Optional user-supplied project name.
        java_version: Target Java version.
        parent: Parent coordinates as ``groupId:artifactId:version``.
        module: Module name; blank for the root or only module.
        packaging: ID of the packaging provider.
        focused_module: Module that ``module`` is created under.
        scaffold_logging: Also install a log4j configuration (root module only).
        dry_run: If ``True``, prints the POM to stdout instead of writing it.

    Returns:
        The path of the written POM, or ``None`` on a dry run.
    """
    provider = get_provider(packaging)
    parent_gav = GAV.parse(parent) if parent else None

    if dry_run:
        _, content = build_descriptor(provider, namespace, project_name, java_version, parent_gav, module)
        print(content, end="")
        return None

    pom_path = create_artifacts(
        provider, namespace, project_name, java_version, parent_gav, module,
        store=FileStore(),
        path_resolver=PathResolver(output_path, focused_module),
        scaffold_logging=scaffold_logging,
    )
    print(f"\n✅ POM ready: {pom_path}")
    return pom_path


def identify(pom_path: Path) -> Optional[str]:
    """Print and return the ID of the provider that generated ``pom_path``."""
    provider = identify_provider(pom_path)
    if provider is None:
        print(f"WARNING: {pom_path} was not generated by a known packaging provider", file=sys.stderr)
        return None
    print(provider.id)
    return provider.id


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a Maven pom.xml for a new project or module from a packaging template"
    )
    parser.add_argument("namespace", nargs="?", help="Top-level Java package, e.g. com.example.app")
    parser.add_argument("--name", dest="project_name", default=None, help="Project name (default: derived from package/module)")
    parser.add_argument("--java-version", "-j", default=None, help="Target Java version, e.g. 1.8")
    parser.add_argument("--parent", "-p", default=None, help="Parent POM as groupId:artifactId:version")
    parser.add_argument("--module", "-m", default="", help="Module name (default: root module)")
    parser.add_argument(
        "--packaging", default=DEFAULT_PROVIDER_ID,
        choices=[p.id for p in list_providers()],
        help=f"Packaging provider (default: {DEFAULT_PROVIDER_ID})",
    )
    parser.add_argument("--output", "-o", type=Path, default=Path("."), help="Project root directory (default: cwd)")
    parser.add_argument("--focused-module", default="", help="Module the new module is created under")
    parser.add_argument("--with-logging-config", action="store_true", help="Also install src/main/resources/log4j.properties")
    parser.add_argument("--dry-run", "-n", action="store_true", help="Print the POM without writing it")
    parser.add_argument("--identify", type=Path, default=None, metavar="POM", help="Print which packaging provider generated POM")
    args = parser.parse_args(argv)
    if args.identify is None and not args.namespace:
        parser.error("namespace is required unless --identify is given")
    return args


def main(argv=None):
    """CLI entry point. Parses arguments and delegates to ``generate()`` or ``identify()``."""
    args = parse_args(argv)
    try:
        if args.identify is not None:
            if identify(args.identify) is None:
                sys.exit(1)
            return
        generate(
            args.namespace, args.output,
            project_name=args.project_name,
            java_version=args.java_version,
            parent=args.parent,
            module=args.module,
            packaging=args.packaging,
            focused_module=args.focused_module,
            scaffold_logging=args.with_logging_config,
            dry_run=args.dry_run,
        )
    except PomGenError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
