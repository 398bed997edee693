"""POM document loading, XML helpers, and serialization.

Handles all interaction with POM XML: loading templates into an
ElementTree, the "create child if absent" mutation helpers used by the
assembler, canonical serialization, and reading identity fields back from
a generated ``pom.xml``.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from .errors import TemplateLoadError
from .models import GAV, DescriptorSummary

# XML namespace used by Maven POM files (POM model version 4.0.0).
NS = {"m": "http://maven.apache.org/POM/4.0.0"}
XSI = "http://www.w3.org/2001/XMLSchema-instance"

# Keep the default namespace unprefixed on output instead of ``ns0:project``.
ET.register_namespace("", NS["m"])
ET.register_namespace("xsi", XSI)

TEMPLATES_DIR = Path(__file__).parent / "templates"

INDENT = "    "


def _local(tag) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _namespace(el) -> str:
    """Return the ``{uri}`` prefix of an element's tag, or ``""``."""
    return el.tag[: el.tag.index("}") + 1] if el.tag.startswith("{") else ""


def _find(el, tag, ns=NS):
    """Find a direct child XML element, trying with and without the Maven namespace.

    Args:
        el: Parent XML element to search within.
        tag: Tag name to look for (without namespace prefix).
        ns: Namespace mapping (defaults to Maven POM 4.0.0).

    Returns:
        The first matching child element, or ``None`` if not found.
    """
    result = el.find(f"m:{tag}", ns)
    if result is not None:
        return result
    return el.find(tag)


def _text(el, tag, ns=NS):
    """Extract the stripped text of a child element, or ``None`` if absent or empty."""
    child = _find(el, tag, ns)
    if child is not None and child.text and child.text.strip():
        return child.text.strip()
    return None


def get_or_create_child(el, tag):
    """Return the child ``tag`` of ``el``, appending a new one if absent.

    New children take the namespace of their parent so that a namespaced
    template never ends up with mixed qualified and unqualified elements.
    """
    child = _find(el, tag)
    if child is None:
        child = ET.SubElement(el, _namespace(el) + tag)
    return child


def remove_children(el, tag) -> int:
    """Remove every direct child named ``tag``; returns how many were removed."""
    doomed = [c for c in el if isinstance(c.tag, str) and _local(c.tag) == tag]
    for child in doomed:
        el.remove(child)
    return len(doomed)


def remove_whitespace_text(el):
    """Clear whitespace-only indentation below ``el``.

    Only text between child elements and tails are touched; a leaf keeps
    whatever text the template gave it, blank or not.

    Removing an element can leave its neighbours' indentation dangling;
    dropping the blank runs lets :func:`serialize` re-indent uniformly.
    """
    for node in el.iter():
        if len(node) and node.text is not None and not node.text.strip():
            node.text = None
        if node.tail is not None and not node.tail.strip():
            node.tail = None


def resolve_template_path(template: str) -> Path:
    """Map a template reference to a file.

    Bare names refer to the templates bundled with this package; anything
    else is treated as a filesystem path.
    """
    path = Path(template)
    if not path.is_absolute() and path.parent == Path("."):
        bundled = TEMPLATES_DIR / template
        if bundled.exists():
            return bundled
    return path


def load_template(template: str) -> ET.ElementTree:
    """Load a POM template into a mutable ElementTree.

    Comments in the template are kept so that unknown template content
    survives into the generated POM.

    Raises:
        TemplateLoadError: If the resource cannot be read or parsed.
    """
    path = resolve_template_path(template)
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        return ET.parse(path, parser=parser)
    except OSError as e:
        raise TemplateLoadError(template, e.strerror or str(e)) from e
    except ET.ParseError as e:
        raise TemplateLoadError(template, str(e)) from e


def find_elements_with_text(root, text: str) -> list:
    """Return every element whose entire text content equals ``text``.

    Comments inside the element do not count, so ``<v>TOKEN<!-- x --></v>``
    matches. An element holding the text plus anything else (other text or
    child elements) does not.
    """
    return [
        el for el in root.iter()
        if isinstance(el.tag, str)
        and all(not isinstance(child.tag, str) for child in el)
        and "".join(el.itertext()) == text
    ]


def serialize(tree: ET.ElementTree) -> str:
    """Serialize a POM tree to canonical text.

    Whitespace-only text is normalised and the tree re-indented, so the same
    logical document always produces the same string regardless of how the
    template was formatted or where new elements were appended.
    """
    root = tree.getroot()
    remove_whitespace_text(root)
    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def parse_pom(source: Union[Path, str]) -> DescriptorSummary:
    """Read the identity fields of an existing ``pom.xml``.

    Handles both namespaced and non-namespaced POM files.

    Args:
        source: Filesystem path, or the XML text itself.

    Returns:
        A populated DescriptorSummary. ``group_id`` stays ``None`` when the
        POM inherits it from its parent.

    Raises:
        TemplateLoadError: If the POM cannot be read or parsed.
    """
    try:
        if isinstance(source, Path):
            root = ET.parse(source).getroot()
        else:
            root = ET.fromstring(source)
    except OSError as e:
        raise TemplateLoadError(str(source), e.strerror or str(e)) from e
    except ET.ParseError as e:
        raise TemplateLoadError(str(source) if isinstance(source, Path) else "<text>", str(e)) from e

    parent: Optional[GAV] = None
    parent_el = _find(root, "parent")
    if parent_el is not None:
        parent_gid = _text(parent_el, "groupId")
        parent_aid = _text(parent_el, "artifactId")
        parent_ver = _text(parent_el, "version")
        if parent_gid and parent_aid and parent_ver:
            parent = GAV(parent_gid, parent_aid, parent_ver)

    properties = {}
    props_el = _find(root, "properties")
    if props_el is not None:
        for child in props_el:
            if isinstance(child.tag, str) and child.text:
                properties[_local(child.tag)] = child.text.strip()

    modules = []
    modules_el = _find(root, "modules")
    if modules_el is not None:
        for mod_el in list(modules_el.findall("m:module", NS)) + list(modules_el.findall("module")):
            if mod_el.text:
                modules.append(mod_el.text.strip())

    return DescriptorSummary(
        group_id=_text(root, "groupId"),
        artifact_id=_text(root, "artifactId") or "",
        version=_text(root, "version"),
        packaging=_text(root, "packaging"),
        name=_text(root, "name"),
        parent=parent,
        properties=properties,
        modules=modules,
    )
