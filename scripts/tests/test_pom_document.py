"""Tests for pom_document.py — template loading, mutation helpers and serialization."""

import xml.etree.ElementTree as ET

import pytest

from pomgen.errors import TemplateLoadError
from pomgen.pom_document import (
    NS,
    find_elements_with_text,
    get_or_create_child,
    load_template,
    parse_pom,
    remove_children,
    serialize,
)


class TestLoadTemplate:
    def test_bundled_template_by_name(self):
        root = load_template("jar-pom-template.xml").getroot()
        assert root.tag == f"{{{NS['m']}}}project"

    def test_missing_template(self, tmp_path):
        with pytest.raises(TemplateLoadError) as exc_info:
            load_template(str(tmp_path / "nope.xml"))
        assert "nope.xml" in str(exc_info.value)

    def test_malformed_template(self, tmp_template):
        path = tmp_template("<project><groupId></project>")
        with pytest.raises(TemplateLoadError):
            load_template(path)

    def test_comments_survive(self, tmp_template):
        path = tmp_template("""\
            <project>
                <!-- keep me -->
                <artifactId>demo</artifactId>
            </project>
        """)
        assert "<!-- keep me -->" in serialize(load_template(path))


class TestGetOrCreateChild:
    def test_existing_child_returned(self):
        root = ET.fromstring("<project><name>x</name></project>")
        assert get_or_create_child(root, "name").text == "x"
        assert len(root.findall("name")) == 1

    def test_missing_child_appended(self):
        root = ET.fromstring("<project><name>x</name></project>")
        get_or_create_child(root, "packaging").text = "jar"
        assert [c.tag for c in root] == ["name", "packaging"]

    def test_namespace_inherited(self):
        root = ET.fromstring(f'<project xmlns="{NS["m"]}"><name>x</name></project>')
        child = get_or_create_child(root, "version")
        assert child.tag == f"{{{NS['m']}}}version"
        assert get_or_create_child(root, "name").text == "x"


class TestRemoveChildren:
    def test_removes_all_matching(self):
        root = ET.fromstring("<project><name/><artifactId/><name/></project>")
        assert remove_children(root, "name") == 2
        assert [c.tag for c in root] == ["artifactId"]


class TestFindElementsWithText:
    def test_exact_match_only(self):
        root = ET.fromstring(
            "<p><a>TOKEN</a><b>TOKEN-1</b><c> TOKEN</c><d>TOKEN<e/></d></p>"
        )
        assert [el.tag for el in find_elements_with_text(root, "TOKEN")] == ["a"]


class TestSerialize:
    def test_declaration_and_indentation(self):
        tree = ET.ElementTree(ET.fromstring("<project><groupId>g</groupId></project>"))
        assert serialize(tree) == (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            "<project>\n"
            "    <groupId>g</groupId>\n"
            "</project>\n"
        )

    def test_formatting_independent(self):
        compact = ET.ElementTree(ET.fromstring("<project><a>1</a><b>2</b></project>"))
        spaced = ET.ElementTree(ET.fromstring("<project>\n\n  <a>1</a>\n\t\t<b>2</b>\n</project>"))
        assert serialize(compact) == serialize(spaced)

    def test_blank_leaf_text_preserved(self):
        tree = ET.ElementTree(ET.fromstring(
            "<project>\n  <properties><sep> </sep></properties>\n</project>"
        ))
        out = serialize(tree)
        assert "<sep> </sep>" in out
        assert "<properties>\n        <sep>" in out

    def test_default_namespace_unprefixed(self):
        tree = ET.ElementTree(ET.fromstring(f'<project xmlns="{NS["m"]}"><a>1</a></project>'))
        out = serialize(tree)
        assert f'<project xmlns="{NS["m"]}">' in out
        assert "ns0:" not in out


class TestParsePom:
    def test_identity_fields(self, tmp_path):
        pom = tmp_path / "pom.xml"
        pom.write_text(f"""<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="{NS['m']}">
    <parent>
        <groupId>com.example</groupId>
        <artifactId>parent-pom</artifactId>
        <version>1.0.0</version>
    </parent>
    <artifactId>core</artifactId>
    <packaging>jar</packaging>
    <properties>
        <pomgen.packaging.provider>jar</pomgen.packaging.provider>
    </properties>
    <modules><module>a</module></modules>
</project>
""", encoding="utf-8")
        summary = parse_pom(pom)
        assert summary.artifact_id == "core"
        assert summary.group_id is None
        assert summary.effective_group_id == "com.example"
        assert summary.parent.version == "1.0.0"
        assert summary.properties == {"pomgen.packaging.provider": "jar"}
        assert summary.modules == ["a"]

    def test_from_text_with_empty_parent(self):
        summary = parse_pom("<project><parent/><groupId>g</groupId><artifactId>a</artifactId></project>")
        assert summary.parent is None
        assert summary.effective_group_id == "g"

    def test_unparsable(self):
        with pytest.raises(TemplateLoadError):
            parse_pom("<project>")
