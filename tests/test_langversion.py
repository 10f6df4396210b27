"""Tests for csprojector.langversion."""

from __future__ import annotations

from conftest import MSBUILD_NS, SAMPLE_CSPROJ

from csprojector.document import ProjectDocument, value_of
from csprojector.langversion import (
    CONFIGURATION_MARKER,
    scoped_groups,
    stamp_version,
    unstamp_version,
    version_stamped,
)


def _stamps(doc: ProjectDocument) -> list[str]:
    return [value_of(el) for el in doc.root.iter(doc.qname("LangVersion"))]


class TestScopedGroups:
    def test_matches_marker_only(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        assert len(scoped_groups(doc)) == 2

    def test_substring_match_not_parsed(self):
        doc = ProjectDocument.parse(
            "<Project>"
            "<PropertyGroup Condition=\"'$(Configuration)' == 'Debug'\" />"
            "<PropertyGroup Condition=\"'$(Configuration)|$(Platform)'=='X'\" />"
            "<PropertyGroup Condition=\" '$(Platform)|$(Configuration)' == 'X' \" />"
            "</Project>"
        )
        assert len(scoped_groups(doc)) == 1

    def test_custom_marker(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        assert len(scoped_groups(doc, "Release|AnyCPU")) == 1

    def test_nested_groups_any_namespace(self):
        doc = ProjectDocument.parse(
            f'<Project xmlns="{MSBUILD_NS}"><Choose><When Condition="true">'
            f'<PropertyGroup Condition="{CONFIGURATION_MARKER} == \'A|B\'" />'
            "</When></Choose></Project>"
        )
        assert len(scoped_groups(doc)) == 1


class TestStampVersion:
    def test_one_element_per_scoped_group(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        assert stamp_version(doc, "7.3") == 2
        for group in scoped_groups(doc):
            assert value_of(group[-1]) == "7.3"

    def test_leaves_unscoped_groups(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        stamp_version(doc, "7.3")
        assert _stamps(doc) == ["latest", "7.3", "7.3"]

    def test_repeat_appends_again(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        stamp_version(doc, "7.3")
        stamp_version(doc, "7.3")
        assert _stamps(doc).count("7.3") == 4

    def test_no_property_groups(self):
        doc = ProjectDocument.parse("<Project><ItemGroup /></Project>")
        before = doc.serialize()
        assert stamp_version(doc, "7.3") == 0
        assert doc.serialize() == before

    def test_stamped_in_document_namespace(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        stamp_version(doc, "7.3")
        assert "<LangVersion>7.3</LangVersion>" in doc.serialize()


class TestVersionStamped:
    def test_false_before_stamp(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        assert version_stamped(doc, "7.3") is False

    def test_true_after_stamp(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        stamp_version(doc, "7.3")
        assert version_stamped(doc, "7.3") is True

    def test_other_version_is_false(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        stamp_version(doc, "7.3")
        assert version_stamped(doc, "8.0") is False

    def test_vacuously_true_without_groups(self):
        doc = ProjectDocument.parse("<Project />")
        assert version_stamped(doc, "7.3") is True


class TestUnstampVersion:
    def test_removes_from_scoped_groups_only(self):
        doc = ProjectDocument.parse(SAMPLE_CSPROJ)
        stamp_version(doc, "7.3")
        assert unstamp_version(doc) == 2
        assert _stamps(doc) == ["latest"]
