"""Shared fixtures for csprojector tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from csprojector.spec import _spec_registry

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"

SAMPLE_CSPROJ = f"""<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="4.0" DefaultTargets="Build" xmlns="{MSBUILD_NS}">
  <PropertyGroup>
    <LangVersion>latest</LangVersion>
  </PropertyGroup>
  <PropertyGroup>
    <Configuration Condition=" '$(Configuration)' == '' ">Debug</Configuration>
    <Platform Condition=" '$(Platform)' == '' ">AnyCPU</Platform>
    <AssemblyName>Assembly-CSharp</AssemblyName>
  </PropertyGroup>
  <PropertyGroup Condition=" '$(Configuration)|$(Platform)' == 'Debug|AnyCPU' ">
    <DebugSymbols>true</DebugSymbols>
    <Optimize>false</Optimize>
  </PropertyGroup>
  <PropertyGroup Condition=" '$(Configuration)|$(Platform)' == 'Release|AnyCPU' ">
    <Optimize>true</Optimize>
  </PropertyGroup>
  <ItemGroup>
    <Compile Include="Assets\\Scripts\\Player.cs" />
  </ItemGroup>
</Project>
"""

ANALYZER_PATH = "Packages/com.bovinelabs.analyzers/Analyzers/RoslynAnalyzers"


def make_files(root: Path, *names: str) -> Path:
    """Create empty files below root; returns root."""
    for name in names:
        file = root / name
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_bytes(b"")
    return root


@pytest.fixture
def analyzer_root(tmp_path: Path) -> Path:
    """A project root whose default analyzer folder holds one asset of each kind."""
    make_files(
        tmp_path / ANALYZER_PATH,
        "a.dll",
        "b.json",
        "rules.ruleset",
        "readme.md",
    )
    return tmp_path


@pytest.fixture
def clean_registry():
    """Snapshot the spec registry and restore it afterwards."""
    saved = _spec_registry.copy()
    yield _spec_registry
    _spec_registry.clear()
    _spec_registry.update(saved)


def link_dir(link: Path, target: Path) -> Path:
    """Create a directory symlink, skipping the test where links are unavailable."""
    link.parent.mkdir(parents=True, exist_ok=True)
    try:
        link.symlink_to(target, target_is_directory=True)
    except (OSError, NotImplementedError) as exc:
        pytest.skip(f"symlinks unavailable: {exc}")
    return link
