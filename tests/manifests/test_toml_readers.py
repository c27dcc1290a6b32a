"""Tests for the pattern-based pyproject.toml and Cargo.toml readers."""

from __future__ import annotations

from marketsync.manifests import CargoReader, PyprojectReader


def test_pyproject_returns_none_when_absent(project_builder) -> None:
    assert PyprojectReader().read(project_builder.path()) is None


def test_pyproject_parses_project_table(project_builder) -> None:
    project_builder.write(
        {
            "pyproject.toml": """
            [project]
            name = "my-python-tool"
            version = "0.3.1"
            description = "Does things"
            keywords = ["near", "python"]
            license = {text = "Apache-2.0"}
            authors = [{name = "Ada Lovelace", email = "ada@example.com"}]

            [project.urls]
            "Homepage" = "https://example.com"
            Repository = "https://github.com/ada/tool"
            """
        }
    )

    meta = PyprojectReader().read(project_builder.path())

    assert meta is not None
    assert meta.source == "pyproject.toml"
    assert meta.name == "my-python-tool"
    assert meta.version == "0.3.1"
    assert meta.description == "Does things"
    assert meta.keywords == ["near", "python"]
    assert meta.license == "Apache-2.0"
    assert meta.author == "Ada Lovelace"
    assert meta.homepage == "https://example.com"
    assert meta.repository == "https://github.com/ada/tool"


def test_pyproject_prefers_lowercase_keys(project_builder) -> None:
    project_builder.write(
        {
            "pyproject.toml": """
            [tool.poetry]
            name = "poetry-tool"
            homepage = "https://lower.example"
            repository = "https://lower.example/repo"

            [tool.poetry.urls]
            Homepage = "https://upper.example"
            """
        }
    )

    meta = PyprojectReader().read(project_builder.path())

    assert meta.homepage == "https://lower.example"
    assert meta.repository == "https://lower.example/repo"


def test_pyproject_tolerates_partial_content(project_builder) -> None:
    project_builder.write({"pyproject.toml": "[project]\nname = \"only-name\"\nversion = 3\n"})

    meta = PyprojectReader().read(project_builder.path())

    assert meta.name == "only-name"
    assert meta.version is None
    assert meta.description is None
    assert meta.keywords is None
    assert meta.license is None


def test_pyproject_multiline_keywords_and_comments(project_builder) -> None:
    project_builder.write(
        {
            "pyproject.toml": """
            [project]
            # name = "commented-out"
            name = "real-name"
            keywords = [
                "alpha",
                'beta',
                "",
            ]
            """
        }
    )

    meta = PyprojectReader().read(project_builder.path())

    assert meta.name == "real-name"
    assert meta.keywords == ["alpha", "beta"]


def test_cargo_returns_none_when_absent(project_builder) -> None:
    assert CargoReader().read(project_builder.path()) is None


def test_cargo_parses_package_table(project_builder) -> None:
    project_builder.write(
        {
            "Cargo.toml": """
            [package]
            name = "my-rust-tool"
            version = "2.0.0"
            description = "Fast Rust thing"
            license = "Apache-2.0"
            homepage = "https://rust.example"
            repository = "https://github.com/r/tool"
            authors = ["Ferris Crab <ferris@example.com>"]
            keywords = ["near", "rust", "wasm"]

            [dependencies]
            serde = { version = "1.0", features = ["derive"] }
            """
        }
    )

    meta = CargoReader().read(project_builder.path())

    assert meta is not None
    assert meta.source == "Cargo.toml"
    assert meta.name == "my-rust-tool"
    assert meta.version == "2.0.0"
    assert meta.description == "Fast Rust thing"
    assert meta.license == "Apache-2.0"
    assert meta.homepage == "https://rust.example"
    assert meta.repository == "https://github.com/r/tool"
    assert meta.author == "Ferris Crab"
    assert meta.keywords == ["near", "rust", "wasm"]


def test_cargo_has_no_capitalized_fallback(project_builder) -> None:
    project_builder.write(
        {"Cargo.toml": '[package]\nname = "x"\nHomepage = "https://upper.example"\n'}
    )

    meta = CargoReader().read(project_builder.path())

    assert meta.homepage is None
