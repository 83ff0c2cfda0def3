"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from weblinks.cli.main import cli

DOCUMENT = """\
default_anchor: https://example.org/page
links:
  - origin: header
    href: https://doi.org/10.1234/abc
    relation: cite-as
  - origin: body
    href: https://example.org/meta.json
    relation: describedby
    facets:
      type: application/json
  - origin: header
    href: https://example.org/linkset.json
    relation: linkset
"""

CONFLICTING = """\
links:
  - origin: header
    href: https://a.example/
    relation: cite-as
  - origin: body
    href: https://b.example/
    relation: cite-as
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "links.yml"
    path.write_text(DOCUMENT)
    return path


@pytest.fixture
def conflicting(tmp_path):
    path = tmp_path / "conflicting.yml"
    path.write_text(CONFLICTING)
    return path


class TestInspect:
    """Tests for the inspect command."""

    def test_inspect(self, runner, document):
        result = runner.invoke(cli, ["inspect", str(document)])

        assert result.exit_code == 0
        assert "Links: 3" in result.output
        assert "Linksets: 1" in result.output
        assert "Warnings: 0" in result.output

    def test_inspect_strict_fails_on_warnings(self, runner, conflicting):
        result = runner.invoke(cli, ["inspect", str(conflicting), "--strict"])

        assert result.exit_code == 1
        assert "Warnings: 1" in result.output
        assert "strict mode" in result.output

    def test_inspect_warnings_without_strict(self, runner, conflicting):
        result = runner.invoke(cli, ["inspect", str(conflicting)])

        assert result.exit_code == 0
        assert "conflicting cite-as" in result.output

    def test_inspect_no_matching_links(self, runner, document):
        result = runner.invoke(cli, ["inspect", str(document), "--origin", "linkset"])

        assert result.exit_code == 0
        assert "No matching links" in result.output

    def test_inspect_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["inspect", str(tmp_path / "missing.yml")])

        assert result.exit_code != 0
        assert "Link document not found" in result.output

    def test_inspect_invalid_document(self, runner, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("links:\n  - origin: header\n    href: ''\n    relation: cite-as\n")

        result = runner.invoke(cli, ["inspect", str(path)])

        assert result.exit_code != 0
        assert "Invalid link document" in result.output

    @pytest.mark.parametrize(
        "content",
        [
            "- origin: header\n",
            "just a string\n",
            "links: [\n",
        ],
    )
    def test_inspect_malformed_document(self, runner, tmp_path, content):
        """Non-mapping documents and YAML syntax errors are reported, not raised."""
        path = tmp_path / "malformed.yml"
        path.write_text(content)

        result = runner.invoke(cli, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "Invalid link document" in result.output
        assert not isinstance(result.exception, (TypeError, ValueError))

    def test_inspect_combined_filters(self, runner, document):
        result = runner.invoke(cli, ["inspect", str(document), "--origin", "body", "--relation", "cite-as"])

        assert result.exit_code == 0
        assert "No matching links" in result.output


class TestRender:
    """Tests for the render command."""

    def test_render_html(self, runner, document):
        result = runner.invoke(cli, ["render", str(document), "-r", "cite-as"])

        assert result.exit_code == 0
        assert result.output.strip() == (
            '<link href="https://doi.org/10.1234/abc" rel="cite-as" anchor="https://example.org/page" />'
        )

    def test_render_header_with_anchor_override(self, runner, document):
        result = runner.invoke(
            cli,
            ["--anchor", "https://override.example/", "render", str(document), "-f", "header", "-r", "linkset"],
        )

        assert result.exit_code == 0
        assert result.output.strip() == (
            '<https://example.org/linkset.json>; rel="linkset"; anchor="https://override.example/"'
        )

    def test_render_combined(self, runner, conflicting):
        result = runner.invoke(cli, ["render", str(conflicting), "-f", "header", "--combined"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 1
        assert lines[0].count("rel=\"cite-as\"") == 2

    def test_anchor_from_environment(self, runner, conflicting):
        result = runner.invoke(
            cli,
            ["render", str(conflicting), "-f", "header"],
            env={"WEBLINKS_DEFAULT_ANCHOR": "https://env.example/"},
        )

        assert result.exit_code == 0
        assert 'anchor="https://env.example/"' in result.output


class TestReport:
    """Tests for the report command."""

    def test_report_stdout(self, runner, document):
        result = runner.invoke(cli, ["report", str(document)])

        assert result.exit_code == 0
        assert result.output.startswith("# Link Report")

    def test_report_file(self, runner, document, tmp_path):
        output = tmp_path / "docs" / "links.md"
        result = runner.invoke(cli, ["report", str(document), "-o", str(output)])

        assert result.exit_code == 0
        assert output.exists()
        assert "**Total links:** 3" in output.read_text()
