import json

import pytest

from tds_codegen.cli import main


@pytest.fixture
def metadata_file(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text(
        json.dumps(
            {
                "templates": [
                    {
                        "id": "a",
                        "name": "Article",
                        "namespace": "Site.Feature.sitecore.templates",
                        "fields": [
                            {"name": "Body", "type": "Rich Text"},
                            {"name": "Tags", "type": "Multilist", "data": "name=TagItems"},
                        ],
                        "base_templates": ["p"],
                    },
                    {
                        "id": "p",
                        "name": "Page",
                        "namespace": "Site.Core.sitecore.templates",
                        "fields": [{"name": "Title", "type": "Single-Line Text"}],
                    },
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def test_inspect(metadata_file, capsys):
    assert main(["inspect", str(metadata_file), "--template", "Article"]) == 0

    out = capsys.readouterr().out
    assert "global::Site.Feature.Article" in out
    assert "global::Site.Core.IPage" in out
    assert "TagItems" in out
    assert "Title" not in out


def test_inspect_include_bases(metadata_file, capsys):
    assert main(["inspect", str(metadata_file), "-t", "a", "--include-bases"]) == 0
    assert "Title" in capsys.readouterr().out


def test_inspect_unknown_template(metadata_file, capsys):
    assert main(["inspect", str(metadata_file), "--template", "Nope"]) == 1
    assert "Template not found" in capsys.readouterr().out


def test_inspect_missing_file(tmp_path, capsys):
    assert main(["inspect", str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().out


def test_render_to_file(metadata_file, tmp_path):
    output = tmp_path / "IArticle.cs"

    assert main(["render", str(metadata_file), "-t", "Article", "-o", str(output)]) == 0

    code = output.read_text(encoding="utf-8")
    assert "namespace Site.Feature" in code
    assert "interface IArticle : IStandardTemplateItem, global::Site.Core.IPage" in code
    assert "IEnumerable<Guid> TagItems { get; }" in code


def test_render_custom_template(metadata_file, tmp_path):
    template_file = tmp_path / "class.jinja"
    template_file.write_text("{{ template.name | class_name }}{{ inheritance_chain('', template) }}")
    output = tmp_path / "out.txt"

    args = ["render", str(metadata_file), "-t", "a", "--template-file", str(template_file), "-o", str(output)]
    assert main(args) == 0
    assert output.read_text(encoding="utf-8") == "Article, global::Site.Core.IPage"


def test_config_file_is_applied(metadata_file, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"global_prefix": "", "include_base_fields": True}))
    output = tmp_path / "IArticle.cs"

    assert main(["--config", str(config), "render", str(metadata_file), "-t", "a", "-o", str(output)]) == 0

    code = output.read_text(encoding="utf-8")
    assert ", Site.Core.IPage" in code
    assert "string Title { get; }" in code


def test_no_command(capsys):
    assert main([]) == 1


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "A", "fields": 3},
        {"name": "A", "fields": [{"name": "Title", "type": 5}]},
        {"name": "A", "namespace": 7},
    ],
)
def test_malformed_metadata_exits_with_error(tmp_path, capsys, entry):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"templates": [entry]}), encoding="utf-8")

    assert main(["inspect", str(path)]) == 1
    assert "Error" in capsys.readouterr().out


def test_malformed_config_exits_with_error(metadata_file, tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"plural_field_types": "multilist"}), encoding="utf-8")

    assert main(["--config", str(config), "inspect", str(metadata_file)]) == 1
    assert "plural_field_types" in capsys.readouterr().out
