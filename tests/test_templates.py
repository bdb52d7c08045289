import pytest

from tds_codegen.core.errors import InheritanceCycleError
from tds_codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    create_template_engine,
    render_interface,
)


def test_render_interface(resolver, page_graph):
    code = render_interface(page_graph["article"], resolver)

    assert code.startswith("namespace Site.Feature\n")
    assert (
        "public partial interface IArticle : IStandardTemplateItem"
        ", global::Site.Feature.IPageBase"
        ", global::Site.Foundation.ISeo"
        ", global::Site.Feature.INavigable\n"
    ) in code
    assert "        string Body { get; }\n" in code
    assert "        IEnumerable<Guid> Writers { get; }\n" in code
    assert "Internal Notes" not in code
    assert "Title" not in code


def test_render_interface_with_bases(resolver, page_graph):
    code = render_interface(page_graph["article"], resolver, include_bases=True)
    assert "string Title { get; }" in code
    assert "IEnumerable<Guid> RelatedLinks { get; }" in code


def test_globals_match_resolver(resolver, page_graph):
    engine = TemplateEngine(resolver)
    article = page_graph["article"]

    rendered = engine.render_string(
        "{{ fully_qualified_name('', t) }}"
        "|{{ inheritance_chain('', t) }}"
        "|{{ custom_property('a=1&b=2', 'B') }}"
        "|{{ join_namespaces('A', '', 'B') }}",
        {"t": article},
    )

    assert rendered == "|".join(
        [
            resolver.get_fully_qualified_name("", article),
            resolver.get_inheritance_chain("", article),
            "2",
            "A.B",
        ]
    )


def test_filters(resolver):
    engine = TemplateEngine(resolver)
    rendered = engine.render_string(
        "{{ 'page base' | interface_name }} {{ 'page base' | class_name }} "
        "{{ 'tag' | property_name(true) }} {{ 'seo settings' | pascal_case }} "
        "{{ 'default value' | parameter_name }} {{ 'Event' | parameter_name }}",
        {},
    )
    assert rendered == "IPageBase PageBase Tags SeoSettings defaultValue event_"


def test_undefined_variable_raises_template_error(resolver):
    engine = TemplateEngine(resolver)
    with pytest.raises(TemplateError):
        engine.render_string("{{ missing.name }}", {})


def test_missing_template_raises_template_error(resolver):
    engine = create_template_engine(resolver)
    assert engine.template_exists("csharp_interface")
    with pytest.raises(TemplateError):
        engine.render_template("nope", {})


def test_cycle_error_propagates(resolver, page_graph):
    seo = page_graph["seo"]
    seo.base_templates.append(page_graph["page_base"])
    with pytest.raises(InheritanceCycleError):
        render_interface(page_graph["article"], resolver)


def test_file_templates(tmp_path, resolver, page_graph):
    (tmp_path / "names.txt").write_text(
        "{% for f in fields_for(t, false) %}{{ field_property_name(f) }};{% endfor %}",
        encoding="utf-8",
    )
    engine = create_template_engine(resolver, tmp_path)

    assert not engine.template_exists("csharp_interface")
    assert engine.render_template("names.txt", {"t": page_graph["article"]}) == "Body;Writers;"
