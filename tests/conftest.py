import pytest

from tds_codegen.core.config import ResolverConfig
from tds_codegen.core.resolver import NameResolver
from tds_codegen.core.schema import Field, Template


def make_template(name, namespace="Site.Feature.sitecore.templates", fields=None, bases=None):
    return Template(
        name=name,
        namespace=namespace,
        fields=list(fields or []),
        base_templates=list(bases or []),
    )


@pytest.fixture
def resolver():
    return NameResolver(ResolverConfig())


@pytest.fixture
def page_graph():
    """Article inherits Page Base (which inherits Seo) and Navigable."""
    seo = make_template(
        "Seo",
        "Site.Foundation.sitecore.templates",
        fields=[Field("Meta Description", "multi-line text"), Field("Meta Keywords", "text")],
    )
    page_base = make_template(
        "Page Base",
        fields=[Field("Title", "single-line text"), Field("Hidden", "checkbox", "ignore=true")],
        bases=[seo],
    )
    navigable = make_template(
        "Navigable",
        fields=[Field("Related Links", "Treelist")],
    )
    article = make_template(
        "Article",
        fields=[
            Field("Body", "rich text"),
            Field("Authors", "multilist", "name=Writers"),
            Field("Internal Notes", "text", "IGNORE=true"),
        ],
        bases=[page_base, navigable],
    )
    return {"seo": seo, "page_base": page_base, "navigable": navigable, "article": article}
