"""
Command-line interface for inspecting template metadata.

Shows how the resolver names templates and fields, and renders
generation templates for a single data template.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich import box

from . import __version__
from .core import (
    CodegenError,
    NameResolver,
    Template,
    TemplateSet,
    as_class_name,
    create_template_engine,
    load_config,
    load_templates_file,
)
from .core.config import get_config_manager
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for tds-codegen."""
    parser = argparse.ArgumentParser(
        prog="tds-codegen",
        description="Inspect how template metadata maps to generated code names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tds-codegen inspect templates.json
  tds-codegen inspect templates.json --template "Page Base" --include-bases
  tds-codegen render templates.json --template Article --output IArticle.cs
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG"
    )

    subparsers = parser.add_subparsers(dest="command")

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show resolved names for templates"
    )
    inspect_parser.add_argument("file", help="Template metadata JSON file")
    inspect_parser.add_argument(
        "--template", "-t", metavar="NAME", help="Only show this template (id or name)"
    )
    inspect_parser.add_argument(
        "--include-bases",
        action="store_true",
        default=None,
        help="Include fields inherited from base templates",
    )
    inspect_parser.set_defaults(func=_handle_inspect)

    render_parser = subparsers.add_parser(
        "render", help="Render a generation template for one data template"
    )
    render_parser.add_argument("file", help="Template metadata JSON file")
    render_parser.add_argument(
        "--template", "-t", metavar="NAME", required=True, help="Template id or name"
    )
    render_parser.add_argument(
        "--template-file",
        metavar="PATH",
        help="Jinja2 template to render (default: built-in C# interface)",
    )
    render_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    render_parser.add_argument(
        "--include-bases",
        action="store_true",
        default=None,
        help="Include fields inherited from base templates",
    )
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the tds-codegen command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (CLIError, CodegenError) as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_resolver(args: argparse.Namespace) -> NameResolver:
    config = load_config(config_file=args.config)
    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️ {warning}[/yellow]")
    if args.include_bases is not None:
        config.include_base_fields = args.include_bases
    return NameResolver(config)


def _select_templates(templates: TemplateSet, key: Optional[str]) -> List[Template]:
    if not key:
        return list(templates)
    template = templates.get(key)
    if template is None:
        raise CLIError(f"Template not found: {key}")
    return [template]


def _handle_inspect(args: argparse.Namespace) -> int:
    """Print resolved names for each selected template."""
    resolver = _build_resolver(args)
    templates = load_templates_file(args.file)
    selected = _select_templates(templates, args.template)

    if not selected:
        console.print("[yellow]⚠️ No templates found[/yellow]")
        return 0

    default_namespace = resolver.config.default_namespace
    for template in selected:
        chain = resolver.get_inherited_interfaces(default_namespace, template)
        info_text = (
            f"[bold]Class:[/bold] {resolver.get_fully_qualified_name(default_namespace, template, as_class_name)}\n"
            f"[bold]Interface:[/bold] {resolver.get_fully_qualified_name(default_namespace, template, resolver.interface_name_func)}\n"
            f"[bold]Namespace:[/bold] {resolver.get_namespace(default_namespace, template) or '[dim]none[/dim]'}\n"
            f"[bold]Inherits:[/bold] {', '.join(chain) if chain else '[dim]none[/dim]'}"
        )
        console.print(Panel(info_text, title=f"🧩 {template.name}", border_style="green"))

        fields = resolver.get_fields_for_template(template)
        if not fields:
            console.print("[dim]  no fields[/dim]")
            continue

        table = Table(box=box.SIMPLE, header_style="bold cyan")
        table.add_column("Field", style="bold")
        table.add_column("Type", style="cyan")
        table.add_column("Property", style="green")
        table.add_column("Plural")

        for field in fields:
            table.add_row(
                field.name,
                field.type or "[dim]-[/dim]",
                resolver.get_property_name(field),
                "✓" if resolver.is_field_plural(field) else "",
            )
        console.print(table)

    return 0


def _handle_render(args: argparse.Namespace) -> int:
    """Render a generation template for one data template."""
    resolver = _build_resolver(args)
    templates = load_templates_file(args.file)
    template = _select_templates(templates, args.template)[0]

    if args.template_file:
        template_path = Path(args.template_file)
        if not template_path.exists():
            raise CLIError(f"Template file not found: {template_path}")
        engine = create_template_engine(resolver, template_path.parent)
        template_name = template_path.name
    else:
        engine = create_template_engine(resolver)
        template_name = "csharp_interface"

    code = engine.render_template(
        template_name,
        {
            "template": template,
            "templates": templates,
            "include_bases": resolver.config.include_base_fields,
            "default_namespace": resolver.config.default_namespace,
        },
    )

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write {output_path}: {e}") from e
        console.print(f"[green]✓[/green] Wrote {output_path}")
        logger.info("Rendered %s to %s", template.name, output_path)
    else:
        console.print(Syntax(code, "csharp", theme="monokai", line_numbers=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
