"""Command line interface for the prompt template tool."""
import logging
import os
import sys
from typing import Dict, List, NoReturn, Optional, TextIO, Tuple

import click
from rich.logging import RichHandler

from ..rendering import TemplateError, TemplateNotFoundError, TemplateRenderer, UnresolvedPolicy
from ..utils.config import Config
from ..utils.display import (
    ask_user,
    console,
    display_banner,
    display_document,
    display_error,
    display_info,
    display_templates,
    display_warning,
)
from ..utils.storage import TemplateLibrary
from ..utils.validation import ValidationError, Validator

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
POLICIES = [policy.value for policy in UnresolvedPolicy]
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handlers installed by the last initialize_logging call
_log_handlers: List[logging.Handler] = []


def initialize_logging(config: Config) -> None:
    """Initialize logging configuration."""
    # Create log directory if it doesn't exist
    os.makedirs(config.LOG_DIR, exist_ok=True)

    # Replace handlers from an earlier call so a new LOG_DIR takes effect
    root = logging.getLogger()
    for handler in _log_handlers:
        root.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(os.path.join(config.LOG_DIR, "prd_prompts.log"), encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _log_handlers[:] = [file_handler, RichHandler(console=console, show_path=False)]

    for handler in _log_handlers:
        root.addHandler(handler)
    root.setLevel(config.LOG_LEVEL)


def fail(message: str) -> NoReturn:
    """Report an error and exit with a non-zero status."""
    display_error(message)
    sys.exit(1)


def list_templates(config: Config) -> None:
    """List all available templates."""
    library = TemplateLibrary(config)
    templates = library.list_templates()

    if not templates:
        display_info("No templates found.")
        return

    display_templates(templates)


def show_template(config: Config, name: str, raw: bool = False) -> None:
    """Print a template, as plain text or formatted markdown."""
    library = TemplateLibrary(config)
    try:
        text = library.load_template(name)
        if raw:
            click.echo(text, nl=False)
            return
        title = library.get_info(name)["title"]
    except (TemplateNotFoundError, TemplateError, IOError) as e:
        fail(str(e))

    display_banner(title)
    display_document(text)


def list_placeholders(config: Config, name: str) -> None:
    """Print the unique placeholder labels of a template, one per line."""
    library = TemplateLibrary(config)
    try:
        info = library.get_info(name)
    except (TemplateNotFoundError, TemplateError, IOError) as e:
        fail(str(e))

    for label in info["placeholders"]:
        click.echo(label)


def parse_bindings(pairs: Tuple[str, ...], bindings_file: Optional[TextIO]) -> Dict[str, str]:
    """
    Build bindings from a JSON file and LABEL=VALUE pairs.

    Args:
        pairs (Tuple[str, ...]): Values given with --set; these win over the file
        bindings_file (Optional[TextIO]): Open JSON file of label to value

    Returns:
        Dict[str, str]: The combined bindings

    Raises:
        ValidationError: If the file or a pair is malformed
    """
    bindings: Dict[str, str] = {}
    if bindings_file is not None:
        bindings.update(Validator.is_json_object(bindings_file.read()))

    for pair in pairs:
        label, value = Validator.is_binding_pair(pair)
        bindings[label] = value

    return bindings


def prompt_for_bindings(labels: List[str], bindings: Dict[str, str]) -> None:
    """Ask the user for each label that has no binding yet."""
    unbound = [label for label in labels if label not in bindings]
    if not unbound:
        return

    display_info(f"{len(unbound)} placeholder(s) need a value")
    for label in unbound:
        while True:
            answer = ask_user(f"{label} (type 'skip' to leave it unresolved)")
            if answer.strip().lower() == 'skip':
                break
            try:
                Validator.not_empty(answer)
                bindings[label] = answer
                break
            except ValidationError as e:
                display_error(str(e))


def render_template(
    config: Config,
    name: str,
    pairs: Tuple[str, ...] = (),
    bindings_file: Optional[TextIO] = None,
    interactive: bool = False,
) -> None:
    """
    Render a template and write the result to stdout.

    Args:
        config (Config): The configuration object
        name (str): Template name or file path
        pairs (Tuple[str, ...]): LABEL=VALUE pairs
        bindings_file (Optional[TextIO]): JSON file of bindings
        interactive (bool): Whether to prompt for missing values
    """
    library = TemplateLibrary(config)
    renderer = TemplateRenderer(config.UNRESOLVED_POLICY)

    try:
        template = library.load_template(name)
        bindings = parse_bindings(pairs, bindings_file)

        if interactive:
            prompt_for_bindings(renderer.placeholders(template), bindings)

        unresolved = renderer.missing(template, bindings)
        if unresolved and renderer.policy is UnresolvedPolicy.LEAVE:
            display_warning(f"Leaving {len(unresolved)} placeholder(s) unresolved: {', '.join(unresolved)}")

        rendered = renderer.render(template, bindings)
    except (TemplateNotFoundError, TemplateError, ValidationError, IOError) as e:
        fail(str(e))

    click.echo(rendered, nl=False)


@click.group()
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), help='Logging level')
@click.option('--log-dir', type=click.Path(file_okay=False), help='Directory for the log file')
@click.option('--template-dir', type=click.Path(file_okay=False), help='Directory of extra .md templates')
@click.option('--policy', type=click.Choice(POLICIES), help='What to do with placeholders that have no value')
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: Optional[str],
    log_dir: Optional[str],
    template_dir: Optional[str],
    policy: Optional[str],
) -> None:
    """PRD Prompts - Fill in the v0.dev and PRD prompt templates."""
    # Initialize configuration
    config = Config()

    # Override settings from command line
    if log_level:
        config.LOG_LEVEL = log_level.upper()
    if log_dir:
        config.LOG_DIR = log_dir
    if template_dir:
        config.TEMPLATE_DIR = template_dir
    if policy:
        config.UNRESOLVED_POLICY = policy

    # Initialize logging
    initialize_logging(config)

    # Store config in context
    ctx.obj = config


@cli.command(name='list')
@click.pass_obj
def list_command(config: Config) -> None:
    """List the available templates."""
    list_templates(config)


@cli.command()
@click.argument('name')
@click.option('--raw', is_flag=True, help='Print the template text without formatting')
@click.pass_obj
def show(config: Config, name: str, raw: bool) -> None:
    """Show a template."""
    show_template(config, name, raw)


@cli.command()
@click.argument('name')
@click.pass_obj
def placeholders(config: Config, name: str) -> None:
    """List the placeholders of a template."""
    list_placeholders(config, name)


@cli.command()
@click.argument('name')
@click.option('--set', 'pairs', multiple=True, metavar='LABEL=VALUE', help='Value for a placeholder (repeatable)')
@click.option('--bindings', 'bindings_file', type=click.File('r'), help='JSON file mapping labels to values')
@click.option('--interactive', '-i', is_flag=True, help='Prompt for placeholders that have no value')
@click.option('--policy', type=click.Choice(POLICIES), help='Override the unresolved placeholder policy')
@click.pass_obj
def render(
    config: Config,
    name: str,
    pairs: Tuple[str, ...],
    bindings_file: Optional[TextIO],
    interactive: bool,
    policy: Optional[str],
) -> None:
    """Render a template to stdout."""
    if policy:
        config.UNRESOLVED_POLICY = policy
    render_template(config, name, pairs, bindings_file, interactive)


if __name__ == '__main__':
    cli()
