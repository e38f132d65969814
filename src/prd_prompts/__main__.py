"""Entry point for ``python -m prd_prompts``."""
from .cli.commands import cli

if __name__ == '__main__':
    cli()
