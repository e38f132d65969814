"""Fill-in-the-blank prompt templates for v0.dev prompts and PRDs."""

__version__ = "0.1.0"
