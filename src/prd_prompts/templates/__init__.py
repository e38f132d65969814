"""Bundled prompt templates."""
import os

TEMPLATE_DIR = os.path.dirname(os.path.abspath(__file__))

# Metadata for the bundled templates
# Format: List of dictionaries with the template name, its file in this directory, and display text
TEMPLATES = [
    {
        "name": "v0_prompt",
        "filename": "v0_prompt.md",
        "title": "v0.dev Product Requirements Prompt",
        "description": "Asks a chat model to write a v0.dev UI prompt for an MVP feature",
    },
    {
        "name": "prd",
        "filename": "prd.md",
        "title": "PRD for AI Coding Agents",
        "description": "Asks a chat model to write a structured PRD an AI coding agent can implement",
    },
]
