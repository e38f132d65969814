"""Storage utilities for locating and loading prompt templates."""
import logging
import os
from typing import Dict, List

from ..rendering import TemplateError, TemplateNotFoundError, placeholders
from ..templates import TEMPLATES
from .config import Config
from .types import TemplateInfo

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".md"


class TemplateLibrary:
    """Finds bundled and user templates and loads their text."""

    def __init__(self, config: Config):
        """Initialize the template library."""
        self.config = config

    def _read(self, path: str) -> str:
        """
        Read a template file.

        Args:
            path (str): Path to the template file

        Returns:
            str: Content of the template file

        Raises:
            IOError: If the template file cannot be read
        """
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (IOError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read template {path}: {e}")
            raise IOError(f"Failed to read template {path}: {e}")

    def _title_from_text(self, text: str, default: str) -> str:
        """Use the first Markdown heading as the title."""
        for line in text.splitlines():
            line = line.strip()
            if line.startswith("#"):
                return line.lstrip("#").strip() or default
        return default

    def _bundled_templates(self) -> Dict[str, Dict[str, str]]:
        templates = {}
        for entry in TEMPLATES:
            templates[entry["name"]] = {
                "path": os.path.join(self.config.PACKAGE_TEMPLATE_DIR, entry["filename"]),
                "title": entry["title"],
                "description": entry["description"],
            }
        return templates

    def _user_templates(self) -> Dict[str, Dict[str, str]]:
        templates: Dict[str, Dict[str, str]] = {}
        template_dir = self.config.TEMPLATE_DIR
        if not template_dir:
            return templates
        if not os.path.isdir(template_dir):
            logger.warning(f"Template directory not found: {template_dir}")
            return templates

        for filename in sorted(os.listdir(template_dir)):
            if not filename.endswith(TEMPLATE_EXTENSION):
                continue
            name = filename[:-len(TEMPLATE_EXTENSION)]
            templates[name] = {
                "path": os.path.join(template_dir, filename),
                "title": "",
                "description": f"User template from {template_dir}",
            }
        return templates

    def _all_templates(self) -> Dict[str, Dict[str, str]]:
        """User templates shadow bundled ones of the same name."""
        templates = self._bundled_templates()
        templates.update(self._user_templates())
        return templates

    def _resolve(self, name: str) -> Dict[str, str]:
        templates = self._all_templates()
        if name in templates:
            return templates[name]
        if os.path.isfile(name):
            logger.debug(f"Using template file {name}")
            return {"path": name, "title": "", "description": f"Template file {name}"}
        raise TemplateNotFoundError(
            f"Template not found: {name} (available: {', '.join(sorted(templates))})"
        )

    def load_template(self, name: str) -> str:
        """
        Load a template by name, or by path to a template file.

        Args:
            name (str): Template name or file path

        Returns:
            str: The template text

        Raises:
            TemplateNotFoundError: If no template matches the name
            IOError: If the template file cannot be read
        """
        entry = self._resolve(name)
        logger.debug(f"Loading template {name} from {entry['path']}")
        return self._read(entry["path"])

    def get_info(self, name: str) -> TemplateInfo:
        """
        Describe a template.

        Args:
            name (str): Template name or file path

        Returns:
            TemplateInfo: Name, title, description, path and placeholder labels

        Raises:
            TemplateNotFoundError: If no template matches the name
            IOError: If the template file cannot be read
            TemplateError: If the template text is malformed
        """
        entry = self._resolve(name)
        text = self._read(entry["path"])
        return TemplateInfo(
            name=name,
            title=entry["title"] or self._title_from_text(text, name),
            description=entry["description"],
            path=entry["path"],
            placeholders=placeholders(text),
        )

    def list_templates(self) -> List[TemplateInfo]:
        """
        List all available templates.

        Unreadable or malformed user templates are skipped with a warning.

        Returns:
            List[TemplateInfo]: Template metadata sorted by name
        """
        infos: List[TemplateInfo] = []
        for name in sorted(self._all_templates()):
            try:
                infos.append(self.get_info(name))
            except (IOError, TemplateError) as e:
                logger.warning(f"Skipping template {name}: {e}")
        return infos
