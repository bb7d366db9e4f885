"""PromptManager — Jinja2-based prompt renderer for the mindset analysis.

Loads templates from the ``template/`` directory and renders questionnaire
responses into the instruction string sent to the language model.

The responses are embedded as canonical JSON (sorted keys, compact
separators) so the same answers always produce the same prompt.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import jinja2

from mindset_analysis.errors import SerializationError

_MINDSET_TEMPLATE = "mindset_analysis.jinja2"


def serialize_responses(responses: Mapping[str, Any]) -> str:
    """Canonical JSON form of the questionnaire responses.

    Raises:
        SerializationError: if a value has no JSON representation.
    """
    try:
        return json.dumps(
            responses,
            sort_keys=True,
            ensure_ascii=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Responses are not serializable: {exc}") from exc


class PromptManager:
    """Jinja2-based prompt renderer for the analysis endpoint.

    Args:
        template_dir: optional override for the template directory.
            Defaults to ``template/`` sibling of this module.
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        if template_dir is None:
            template_dir = Path(__file__).parent / "template"
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_mindset_prompt(self, responses: Mapping[str, Any]) -> str:
        """Render the analysis instructions with ``responses`` embedded."""
        responses_json = serialize_responses(responses)
        return self.render(_MINDSET_TEMPLATE, responses_json=responses_json)

    def render(self, template_name: str, **context) -> str:
        """Render a named template with arbitrary context."""
        template = self._env.get_template(template_name)
        return template.render(**context)


_default_manager: PromptManager | None = None


def build_prompt(responses: Mapping[str, Any]) -> str:
    """Render the mindset analysis prompt with the packaged template."""
    global _default_manager
    if _default_manager is None:
        _default_manager = PromptManager()
    return _default_manager.render_mindset_prompt(responses)
