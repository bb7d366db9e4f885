"""Prompt rendering for the language model.

Provides ``PromptManager``, a Jinja2-based template engine that embeds
questionnaire responses into the analysis instructions, and the
``build_prompt`` shortcut that uses the packaged template.
"""

from mindset_analysis.prompt.manager import PromptManager, build_prompt, serialize_responses

__all__ = ["PromptManager", "build_prompt", "serialize_responses"]
