"""Prompt Construction Package"""

from genie.prompts.builder import PromptBuilder

__all__ = ["PromptBuilder"]
