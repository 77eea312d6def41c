"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

import html

from quiz_player.core.markdown_math_renderer import renderer
from quiz_player.core.models import MultiSelectQuestion, Question, SingleChoiceQuestion


def render_question(
    question: Question,
    hint: str | None = None,
    explanation: str | None = None,
    font_size: int = 14,
) -> str:
    """Render a question with its numbered options as HTML.

    Args:
        question: The prepared question (options already in session order)
        hint: Hint text to show below the prompt, if visible
        explanation: Explanation text to show during feedback, if enabled
        font_size: Font size in points for the page

    Returns:
        HTML string ready for display in QWebEngineView
    """
    sections = [renderer.render_section("prompt", question.prompt or "(No question text)")]

    if question.media_url:
        sections.append(
            f'<div class="media"><img src="{html.escape(question.media_url, quote=True)}" alt="" /></div>'
        )

    if isinstance(question, (SingleChoiceQuestion, MultiSelectQuestion)):
        option_lines = [
            f"**{idx}.** {option.text or '(empty)'}"
            for idx, option in enumerate(question.options, start=1)
        ]
        sections.append(renderer.render_section("options", "\n\n".join(option_lines)))

    if hint:
        sections.append(renderer.render_section("hint", hint))
    if explanation:
        sections.append(renderer.render_section("explanation", explanation))

    return renderer.wrap_with_mathjax("\n".join(sections), font_size=font_size)
