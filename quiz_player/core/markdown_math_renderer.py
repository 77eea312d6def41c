"""Markdown + LaTeX rendering for question prompts, hints and explanations.

Architecture note:
    Quiz text is stored as Markdown with ``$...$`` math. The renderer turns it
    into HTML and leaves the math untouched for MathJax, which runs inside the
    QWebEngineView that displays the page. Rendering stays out of the session
    controller so the core never depends on a presentation format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into a block-level HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_section(self, css_class: str, markdown_text: str) -> str:
        return f'<div class="{css_class}">{self.render_fragment(markdown_text)}</div>'

    def wrap_with_mathjax(self, body_html: str, title: str = "QuizPlayer", font_size: int = 14) -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; font-size: {font_size}pt; }}
      .prompt {{ line-height: 1.5; }}
      .media img {{ max-width: 100%; border-radius: 0.5rem; }}
      .hint {{ margin-top: 0.75rem; padding: 0.5rem 0.75rem; border-left: 4px solid #facc15; background: #fef9c3; }}
      .explanation {{ margin-top: 0.75rem; padding: 0.5rem 0.75rem; border-left: 4px solid #1f9aa5; background: #e0f2f1; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
    {body_html}
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str = "QuizPlayer", font_size: int = 14) -> str:
        """Convenience wrapper to render markdown and embed MathJax."""

        fragment = self.render_section("prompt", markdown_text)
        return self.wrap_with_mathjax(fragment, title=title, font_size=font_size)


# Shared instance; only used from the GUI thread.
renderer = MarkdownMathRenderer()
