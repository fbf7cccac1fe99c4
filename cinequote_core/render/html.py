from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from pathlib import Path

from cinequote_ui.render import RenderedElement, SceneRenderBatch
from cinequote_ui.style.theme import DEFAULT_THEME, StageTheme


def render_element_html(element: RenderedElement, *, theme: StageTheme = DEFAULT_THEME) -> str:
    style = dict(element.style())
    if element.kind == "button":
        style.setdefault("background", theme.button_bg)
        style.setdefault("color", theme.button_text)
    else:
        style.setdefault("color", theme.label_text)
    style_attr = "; ".join(f"{name}: {value}" for name, value in style.items())
    return (
        f'<{element.tag} data-name="{escape(element.name)}" '
        f'data-message="{escape(element.message)}" '
        f'style="{escape(style_attr)}">'
        f"{escape(element.text)}</{element.tag}>"
    )


def render_html_document(
    batch: SceneRenderBatch,
    *,
    title: str = "cinequote",
    theme: StageTheme = DEFAULT_THEME,
) -> str:
    """Standalone page; clicks post the element's `data-message` to `window.cinequote`."""

    body = "\n".join(f"    {render_element_html(e, theme=theme)}" for e in batch.elements)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>{escape(title)}</title>\n"
        "</head>\n"
        f'<body style="margin: 0; background: {theme.background}; font-family: sans-serif;">\n'
        f'  <main data-timestamp="{batch.timestamp}" style="position: relative;">\n'
        f"{body}\n"
        "  </main>\n"
        "  <script>\n"
        "    document.querySelectorAll('[data-message]').forEach(function (el) {\n"
        "      el.addEventListener('click', function () {\n"
        "        if (window.cinequote) { window.cinequote(el.dataset.message); }\n"
        "      });\n"
        "    });\n"
        "  </script>\n"
        "</body>\n"
        "</html>\n"
    )


@dataclass
class HtmlSceneRenderer:
    """SceneRenderer host that keeps the latest page and optionally writes it to disk."""

    output_path: Path | None = None
    theme: StageTheme = DEFAULT_THEME
    pages_written: int = 0
    last_document: str = field(default="", repr=False)

    def draw_scene_batch(self, batch: SceneRenderBatch) -> None:
        self.last_document = render_html_document(batch, theme=self.theme)
        if self.output_path is not None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(self.last_document, encoding="utf-8")
        self.pages_written += 1
