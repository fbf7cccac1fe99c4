from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import numpy as np
import torch

from PIL import Image, ImageDraw, ImageFont

from cinequote_ui.render import RenderedElement, SceneRenderBatch
from cinequote_ui.style.theme import DEFAULT_THEME, StageTheme


Color = tuple[int, int, int, int]


@dataclass
class SceneRasterizer:
    """Torch-first preview host: paints a render batch into an RGBA frame.

    Only the box model the engine emits is honoured: `left`/`top` offsets, `width`
    (text is clipped to it, like `overflow: hidden`), `height`, `font-size` and `color`.
    """

    width: int = 1024
    height: int = 640
    theme: StageTheme = DEFAULT_THEME
    font_path: str | None = None
    last_frame: torch.Tensor | None = field(default=None, init=False, repr=False)
    _frame: torch.Tensor | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame dimensions must be > 0")

    def begin_frame(self, clear_color: Color | None = None) -> None:
        color = clear_color or parse_rgba_u8(self.theme.background)
        frame = torch.zeros((self.height, self.width, 4), dtype=torch.uint8)
        frame[:, :] = torch.tensor(color, dtype=torch.uint8)
        self._frame = frame

    def draw_elements(self, elements: tuple[RenderedElement, ...]) -> None:
        if self._frame is None:
            raise RuntimeError("begin_frame must be called before draw_elements")
        for element in elements:
            self._draw_element(element)

    def end_frame(self) -> torch.Tensor:
        if self._frame is None:
            raise RuntimeError("begin_frame must be called before end_frame")
        out = self._frame.clone()
        self._frame = None
        self.last_frame = out
        return out

    def draw_scene_batch(self, batch: SceneRenderBatch) -> None:
        self.begin_frame()
        self.draw_elements(batch.elements)
        self.end_frame()

    def _draw_element(self, element: RenderedElement) -> None:
        style = element.style()
        x = _parse_px(style.get("left"), 0)
        y = _parse_px(style.get("top"), 0)
        font_size = max(1, _parse_px(style.get("font-size"), self.theme.line_font_size_px))
        box_w = _parse_px(style.get("width"), -1)
        box_h = _parse_px(style.get("height"), -1)
        if element.kind == "button":
            w = box_w if box_w >= 0 else self.theme.button_size_px
            h = box_h if box_h >= 0 else self.theme.button_size_px
            self._fill_box(x, y, w, h, parse_rgba_u8(self.theme.button_bg))
            text_color = parse_rgba_u8(style.get("color", self.theme.button_text))
            self._draw_text(element.text, x=x + 8, y=y + 8, size_px=font_size, color=text_color, clip_width=w - 16)
            return
        text_color = parse_rgba_u8(style.get("color", self.theme.label_text))
        self._draw_text(
            element.text,
            x=x,
            y=y,
            size_px=font_size,
            color=text_color,
            clip_width=box_w if box_w >= 0 else None,
        )

    def _draw_text(
        self,
        text: str,
        *,
        x: int,
        y: int,
        size_px: int,
        color: Color,
        clip_width: int | None,
    ) -> None:
        if not text:
            return
        mask = _rasterize_line(self.font_path or "", size_px, text)
        if clip_width is not None:
            if clip_width <= 0:
                return
            mask = mask[:, :clip_width]
        self._blend_alpha_mask(mask, x=x, y=y, color=color)

    def _clip_to_frame(self, x: int, y: int, w: int, h: int) -> tuple[slice, slice] | None:
        """Row and column slices of the frame covered by a box, or None when off-frame."""

        if self._frame is None or w <= 0 or h <= 0:
            return None
        frame_h, frame_w = self._frame.shape[:2]
        rows = slice(min(max(y, 0), frame_h), min(max(y + h, 0), frame_h))
        cols = slice(min(max(x, 0), frame_w), min(max(x + w, 0), frame_w))
        if rows.start == rows.stop or cols.start == cols.stop:
            return None
        return rows, cols

    def _fill_box(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Paint a button box; translucent theme colors are mixed over what is below."""

        region = self._clip_to_frame(x, y, w, h)
        if region is None or color[3] == 0:
            return
        box = self._frame[region]
        fill = torch.tensor(color[:3], dtype=torch.float32)
        if color[3] < 255:
            fill = torch.lerp(box[:, :, :3].to(torch.float32), fill, color[3] / 255.0)
        box[:, :, :3] = fill.round().to(torch.uint8)
        box[:, :, 3] = 255

    def _blend_alpha_mask(self, mask: np.ndarray, *, x: int, y: int, color: Color) -> None:
        if self._frame is None:
            return
        h, w = mask.shape
        region = self._clip_to_frame(x, y, w, h)
        if region is None:
            return
        rows, cols = region
        cov = mask[rows.start - y : rows.stop - y, cols.start - x : cols.stop - x].astype(np.float32) / 255.0
        src_alpha = cov * (color[3] / 255.0)
        if not np.any(src_alpha > 0):
            return
        patch = self._frame[region]
        dst_rgb = patch[:, :, :3].to(torch.float32).cpu().numpy()
        src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
        out_rgb = src_rgb * src_alpha[:, :, None] + dst_rgb * (1.0 - src_alpha[:, :, None])
        patch[:, :, :3] = torch.from_numpy(np.clip(out_rgb, 0, 255).astype(np.uint8))
        patch[:, :, 3] = 255


def save_png(frame: torch.Tensor, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(frame.cpu().numpy().astype(np.uint8)).save(out, format="PNG")
    return out


@lru_cache(maxsize=32)
def _load_font(font_path: str, size_px: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    candidates = [font_path] if font_path else ["DejaVuSans.ttf", "Arial.ttf"]
    for candidate in candidates:
        try:
            return ImageFont.truetype(candidate, size=size_px)
        except OSError:
            continue
    return ImageFont.load_default()


@lru_cache(maxsize=256)
def _rasterize_line(font_path: str, size_px: int, text: str) -> np.ndarray:
    font = _load_font(font_path, size_px)
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - min(0, left)))
    height = max(1, int(bottom - min(0, top)))
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).text((-min(0, left), -min(0, top)), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


def _parse_px(value: str | None, default: int) -> int:
    if value is None:
        return default
    raw = value.strip()
    if raw.endswith("px"):
        raw = raw[:-2]
    try:
        return int(round(float(raw)))
    except ValueError:
        return default


def parse_rgba_u8(hex_color: str) -> Color:
    value = hex_color.strip()
    if not value.startswith("#"):
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
    raw = value[1:]
    if len(raw) == 6:
        return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16), 255)
    if len(raw) == 8:
        return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16), int(raw[6:8], 16))
    raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
