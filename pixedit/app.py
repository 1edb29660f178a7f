"""Interactive editor window: toolbar, palette, text prompts and the event loop."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable

import pygame

from pixedit.color import color_pixel
from pixedit.layout import (
    COLORS,
    IMAGE_ORIGIN,
    NB_ICONS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Mode,
    Tool,
    color_to_triplet,
    modify_image,
    place_rects,
    resize_image,
    sharpen_kernel,
)
from pixedit.loading import load_bmp
from pixedit.matrix import MatrixPack, Triplet
from pixedit.selection import select
from pixedit.textinput import TextBuffer
from pixedit.tools import pack_to_surface, surface_to_pack

WINDOW_TITLE = "Menamoste Image Editor"
BACKGROUND = (100, 100, 100)
TEXT_BOX_COLOR = (255, 255, 255)
TEXT_COLOR = (0, 0, 0)
ERROR_COLOR = (255, 0, 0)
SUCCESS_COLOR = (0, 255, 0)

PATH_RECT = pygame.Rect(0, 20, 1000, 60)
MESSAGE_BAR = pygame.Rect(1100, 10, 800, 60)
RESIZE_HEIGHT_RECT = pygame.Rect(1700, 400, 200, 50)
RESIZE_WIDTH_RECT = pygame.Rect(1700, 600, 200, 50)

PATH_MAX_INPUT = 100
SIZE_MAX_INPUT = 5
LOAD_ERROR = "Impossible de charger l'image"
LOAD_SUCCESS = "L'image a bien pu etre chargee"

_ICON_FILES = ("pensil.bmp", "cursor.bmp", "eraser.bmp", "bucket.bmp",
               "filter.bmp", "group.bmp", "resize.bmp", "rotate.bmp")

Prompt = Callable[[pygame.Rect, int], "str | None"]


def _present(screen: pygame.Surface) -> None:
    if pygame.display.get_surface() is screen:
        pygame.display.flip()


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: no digits gives 0."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _draw_text(screen: pygame.Surface, rect: pygame.Rect, text: str,
               font: pygame.font.Font) -> None:
    screen.fill(TEXT_BOX_COLOR, rect)
    if text:
        rendered = font.render(text, True, TEXT_COLOR)
        offset = max(0, rendered.get_width() - rect.w)
        screen.blit(rendered, rect.topleft,
                    area=pygame.Rect(offset, 0, rect.w, rect.h))
    _present(screen)


def _show_message(screen: pygame.Surface, font: pygame.font.Font, text: str,
                  rect: pygame.Rect, error: bool) -> None:
    if text:
        color = ERROR_COLOR if error else SUCCESS_COLOR
        screen.blit(font.render(text, True, color), rect.topleft)
        _present(screen)


def prompt_text(screen: pygame.Surface, rect: pygame.Rect, max_length: int,
                font: pygame.font.Font) -> str | None:
    """Read a line of text typed into a box drawn at ``rect``.

    Return ends the input once something else has happened since the
    last Return. Closing the window returns None and leaves the quit
    event queued for the caller.
    """
    buffer = TextBuffer(max_length)
    screen.fill(TEXT_BOX_COLOR, rect)
    _present(screen)
    new_input = False
    pygame.key.start_text_input()
    try:
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                return None
            key = getattr(event, "key", None)
            is_return = (event.type == pygame.KEYDOWN
                         and key in (pygame.K_RETURN, pygame.K_KP_ENTER))
            if is_return and new_input:
                return str(buffer)
            if event.type == pygame.KEYDOWN and key == pygame.K_BACKSPACE:
                buffer.backspace()
                _draw_text(screen, rect, str(buffer), font)
            elif event.type == pygame.TEXTINPUT:
                buffer.insert(event.text)
                _draw_text(screen, rect, str(buffer), font)
            new_input = not is_return
    finally:
        pygame.key.stop_text_input()


class Editor:
    """The editing window: an image, its pixel pack and the tool state."""

    def __init__(self, screen: pygame.Surface, image: pygame.Surface,
                 prompt: Prompt | None = None,
                 icon_dir: str | os.PathLike[str] | None = None) -> None:
        self.screen = screen
        self.surface = image
        self.pack: MatrixPack = surface_to_pack(image)
        self.rects = place_rects()
        self.image_rect = self.rects[-1]
        self.image_rect.topleft = IMAGE_ORIGIN
        self.image_rect.size = (0, 0)
        self.kernel = sharpen_kernel()
        self.trip = Triplet(1.0, 0.0, 0.0)
        self.is_pencil = False
        self.is_selection = False
        self.is_resized = False
        self.running = False
        self._selection_start: tuple[int, int] | None = None
        self._font: pygame.font.Font | None = None
        self._prompt = prompt if prompt is not None else self._prompt_box
        self._icon_dir = icon_dir
        self._draw_toolbar()
        self._render(self.pack)

    def _prompt_box(self, rect: pygame.Rect, max_length: int) -> str | None:
        if self._font is None:
            self._font = pygame.font.Font(None, 50)
        return prompt_text(self.screen, rect, max_length, self._font)

    def _draw_toolbar(self) -> None:
        self.screen.fill(BACKGROUND)
        for slot, color in enumerate(COLORS):
            self.screen.fill(color[:3], self.rects[NB_ICONS + slot])
        if self._icon_dir is not None:
            for rect, name in zip(self.rects, _ICON_FILES):
                try:
                    icon = load_bmp(os.path.join(self._icon_dir, name))
                except OSError:
                    continue
                self.screen.blit(pygame.transform.scale(icon, rect.size), rect)
        _present(self.screen)

    def _render(self, pack: MatrixPack) -> None:
        pack_to_surface(self.surface, pack)
        self.image_rect.size = self.surface.get_size()
        self.screen.blit(self.surface, self.image_rect)
        _present(self.screen)

    def _relative(self, pos: tuple[int, int]) -> tuple[int, int]:
        return pos[0] - IMAGE_ORIGIN[0], pos[1] - IMAGE_ORIGIN[1]

    def _replace_image(self, pack: MatrixPack) -> None:
        self.screen.fill(BACKGROUND, self.image_rect)
        self.pack = pack
        self.surface = pygame.Surface((pack.cols, pack.rows))
        self._render(pack)

    def _resize(self) -> None:
        height_text = self._prompt(RESIZE_HEIGHT_RECT, SIZE_MAX_INPUT)
        if height_text is None:
            return
        width_text = self._prompt(RESIZE_WIDTH_RECT, SIZE_MAX_INPUT)
        if width_text is None:
            return
        new_h = _atoi(height_text)
        new_w = _atoi(width_text)
        self._replace_image(resize_image(self.pack, new_w, new_h))
        self.is_pencil = False
        self.is_resized = True

    def handle_click(self, pos: tuple[int, int]) -> None:
        """React to a mouse button press at window position ``pos``."""
        rects = self.rects
        if rects[Tool.PENCIL].collidepoint(pos):
            self.is_pencil = True
        if rects[Tool.FILTER].collidepoint(pos) and not self.is_resized:
            self._render(modify_image(self.pack, self.kernel, Mode.FILTER))
            self.is_pencil = False
        if rects[Tool.GROUP].collidepoint(pos):
            self.is_selection = True
        if rects[Tool.RESIZE].collidepoint(pos) and not self.is_resized:
            self._resize()
        if rects[Tool.ROTATE].collidepoint(pos):
            self._render(modify_image(self.pack, self.kernel, Mode.ROTATE))
            self.is_pencil = False
        if self.image_rect.collidepoint(pos):
            rel_x, rel_y = self._relative(pos)
            if self.is_pencil:
                color_pixel(self.pack, self.surface, self.trip, rel_x, rel_y)
                self._render(self.pack)
            if self.is_selection:
                self._selection_start = (rel_x, rel_y)
        for slot, color in enumerate(COLORS):
            if rects[NB_ICONS + slot].collidepoint(pos):
                self.trip = color_to_triplet(color)

    def _handle_release(self, pos: tuple[int, int]) -> None:
        if (not self.is_selection or self._selection_start is None
                or not self.image_rect.collidepoint(pos)):
            return
        x1, y1 = self._selection_start
        x2, y2 = self._relative(pos)
        self._replace_image(select(self.pack, x1, y1, x2, y2))
        self.is_pencil = False
        self.is_selection = False
        self._selection_start = None

    def run(self) -> None:
        """Process window events until the window is closed."""
        self.running = True
        while self.running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.handle_click(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP:
                self._handle_release(event.pos)


def main(argv: list[str] | None = None) -> int:
    """Open the editor window, asking for an image path when needed."""
    parser = argparse.ArgumentParser(prog="pixedit",
                                     description="Simple raster image editor.")
    parser.add_argument("image", nargs="?", help="image file to open")
    parser.add_argument("--icons", help="directory holding the toolbar icons")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        screen.fill(BACKGROUND)
        _present(screen)
        message_font = pygame.font.Font(None, 40)
        input_font = pygame.font.Font(None, 50)

        image: pygame.Surface | None = None
        prompted = False
        if args.image:
            try:
                image = load_bmp(args.image)
            except OSError:
                _show_message(screen, message_font, LOAD_ERROR, MESSAGE_BAR, True)
        while image is None:
            path = prompt_text(screen, PATH_RECT, PATH_MAX_INPUT, input_font)
            if path is None:
                return 1
            prompted = True
            try:
                image = load_bmp(path)
            except OSError:
                _show_message(screen, message_font, LOAD_ERROR, MESSAGE_BAR, True)

        editor = Editor(screen, image, icon_dir=args.icons)
        if prompted:
            _show_message(screen, message_font, LOAD_SUCCESS, MESSAGE_BAR, False)
            pygame.time.delay(2000)
            screen.fill(BACKGROUND, MESSAGE_BAR)
            _present(screen)
        editor.run()
        return 0
    finally:
        pygame.quit()