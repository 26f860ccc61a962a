"""
draw_manager.py
---------------
pygame render sink for the board, HUD and overlays.

Responsibilities:
- Receive per-tick snapshots from the simulation (render()).
- Receive overlay requests (present_overlay() / hide_overlay()).
- Paint the latest snapshot and overlay once per display frame (draw()).
- Cache one label sprite per falling object.
"""

import math

import pygame

from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.runtime.game_settings import Display, Layers


BACKGROUND_COLOR = (245, 240, 230)
HUD_COLOR = (186, 16, 16)
CHARACTER_COLOR = (120, 85, 60)
OBJECT_COLOR = (60, 70, 140)
TEXT_COLOR = (255, 255, 255)
OVERLAY_TINT = (0, 0, 0, 170)


class DrawManager:
    """Implements the RenderSink interface on top of a pygame surface."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, board_width, board_height, hud_height=Display.HUD_HEIGHT):
        self.board_width = board_width
        self.board_height = board_height
        self.hud_height = hud_height

        self._fonts = {}
        self._sprites = {}      # object_id -> label surface

        # Latest snapshot from the simulation
        self.character = None
        self.objects = ()
        self.score = 0
        self.time_left = 0.0

        # Active overlay: (title, message_lines, options) or None
        self.overlay = None

        DebugLogger.init_entry("DrawManager")

    def font(self, size):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def text(self, text, size, color, background=None):
        """Render text, dropping characters the default font cannot encode."""
        try:
            return self.font(size).render(text, True, color, background)
        except (pygame.error, ValueError):
            plain = text.encode("ascii", "ignore").decode().strip()
            return self.font(size).render(plain, True, color, background)

    # ===========================================================
    # RenderSink
    # ===========================================================

    def render(self, character, objects, score, time_left):
        """Store the latest simulation snapshot and refresh object sprites."""
        self.character = character
        self.objects = tuple(objects)
        self.score = score
        self.time_left = time_left

        live = set()
        for obj in self.objects:
            live.add(obj.object_id)
            if obj.object_id not in self._sprites:
                self._sprites[obj.object_id] = self._build_sprite(obj)

        for object_id in list(self._sprites):
            if object_id not in live:
                del self._sprites[object_id]

    def present_overlay(self, title, message, options):
        self.overlay = (title, list(message), dict(options))
        DebugLogger.state(f"Overlay: {title}", category="render")

    def hide_overlay(self):
        self.overlay = None

    @property
    def overlay_visible(self) -> bool:
        return self.overlay is not None

    # ===========================================================
    # Sprites
    # ===========================================================

    def _build_sprite(self, obj):
        """Render the object's label; a failure detaches its render handle."""
        try:
            return self.text(obj.label, 20, TEXT_COLOR)
        except pygame.error as e:
            DebugLogger.warn(f"Could not render sprite for {obj.label}: {e}", category="render")
            obj.handle = None
            return None

    # ===========================================================
    # Painting
    # ===========================================================

    def draw(self, surface):
        """Paint everything in layer order onto the display surface."""
        layers = (
            (Layers.BACKGROUND, self._draw_background),
            (Layers.OBJECTS, self._draw_objects),
            (Layers.CHARACTER, self._draw_character),
            (Layers.HUD, self._draw_hud),
            (Layers.OVERLAY, self._draw_overlay),
        )
        for _, painter in sorted(layers, key=lambda layer: layer[0]):
            painter(surface)

    def _board_rect(self, entity):
        return pygame.Rect(
            round(entity.x),
            round(entity.y) + self.hud_height,
            round(entity.width),
            round(entity.height),
        )

    def _draw_background(self, surface):
        surface.fill(BACKGROUND_COLOR)
        pygame.draw.rect(surface, HUD_COLOR, (0, 0, self.board_width, self.hud_height))

    def _draw_objects(self, surface):
        for obj in self.objects:
            rect = self._board_rect(obj)
            if rect.bottom < self.hud_height:
                continue
            pygame.draw.rect(surface, OBJECT_COLOR, rect, border_radius=10)
            sprite = self._sprites.get(obj.object_id)
            if sprite is not None:
                surface.blit(sprite, sprite.get_rect(center=rect.center))
        # Objects above the board top are hidden under the HUD
        pygame.draw.rect(surface, HUD_COLOR, (0, 0, self.board_width, self.hud_height))

    def _draw_character(self, surface):
        if self.character is None:
            return
        rect = self._board_rect(self.character)
        pygame.draw.rect(surface, CHARACTER_COLOR, rect, border_radius=14)
        eye_y = rect.top + rect.height // 3
        for eye_x in (rect.left + rect.width // 3, rect.right - rect.width // 3):
            pygame.draw.circle(surface, TEXT_COLOR, (eye_x, eye_y), 5)

    def _draw_hud(self, surface):
        timer = self.text(f"Time {max(math.ceil(self.time_left), 0)}", 40, TEXT_COLOR)
        score = self.text(f"Score {self.score}", 40, TEXT_COLOR)
        surface.blit(timer, timer.get_rect(midleft=(16, self.hud_height // 2)))
        surface.blit(score, score.get_rect(midright=(self.board_width - 16, self.hud_height // 2)))

    def _draw_overlay(self, surface):
        if self.overlay is None:
            return
        title, message, options = self.overlay

        tint = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        tint.fill(OVERLAY_TINT)
        surface.blit(tint, (0, 0))

        center_x = surface.get_width() // 2
        y = surface.get_height() // 3
        title_surf = self.text(title, 48, TEXT_COLOR)
        surface.blit(title_surf, title_surf.get_rect(center=(center_x, y)))

        y += 60
        for line in message:
            line_surf = self.text(line, 24, TEXT_COLOR)
            surface.blit(line_surf, line_surf.get_rect(center=(center_x, y)))
            y += 32

        label = "RESTART" if options.get("button") == "restart" else "START"
        button = self.text(f"[ {label} ]  Enter / Click", 32, HUD_COLOR, TEXT_COLOR)
        surface.blit(button, button.get_rect(center=(center_x, y + 40)))
