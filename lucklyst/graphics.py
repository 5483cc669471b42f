"""Window, loaded assets and basic drawing primitives."""

from __future__ import annotations

import pygame

from . import settings

BLACK = pygame.Color(0, 0, 0, 255)
WHITE = pygame.Color(255, 255, 255, 255)
GREY = pygame.Color(120, 120, 120, 255)
BLUE = pygame.Color(0, 120, 255, 255)
RED = pygame.Color(255, 80, 80, 255)

DEFAULT_TEXT_SIZE = 20
WINDOW_TITLE = "Lucklyst"


def display_ready() -> bool:
    """Return True when a display window exists."""
    return pygame.display.get_init() and pygame.display.get_surface() is not None


def _load_sound(path):
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError):
        return None


def _music_available(path) -> bool:
    try:
        pygame.mixer.music.load(path)
    except (pygame.error, OSError):
        return False
    return True


class Graphics:
    """Owns the window, the fonts and the game's images and sounds."""

    black = BLACK
    white = WHITE
    grey = GREY
    blue = BLUE
    red = RED

    def __init__(self, font_path=settings.FONT_PATH):
        self.font_path = font_path
        self.screen = None
        self.font = None
        self.bg_texture = None
        self.tree_texture = None
        self.fruit_textures = []
        self.drop_sound = None
        self.fall_sound = None
        self.bg_music = None
        self.replay_btn = pygame.Rect(340, 500, 120, 50)
        self._fonts = {}

    def init(self):
        """Open the window and load every asset; missing assets become None."""
        self.screen = pygame.display.set_mode(
            (settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = self._open_font(DEFAULT_TEXT_SIZE)

        self.bg_texture = self.load_texture(settings.BG_PATH)
        self.tree_texture = self.load_texture(settings.TREE_PATH)
        self.fruit_textures = [self.load_texture(path) for path in settings.FRUIT_PATHS]

        self.drop_sound = _load_sound(settings.DROP_SOUND)
        self.fall_sound = _load_sound(settings.FALL_SOUND)
        self.bg_music = settings.BG_MUSIC if _music_available(settings.BG_MUSIC) else None

    def quit(self):
        """Release every asset and shut pygame down."""
        self.fruit_textures = []
        self.bg_texture = None
        self.tree_texture = None
        self.drop_sound = None
        self.fall_sound = None
        self.bg_music = None
        self.font = None
        self._fonts.clear()
        self.screen = None

        pygame.mixer.quit()
        pygame.font.quit()
        pygame.quit()

    def load_texture(self, path):
        """Load an image, or return None if it cannot be read."""
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError):
            return None
        if display_ready():
            return image.convert_alpha()
        return image

    def _open_font(self, size):
        if size not in self._fonts:
            try:
                self._fonts[size] = pygame.font.Font(self.font_path, size)
            except (pygame.error, OSError):
                self._fonts[size] = None
        return self._fonts[size]

    def render_text(self, text, x, y, color, size=DEFAULT_TEXT_SIZE):
        """Draw text with its top-left at (x, y); return the drawn area or None."""
        font = self._open_font(size)
        if font is None or not text:
            return None
        surface = font.render(text, False, color)
        return self.screen.blit(surface, (x, y))

    def render_button(self, rect, color, label):
        """Draw a filled, outlined button with a white label."""
        rect = pygame.Rect(rect)
        self.screen.fill(color, rect)
        self.render_text(label, rect.x + 10, rect.y + 8, WHITE)
        pygame.draw.rect(self.screen, BLACK, rect, 1)

    def render_replay_button(self):
        """Draw the button that starts a new round."""
        self.render_button(self.replay_btn, BLUE, "Replay")