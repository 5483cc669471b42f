import pygame
import pytest

from lucklyst import settings
from lucklyst.graphics import BLACK, BLUE, WHITE, Graphics


@pytest.fixture
def gfx():
    pygame.font.init()
    graphics = Graphics(font_path=None)
    graphics.screen = pygame.Surface((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT))
    yield graphics
    pygame.font.quit()


def _pixels(surface, rect):
    return [surface.get_at((x, y)) for x in range(rect.left, rect.right) for y in range(rect.top, rect.bottom)]


def test_load_texture_missing_file_returns_none(gfx, tmp_path):
    assert gfx.load_texture(str(tmp_path / "missing.png")) is None


def test_load_texture_reads_saved_image(gfx, tmp_path):
    image = pygame.Surface((12, 7))
    image.fill((10, 20, 30))
    path = tmp_path / "image.png"
    pygame.image.save(image, str(path))
    loaded = gfx.load_texture(str(path))
    assert loaded.get_size() == (12, 7)
    assert loaded.get_at((3, 3))[:3] == (10, 20, 30)


def test_render_text_draws_at_position(gfx):
    area = gfx.render_text("Hello", 10, 10, WHITE)
    assert area.topleft == (10, 10)
    assert area.width > 0
    assert WHITE in _pixels(gfx.screen, area)


def test_render_text_empty_draws_nothing(gfx):
    assert gfx.render_text("", 10, 10, WHITE) is None
    assert gfx.screen.get_at((10, 10)) == BLACK


def test_render_text_missing_font_draws_nothing(tmp_path):
    pygame.font.init()
    try:
        graphics = Graphics(font_path=str(tmp_path / "nofont.ttf"))
        graphics.screen = pygame.Surface((100, 100))
        assert graphics.render_text("Hello", 0, 0, WHITE) is None
        assert all(pixel == BLACK for pixel in _pixels(graphics.screen, graphics.screen.get_rect()))
    finally:
        pygame.font.quit()


def test_render_button_fills_and_outlines(gfx):
    rect = pygame.Rect(320, 270, 100, 40)
    gfx.render_button(rect, BLUE, "SUBMIT")
    assert gfx.screen.get_at((rect.x, rect.y)) == BLACK
    assert gfx.screen.get_at((rect.right - 1, rect.bottom - 1)) == BLACK
    assert gfx.screen.get_at((rect.right - 3, rect.bottom - 3)) == BLUE


def test_render_replay_button_uses_replay_rect(gfx):
    gfx.render_replay_button()
    rect = gfx.replay_btn
    assert rect == pygame.Rect(340, 500, 120, 50)
    assert gfx.screen.get_at((rect.right - 3, rect.bottom - 3)) == BLUE
    assert gfx.screen.get_at((rect.x - 1, rect.y)) == BLACK


def test_init_and_quit_with_dummy_display(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    pygame.display.init()
    pygame.font.init()
    graphics = Graphics(font_path=None)
    graphics.init()
    assert graphics.screen.get_size() == (settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT)
    assert pygame.display.get_caption()[0] == "Lucklyst"
    assert graphics.fruit_textures == [None, None, None]
    assert graphics.bg_texture is None
    assert graphics.font is not None
    graphics.quit()
    assert graphics.screen is None
    assert not pygame.get_init()