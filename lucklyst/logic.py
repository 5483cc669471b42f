"""Game state: customer entry form, the shaking tree and falling fruit."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import NamedTuple

import pygame

from . import settings
from .graphics import BLACK, BLUE, RED, WHITE, display_ready

TREE_RECT = pygame.Rect(300, 80, 200, 300)
FRUIT_SIZE = 40
GROUND_Y = 550
SHAKE_FRAMES = 10
SHAKE_OFFSET = 5
SHAKE_DELAY_MS = 30
ROW_HEIGHT = 30

ACTIVE_FIELD_COLOR = pygame.Color(200, 100, 100, 255)
INACTIVE_FIELD_COLOR = pygame.Color(100, 100, 100, 255)
ROW_COLOR = pygame.Color(200, 200, 200, 255)

FIELD_LABELS = (
    ("Name", 380, 105),
    ("ID Number", 360, 145),
    ("Date of Birth", 340, 185),
    ("Account Number", 320, 225),
)


class _Branch(NamedTuple):
    min_x: int
    max_x: int
    min_y: int
    max_y: int


BRANCHES = (
    _Branch(330, 370, 90, 110),
    _Branch(310, 390, 130, 160),
    _Branch(280, 420, 180, 210),
)


@dataclass
class InputField:
    """One text box of the customer form."""

    rect: pygame.Rect
    text: str = ""
    active: bool = False


@dataclass
class Customer:
    """A participant in the draw."""

    name: str
    id_number: str = ""
    date_of_birth: str = ""
    account_number: str = ""


@dataclass
class Fruit:
    """A fruit hanging on the tree, carrying one customer's name."""

    texture: object
    rect: pygame.Rect
    speed: float
    customer_name: str
    falling: bool = False
    landed: bool = False


def _blit(gfx, texture, rect):
    if texture is None or gfx.screen is None:
        return
    gfx.screen.blit(pygame.transform.scale(texture, rect.size), rect.topleft)


def _present():
    if display_ready():
        pygame.display.flip()


def _play_sound(sound):
    if sound is not None and pygame.mixer.get_init():
        sound.play()


def _play_music(gfx):
    if gfx.bg_music is None or not pygame.mixer.get_init():
        return
    try:
        pygame.mixer.music.load(gfx.bg_music)
    except (pygame.error, OSError):
        return
    pygame.mixer.music.play(-1)


def _halt_music():
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()


@dataclass
class GameLogic:
    """Holds the form, the customers and the fruit, and reacts to events."""

    input_fields: list = field(default_factory=list)
    customers: list = field(default_factory=list)
    fruits: list = field(default_factory=list)
    current_input: int = 0
    in_game: bool = False
    tree_shaking: bool = False
    show_cursor: bool = True
    last_cursor_toggle: int = 0
    current_customer_shown: str = ""
    show_name_start_time: int = 0
    add_btn: pygame.Rect = field(default_factory=lambda: pygame.Rect(320, 270, 100, 40))
    play_btn: pygame.Rect = field(default_factory=lambda: pygame.Rect(440, 270, 100, 40))
    rng: random.Random = field(default_factory=random.Random)

    def init_input(self):
        """Create the four form fields, the first one focused."""
        self.input_fields = [
            InputField(pygame.Rect(500, top, 200, 30)) for top in (100, 140, 180, 220)
        ]
        self.input_fields[0].active = True

    def toggle_cursor(self, now=None):
        """Flip cursor visibility once the blink interval has passed."""
        if now is None:
            now = pygame.time.get_ticks()
        if now - self.last_cursor_toggle >= settings.CURSOR_BLINK_INTERVAL:
            self.show_cursor = not self.show_cursor
            self.last_cursor_toggle = now

    def start_game(self, gfx):
        """Shuffle the customers and hang one fruit per customer on the tree."""
        self.in_game = True
        self.tree_shaking = True
        self.fruits.clear()
        if not self.customers:
            return

        self.rng.shuffle(self.customers)
        for customer in self.customers:
            texture = self.rng.choice(gfx.fruit_textures)
            branch = self.rng.choice(BRANCHES)
            x = self.rng.randrange(branch.min_x, branch.max_x)
            y = self.rng.randrange(branch.min_y, branch.max_y)
            self.fruits.append(
                Fruit(texture, pygame.Rect(x, y, FRUIT_SIZE, FRUIT_SIZE), 0.0, customer.name)
            )
        _play_music(gfx)

    def update_fruits(self, gfx):
        """Shake the tree once to drop a fruit, then move falling fruit."""
        if self.tree_shaking:
            _play_sound(gfx.drop_sound)
            for frame in range(SHAKE_FRAMES):
                offset = SHAKE_OFFSET if frame % 2 == 0 else -SHAKE_OFFSET
                _blit(gfx, gfx.tree_texture, TREE_RECT.move(offset, 0))
                _present()
                pygame.time.delay(SHAKE_DELAY_MS)
            waiting = next(
                (fruit for fruit in self.fruits if not fruit.falling and not fruit.landed),
                None,
            )
            if waiting is not None:
                waiting.falling = True
                waiting.speed = 2.0 + self.rng.randrange(3)
            self.tree_shaking = False

        for fruit in self.fruits:
            if fruit.falling and not fruit.landed:
                fruit.rect.y += int(fruit.speed)
                if fruit.rect.y >= GROUND_Y:
                    fruit.landed = True
                    fruit.falling = False
                    self.current_customer_shown = fruit.customer_name
                    self.show_name_start_time = pygame.time.get_ticks()
                    _halt_music()
                    _play_sound(gfx.fall_sound)

    def render_game(self, gfx):
        """Draw the tree, the fruit and, once one has landed, the winner."""
        _blit(gfx, gfx.bg_texture, gfx.screen.get_rect())
        _blit(gfx, gfx.tree_texture, TREE_RECT)
        for fruit in self.fruits:
            _blit(gfx, fruit.texture, fruit.rect)

        if self.current_customer_shown:
            gfx.render_text("Congratulations! " + self.current_customer_shown, 180, 420, RED, 32)
            gfx.render_replay_button()

    def render_input_field(self, field, gfx):
        """Draw one text box, with a blinking cursor when it has focus."""
        color = ACTIVE_FIELD_COLOR if field.active else INACTIVE_FIELD_COLOR
        gfx.screen.fill(color, field.rect)
        gfx.render_text(field.text, field.rect.x + 5, field.rect.y + 5, WHITE)

        if field.active and self.show_cursor:
            text_width = gfx.font.size(field.text)[0] if gfx.font is not None else 0
            cursor_x = field.rect.x + 5 + text_width
            pygame.draw.line(
                gfx.screen,
                WHITE,
                (cursor_x, field.rect.y + 5),
                (cursor_x, field.rect.bottom - 5),
            )
        pygame.draw.rect(gfx.screen, BLACK, field.rect, 1)

    def render_customer_table(self, gfx, x, y):
        """Draw the list of entered customers with a header row."""
        headers = ("Name", "ID Number", "Date of Birth", "Account Number")
        columns = (0, 160, 320, 500)
        for header, offset in zip(headers, columns):
            gfx.render_text(header, x + offset, y, BLACK)
        pygame.draw.line(gfx.screen, BLACK, (x - 5, y + 25), (x + 700, y + 25))

        for row_number, customer in enumerate(self.customers, start=1):
            row_y = y + row_number * ROW_HEIGHT
            gfx.screen.fill(ROW_COLOR, pygame.Rect(x - 5, row_y - 5, 700, ROW_HEIGHT))
            values = (
                customer.name,
                customer.id_number,
                customer.date_of_birth,
                customer.account_number,
            )
            for value, offset in zip(values, columns):
                gfx.render_text(value, x + offset, row_y, BLACK)

    def render_input_ui(self, gfx):
        """Draw the customer form, its buttons and the customer table."""
        _blit(gfx, gfx.bg_texture, gfx.screen.get_rect())
        for label, x, y in FIELD_LABELS:
            gfx.render_text(label, x, y, BLACK)
        for input_field in self.input_fields:
            self.render_input_field(input_field, gfx)
        gfx.render_button(self.add_btn, BLUE, "SUBMIT")
        gfx.render_button(self.play_btn, RED, "PLAY")
        self.render_customer_table(gfx, 80, 340)

    def _clear_fields(self):
        for input_field in self.input_fields:
            input_field.text = ""

    def handle_input_event(self, event, gfx):
        """React to a mouse click, typed text or a key press."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            mouse = event.pos
            if not self.in_game and self.add_btn.collidepoint(mouse):
                if self.input_fields[0].text:
                    self.customers.append(
                        Customer(*(input_field.text for input_field in self.input_fields))
                    )
                    self._clear_fields()
            elif not self.in_game and self.play_btn.collidepoint(mouse):
                self.start_game(gfx)
            elif self.in_game and gfx.replay_btn.collidepoint(mouse):
                self.in_game = False
                self.current_customer_shown = ""
                self.fruits.clear()
                self.customers.clear()
                self._clear_fields()
                _halt_music()
        elif not self.in_game and event.type == pygame.TEXTINPUT:
            self.input_fields[self.current_input].text += event.text
        elif not self.in_game and event.type == pygame.KEYDOWN:
            current = self.input_fields[self.current_input]
            if event.key == pygame.K_BACKSPACE and current.text:
                current.text = current.text[:-1]
            elif event.key == pygame.K_TAB:
                current.active = False
                self.current_input = (self.current_input + 1) % len(self.input_fields)
                self.input_fields[self.current_input].active = True