# lucklyst

A small lucky-draw game. You type in a list of customers and press **PLAY**.
The tree then shakes. One fruit per customer hangs from its branches. The
first fruit to reach the ground picks the winner, and the game shows
"Congratulations!" with that customer's name.

## Installing

```
pip install .
```

This also installs `pygame`, which the game uses for the window, images,
text and sound.

## Running

```
lucklyst
```

The command takes no options apart from `--help`. It opens an 800×600 window
and runs until the window is closed.

The game loads its font, pictures and sounds from paths relative to the
current working directory:

- `font arial/arial.ttf`
- `asset/download.jpg` (background), `asset/200px-Tree_SMO.png` (tree)
- `asset/apple.png`, `asset/blackberry.png`, `asset/strawberry.png` (fruits)
- `asset/axe_tree_leaves.mp3`, `asset/thud.wav`, `asset/invincible_loop.wav` (sounds)

The game does not stop if one of these files is missing. That picture or
sound is left out. Without the font, no text is drawn.

## Playing

1. On the entry screen, fill in **Name**, **ID Number**, **Date of Birth**
   and **Account Number**. Press **Tab** to move to the next field; after
   the last field it goes back to the first. Press **Backspace** to delete a
   character.
2. Click **SUBMIT** to add the customer to the table and clear the fields.
   A customer is added only if the name is filled in.
3. Add as many customers as you like, then click **PLAY**. The customers are
   shuffled, and each one gets a fruit placed at random on one of the
   tree's branches.
4. The tree shakes once and the first fruit starts to fall. When it lands,
   the winner's name is shown along with a **Replay** button.
5. Click **Replay** to clear the customers and the fields and go back to the
   entry screen.

Customers are kept only in memory. They are not saved between runs.

## Using it from Python

- `lucklyst.app.main(argv=None)` runs the whole game loop.
- `lucklyst.graphics.Graphics` holds the window, the fonts and the loaded
  images and sounds. `init()` opens the window and `quit()` shuts pygame
  down. `render_text`, `render_button` and `render_replay_button` draw onto
  the window.
- `lucklyst.logic.GameLogic` holds the game state: `input_fields`,
  `customers`, `fruits` and `in_game`. Call `init_input()` to create the
  form. `handle_input_event(event, gfx)` reacts to pygame mouse, text and
  key events. `start_game(gfx)` hangs the fruit, and `update_fruits(gfx)`
  moves them each frame. `toggle_cursor(now=None)` makes the text cursor
  blink. Its `rng` attribute is a `random.Random`; seed it to get a
  repeatable draw.
- `lucklyst.logic.Customer`, `InputField` and `Fruit` are the dataclasses
  that `GameLogic` works with.
- `lucklyst.settings` contains the window size, the asset paths and the
  cursor blink interval.

## Running the tests

```
pip install .[test]
pytest
```