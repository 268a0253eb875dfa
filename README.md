# questmenu

A small game menu in a 600 × 1000 window. A row of six image buttons along
the bottom edge switches between the Quest, Tasks, Story, Hunting, Colection
and Tent screens. Each screen has its own background colour and title. The
Quest screen is shown at start and also draws a yellow panel.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
questmenu
```

By default every button is drawn from `Graphics/menu_button.png`, resolved
relative to the working directory. Another image can be given with `--image`:

```
questmenu --image path/to/button.png
```

The image is scaled to 30 % of its size. Left-click a button to open its
screen. Close the window or press Escape to quit. If the image file does not
exist, the command stops with `FileNotFoundError`.

## Using the pieces

- `questmenu.button.Button(image_path, position, scale)` loads an image and
  scales it by `scale`. It raises `FileNotFoundError` if the file is missing
  and `ValueError` if `scale` is negative. `draw(surface)` blits it at
  `position`; `contains(point)` tells whether a point lies inside it (right
  and bottom edges excluded); `is_pressed(mouse_pos, mouse_pressed)` is true
  when `mouse_pressed` is set and the mouse is inside. `width` and `height`
  give the scaled size.
- `questmenu.quest.Quest().draw(surface)` paints the Quest screen: a purple
  background, the title and a yellow panel.
- `questmenu.app.MenuState` lists the screens: `NONE`, `QUESTS`, `TASKS`,
  `STORY`, `HUNTING`, `COLLECTION` and `TENT`.
- `questmenu.app.select_menu_state(buttons, mouse_pos, mouse_pressed, current)`
  takes a mapping of states to buttons in priority order and returns the
  `MenuState` of the first pressed button, or `current` if none was pressed.
- `questmenu.app.draw_screen(surface, state, quest)` paints the screen for a
  `MenuState`; `NONE` and `QUESTS` draw the Quest screen.
- `questmenu.app.main(argv=None)` runs the window and returns 0 when it is
  closed.

## What it does not do

The screens other than Quest show only a coloured background and a title;
there is no game content behind them, and nothing is saved between runs.