# pyramid-quest

A small text adventure for the terminal. You walk into a completely unexplored
pyramid and answer nine questions along the way. The story can end in five
ways: basic, good, bad, and two secret endings (death and lost). Every ending
you reach is recorded in a save directory, so you can keep track of how many
you have unlocked.

The game can be played in English or Italian.

## Installing

```
pip install .
```

## Playing

```
pyramid-quest
```

Command-line options:

- `--saves DIR` – directory holding the ending records (default `code/saves`).
- `--language {en,it}` – language to start in (default `en`).
- `--no-clear` – never clear the terminal between screens.

The main menu offers:

1. **New Game** – asks for confirmation, resets every recorded ending to 0 and
   starts a run from scratch.
2. **Continue** – starts another run without touching the recorded endings.
   The menu shows how many of the five you have found (or `-1` if a record
   file is missing). Answers and secret-ending flags from an earlier run in
   the same session are not forgotten.
3. **Options** – `1` lists which endings are completed, `2` changes the
   language between Italiano and English, `3` deletes your saves, `0` goes
   back to the main menu.
4. **Quit**.

Answer each question by typing `1` or `2` and pressing ENTER. Anything else is
rejected and the question is asked again.

One question is on a timer: you have 10 seconds to answer it. Take longer and
you are crushed, get a three-second countdown, and the question is asked again.

At the end of a run the game shows which ending you reached and how many of the
five endings are unlocked, then thanks you and returns to the main menu.
Reaching the end of input or pressing Ctrl+C leaves the game.

## Save files

Each ending has its own file in the save directory: `normal.txt`, `good.txt`,
`bad.txt`, `death.txt` and `lost.txt`. A file holds `1` once its ending has
been reached and `0` otherwise.

## Using it from Python

- `pyramid_quest.app.run(console, store, texts)` runs the menu and game loop.
- `pyramid_quest.console.Console` wraps the input, output and error streams.
- `pyramid_quest.saves.SaveStore(directory)` reads, records and wipes endings.
- `pyramid_quest.game.Adventure` plays one run; `play()` returns the `Ending`.
- `pyramid_quest.endings.sort_ending(state)` decides the ending from a
  `GameState`.
- `pyramid_quest.languages.texts_for("en")` / `texts_for("it")` return the
  text tables.

## What it does not do

The game does not create the save directory. If it does not exist, recording
an ending silently does nothing, the unlocked count shows `-1`, and New Game
reports that the saves could not be deleted. Create the directory (for example
`mkdir -p code/saves`) and choose New Game once to create the record files.

## Running the tests

```
pip install ".[test]"
pytest
```