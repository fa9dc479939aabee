# pianodaw

A small digital audio workstation built on pygame. It opens a main window
with a song roll of regions, an instrument list, a control bar with play and
stop buttons, and an editor panel that names the selected region or
instrument. Clicking a region opens a piano roll editor for its notes.

The piano roll supports microtonal grids: the number of notes per octave can
be changed at any time (from 1 to 128), and each note remembers the
temperament it was created in. Note positions and pitches are kept as
fractions (`pianodaw.fract.Fract`).

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
pianodaw [PROJECT]
```

This opens the main window and starts audio output through the pygame mixer.
`PROJECT` is an optional path to a JSON project file. If the file exists, its
tempo and regions (with their notes) are loaded; when the program exits, the
tempo and regions are written back to that path. Without a path nothing is
loaded or saved.

The main font is read from `assets/fonts/Arial.ttf`, relative to the current
directory. If it cannot be opened, `pianodaw` prints `could not load fonts`
and exits with status 1. It also exits with status 1 if the audio device
cannot be opened.

## Using the editors

In the main window:

- Left-click a region in the song roll to open it in a piano roll and show
  it in the editor panel.
- Left-click an instrument in the instrument list to show it in the editor
  panel.
- The play button starts the transport; the stop button stops it and
  rewinds to the start. The play head moves with the transport.

In the piano roll:

- Left-click an empty cell to the right of the keyboard to create a note one
  bar long; press on a note and drag to move it by whole grid cells.
- Right-click a note, or move over notes with the right button held, to
  delete them.
- The minus and equals keys lower and raise the number of notes per octave.
- Mouse wheel scrolls vertically; Shift + wheel scrolls horizontally.
- Ctrl + wheel zooms horizontally, Alt + wheel zooms vertically.

The focused piano roll is drawn over the main window; closing the window
while no editor is found for the close request ends the program.

## Using it as a library

The model classes can be used without opening any window:

```python
from pianodaw.fract import Fract
from pianodaw.project import Project

project = Project("")
region = project.create_region(Fract(1, 1), 2)
region.move_x(Fract(1, 2))
region.resize(True, Fract(1, 1))

project.play()
project.stop()
```

A new `Project` holds one mixer track, one instrument routed into it and,
unless regions were loaded from a file, one empty region.
`pianodaw.audio.AudioManager.callback(frames)` renders that many samples
from the first mixer track while the project is playing, advancing
`project.time_seconds`, and silence otherwise.

## What it does not do

- Instruments and racks do not load sound plugins. A `Plugin` only records
  its file path; every plugin in a rack renders a fixed sine test tone, so
  playback produces that tone rather than the notes of the regions.
- Notes are not sent anywhere: `MidiRouter` and `EventManager.tick` do no
  routing or scheduling.
- The song roll draws regions at fixed positions; its wheel handling updates
  scroll and zoom values that the drawing does not use.
- The project file stores only the tempo and the regions, not instruments,
  mixer tracks or routing.