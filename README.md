# vnreg

vnreg is the core of a small visual-novel engine. It reads scripts
written in the `.reg` format, splits them into blocks, and turns each
block into a render block: what should change on screen and in the
speakers when the player advances the story (background, character
figure, dialogue, voice line and background music). It also maps asset
names to files and plays audio through pygame.

## Installation

Install the package with pip from a checkout of this repository, then
import `vnreg` from Python. pygame is installed as a dependency.

## The `.reg` script format

A script is a series of blocks separated by blank lines. Each block is
one step of the story: everything in it takes effect together.

```
%version 1

@bg school_gate.png
@bgm morning.ogg

@fg alice|near|body_01|smile|0
@voice alice_001.ogg
Alice “Good morning!”
```

Lines inside a block (leading and trailing spaces are ignored):

| Line                                       | Parsed as                                   |
|--------------------------------------------|---------------------------------------------|
| `%version 1`                               | Version check; the block yields no commands |
| `@bg <file>`                               | `SetBackground`                             |
| `@bgm <file>`                              | `PlayBgm`                                   |
| `@voice <file>`                            | `PlayVoice`                                 |
| `@fg name\|distance\|body\|face\|position` | `Figure`                                    |
| `@jump <label>`                            | `Jump`                                      |
| `@label <name>`                            | `Label`                                     |
| `# ...`                                    | Comment, ignored                            |
| `Speaker “text”`                           | `Dialogue`; the rest of the block is ignored |

A `%version` line ends its block at once, whatever follows it. Any
other line is a parse error that reports its line number and content.

## Parsing and stepping through a script

```python
from vnreg.parser import parse_script
from vnreg.executor import execute_script

with open("story.reg", encoding="utf-8") as fh:
    script = parse_script(fh.read())

while (block := execute_script(script)) is not None:
    if block.background:
        print("background:", block.background)
    if block.dialogue:
        speaker, text = block.dialogue
        print(f"{speaker}: {text}")
```

- `vnreg.parser.parse_script(text)` returns a `vnreg.script.Script`.
  `parse_block(lines)` parses one block given as `(line number, text)`
  pairs and returns a tuple of commands.
- `Script.next_command()` removes and returns the next block, or `None`
  when none are left; `len(script)` gives how many blocks remain.
- `vnreg.executor.execute_script(script)` skips empty blocks, folds the
  next block into a `RenderBlock` and returns `None` once the script is
  finished. `RenderBlock` has the fields `dialogue` (a `(speaker, text)`
  pair), `background`, `bgm`, `voice` and `figure` (a
  `(name, distance, body, face, position)` tuple); a field left at
  `None` means "unchanged". `apply_command(command, block)` records one
  command in a block.

## Errors

All failures derive from `vnreg.errors.EngineError`. Parsing problems
raise a subclass of `vnreg.errors.ParserError`:

- `InvalidCommand` – an unknown `@` command, or an `@` or `%` line
  without an argument
- `MalformedDialogue` – dialogue without a closing `”`
- `UnknownLine` – a line that fits no known form, or a `%` directive
  other than `version`
- `EmptyBlock` – a block containing only comments
- `UnsupportedVersion` – a `%version` other than 1
- `FigureTooShort` – an `@fg` line with fewer than five fields

Line errors carry `line` and `content` attributes; `EmptyBlock` carries
`line`, and `UnsupportedVersion` carries `need` and `indeed`.

## Assets and audio

`vnreg.assets` maps names used in scripts to files under `./source/`:

- `background_path(name)` → `./source/background/<name>`
- `figure_paths(name, distance, body, face)` → the body and face images
  `./source/figure/<name>/<distance>/<body>.png` and `.../<face>.png`
- `voice_path(name)` → `./source/voice/<name>`
- `bgm_path(name)` → `./source/bgm/<name>`
- `mix_volume(main, channel)` combines two volumes given in percent into
  one gain: `(main / 100) * (channel / 100)`.

`vnreg.player.Player` plays one sound at a time; starting a new one
stops the previous one. `play_loop(path, volume)` repeats a sound
without end, `play_voice(path, volume)` plays it once, and
`change_volume(volume)` and `stop()` act on the current sound. The
`playing` property tells whether a sound is active. By default the
pygame mixer is opened; any object with a compatible `Sound` factory can
be passed as `Player(mixer=...)`.

## What the package does not do

vnreg has no game window and no command to run a story. It produces
render blocks and plays audio, but drawing backgrounds, figures and
dialogue, and reacting to clicks, are left to the program that uses it.
`Jump`, `Label` and `Choice` commands are parsed or defined but have no
effect when a script is executed, and the parser never produces
`Choice`.

## Running the tests

Install the `test` extra and run pytest from the repository root.