# arithmego

A library for short, timed arithmetic sessions. Questions are generated for
twelve operations and scored for how hard they are to work out in your head,
so a chosen difficulty tier gets questions that feel like that tier.

It has no dependencies beyond the Python standard library and supports
Python 3.10 and later.

## What is inside

- **Operations** (`arithmego.operations`): `Addition`, `Subtraction`,
  `Multiplication` and `Division` in `basic`; `Square`, `Cube`,
  `SquareRoot` and `CubeRoot` in `powers`; `Modulo`, `Factorial`,
  `Percentage` and `Power` in `advanced`. Each one has `apply`,
  `score_difficulty`, `generate` and `format` (`"5 + 3"`, `"√49"`, `"7²"`).
  `arithmego.operations.registry` holds one instance of each, found with
  `get(name)`, `all_operations()`, `by_category(...)`,
  `basic_operations()`, `power_operations()` and `advanced_operations()`.
- **Difficulty** (`arithmego.game.difficulty`): the `Difficulty` tiers
  `BEGINNER` to `EXPERT`, each accepting a band of difficulty scores between
  1 and 10; `parse_difficulty` turns a display name such as `"Hard"` into a
  tier, and unknown names give `MEDIUM`.
- **Questions** (`arithmego.game.question`, `arithmego.game.engine`):
  `Question.check_answer` returns an `AnswerResult`; `generate_question`
  picks one of several operations at random and raises `ValueError` when
  given none.
- **Scoring** (`arithmego.game.scoring`): 100 base points for a correct
  answer, scaled by difficulty (×0.5 to ×2.0), a time bonus of ×1.5 below
  two seconds decaying to ×1.0 at ten seconds, and a streak bonus that grows
  by 0.25 every five correct answers up to ×2.0. Wrong answers cost 25
  points; skips cost nothing but break the streak. Streaks have tiers
  (`StreakTier`) and milestone announcements at 5, 10, 15, 20 and 25.
- **Multiple choice** (`arithmego.game.choices`): `generate_choices`
  returns four shuffled options, three of them distractors near the real
  answer, and the index of the correct one. Non-negative answers never get
  negative distractors.
- **Sessions** (`arithmego.game.session`): `Session` keeps the timer, the
  current question, per-question `QuestionHistory`, running score and
  streaks. Durations and response times are in seconds; a custom `clock`
  function can be passed in.
- **Modes** (`arithmego.modes`): `Mode`, `ModeCategory` and the selectable
  `ALLOWED_DURATIONS` in `mode`; `register_presets()` in `registry` adds
  four single-operation sprints and three challenges mixing the four basic
  operations.
- **Storage** (`arithmego.storage`): the user `Config` (`load_config`,
  `save_config`) and session statistics (`load`, `save`, `add_session`,
  `compute_aggregates`) kept as JSON files in an `arithmego` directory under
  the user's configuration directory. `paths.set_config_dir_override`
  points both files elsewhere.

## A session in a few lines

```python
from arithmego.game.session import Session
from arithmego.modes.registry import get, register_presets

register_presets()
mode = get("mixed-operations")

session = Session(mode.operations, mode.default_difficulty, mode.default_duration)
session.start()

print(session.current.display)
session.submit_answer(session.current.answer)
session.skip()

print(session.score, session.accuracy(), session.streak_tier())
```

Call `session.tick()` to update `time_left` and `session.is_finished()` to
see whether time has run out.

## Single questions

```python
from arithmego.game.choices import generate_choices
from arithmego.game.difficulty import parse_difficulty
from arithmego.operations.registry import get

hard = parse_difficulty("Hard")
square_root = get("Square Root")
question = square_root.generate(hard)

choices, correct_index = generate_choices(question.answer, hard)
result = question.check_answer(choices[correct_index])
print(question.display, result.correct)
```

## Statistics and preferences

```python
from arithmego.storage.config import load_config
from arithmego.storage.statistics import compute_aggregates, load

config = load_config()
if config.has_last_played():
    print("Last mode:", config.last_played_mode_id)

aggregates = compute_aggregates(load())
print(aggregates.total_sessions, aggregates.overall_accuracy)
```

A missing or unparsable config file gives the defaults; a missing statistics
file gives empty statistics, while a corrupted one raises `ValueError`.
Files are written through a temporary file and a rename, so an interrupted
save never leaves a half-written file behind.

## What it does not do

This package is a library only. It has no command-line program, no
terminal screens for menus, play or statistics, and no check for newer
versions. Turning a `Session` into an interactive game, and recording its
history with `new_session_record` and `add_session`, is left to the code
that uses it.