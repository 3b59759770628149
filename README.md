# enginecore

The core runtime pieces of a small game engine. It is written in pure Python
and has no third-party dependencies.

## What is inside

- `enginecore.singleton`: `Singleton` is a base class. Each subclass gets one
  lazily created instance through `get()`, and `destroy()` discards it so that
  the next `get()` builds a new one.
- `enginecore.names`: `FName` holds interned names whose equality and hash
  ignore letter case, while `to_string()` returns the spelling that was first
  stored. The names live in a `NamePool` singleton and are keyed by 32-bit
  djb2 hashes (`hash_string`, `hash_string_lower`). A name of 256 characters
  or more is not stored and becomes the empty name `"None"`.
- `enginecore.objects`: run-time class information for engine objects.
  - `UObject.static_class()` returns a shared `UClass` whose super class
    follows the Python inheritance chain.
  - `UObject.is_a` and `UClass.is_child_of` test class relationships.
  - `UClass.default_object()` builds the class default object on first use.
  - `cast` returns the object or `None`. `cast_checked` raises `ValueError`
    for `None` and `TypeError` for a mismatch.
  - `iterate_objects(objects, cls)` yields a snapshot of the matching objects
    from a mapping or an iterable.
- `enginecore.delegates`:
  - `Delegate` holds at most one function, which you attach with `bind` and
    can call with `execute` or `execute_if_bound`. Calling `execute` while
    nothing is bound raises `UnboundDelegateError`.
  - `MulticastDelegate` collects functions through `add`, which returns a
    `DelegateHandle`. `remove(handle)` takes one out, and `broadcast` calls
    every function that was added before the broadcast began.
- `enginecore.show_flags`: `EngineShowFlags` is a 64-bit flag set in which
  every bit starts enabled. It supports get, set and toggle of single flags,
  and lookup by the names `"Primitives"` and `"BillboardText"`. The module
  also defines `EngineShowFlag` and `EndPlayReason`.
- `enginecore.stats`: `StatGroupManager` controls the statistics panel
  through `enable_stat`, `disable_stat` and `is_stat_enabled`. It also tracks
  named groups, starting with `FPS` and `Memory`, both disabled.
- `enginecore.view_mode`: `ViewMode` records the current `ViewModeIndex`.
  After `initialize()` it is set to `DEFAULT`, and `current_rasterizer()`
  behaves as follows:
  - `DEFAULT` returns `None`, because no override applies.
  - `SOLID` returns the solid `RasterizerDesc`.
  - `WIREFRAME` returns the wireframe `RasterizerDesc`.
- `enginecore.console`: `DebugConsole` keeps a list of log lines (`items`)
  and an input history that you step through with `history_previous` and
  `history_next`. `submit` records a typed line and runs it as a command. The
  commands are `help`, `clear`, `stat fps`, `stat memory` and `stat clear`,
  and anything else is logged as unknown. `resize_to_screen` rescales a
  window position or size after the screen ratio changes.
- `enginecore.font_atlas`: `FontAtlas.load(path)` and
  `FontAtlas.from_lines(lines)` read a plain-text glyph table into
  `GlyphInfo` UV rectangles. The table consists of `KEY value` settings and
  `index unicode` entries. `get_glyph` returns an all-zero glyph for
  characters that are not in the table.
- `enginecore.debug_draw`: `DebugDrawManager` gathers lines into `vertices`
  (`LineVertex`) and `indices` (two per line). `draw_line` adds one line and
  `draw_aabb_box` adds the twelve edges of a box. `clear()` empties both
  lists.
- `enginecore.scene_io`: `save_scene(world_info)` writes a `WorldInfo` and
  its `ObjectInfo` list to `<scene_name>.scene` as JSON. A scene with no name
  is not written. `load_scene(scene_name)` reads that file back and orders
  the actors by their UUID key strings. It raises `FileNotFoundError` when
  the file is missing.

## Example

```python
from enginecore.names import FName
from enginecore.delegates import MulticastDelegate
from enginecore.console import DebugConsole

assert FName("Player") == FName("player")

on_spawn = MulticastDelegate()
handle = on_spawn.add(lambda: print("spawned"))
on_spawn.broadcast()
on_spawn.remove(handle)

console = DebugConsole()
console.submit("help")
print("\n".join(console.items))
```

## What it does not do

This package contains no renderer, window or GPU code, and it has no command
of its own.

- `DebugDrawManager` only collects line geometry. Drawing it is left to you.
- `ViewMode` describes rasterizer settings but does not apply them.
- `DebugConsole` keeps its log and history in memory without displaying
  anything on screen.
- The statistics groups are flags only. Measuring frame rate or memory is
  left to you.
- The scene files store actor transforms, type names and mesh asset paths.
  Nothing here creates actors from them.

## Running the tests

```
pip install -e ".[test]"
pytest
```