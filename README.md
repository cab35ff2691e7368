# qrforge

qrforge lays out the module grid of QR code, Micro QR code and rMQR code
symbols. It does the following:

- places the finder, alignment, timing, format-information and
  version-information patterns;
- fills the free modules with data and error-correction codewords that you
  supply;
- applies one of the standard mask patterns, or picks the mask with the lowest
  penalty score.

The package is pure Python. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from qrforge.types import EcLevel, Version
from qrforge.canvas import Canvas
from qrforge.masking import MaskPattern
from qrforge.penalty import apply_best_mask

canvas = Canvas(Version.normal(1), EcLevel.L)
canvas.draw_all_functional_patterns()
canvas.draw_data(b"data_here", b"ec_code_here")

# Apply a specific mask to a copy...
fixed = canvas.copy()
fixed.apply_mask(MaskPattern.CHECKERBOARD)

# ...or get a masked copy that uses the lowest-penalty mask.
best = apply_best_mask(canvas)
colors = best.colors()   # Color.DARK / Color.LIGHT, row by row
```

Use `Version.micro(n)` for Micro QR versions 1 to 4. Use
`Version.rect_micro(height, width)` for rMQR versions. If a version does not
exist, the constructor raises `InvalidVersion`. `InvalidVersion` is a subclass
of both `QrError` and `ValueError`.

On an rMQR canvas the version information depends on the level. Level M is
drawn one way, and every other level is drawn as H. A Micro QR symbol allows
only some mask patterns and levels, and `format_info_number` raises `QrError`
for the rest.

`Canvas.get` and `Canvas.put` accept negative coordinates. These count back from
the right or bottom edge.

`Canvas.to_debug_str()` draws the grid as text, which helps when you inspect a
layout:

| char | module                          |
|------|---------------------------------|
| `?`  | empty                           |
| `#`  | dark, functional or masked      |
| `.`  | light, functional or masked     |
| `*`  | dark, unmasked data             |
| `-`  | light, unmasked data            |

Call `to_debug_str(merge_masked=True)` to draw unmasked data with `#` and `.`
as well.

## Modules

- `qrforge.types` has `Version`, `VersionKind`, `EcLevel`, `Color`, `QrError`
  and `InvalidVersion`.
- `qrforge.patterns` has `alignment_positions` and `is_functional`. It also has
  `data_module_coords`, which gives the order in which data modules are filled.
  `is_functional` does not support rMQR codes.
- `qrforge.masking` has `MaskPattern`, `mask_function`, `format_info_number`
  and `patterns_for`.
- `qrforge.canvas` has `Module` and `Canvas`.
- `qrforge.penalty` has the penalty scores (adjacent runs, 2x2 blocks,
  finder-like patterns, dark/light balance and Micro QR light sides),
  `total_penalty_score` and `apply_best_mask`.

## What it does not do

qrforge does not turn text or bytes into codewords, and it does not compute
Reed–Solomon error-correction codewords. Both must be supplied to
`Canvas.draw_data`. qrforge also does not render a finished symbol to an image,
an SVG, or a terminal. The result is a list of `Color` values that you turn
into output yourself. It has no command-line interface.