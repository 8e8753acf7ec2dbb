# avatarface

Draw small animated cartoon faces. A face is made of parts (eyes, eyebrows,
mouth), each placed by a `BoundingRect` on a 320×240 canvas, plus overlays
for a speech balloon, an expression mark and a battery icon. An `Avatar`
holds the expression, gaze, blink, breath and mouth state; a
`FacialDriver` moves the gaze, blinks and breathes over time; and each
frame can be rotated and scaled before it is turned into a Pillow image.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from avatarface.avatar import Avatar
from avatarface.context import Expression
from avatarface.faces import OmegaFace

avatar = Avatar(OmegaFace())
avatar.expression = Expression.HAPPY
avatar.mouth_open_ratio = 0.3
avatar.set_eye_open_ratio(1.0)
avatar.color_depth = 16

frame = avatar.draw()            # an avatarface.canvas.Canvas
frame.to_image().save("face.png")
```

`Avatar.draw()` builds a `DrawContext` with `make_context()`, lets the face
draw it and returns the resulting `Canvas`. If the avatar was given a
`display` callable, each frame is also passed to it as
`display(frame, left, top)`.

`Avatar.start(color_depth)` (or `init`) starts two background threads: one
draws frames continuously, the other runs a `FacialDriver` about 30 times a
second. `stop()` ends them, `suspend()` and `resume()` pause and continue
drawing, and `add_task(func, name)` runs `func(avatar)` in another thread.
`FacialDriver(avatar, rng).tick(now_ms)` can also be called directly to
animate on your own clock.

Other state on `Avatar`: `set_right_gaze`, `set_left_gaze`, `gaze()`
(the mean of both eyes), `set_position(top, left)`, `rotation` (degrees),
`scale`, `speech_text`, `palette`, `set_battery_icon(visible)` and
`set_battery_status(is_charging, level)`.

### Faces and parts

Ready-made faces in `avatarface.faces`: `SimpleFace`, `OmegaFace`,
`GirlyFace`, `GirlyFace2`, `PinkDemonFace`, `DoggyFace`, `DogFace` and
`OledFace`. The plain `Face` from `avatarface.face` uses the round eyes,
bar eyebrows and bar mouth from `avatarface.classic`. Any face can be
assembled from parts:

- eyes: `avatarface.eyes` (`EllipseEye`, `GirlyEye`, `PinkDemonEye`,
  `DoggyEye`) and `avatarface.classic.Eye`
- eyebrows: `avatarface.eyebrows` (`EllipseEyebrow`, `BowEyebrow`,
  `RectEyebrow`) and `avatarface.classic.Eyeblow`
- mouths: `avatarface.mouths` (`RectMouth`, `OmegaMouth`, `UShapeMouth`,
  `DoggyMouth`) and `avatarface.classic.Mouth`

A new part subclasses `avatarface.canvas.Drawable` and implements
`draw(canvas, rect, ctx)`. `Face.compose(ctx)` draws the untransformed
frame; `Face.draw(ctx)` also applies rotation and scale.

### Colours and expressions

Colours are 16-bit RGB565 values held in a `ColorPalette`
(`avatarface.palette`) under the keys `primary`, `secondary`,
`background`, `balloon_f` and `balloon_b`; unknown keys read as black.
`color565`, `color24_to_16` and `color16_to_rgb` convert between formats.
A `Canvas` stores pixels at a colour depth of 1, 8 or 16 bits.

Expressions (`avatarface.context.Expression`) are `NEUTRAL`, `HAPPY`,
`ANGRY`, `SAD`, `DOUBT` and `SLEEPY`.

## The demo

```
avatarface --seconds 5 --press 1000 --hold 500 --seed 1 --frame face.png
```

runs `avatarface.app.AvatarApp` on a simulated clock, in 50 ms steps, and
prints the status lines it reports. A touch held for at least 300 ms steps
to the next expression; once a second the mouth opens by a random amount;
the face and palette are reset to their defaults every 15 and 30 seconds.

Options:

- `--seconds` — how long to run (default 5)
- `--press MS` — simulate a touch starting at this time; may be repeated
- `--hold` — length of each simulated touch in ms (default 500)
- `--seed` — random seed
- `--frame PATH` — save the last frame as a PNG
- `--realtime` — sleep between loop passes

## What it does not do

The package draws frames into memory only. It does not drive a screen,
read a real touch sensor or control a backlight: the demo's touches are
simulated from `--press`, and frames are shown only if you pass a
`display` callable to `Avatar` or save them as images. There is no
lip-sync from speech audio; the mouth opening is set by hand or at random.