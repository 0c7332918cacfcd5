# randomface

Builds a face picture from a name. The same name and sex always give the
same face. Each face starts from a background image, and a skin colour,
hair, eyebrows (male) or earrings (female), eyes, nose and lips are laid on
top of it, one transparent PNG layer at a time. A few particular names get a
fixed special picture instead.

## Installing

```
pip install .
```

## The ingredients directory

Faces are put together from PNG files in an ingredients directory:

```
ingredients/
    mirror.png                  background
    male/color/1.png .. 4.png
    male/hair/1.png .. 3.png
    male/eyebrow/1.png .. 3.png
    male/eyes/1.png .. 3.png
    male/nose/1.png .. 3.png
    male/lips/1.png .. 3.png
    male/egg/ldg.png, ljh.png   special pictures
    female/color/1.png .. 4.png
    female/hair/1.png .. 12.png
    female/earrings/1.png .. 4.png
    female/eyes/1.png .. 4.png
    female/nose/1.png .. 4.png
    female/lips/1.png .. 4.png
    female/egg/jhs.png          special picture
```

Layers should have the same size as the background. Every layer pixel that
is not fully transparent replaces the pixel below it.

## Running

```
randomface
randomface --ingredients path/to/ingredients --results path/to/output
```

The program asks (in Korean) for a sex (`m` or `f`) and a name, writes the
face to `<results>/<name> 군의 얼굴.png` or `<results>/<name> 양의 얼굴.png`,
and then asks whether to stop (`y`) or make another (`n`). The defaults are
`ingredients` and `result` in the current directory; the output directory
must already exist. A missing or unreadable image is reported on standard
error and the program carries on. End of input stops it.

## From Python

```python
from randomface.face import Sex, generate_face, result_path
from randomface.image import write_png

face = generate_face(Sex.FEMALE, "Alice", "ingredients")
write_png(result_path("result", Sex.FEMALE, "Alice"), face.image)
```

`randomface.face` also offers:

- `choose_parts(sex, name)`: the `(Part, variant)` list a name gives, without
  reading any images.
- `seed_from_name(name)`: the stable seed behind that choice.
- `easter_egg(sex, name)`: the special picture number for a name, or 0.
- `part_path(ingredients, sex, part, n)`: where a part's image is looked for.
- `Face`, with `add_layer`, `add_part` and `add_egg`, to build a picture by
  hand.

`randomface.image` holds the PNG side on its own: `read_png` gives an
`RGBAImage` with 8-bit RGBA pixels (any PNG colour type or bit depth is
expanded to it), `write_png` saves one, and `overlay_images` or
`RGBAImage.overlay` lays one image on top of another. `RGBAImage.blank`
makes a transparent image and `RGBAImage.pixel` reads one pixel. Files that
are missing or are not PNG raise `ImageError`.

## What it does not do

No part images are included; the ingredients directory has to be supplied.

## Tests

```
pip install .[test]
pytest
```