"""Build a face portrait by layering part images chosen from a person's name."""

from __future__ import annotations

import argparse
import hashlib
import random
import sys
from enum import Enum
from pathlib import Path
from typing import Sequence, Union

from .image import ImageError, RGBAImage, overlay_images, read_png, write_png

StrPath = Union[str, Path]


class Sex(Enum):
    """Whose face is drawn; the value is the answer typed at the prompt."""

    MALE = "m"
    FEMALE = "f"

    @property
    def directory(self) -> str:
        return "male" if self is Sex.MALE else "female"

    @property
    def honorific(self) -> str:
        return "군" if self is Sex.MALE else "양"


class Part(Enum):
    """A layer of the face; the value is its directory name."""

    COLOR = "color"
    HAIR = "hair"
    EYEBROW = "eyebrow"
    EARRINGS = "earrings"
    EYES = "eyes"
    NOSE = "nose"
    LIPS = "lips"


_LAYOUT: dict[Sex, tuple[tuple[Part, int], ...]] = {
    Sex.MALE: (
        (Part.COLOR, 4),
        (Part.HAIR, 3),
        (Part.EYEBROW, 3),
        (Part.EYES, 3),
        (Part.NOSE, 3),
        (Part.LIPS, 3),
    ),
    Sex.FEMALE: (
        (Part.COLOR, 4),
        (Part.HAIR, 12),
        (Part.EARRINGS, 4),
        (Part.EYES, 4),
        (Part.NOSE, 4),
        (Part.LIPS, 4),
    ),
}

# Parts that exist for one sex only and are always read from its directory.
_FIXED_DIRECTORY = {Part.EYEBROW: Sex.MALE, Part.EARRINGS: Sex.FEMALE}

_EGGS = {
    1: ("male", "egg", "ldg.png"),
    2: ("female", "egg", "jhs.png"),
    3: ("male", "egg", "ljh.png"),
}

_EGG_NAMES = {
    (Sex.MALE, "이동규"): 1,
    (Sex.MALE, "이주호"): 3,
    (Sex.FEMALE, "정희선"): 2,
}


def easter_egg(sex: Sex | str, name: str) -> int:
    """Return the special portrait number for a name, or 0 if there is none."""
    return _EGG_NAMES.get((Sex(sex), name), 0)


def seed_from_name(name: str) -> int:
    """Return a stable 64-bit seed derived from the name."""
    digest = hashlib.sha256(name.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little")


def part_path(ingredients: StrPath, sex: Sex | str, part: Part, n: int) -> Path:
    """Return the image file for variant ``n`` of a part."""
    owner = _FIXED_DIRECTORY.get(part, Sex(sex))
    return Path(ingredients) / owner.directory / part.value / f"{n}.png"


def choose_parts(sex: Sex | str, name: str) -> list[tuple[Part, int]]:
    """Pick a variant (numbered from 1) of every part, determined by the name."""
    rng = random.Random(seed_from_name(name))
    return [(part, rng.randrange(count) + 1) for part, count in _LAYOUT[Sex(sex)]]


class Face:
    """A portrait under construction, starting from the mirror background."""

    def __init__(self, sex: Sex | str, name: str, ingredients: StrPath = "ingredients"):
        self.sex = Sex(sex)
        self.name = name
        self.ingredients = Path(ingredients)
        self.image: RGBAImage = read_png(self.ingredients / "mirror.png")

    def add_layer(self, path: StrPath) -> None:
        """Draw the image at ``path`` on top of the portrait."""
        layer = read_png(path)
        overlay_images(
            self.image,
            layer,
            min(self.image.width, layer.width),
            min(self.image.height, layer.height),
        )

    def add_part(self, part: Part, n: int) -> None:
        """Draw variant ``n`` of a part."""
        self.add_layer(part_path(self.ingredients, self.sex, part, n))

    def add_egg(self, n: int) -> None:
        """Draw special portrait ``n``; unknown numbers draw nothing."""
        parts = _EGGS.get(n)
        if parts is not None:
            self.add_layer(self.ingredients.joinpath(*parts))


def generate_face(sex: Sex | str, name: str, ingredients: StrPath = "ingredients") -> Face:
    """Build the portrait for a person."""
    face = Face(sex, name, ingredients)
    egg = easter_egg(face.sex, name)
    if egg:
        face.add_egg(egg)
        return face
    for part, n in choose_parts(face.sex, name):
        face.add_part(part, n)
    return face


def result_path(results: StrPath, sex: Sex | str, name: str) -> Path:
    """Return the file a person's portrait is saved to."""
    return Path(results) / f"{name} {Sex(sex).honorific}의 얼굴.png"


def _ask_sex() -> Sex:
    while True:
        reply = input("성별을 입력해주세요. [m/f]").strip()
        if reply in ("m", "f"):
            return Sex(reply)
        print("잘못된 입력입니다.")


def _ask_name() -> str:
    while True:
        words = input("이름을 입력해주세요: ").split()
        if words:
            return words[0]


def _ask_done() -> bool:
    while True:
        reply = input("종료하시겠습니까? [y/n] ").strip()
        if reply == "y":
            return True
        if reply == "n":
            return False
        print("잘못된 입력입니다.")


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for people and save their portraits until told to stop."""
    parser = argparse.ArgumentParser(description="Generate a face portrait from a name.")
    parser.add_argument("--ingredients", default="ingredients", help="part image directory")
    parser.add_argument("--results", default="result", help="output directory")
    args = parser.parse_args(argv)

    try:
        while True:
            print("랜덤 얼굴 생성")
            sex = _ask_sex()
            name = _ask_name()
            print("얼굴을 생성합니다.")
            try:
                face = generate_face(sex, name, args.ingredients)
                write_png(result_path(args.results, sex, name), face.image)
            except ImageError as exc:
                print(f"Error: {exc}", file=sys.stderr)
            if _ask_done():
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())