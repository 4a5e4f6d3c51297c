"""Fake customer title (salutation) records."""

from __future__ import annotations

import tempfile
from pathlib import Path

from faker import Faker

# One generator per process so ``unique`` never hands out the same name twice.
fake = Faker()

GENDERS = ("Male", "Female", "Neutral")


class TitleFaker:
    """A customer title with its image, distinct from every other instance.

    Every field can be overridden by keyword.
    """

    def __init__(
        self,
        name: str | None = None,
        fr_name: str | None = None,
        gender: str | None = None,
        image_name: str | None = None,
        image_width: int = 16,
        image_height: int = 16,
    ) -> None:
        # Title names only accept letters, so first names fit the validator.
        self.name = name or fake.unique.first_name()
        self.fr_name = fr_name or self.name
        self.gender = gender or fake.random_element(GENDERS)
        self.image_name = image_name or str(
            Path(tempfile.gettempdir()) / f"title-{fake.unique.uuid4()[:8]}.png"
        )
        self.image_width = image_width
        self.image_height = image_height

    def __repr__(self) -> str:
        return f"TitleFaker(name={self.name!r}, gender={self.gender!r}, image_name={self.image_name!r})"
