"""
Candidates
==========
The fixed list of people the chooser picks from.

Classes:
    Candidate: One selectable named item with an associated display image.

Exports:
    DEFAULT_CANDIDATES: The hard-coded candidate list shown by the app.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class Candidate:
    name: str
    image_ref: str
    # Two candidates sharing a name still compare unequal
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def initial(self) -> str:
        """First letter of the name, used by the placeholder image."""
        return self.name[:1].upper() or "?"


def make_candidates(names: Sequence[str]) -> tuple[Candidate, ...]:
    """Build an immutable candidate list where each image is named after the person."""
    return tuple(Candidate(name=name, image_ref=name) for name in names)


DEFAULT_CANDIDATES: tuple[Candidate, ...] = make_candidates(
    ["Max", "Jameson", "Gabe", "Chaden"]
)
