"""Base generator class for report synthesis."""

from __future__ import annotations

import hashlib
import random
from abc import ABC
from datetime import date

from faker import Faker


def seed_for(property_id: str, salt: str = "") -> int:
    """Derive a stable 64-bit seed from a property id."""
    digest = hashlib.sha256(f"{salt}:{property_id}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class BaseGenerator(ABC):
    """Base class for all synthesis generators.

    Provides a Faker instance and per-call random streams. In deterministic
    mode every call for the same property id replays the same stream, so a
    report looks the same on every fetch; otherwise each call draws fresh
    values.

    Parameters
    ----------
    seed : int | None
        Extra seed mixed into every per-property seed.
    locale : str
        Faker locale (default ``en_AU``).
    deterministic : bool
        Derive randomness from the property id.
    """

    # Salt keeps the streams of different generators independent
    SALT = "base"

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_AU",
        deterministic: bool = True,
    ) -> None:
        self.fake = Faker(locale)
        self.seed = seed
        self.deterministic = deterministic
        self._fresh = random.Random(seed)

    def _rng_for(self, property_id: str) -> random.Random:
        """Random stream for one call; also reseeds Faker to match."""
        if self.deterministic:
            value = seed_for(property_id, f"{self.SALT}:{self.seed}")
        else:
            value = self._fresh.getrandbits(64)
        self.fake.seed_instance(value)
        return random.Random(value)

    @staticmethod
    def _today(reference_date: date | None) -> date:
        return reference_date or date.today()
