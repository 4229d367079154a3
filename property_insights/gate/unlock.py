"""Per-property unlock state and the locked rendering contract."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable

from property_insights.gate.storage import KeyValueStore
from property_insights.models import GateState, PropertyDetail, UnlockRecord, UserProfile

logger = logging.getLogger(__name__)

PROFILE_KEY = "profile:last"


def unlock_key(property_id: str) -> str:
    return f"unlock:{property_id}"


class UnlockGate:
    """Two-state machine per property id, persisted through a key-value store.

    The only transition is ``LOCKED -> UNLOCKED``; no operation writes a
    locked record. A separate global slot caches the last submitted profile
    for form prefill.

    Parameters
    ----------
    store : KeyValueStore
        Durable storage shared by every view.
    prompt_delay_seconds : float
        Default delay before the auto-prompt fires.
    """

    def __init__(self, store: KeyValueStore, prompt_delay_seconds: float = 0.5) -> None:
        self.store = store
        self.prompt_delay_seconds = prompt_delay_seconds

    def record(self, property_id: str) -> UnlockRecord:
        """Stored record for ``property_id``; unreadable values count as locked."""
        raw = self.store.get(unlock_key(property_id))
        if raw is None:
            return UnlockRecord(property_id=property_id, unlocked=False)
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Corrupt unlock record for %s, treating as locked", property_id)
            return UnlockRecord(property_id=property_id, unlocked=False)
        if not isinstance(payload, dict):
            logger.warning("Unexpected unlock record for %s: %r", property_id, payload)
            return UnlockRecord(property_id=property_id, unlocked=False)
        return UnlockRecord(
            property_id=property_id,
            unlocked=payload.get("unlocked") is True,
            email=payload.get("email"),
        )

    def is_unlocked(self, property_id: str) -> bool:
        return self.record(property_id).unlocked

    def state(self, property_id: str) -> GateState:
        return GateState.UNLOCKED if self.is_unlocked(property_id) else GateState.LOCKED

    def unlock(self, property_id: str, email: str) -> UnlockRecord:
        """Mark ``property_id`` unlocked for ``email``.

        Calling again is harmless; the latest email wins.
        """
        record = UnlockRecord(property_id=property_id, unlocked=True, email=email)
        self.store.set(
            unlock_key(property_id),
            json.dumps({"unlocked": True, "email": email}),
        )
        logger.info("Unlocked property %s", property_id)
        return record

    def remember_profile(self, profile: UserProfile) -> None:
        """Overwrite the global last-profile slot."""
        self.store.set(PROFILE_KEY, json.dumps(asdict(profile)))

    def last_profile(self) -> UserProfile | None:
        raw = self.store.get(PROFILE_KEY)
        if raw is None:
            return None
        try:
            payload = json.loads(raw)
            return UserProfile(**payload)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Ignoring unreadable cached profile")
            return None

    def schedule_prompt(
        self,
        property_id: str,
        callback: Callable[[str], Any],
        delay: float | None = None,
    ) -> asyncio.TimerHandle | None:
        """Schedule the unlock prompt for a locked property.

        Must be called from a running event loop. The gate is checked again
        when the timer fires, so a property unlocked in the meantime does not
        prompt.

        Returns
        -------
        asyncio.TimerHandle | None
            Handle to cancel on teardown, or ``None`` if already unlocked.
        """
        if self.is_unlocked(property_id):
            return None
        loop = asyncio.get_running_loop()
        wait = self.prompt_delay_seconds if delay is None else delay
        return loop.call_later(wait, self._fire_prompt, property_id, callback)

    def _fire_prompt(self, property_id: str, callback: Callable[[str], Any]) -> None:
        if self.is_unlocked(property_id):
            return
        logger.debug("Prompting for unlock of %s", property_id)
        callback(property_id)


@dataclass(frozen=True)
class SectionView:
    """One rendered block of the property report."""

    name: str
    content: Any
    obscured: bool = False
    interactive: bool = True


# Sections that stay readable while locked
CLEAR_SECTIONS = frozenset({"address", "preview_image"})


def render_sections(detail: PropertyDetail, unlocked: bool) -> list[SectionView]:
    """Lay out a report, obscuring everything but the address and preview while locked."""
    preview = detail.images[0] if detail.images else None
    sections: list[tuple[str, Any]] = [
        ("address", detail.address),
        ("preview_image", preview),
        (
            "features",
            {
                "property_type": detail.property_type,
                "beds": detail.beds,
                "baths": detail.baths,
                "parking": detail.parking,
                "land_size": detail.land_size,
                "building_size": detail.building_size,
            },
        ),
        ("price_estimate", detail.price_estimate),
        ("rental_estimate", detail.rental_estimate),
        ("suburb_insights", detail.suburb_insights),
        ("comparables", detail.comparables),
        ("schools", detail.schools),
        ("sales_history", detail.sales_history),
        ("gallery", detail.images[1:]),
        ("location", detail.coordinates),
    ]

    views = []
    for name, content in sections:
        hidden = not unlocked and name not in CLEAR_SECTIONS
        views.append(SectionView(name=name, content=content, obscured=hidden, interactive=not hidden))
    return views
