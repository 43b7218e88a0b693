"""Zone identity models.

Usage:
    key = ZoneKey(owner_id="card-1", zone_name="body")
    str(key)                     # "card-1:body"
    ZoneKey.parse("card-1:body") # round-trips
"""

from __future__ import annotations

from dataclasses import dataclass

ZONE_SEPARATOR = ":"
ROOT_ZONE = "root"


@dataclass(frozen=True, slots=True)
class ZoneKey:
    """Names one child slot of one component.

    The owner id is the identity of the component that owns the zone. The zone
    name is opaque and kept verbatim through every clone and paste.
    """

    owner_id: str
    zone_name: str

    def __str__(self) -> str:
        return f"{self.owner_id}{ZONE_SEPARATOR}{self.zone_name}"

    @classmethod
    def parse(cls, text: str) -> ZoneKey:
        """Parse the wire form ``"<owner_id>:<zone_name>"``.

        Splits on the first separator so zone names may themselves contain it.

        Args:
            text: Encoded zone key.

        Returns:
            Parsed ZoneKey.

        Raises:
            ValueError: If the separator is missing or the owner id is empty.
        """
        owner_id, sep, zone_name = text.partition(ZONE_SEPARATOR)
        if not sep or not owner_id:
            raise ValueError(f"Invalid zone key {text!r}: expected 'ownerId{ZONE_SEPARATOR}zoneName'")
        return cls(owner_id=owner_id, zone_name=zone_name)

    def with_owner(self, owner_id: str) -> ZoneKey:
        """Same zone name under a different owner."""
        return ZoneKey(owner_id=owner_id, zone_name=self.zone_name)
