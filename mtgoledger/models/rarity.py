from enum import Enum


class Rarity(str, Enum):
    """Closed set of MTGO rarities."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    MYTHIC = "Mythic"
    BOOSTER = "Booster"
    SPECIAL = "Special"

    @classmethod
    def parse(cls, text: str) -> "Rarity":
        """
        Parse a rarity from its full name or single-letter code.

        Accepts "Rare", "rare", "R" and so on. Anything unknown
        (e.g. event tickets) maps to SPECIAL.
        """
        key = text.strip().lower()
        for rarity in cls:
            if key in (rarity.value.lower(), rarity.value[0].lower()):
                return rarity
        return cls.SPECIAL

    def __str__(self) -> str:
        return self.value
