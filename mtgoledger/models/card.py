from pydantic import BaseModel, ConfigDict


class Card(BaseModel):
    """
    A card in an MTGO collection.

    Field names match the JSON persistence schema exactly.

    Attributes:
        id: MTGO card ID, opaque join key for reference data
        quantity: Number of copies as text (unsigned integer literal)
        name: Card name as shown in MTGO
        set: Set code (e.g., "LTC"), filled in by enrichment
        rarity: Rarity as reported by GoatBots (free text)
        foil: Whether this is the foil printing
        goatbots_price: GoatBots price in tix
        scryfall_price: Scryfall price in tix
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = ""
    quantity: str = ""
    name: str = ""
    set: str = ""
    rarity: str = ""
    foil: bool = False
    goatbots_price: float = 0.0
    scryfall_price: float = 0.0

    @classmethod
    def from_fields(
        cls,
        id: str,
        quantity: str,
        name: str,
        set: str = "",
        rarity: str = "",
        foil: bool = False,
        goatbots_price: float = 0,
        scryfall_price: float = 0,
    ) -> "Card":
        """Build a card from positional fields (e.g. a parsed .dek row)."""
        return cls(
            id=id,
            quantity=quantity,
            name=name,
            set=set,
            rarity=rarity,
            foil=foil,
            goatbots_price=goatbots_price,
            scryfall_price=scryfall_price,
        )
