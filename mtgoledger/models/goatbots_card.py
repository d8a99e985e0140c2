from pydantic import BaseModel


class GoatbotsCard(BaseModel):
    """
    A card definition from the GoatBots card-definitions file.

    Example entry (keyed by MTGO card ID):
        "47483": {"name": "Gruul Charm", "cardset": "GTC", "rarity": "Uncommon", "foil": 0}
    """

    name: str
    cardset: str
    rarity: str
    foil: int = 0
