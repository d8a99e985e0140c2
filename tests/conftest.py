import pytest

from mtgoledger.models.card import Card
from mtgoledger.models.collection import Collection
from mtgoledger.models.goatbots_card import GoatbotsCard

SNAPSHOT_TABLE = """id,quantity,name,set,rarity,foil,2023-11-06T083944Z,2023-11-06T115147Z,2023-11-08T084732Z
120020,1,In the Darkness Bind Them,LTC,R,false,[4]0.72;0.1,[8]0.78;-,0.4;0.3
106729,1,Razorverge Thicket,ONE,R,false,[1]1.1;0.9,2.0;2.1,[11]0.9;-
106729,1,Razorverge Thicket,THR,R,false,-;-,[2]2.0;2.1,[0]0.9;-"""


@pytest.fixture
def snapshot_table() -> str:
    """Three-snapshot history table as produced by the archive writer."""
    return SNAPSHOT_TABLE


@pytest.fixture
def sample_collection() -> Collection:
    """Unenriched collection as read from an MTGO trade list."""
    return Collection(
        cards=[
            Card(id="120020", quantity="4", name="In the Darkness Bind Them"),
            Card(id="106729", quantity="1", name="Razorverge Thicket"),
            Card(id="348", quantity="2", name="Black Lotus"),
        ]
    )


@pytest.fixture
def card_definitions() -> dict[str, GoatbotsCard]:
    return {
        "120020": GoatbotsCard(
            name="In the Darkness Bind Them", cardset="LTC", rarity="Rare", foil=0
        ),
        "348": GoatbotsCard(name="Black Lotus", cardset="1E", rarity="Rare", foil=1),
    }


@pytest.fixture
def price_history() -> dict[str, float]:
    return {"120020": 0.72, "106729": 1.1}
