import pytest

from mtgoledger.errors import TableFormatError
from mtgoledger.history.collection_history import CollectionHistory
from mtgoledger.models.card import Card
from mtgoledger.models.price_point import PricePoint

HISTORY_TABLE = """id,quantity,name,set,rarity,foil,2023-11-06T083944Z
106729,1,Razorverge Thicket,ONE,Rare,false,[1]1.1;0.9
120020,4,In the Darkness Bind Them,LTC,Rare,false,[4]0.72;0.1"""


def snapshot_cards() -> list[Card]:
    return [
        Card.from_fields("120020", "4", "In the Darkness Bind Them", "LTC", "Rare", False, 0.78),
        Card.from_fields("348", "2", "Black Lotus", "1E", "Rare", True, 419.99),
    ]


class TestCsvText:
    def test_parse(self) -> None:
        history = CollectionHistory.from_csv_text(HISTORY_TABLE)

        assert history.timestamps == ["2023-11-06T083944Z"]
        assert history.size() == 2
        assert history.card_histories[1].price_history == [PricePoint(4, 0.72, 0.1)]

    def test_round_trip(self) -> None:
        history = CollectionHistory.from_csv_text(HISTORY_TABLE)
        assert history.to_csv_text() == HISTORY_TABLE

    def test_trailing_newline_tolerated(self) -> None:
        history = CollectionHistory.from_csv_text(HISTORY_TABLE + "\n")
        assert history.size() == 2

    def test_header_only(self) -> None:
        history = CollectionHistory.from_csv_text("id,quantity,name,set,rarity,foil")

        assert history.timestamps == []
        assert history.size() == 0

    def test_letter_rarities_are_normalized(self, snapshot_table: str) -> None:
        history = CollectionHistory.from_csv_text(snapshot_table)

        assert len(history.timestamps) == 3
        assert "120020,1,In the Darkness Bind Them,LTC,Rare,false,[4]0.72;0.1" in (
            history.to_csv_text()
        )

    def test_bad_header(self) -> None:
        with pytest.raises(TableFormatError, match="header"):
            CollectionHistory.from_csv_text("id,name,2023-11-06T083944Z\n1,Opt,0.1;-")

    def test_row_with_wrong_snapshot_count(self) -> None:
        table = HISTORY_TABLE + "\n348,1,Black Lotus,1E,Rare,true,1;1,2;2"

        with pytest.raises(TableFormatError, match="ID=348"):
            CollectionHistory.from_csv_text(table)


class TestAddSnapshot:
    def test_merges_snapshot(self) -> None:
        history = CollectionHistory.from_csv_text(HISTORY_TABLE)

        history.add_snapshot("2023-11-07T083944Z", snapshot_cards())

        assert history.to_csv_text() == (
            "id,quantity,name,set,rarity,foil,2023-11-06T083944Z,2023-11-07T083944Z\n"
            "348,2,Black Lotus,1E,Rare,true,-;-,[2]419.99;-\n"
            "106729,1,Razorverge Thicket,ONE,Rare,false,[1]1.1;0.9,[0]-;-\n"
            "120020,4,In the Darkness Bind Them,LTC,Rare,false,[4]0.72;0.1,0.78;-"
        )

    def test_every_history_matches_timestamps(self) -> None:
        history = CollectionHistory.from_csv_text(HISTORY_TABLE)

        history.add_snapshot("2023-11-07T083944Z", snapshot_cards())
        history.add_snapshot("2023-11-08T083944Z", [])

        for card_history in history.card_histories:
            assert len(card_history.price_history) == 3

    def test_sold_out_recorded_once(self) -> None:
        history = CollectionHistory.from_csv_text(HISTORY_TABLE)

        history.add_snapshot("2023-11-07T083944Z", snapshot_cards())
        history.add_snapshot("2023-11-08T083944Z", [])

        thicket = history.card_histories[1]
        assert thicket.price_history[1:] == [PricePoint(0), PricePoint()]
        assert history.newest_quantity(106729) == 0
        assert history.newest_quantity(348) == 0

    def test_quantity_change_is_recorded(self) -> None:
        history = CollectionHistory.from_csv_text(HISTORY_TABLE)
        cards = [Card.from_fields("120020", "9", "In the Darkness Bind Them", "LTC", "Rare")]

        history.add_snapshot("2023-11-07T083944Z", cards)

        darkness = history.card_histories[-1]
        assert darkness.price_history[-1].quantity == 9
        assert darkness.quantity == "9"
        assert history.newest_quantity(120020) == 9

    def test_start_from_empty_history(self) -> None:
        history = CollectionHistory()

        history.add_snapshot("2023-11-06T083944Z", snapshot_cards())

        assert history.to_csv_text() == (
            "id,quantity,name,set,rarity,foil,2023-11-06T083944Z\n"
            "348,2,Black Lotus,1E,Rare,true,[2]419.99;-\n"
            "120020,4,In the Darkness Bind Them,LTC,Rare,false,[4]0.78;-"
        )

    def test_newest_quantity_of_unknown_card(self) -> None:
        assert CollectionHistory().newest_quantity(1) is None
