import random
from collections import Counter

from app.models.card_db.card_db import Card
from app.services.card_selector import eligible_cards, effective_weight, select_random_card


def make_card(card_id, category="X", weight=1, hidden=False):
    return Card(
        id=card_id,
        category=category,
        color="blue",
        question=f"Question {card_id}",
        card_type="special",
        hidden=hidden,
        weight=weight,
    )


class TestSelectRandomCard:

    def test_frequency_follows_weights(self):
        rng = random.Random(1234)
        cards = [make_card("A", weight=3), make_card("B", weight=1)]

        draws = Counter(select_random_card(cards, rng=rng).id for _ in range(10000))

        assert abs(draws["A"] / 10000 - 0.75) < 0.03
        assert draws["A"] + draws["B"] == 10000

    def test_hidden_card_is_never_returned(self):
        rng = random.Random(7)
        cards = [make_card("A", weight=2), make_card("B", weight=1000, hidden=True)]

        picked = {select_random_card(cards, "X", rng=rng).id for _ in range(500)}

        assert picked == {"A"}

    def test_category_filter(self):
        rng = random.Random(3)
        cards = [make_card("A", category="X"), make_card("B", category="Y"), make_card("C", category="X")]

        picked = {select_random_card(cards, "X", rng=rng).category for _ in range(200)}

        assert picked == {"X"}

    def test_no_match_returns_none(self):
        cards = [make_card("A", category="X")]

        assert select_random_card(cards, "Z") is None
        assert select_random_card([]) is None
        assert select_random_card([make_card("A", hidden=True)]) is None

    def test_empty_category_means_no_filter(self):
        rng = random.Random(5)
        cards = [make_card("A", category="X"), make_card("B", category="Y")]

        picked = {select_random_card(cards, "", rng=rng).id for _ in range(200)}

        assert picked == {"A", "B"}
        assert [card.id for card in eligible_cards(cards, "")] == ["A", "B"]

    def test_zero_or_negative_weight_still_selectable(self):
        rng = random.Random(11)
        cards = [make_card("A", weight=0), make_card("B", weight=-4)]

        picked = Counter(select_random_card(cards, rng=rng).id for _ in range(2000))

        assert picked["A"] > 0 and picked["B"] > 0
        assert effective_weight(cards[0]) == 1
        assert effective_weight(cards[1]) == 1

    def test_without_category_all_visible_cards_are_eligible(self):
        cards = [make_card("A", category="X"), make_card("B", category="Y"), make_card("C", hidden=True)]

        assert [card.id for card in eligible_cards(cards)] == ["A", "B"]

    def test_input_is_not_modified(self):
        cards = [make_card("A", weight=5), make_card("B", hidden=True)]

        select_random_card(cards, rng=random.Random(0))

        assert [card.id for card in cards] == ["A", "B"]
        assert cards[0].weight == 5
