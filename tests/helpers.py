def quiz_card_payload(card_id, category="Animals", **overrides):
    payload = {
        "id": card_id,
        "category": category,
        "color": "green",
        "question": f"Question {card_id}?",
        "optionA": "One",
        "optionB": "Two",
        "optionC": "Three",
        "correctOption": "B",
        "cardType": "quiz",
    }
    payload.update(overrides)
    return payload
