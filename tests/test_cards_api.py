from tests.helpers import quiz_card_payload


def special_card_payload(card_id, category="Party"):
    return {
        "id": card_id,
        "category": category,
        "color": "yellow",
        "question": "Everybody sings!",
        "cardType": "special",
    }


class TestCardCrud:

    def test_cms_routes_need_a_token(self, client):
        assert client.get("/cards/").status_code == 401
        assert client.post("/cards/", json=quiz_card_payload("V001")).status_code == 401

    def test_cms_routes_need_admin(self, client, player_headers):
        response = client.get("/cards/", headers=player_headers)
        assert response.status_code == 403

    def test_create_and_get(self, client, admin_headers):
        response = client.post("/cards/", json=quiz_card_payload("V001", weight=3), headers=admin_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == "V001"
        assert body["weight"] == 3
        assert body["hidden"] is False
        assert body["correctOption"] == "B"

        response = client.get("/cards/V001", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["question"] == "Question V001?"

    def test_duplicate_id_rejected(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("V001"), headers=admin_headers)
        response = client.post("/cards/", json=quiz_card_payload("V001"), headers=admin_headers)
        assert response.status_code == 400

    def test_malformed_cards_rejected(self, client, admin_headers):
        missing_option = quiz_card_payload("V002", optionC=None)
        assert client.post("/cards/", json=missing_option, headers=admin_headers).status_code == 422

        zero_weight = quiz_card_payload("V003", weight=0)
        assert client.post("/cards/", json=zero_weight, headers=admin_headers).status_code == 422

        special_with_answer = dict(special_card_payload("S001"), correctOption="A")
        assert client.post("/cards/", json=special_with_answer, headers=admin_headers).status_code == 422

    def test_partial_update(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("V001"), headers=admin_headers)

        response = client.put("/cards/V001", json={"weight": 5, "correctOption": "C"}, headers=admin_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["weight"] == 5
        assert body["correctOption"] == "C"
        assert body["category"] == "Animals"

    def test_update_cannot_break_card_shape(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("V001"), headers=admin_headers)

        response = client.put("/cards/V001", json={"cardType": "special"}, headers=admin_headers)
        assert response.status_code == 400

        response = client.put("/cards/V001", json={"cardType": "special", "correctOption": None}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["cardType"] == "special"

    def test_update_and_delete_missing_card(self, client, admin_headers):
        assert client.put("/cards/NOPE", json={"weight": 2}, headers=admin_headers).status_code == 404
        assert client.delete("/cards/NOPE", headers=admin_headers).status_code == 404

    def test_delete(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("V001"), headers=admin_headers)

        assert client.delete("/cards/V001", headers=admin_headers).status_code == 204
        assert client.get("/cards/V001", headers=admin_headers).status_code == 404

    def test_list_by_category(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("V001", category="Animals"), headers=admin_headers)
        client.post("/cards/", json=quiz_card_payload("V002", category="Music"), headers=admin_headers)

        response = client.get("/cards/category/Music", headers=admin_headers)
        assert [card["id"] for card in response.json()] == ["V002"]
        assert len(client.get("/cards/", headers=admin_headers).json()) == 2

    def test_bulk_operations(self, client, admin_headers):
        for card_id in ("V001", "V002", "V003"):
            client.post("/cards/", json=quiz_card_payload(card_id), headers=admin_headers)

        response = client.post("/cards/bulk/hide", json={"ids": ["V001", "V002"]}, headers=admin_headers)
        assert response.json() == {"affected": 2}
        assert client.get("/cards/V001", headers=admin_headers).json()["hidden"] is True

        response = client.post("/cards/bulk/show", json={"ids": ["V001"]}, headers=admin_headers)
        assert response.json() == {"affected": 1}

        response = client.post("/cards/bulk/delete", json={"ids": ["V003", "MISSING"]}, headers=admin_headers)
        assert response.json() == {"affected": 1}

        response = client.post("/cards/bulk/delete", json={"ids": []}, headers=admin_headers)
        assert response.json() == {"affected": 0}


class TestRandomCard:

    def test_no_cards(self, client):
        response = client.get("/cards/random")
        assert response.status_code == 404
        assert response.json()["detail"] == "No cards available"

    def test_category_and_hidden(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("A", category="X", weight=2), headers=admin_headers)
        client.post("/cards/", json=quiz_card_payload("B", category="X", hidden=True), headers=admin_headers)
        client.post("/cards/", json=special_card_payload("S", category="Y"), headers=admin_headers)

        for _ in range(20):
            response = client.get("/cards/random", params={"category": "X"})
            assert response.status_code == 200
            assert response.json()["id"] == "A"

        assert client.get("/cards/random", params={"category": "Z"}).status_code == 404

    def test_empty_category_returns_any_visible_card(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("A", category="X"), headers=admin_headers)

        response = client.get("/cards/random?category=")

        assert response.status_code == 200
        assert response.json()["id"] == "A"

    def test_bulk_hidden_cards_leave_the_game(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("A"), headers=admin_headers)
        client.post("/cards/bulk/hide", json={"ids": ["A"]}, headers=admin_headers)

        assert client.get("/cards/random").status_code == 404

    def test_categories_list_visible_only(self, client, admin_headers):
        client.post("/cards/", json=quiz_card_payload("A", category="Music"), headers=admin_headers)
        client.post("/cards/", json=quiz_card_payload("B", category="Animals"), headers=admin_headers)
        client.post("/cards/", json=quiz_card_payload("C", category="Secret", hidden=True), headers=admin_headers)

        assert client.get("/cards/categories").json() == ["Animals", "Music"]
