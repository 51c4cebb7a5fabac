"""HTTP tests for /api/joueurs."""

import pytest


class TestCreateJoueur:
    """POST /api/joueurs."""

    def test_create_unassigned(self, client):
        response = client.post("/api/joueurs", json={"nom": "Dante", "position": "Défenseur"})

        assert response.status_code == 201
        body = response.json()
        assert body["nom"] == "Dante"
        assert body["position"] == "Défenseur"
        assert body["equipeId"] is None
        assert body["equipeNom"] is None

    def test_create_on_team(self, client, create_equipe):
        equipe = create_equipe("OGC Nice", "OGC")

        response = client.post("/api/joueurs", json={"nom": "Dante", "position": "Défenseur", "equipeId": equipe["id"]})

        assert response.status_code == 201
        assert response.json()["equipeId"] == equipe["id"]
        assert response.json()["equipeNom"] == "OGC Nice"

    def test_duplicate_name_is_conflict(self, client, create_joueur):
        create_joueur("Dante", "Défenseur")

        response = client.post("/api/joueurs", json={"nom": "Dante", "position": "Milieu"})

        assert response.status_code == 409
        assert response.json() == {
            "error": "Erreur de validation",
            "message": "Un joueur avec le nom 'Dante' existe déjà",
        }

    def test_unknown_team_is_not_found(self, client):
        response = client.post("/api/joueurs", json={"nom": "Dante", "position": "Défenseur", "equipeId": 999})

        assert response.status_code == 404
        assert response.json()["message"] == "Équipe avec l'ID 999 non trouvée"
        assert client.get("/api/joueurs").json()["totalElements"] == 0

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"position": "Gardien"}, "nom"),
            ({"nom": "", "position": "Gardien"}, "nom"),
            ({"nom": "x" * 101, "position": "Gardien"}, "nom"),
            ({"nom": "Dante"}, "position"),
            ({"nom": "Dante", "position": "p" * 51}, "position"),
        ],
    )
    def test_invalid_payload_is_bad_request(self, client, payload, field):
        response = client.post("/api/joueurs", json=payload)

        assert response.status_code == 400
        assert field in [d["field"] for d in response.json()["details"]]


class TestListJoueurs:
    """GET /api/joueurs."""

    @pytest.fixture
    def squad(self, create_equipe, create_joueur):
        nice = create_equipe("OGC Nice", "OGC")
        monaco = create_equipe("AS Monaco", "ASM")
        create_joueur("Schmeichel", "Gardien", nice["id"])
        create_joueur("Dante", "Défenseur central", nice["id"])
        create_joueur("Moffi", "Attaquant", nice["id"])
        create_joueur("Singo", "Défenseur droit", monaco["id"])
        create_joueur("Libre", "Défenseur")
        return nice, monaco

    @pytest.mark.parametrize("query", ["page=-1", "size=0", "size=101", "page=99999999999999999999"])
    def test_bad_paging_is_bad_request(self, client, query):
        response = client.get(f"/api/joueurs?{query}")

        assert response.status_code == 400
        assert response.content == b""

    def test_unfiltered(self, client, squad):
        body = client.get("/api/joueurs").json()

        assert body["totalElements"] == 5
        assert [j["nom"] for j in body["content"]] == ["Dante", "Libre", "Moffi", "Schmeichel", "Singo"]

    def test_team_filter(self, client, squad):
        nice, _ = squad

        body = client.get(f"/api/joueurs?equipeId={nice['id']}").json()

        assert {j["nom"] for j in body["content"]} == {"Schmeichel", "Dante", "Moffi"}
        assert all(j["equipeNom"] == "OGC Nice" for j in body["content"])

    def test_position_filter_is_case_insensitive_substring(self, client, squad):
        body = client.get("/api/joueurs?position=DÉFENSEUR").json()

        assert {j["nom"] for j in body["content"]} == {"Dante", "Singo", "Libre"}

    def test_both_filters(self, client, squad):
        nice, _ = squad

        body = client.get(f"/api/joueurs?equipeId={nice['id']}&position=défenseur").json()

        assert [j["nom"] for j in body["content"]] == ["Dante"]

    def test_sort_by_position_descending(self, client, squad):
        body = client.get("/api/joueurs?sortBy=position&sortDirection=desc&size=2").json()

        assert [j["position"] for j in body["content"]] == ["Gardien", "Défenseur droit"]
        assert body["totalPages"] == 3


class TestTransferJoueur:
    """PUT /api/joueurs/{id}/transfer."""

    def test_transfer_between_teams(self, client, create_equipe, create_joueur):
        nice = create_equipe("OGC Nice", "OGC")
        monaco = create_equipe("AS Monaco", "ASM")
        joueur = create_joueur("Dante", "Défenseur", nice["id"])

        response = client.put(f"/api/joueurs/{joueur['id']}/transfer?equipeId={monaco['id']}")

        assert response.status_code == 200
        assert response.json()["equipeNom"] == "AS Monaco"
        assert client.get(f"/api/equipes/{nice['id']}").json()["joueurs"] == []
        assert len(client.get(f"/api/equipes/{monaco['id']}").json()["joueurs"]) == 1

    def test_transfer_unassigned_player(self, client, create_equipe, create_joueur):
        """Transfer assigns a player that had no team at all."""
        monaco = create_equipe("AS Monaco", "ASM")
        joueur = create_joueur("Dante", "Défenseur")

        response = client.put(f"/api/joueurs/{joueur['id']}/transfer?equipeId={monaco['id']}")

        assert response.status_code == 200
        assert response.json()["equipeId"] == monaco["id"]

    def test_unknown_ids_are_not_found(self, client, create_equipe, create_joueur):
        equipe = create_equipe("OGC Nice", "OGC")
        joueur = create_joueur("Dante", "Défenseur")

        missing_player = client.put(f"/api/joueurs/999/transfer?equipeId={equipe['id']}")
        missing_team = client.put(f"/api/joueurs/{joueur['id']}/transfer?equipeId=999")

        assert missing_player.status_code == 404
        assert missing_player.json() == {"error": "Erreur de transfert", "message": "Joueur avec l'ID 999 non trouvé"}
        assert missing_team.status_code == 404
        assert missing_team.json()["message"] == "Équipe avec l'ID 999 non trouvée"

    def test_missing_team_parameter_is_bad_request(self, client, create_joueur):
        joueur = create_joueur("Dante", "Défenseur")

        response = client.put(f"/api/joueurs/{joueur['id']}/transfer")

        assert response.status_code == 400
        assert "equipeId" in [d["field"] for d in response.json()["details"]]


class TestGetAndDeleteJoueur:
    """GET and DELETE /api/joueurs/{id}."""

    def test_get_unknown_is_not_found_without_body(self, client):
        response = client.get("/api/joueurs/999")

        assert response.status_code == 404
        assert response.content == b""

    def test_delete_once_then_not_found(self, client, create_joueur):
        joueur = create_joueur("Dante", "Défenseur")

        first = client.delete(f"/api/joueurs/{joueur['id']}")
        second = client.delete(f"/api/joueurs/{joueur['id']}")

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404

    def test_deleted_player_leaves_roster(self, client, create_equipe):
        equipe = create_equipe("OGC Nice", "OGC", joueurs=[{"nom": "Schmeichel", "position": "Gardien"}])

        client.delete(f"/api/joueurs/{equipe['joueurs'][0]['id']}")

        assert client.get(f"/api/equipes/{equipe['id']}").json()["joueurs"] == []

    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/api/joueurs/99999999999999999999"),
            ("DELETE", "/api/joueurs/99999999999999999999"),
            ("PUT", "/api/joueurs/99999999999999999999/transfer?equipeId=1"),
            ("PUT", "/api/joueurs/1/transfer?equipeId=99999999999999999999"),
            ("GET", "/api/joueurs?equipeId=99999999999999999999"),
        ],
    )
    def test_id_beyond_64_bits_is_bad_request(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 400
        assert response.json()["error"] == "Erreur de validation"


class TestUnexpectedErrors:
    def test_unexpected_error_is_generic_500(self, monkeypatch):
        """Internal failures are logged and answered with a generic body."""
        from fastapi.testclient import TestClient

        from football_api.app.main import app
        from football_api.app.services.joueur_service import JoueurService

        async def boom(cls, joueur_id):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(JoueurService, "get_joueur", classmethod(boom))

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/joueurs/1")

        assert response.status_code == 500
        assert response.json() == {"error": "Erreur interne", "message": "Une erreur inattendue s'est produite"}
