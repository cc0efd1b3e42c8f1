import unittest

from fastapi.testclient import TestClient

from time_travel.main import app
from time_travel.store import GameStore, get_store


class TestGameAPI(unittest.TestCase):
    def setUp(self):
        self.store = GameStore()
        app.dependency_overrides[get_store] = lambda: self.store
        self.client = TestClient(app)
        resp = self.client.post("/games")
        self.assertEqual(resp.status_code, 201)
        self.game_id = resp.json()["id"]

    def tearDown(self):
        app.dependency_overrides.clear()

    def _move(self, cell):
        return self.client.post(f"/games/{self.game_id}/move", json={"cell": cell})

    def _jump(self, step):
        return self.client.post(f"/games/{self.game_id}/jump", json={"step": step})

    def _play_winning_sequence(self):
        for cell in (0, 4, 1, 5, 2):
            resp = self._move(cell)
            self.assertEqual(resp.status_code, 200)
        return resp.json()

    def test_given_server_when_health_checked_then_healthy(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Healthy"})

    def test_given_openapi_schema_when_read_then_game_fields_described(self):
        schemas = self.client.get("/openapi.json").json()["components"]["schemas"]
        for name in ("GameView", "GameListItem"):
            for field, prop in schemas[name]["properties"].items():
                self.assertTrue(prop.get("description"), f"{name}.{field}")

    def test_given_new_game_when_fetched_then_start_state(self):
        data = self.client.get(f"/games/{self.game_id}").json()
        self.assertEqual(data["squares"], [None] * 9)
        self.assertEqual(data["step_number"], 0)
        self.assertEqual(data["history_length"], 1)
        self.assertEqual(data["next_player"], "X")
        self.assertIsNone(data["winner"])
        self.assertEqual(data["status"], "Next player: X")
        self.assertEqual(data["moves"], [{"step": 0, "description": "Game start", "current": True}])

    def test_given_winning_sequence_when_played_then_winner_reported(self):
        data = self._play_winning_sequence()
        self.assertEqual(data["winner"], "X")
        self.assertEqual(data["winning_line"], [0, 1, 2])
        self.assertEqual(data["history_length"], 6)
        self.assertEqual(data["step_number"], 5)

    def test_given_won_game_when_moving_then_state_unchanged(self):
        won = self._play_winning_sequence()
        resp = self._move(3)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), won)

    def test_given_occupied_cell_when_moving_then_state_unchanged(self):
        first = self._move(4).json()
        resp = self._move(4)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), first)

    def test_given_won_game_when_jumping_and_moving_then_future_discarded(self):
        self._play_winning_sequence()
        data = self._jump(2).json()
        self.assertEqual(data["step_number"], 2)
        self.assertEqual(data["next_player"], "X")
        self.assertIsNone(data["winner"])
        self.assertEqual(data["history_length"], 6)

        data = self._move(8).json()
        self.assertEqual(data["history_length"], 4)
        self.assertEqual(data["step_number"], 3)
        self.assertEqual(data["squares"], ["X", None, None, None, "O", None, None, None, "X"])

        moves = self.client.get(f"/games/{self.game_id}/moves").json()
        self.assertEqual([m["description"] for m in moves], ["Game start", "Move #1", "Move #2", "Move #3"])

    def test_given_rewound_game_when_move_on_taken_cell_then_history_kept(self):
        self._play_winning_sequence()
        self._jump(2)
        data = self._move(4).json()
        self.assertEqual(data["history_length"], 6)
        self.assertEqual(data["step_number"], 2)
        self.assertEqual(self._jump(5).json()["winner"], "X")

    def test_given_same_step_when_jumping_twice_then_identical_views(self):
        self._play_winning_sequence()
        self.assertEqual(self._jump(1).json(), self._jump(1).json())

    def test_given_step_past_history_when_jumping_then_bad_request(self):
        self._move(0)
        resp = self._jump(2)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.client.get(f"/games/{self.game_id}").json()["step_number"], 1)

    def test_given_invalid_bodies_when_posting_then_unprocessable(self):
        self.assertEqual(self._move(9).status_code, 422)
        self.assertEqual(self._move(-1).status_code, 422)
        self.assertEqual(self._jump(-1).status_code, 422)
        self.assertEqual(self.client.post(f"/games/{self.game_id}/move", json={}).status_code, 422)

    def test_given_unknown_game_when_requested_then_not_found(self):
        self.assertEqual(self.client.get("/games/999").status_code, 404)
        self.assertEqual(self.client.post("/games/999/move", json={"cell": 0}).status_code, 404)
        self.assertEqual(self.client.post("/games/999/jump", json={"step": 0}).status_code, 404)
        self.assertEqual(self.client.get("/games/999/moves").status_code, 404)
        self.assertEqual(self.client.delete("/games/999").status_code, 404)

    def test_given_games_when_listed_then_each_summarised(self):
        self._move(4)
        other = self.client.post("/games").json()["id"]
        listing = self.client.get("/games").json()
        self.assertEqual([g["id"] for g in listing], [self.game_id, other])
        self.assertEqual(listing[0]["status"], "Next player: O")
        self.assertEqual(listing[0]["history_length"], 2)
        self.assertEqual(listing[1]["step_number"], 0)

    def test_given_game_when_ended_then_gone(self):
        resp = self.client.delete(f"/games/{self.game_id}")
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(self.client.get(f"/games/{self.game_id}").status_code, 404)
        self.assertEqual(len(self.store), 0)


if __name__ == "__main__":
    unittest.main()
