"""End-to-end match flows driven through the HTTP API."""

from snooker.logic.balls import CLEARANCE_ORDER


def _post(client, path, body=None):
    response = client.post(path, json=body) if body is not None else client.post(path)
    assert response.status_code == 200, response.json()
    return response.json()["match"]


def _pot(client, ball):
    return _post(client, "/match/pot", {"ball": ball})


class TestMaximumBreak:
    def test_147_through_the_api(self, client):
        client.post("/match", json={"player_names": ["Ronnie", "Judd"], "total_frames": 1})

        for _ in range(15):
            _pot(client, "red")
            _pot(client, "black")
        for ball in CLEARANCE_ORDER:
            match = _pot(client, ball.value)

        ronnie = match["players"][0]
        assert match["phase"] == "frame_over"
        assert match["frame_winner"] == 1
        assert ronnie["score"] == 147
        assert ronnie["highest_break"] == 147
        assert len(ronnie["history"]) == 36
        assert match["points_remaining"] == 0

        final = _post(client, "/match/end-frame")
        assert final["phase"] == "game_over"
        assert final["match_winner"] == 1
        assert final["players"][0]["highest_break"] == 147


class TestBestOfThree:
    def test_frames_alternate_break_off(self, client):
        start = client.post(
            "/match",
            json={"player_names": ["Ronnie", "Judd"], "total_frames": 3, "alternate_break_off": True},
        ).json()
        assert start["players"][0]["is_active"] is True

        # frame 1: Ronnie pots a red and ends it
        _pot(client, "red")
        second = _post(client, "/match/end-frame")
        assert second["frame_number"] == 2
        assert second["players"][1]["is_active"] is True
        assert second["players"][0]["frames_won"] == 1
        assert second["players"][0]["history"] == []

        # frame 2: Judd pots a red and ends it
        _pot(client, "red")
        third = _post(client, "/match/end-frame")
        assert third["frame_number"] == 3
        assert third["players"][0]["is_active"] is True

        # frame 3: level, no frame awarded, match drawn
        final = _post(client, "/match/end-frame")
        assert final["phase"] == "game_over"
        assert final["match_drawn"] is True
        assert final["match_winner"] is None
        assert [p["frames_won"] for p in final["players"]] == [1, 1]


class TestFoulOnLastRedColour:
    def test_foul_after_last_red_resets_to_yellow(self, client):
        client.post("/match", json={"player_names": ["Ronnie", "Judd"]})

        for _ in range(15):
            _pot(client, "red")
            match = _pot(client, "black")
        assert match["reds_remaining"] == 0
        assert match["legal_balls"] == ["yellow"]

        client.post("/match/undo")
        match = client.get("/match").json()
        assert match["last_red_colour_pending"] is True

        fouled = _post(client, "/match/foul")
        assert fouled["phase"] == "foul_pending"
        assert fouled["legal_balls"] == []

        resumed = _post(client, "/match/foul-points", {"points": 7})
        assert resumed["phase"] == "clearance_sequence"
        assert resumed["clearance_index"] == 0
        assert resumed["last_red_colour_pending"] is False
        assert resumed["players"][1]["score"] == 7
        assert resumed["players"][1]["is_active"] is True
