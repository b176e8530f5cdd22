"""
Tests for channel routes - CRUD, reassignment on delete, channel monitor
"""
from datetime import datetime
from unittest.mock import patch

from models import Channel, Program, db


class TestChannelCRUD:
    """Tests for channel create/read/update/delete"""

    def test_get_channels_empty(self, app, client):
        """Test listing channels when none exist"""
        response = client.get("/api/channels")
        assert response.status_code == 200
        assert response.json == []

    def test_get_channels_in_order(self, app, client, channels):
        """Test channels come back in collection order"""
        response = client.get("/api/channels")
        assert response.status_code == 200
        assert [c["id"] for c in response.json] == ["CH1", "CH2"]
        assert response.json[0] == {"id": "CH1", "name": "WXYZ-TV (CH 7)", "order": 1}

    def test_create_channel(self, app, client, channels):
        """Test a new channel gets a generated id and goes last"""
        response = client.post("/api/channels", json={"name": "RETRO-TV (CH 3)"})
        assert response.status_code == 201
        data = response.json
        assert data["id"].startswith("CH")
        assert data["id"][2:].isdigit()
        assert data["order"] == 3

        response = client.get("/api/channels")
        assert response.json[-1]["name"] == "RETRO-TV (CH 3)"

    def test_create_channel_with_id(self, app, client):
        """Test an explicit channel id is kept"""
        response = client.post("/api/channels", json={"id": "CH7", "name": "Seven"})
        assert response.status_code == 201
        assert response.json == {"id": "CH7", "name": "Seven", "order": 1}

    def test_create_channel_duplicate_id(self, app, client, channels):
        """Test channel ids are unique"""
        response = client.post("/api/channels", json={"id": "CH1", "name": "Again"})
        assert response.status_code == 400

    def test_create_channel_blank_name(self, app, client):
        """Test names cannot be whitespace"""
        response = client.post("/api/channels", json={"name": "   "})
        assert response.status_code == 400
        assert "name" in response.json["validation_errors"]

    def test_create_channel_missing_name(self, app, client):
        """Test name is required"""
        response = client.post("/api/channels", json={})
        assert response.status_code == 400

    def test_update_channel(self, app, client, channels):
        """Test renaming a channel"""
        response = client.put("/api/channels/CH2", json={"id": "CH2", "name": "KROQ 2"})
        assert response.status_code == 200
        assert response.json["name"] == "KROQ 2"
        assert db.session.get(Channel, "CH2").name == "KROQ 2"

    def test_update_channel_not_found(self, app, client, channels):
        """Test renaming an unknown channel"""
        response = client.put("/api/channels/CH9", json={"name": "Nobody"})
        assert response.status_code == 404

    def test_delete_channel_reassigns_programs(self, app, client, morning_block):
        """Test programs move to the first remaining channel with start times kept"""
        response = client.delete("/api/channels/CH1")
        assert response.status_code == 204

        assert db.session.get(Channel, "CH1") is None
        programs = {p.id: p for p in Program.query.all()}
        assert {p.channel_id for p in programs.values()} == {"CH2"}
        assert programs["A"].start_time == "08:00"
        assert programs["B"].start_time == "08:30"
        assert programs["C"].start_time == "08:45"
        assert programs["Z"].start_time == "08:00"

    def test_delete_channel_reassigns_to_first_by_order(self, app, client, morning_block):
        """Test the target is the first channel in collection order"""
        db.session.add(Channel(id="CH0", name="Zero", position=0))
        db.session.commit()

        response = client.delete("/api/channels/CH2")
        assert response.status_code == 204
        assert db.session.get(Program, "Z").channel_id == "CH0"

    def test_delete_last_channel_refused(self, app, client):
        """Test the only channel cannot be deleted"""
        client.post("/api/channels", json={"id": "CH1", "name": "Only"})

        response = client.delete("/api/channels/CH1")
        assert response.status_code == 400
        assert response.json["error"] == "Cannot delete the last channel"
        assert db.session.get(Channel, "CH1") is not None

    def test_delete_channel_not_found(self, app, client, channels):
        """Test deleting an unknown channel"""
        response = client.delete("/api/channels/CH9")
        assert response.status_code == 404


class TestChannelMonitor:
    """Tests for the now-playing endpoint"""

    def test_now_and_next(self, app, client, morning_block):
        """Test the on-air program and the one after it"""
        with patch("services.monitor_service.datetime") as mock_datetime:
            mock_datetime.now.return_value = datetime(2024, 5, 1, 8, 35)
            response = client.get("/api/channels/CH1/now")

        assert response.status_code == 200
        data = response.json
        assert data["channel"]["id"] == "CH1"
        assert data["nowPlaying"]["id"] == "B"
        assert data["upNext"]["id"] == "C"

    def test_nothing_on_air(self, app, client, morning_block):
        """Test an idle channel reports the next program to start"""
        with patch("services.monitor_service.datetime") as mock_datetime:
            mock_datetime.now.return_value = datetime(2024, 5, 1, 7, 0)
            response = client.get("/api/channels/CH1/now")

        assert response.json["nowPlaying"] is None
        assert response.json["upNext"]["id"] == "A"

    def test_unknown_channel(self, app, client):
        """Test the monitor on an unknown channel"""
        response = client.get("/api/channels/CH9/now")
        assert response.status_code == 404
