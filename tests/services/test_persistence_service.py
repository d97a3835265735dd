import json
import os

from tourney_store.services.persistence_service import JsonFileStorage, MemoryStorage


class TestJsonFileStorage:

    def test_load_missing_file_returns_none(self, file_storage):
        assert file_storage.load() is None

    def test_file_path_uses_storage_key(self, tmp_path):
        storage = JsonFileStorage(data_dir=str(tmp_path), storage_key="ff_tourney_v1")
        assert storage.data_file_path == os.path.join(str(tmp_path), "ff_tourney_v1.json")

    def test_init_creates_directory(self, tmp_path):
        data_dir = tmp_path / "nested" / "data"
        JsonFileStorage(data_dir=str(data_dir))
        assert data_dir.is_dir()

    def test_save_then_load(self, file_storage, player_state):
        file_storage.save(player_state)
        loaded = file_storage.load()
        assert loaded == player_state
        assert loaded.current_user.id == "user-1"

    def test_saved_file_is_readable_json(self, file_storage, default_state):
        file_storage.save(default_state)
        with open(file_storage.data_file_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        assert set(raw) == {"current_user", "users", "tournaments", "payments", "settings", "messages"}
        assert raw["users"][0]["id"] == "admin-1"
        # Bengali notice is written as-is, not escaped
        with open(file_storage.data_file_path, "r", encoding="utf-8") as f:
            assert default_state.settings.marquee_notice in f.read()

    def test_save_leaves_no_temp_file(self, file_storage, default_state):
        file_storage.save(default_state)
        assert not os.path.exists(f"{file_storage.data_file_path}.tmp")

    def test_passwords_are_not_written_in_plain_text(self, file_storage, default_state):
        file_storage.save(default_state)
        with open(file_storage.data_file_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        assert all(u["password_hash"] != "123" for u in raw["users"])
        assert all("password" not in u for u in raw["users"])

    def test_session_can_be_kept_out_of_the_file(self, tmp_path, player_state):
        storage = JsonFileStorage(data_dir=str(tmp_path), persist_session=False)
        storage.save(player_state)
        with open(storage.data_file_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        assert "current_user" not in raw
        loaded = storage.load()
        assert loaded.current_user is None
        assert loaded.users == player_state.users

    def test_corrupt_file_returns_none(self, file_storage, caplog):
        with open(file_storage.data_file_path, "w") as f:
            f.write("this is not json")
        assert file_storage.load() is None
        assert "Could not load snapshot" in caplog.text

    def test_non_utf8_file_returns_none(self, file_storage, caplog):
        with open(file_storage.data_file_path, "wb") as f:
            f.write(b"\xff\xfe\x00garbage")
        assert file_storage.load() is None
        assert "Could not load snapshot" in caplog.text

    def test_wrong_shape_returns_none(self, file_storage):
        with open(file_storage.data_file_path, "w") as f:
            json.dump({"users": [{"id": "x"}]}, f)
        assert file_storage.load() is None

    def test_empty_file_returns_none(self, file_storage):
        open(file_storage.data_file_path, "w").close()
        assert file_storage.load() is None


class TestMemoryStorage:

    def test_round_trip(self, player_state):
        storage = MemoryStorage()
        assert storage.load() is None
        storage.save(player_state)
        assert storage.load() == player_state
        assert storage.save_count == 1

    def test_session_excluded(self, player_state):
        storage = MemoryStorage(persist_session=False)
        storage.save(player_state)
        assert storage.load().current_user is None
