from pablaide.settings import Settings, default_settings_path


def test_missing_file_gives_empty(tmp_path):
    assert Settings(tmp_path / "none.json").load_last_folder() == ""


def test_round_trip(tmp_path):
    path = tmp_path / "sub" / "s.json"
    Settings(path).save_last_folder(tmp_path)
    assert Settings(path).load_last_folder() == str(tmp_path)


def test_overwrite(tmp_path):
    settings = Settings(tmp_path / "s.json")
    settings.save_last_folder("first")
    settings.save_last_folder("second")
    assert settings.load_last_folder() == "second"


def test_corrupt_file_gives_empty(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("{not json", encoding="utf-8")
    assert Settings(path).load_last_folder() == ""


def test_default_path(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    path = default_settings_path()
    assert path.name == "CodeEditor.json"
    assert path.parent.name == "PablaIDE"
    assert path.parent.parent == tmp_path