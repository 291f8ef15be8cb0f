import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from configs.config import BASE_DIR, resolve_data_dir


def test_default_data_dir_is_backend_data():
    assert resolve_data_dir(None) == os.path.join(BASE_DIR, "data")
    assert resolve_data_dir("") == os.path.join(BASE_DIR, "data")


def test_relative_data_dir_ignores_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_data_dir("./data") == os.path.join(BASE_DIR, "data")
    assert resolve_data_dir("../fixtures") == os.path.normpath(os.path.join(BASE_DIR, "..", "fixtures"))


def test_absolute_data_dir_is_kept(tmp_path):
    assert resolve_data_dir(str(tmp_path)) == str(tmp_path)
