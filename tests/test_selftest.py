import io

import pytest

from goolzip.selftest import main, verify_file, verify_folder

SAMPLE = b"mississippi river banks and sandy shores"


def test_verify_file_removes_archive_and_keeps_original(tmp_path):
    source = tmp_path / "s.txt"
    source.write_bytes(SAMPLE)
    result = verify_file(source)
    assert result.input_size == len(SAMPLE)
    assert not (tmp_path / "s.txt.GOOOOOOL").exists()
    assert source.read_bytes() == SAMPLE


def test_verify_empty_file(tmp_path):
    source = tmp_path / "empty"
    source.write_bytes(b"")
    assert verify_file(source).input_size == 0
    assert [p.name for p in tmp_path.iterdir()] == ["empty"]


def test_verify_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        verify_file(tmp_path / "absent")


def test_verify_folder_recurses(tmp_path):
    (tmp_path / "a").write_bytes(SAMPLE)
    nested = tmp_path / "inner"
    nested.mkdir()
    (nested / "b").write_bytes(bytes(range(256)) * 3)
    checked = verify_folder(tmp_path)
    assert sorted(p.name for p in checked) == ["a", "b"]
    assert not list(tmp_path.rglob("*.GOOOOOOL"))


def test_verify_folder_on_file(tmp_path):
    source = tmp_path / "f"
    source.write_bytes(SAMPLE)
    with pytest.raises(NotADirectoryError):
        verify_folder(source)


def test_main_with_argument(tmp_path, capsys):
    (tmp_path / "a").write_bytes(SAMPLE)
    assert main([str(tmp_path)]) == 0
    assert "All tests have run successfully" in capsys.readouterr().out


def test_main_interactive_retry(tmp_path, monkeypatch, capsys):
    (tmp_path / "a").write_bytes(SAMPLE)
    monkeypatch.setattr(
        "sys.stdin", io.StringIO(f"{tmp_path / 'nowhere'}\n{tmp_path}\n")
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "No such directory found" in out
    assert "Such folder exists." in out


def test_main_missing_folder(tmp_path):
    assert main([str(tmp_path / "nowhere")]) == 1