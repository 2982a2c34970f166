import pytest

from solong.cli import main


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Wrong number of arguments\n"


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().out == "Wrong number of arguments\n"


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing.ber"]) == 1
    assert capsys.readouterr().out == "Invalid path\n"


def test_name_without_extension(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "plainmap").write_text("11111\n1PCE1\n11111\n")
    assert main(["plainmap"]) == 1
    assert capsys.readouterr().out == "Invalid path\n"


@pytest.mark.parametrize(
    "content",
    [
        "",
        "\n\n",
        "111\n1P1\n111\n",
        "11111\n1PCE1\n1111\n",
        "11111\n1PXE1\n11111\n",
        "11111\n1P1CE1\n11111\n",
    ],
)
def test_invalid_maps(tmp_path, monkeypatch, capsys, content):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.ber").write_text(content)
    assert main(["bad.ber"]) == 1
    assert capsys.readouterr().out == "Invalid map\n"


def test_unreachable_exit_is_invalid(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "walled.ber").write_text("1111111\n1PC01E1\n1111111\n")
    assert main(["walled.ber"]) == 1
    assert capsys.readouterr().out == "Invalid map\n"