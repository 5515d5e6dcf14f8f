import pytest
from PIL import Image

from comicli import cli
from comicli.cli import Options, parse_options


def test_defaults():
    options = parse_options(["xkcd"])
    assert options == Options(image="xkcd")
    assert options.width == 80
    assert options.depth == 70
    assert options.height is None
    assert options.trim_border is True


def test_short_flags():
    options = parse_options(["-c", "-b", "-w", "40", "-d", "10", "-h", "12", "--bg", "xkcd:353"])
    assert options == Options(
        image="xkcd:353", color=True, braille=True, width=40, depth=10, height=12, background=True
    )


def test_no_trim_and_verbose():
    options = parse_options(["--no-trim", "-v", "comic.png"])
    assert options.trim_border is False
    assert options.verbose is True


@pytest.mark.parametrize("argv", [["-w", "0", "xkcd"], ["-d", "256", "xkcd"], ["-h", "-1", "xkcd"]])
def test_invalid_values_rejected(argv):
    with pytest.raises(SystemExit):
        parse_options(argv)


def test_help(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_options(["--help"])
    assert exc.value.code == 0
    assert "--height" in capsys.readouterr().out


def test_main_prints_ascii(monkeypatch, capsys, png_bytes):
    data = png_bytes(Image.new("RGB", (50, 50), (255, 255, 255)))
    monkeypatch.setattr(cli, "fetch_image_bytes", lambda source: data)
    cli.main(["-w", "5", "xkcd"])
    assert capsys.readouterr().out == "$$$\n$$$\n$$$\n"


def test_main_colour(monkeypatch, capsys, png_bytes):
    data = png_bytes(Image.new("RGB", (30, 30), (0, 0, 255)))
    monkeypatch.setattr(cli, "fetch_image_bytes", lambda source: data)
    cli.main(["-c", "-w", "3", "xkcd"])
    assert capsys.readouterr().out == "\033[38;2;0;0;255m$\033[0m\n"


def test_main_reports_unknown_source(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["not-a-comic-source:1"])
    assert exc.value.code == 1
    assert "comicli: unknown source" in capsys.readouterr().err


def test_main_reports_decode_error(monkeypatch, capsys):
    monkeypatch.setattr(cli, "fetch_image_bytes", lambda source: b"garbage")
    with pytest.raises(SystemExit) as exc:
        cli.main(["xkcd"])
    assert exc.value.code == 1
    assert "Cannot decode" in capsys.readouterr().err


def test_main_reports_invalid_dimensions(monkeypatch, capsys, png_bytes):
    data = png_bytes(Image.new("RGB", (4, 4)))
    monkeypatch.setattr(cli, "fetch_image_bytes", lambda source: data)
    with pytest.raises(SystemExit) as exc:
        cli.main(["-w", "80", "xkcd"])
    assert exc.value.code == 1
    assert "tiles would be empty" in capsys.readouterr().err


def test_main_reports_overlong_source(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["comic:" + "9" * 5000])
    assert exc.value.code == 1
    assert "comicli: unknown source" in capsys.readouterr().err
