import pytest

from subasta.hello import greeting, main


def test_greeting_lowercase():
    assert greeting(False) == "holamundo"


def test_greeting_capitalized():
    assert greeting(True) == "Holamundo"


@pytest.mark.parametrize(
    "argv, expected",
    [([], "holamundo"), (["--capitalized"], "Holamundo"), (["-c"], "Holamundo")],
)
def test_main_prints_without_newline(argv, expected, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == expected


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])