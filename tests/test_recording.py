from subasta.recording import Artist, Recording, main


def test_artist_str_joins_names():
    assert str(Artist("Paul", "McCartney")) == "Paul McCartney"


def test_recording_str():
    record = Recording("Band on the run", Artist("Paul", "McCartney"), 1974)
    assert str(record) == (
        "La grabacion es:\nBand on the run\ncreada por Paul McCartney\nFecha: 1974\n"
    )


def test_comment_does_not_change_output():
    plain = Recording("Band on the run", Artist("Paul", "McCartney"), 1974)
    commented = Recording("Band on the run", Artist("Paul", "McCartney"), 1974)
    commented.comment = "excelente"
    assert commented.comment == "excelente"
    assert str(commented) == str(plain)


def test_main_prints_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == str(Recording("Band on the run", Artist("Paul", "McCartney"), 1974))