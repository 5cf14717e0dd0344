from subasta.movies import Director, Movie, main


def test_describe_includes_all_fields():
    movie = Movie("Interestelar", 2014, "Trama corta", Director("Christopher Nolan"))
    assert movie.describe() == (
        "Pelicula:\nNombre: Interestelar\n"
        "Año de filmacion: 2014\n"
        "Director: Christopher Nolan\n"
        "Trama: Trama corta\n"
    )


def test_director_defaults_to_empty_name():
    movie = Movie("Interestelar", 2014, "x")
    assert "Director: \n" in movie.describe()


def test_director_can_be_assigned_later():
    movie = Movie("Interestelar", 2014, "x")
    movie.director = Director("Christopher Nolan")
    assert "Director: Christopher Nolan\n" in movie.describe()


def test_main_prints_director_then_movie(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Christopher Nolan\nPelicula:\nNombre: Interestelar\n")
    assert "Año de filmacion: 2014\n" in out