from numpy import inf, isclose

from ...schemes.ewald import Ewald
from ...schemes.poisson import Poisson
from ..io import parse_scheme_parameters, print_to_logger, read_scheme, write_scheme

from pytest import mark, raises


def test_write_read_scheme(tmp_path):
    """Test that a scheme saved to YAML is rebuilt with the same interactions."""
    pot = Poisson(cutoff=29.0, C=3, D=3, debye_length=23.0)
    filename = tmp_path / "scheme.yaml"
    write_scheme(pot, filename)

    new_pot = read_scheme(filename)

    assert isinstance(new_pot, Poisson)
    assert new_pot.to_dict() == pot.to_dict()
    assert new_pot.ion_potential(2.0, 23.0) == pot.ion_potential(2.0, 23.0)


def test_read_scheme_aliases(tmp_path):
    """Test the aliases of the parameters and infinity strings."""
    filename = tmp_path / "input.yaml"
    filename.write_text(
        "Scheme:\n"
        "    type: Ewald\n"
        "    cutoff: 29.0\n"
        "    alpha: 0.1\n"
        "    epss: 80.0\n"
        "    debyelength: inf\n"
    )

    pot = read_scheme(filename)

    assert isinstance(pot, Ewald)
    assert pot.debye_length is None
    assert pot.eps_sur == 80.0
    assert isclose(pot.T0, 2.0 * 79.0 / 161.0)


def test_read_scheme_missing_block(tmp_path):
    filename = tmp_path / "input.yaml"
    filename.write_text("IO:\n    verbose: true\n")

    with raises(KeyError):
        read_scheme(filename)


@mark.parametrize("value", ["inf", "Infinity", "INF"])
def test_parse_scheme_parameters(value):
    params = parse_scheme_parameters({"DebyeLength": value, "cutoff": 29.0})

    assert params == {"debye_length": inf, "cutoff": 29.0}


def test_print_to_logger(tmp_path, capsys):
    log_file = tmp_path / "log.out"
    print_to_logger("first message", log_file)
    print_to_logger("second message", log_file, print_to_screen=True)

    assert log_file.read_text() == "first message\nsecond message\n"
    assert capsys.readouterr().out == "second message\n"


def test_read_scheme_case_insensitive_keys(tmp_path):
    filename = tmp_path / "input.yaml"
    filename.write_text(
        "Scheme:\n"
        "    type: poisson\n"
        "    Cutoff: 29.0\n"
        "    c: 3\n"
        "    d: 3\n"
        "    Debye_Length: 23.0\n"
    )

    pot = read_scheme(filename)

    assert pot.to_dict() == Poisson(cutoff=29.0, C=3, D=3, debye_length=23.0).to_dict()
