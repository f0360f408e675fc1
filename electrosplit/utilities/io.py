"""
Module handling the Input/Output of schemes.
"""
import yaml
from numpy import inf

# Keys that are accepted in the YAML file, lowercase, and their bundle counterpart
PARAMETER_ALIASES = {
    "cutoff": "cutoff",
    "debye_length": "debye_length",
    "debyelength": "debye_length",
    "alpha": "alpha",
    "order": "order",
    "c": "C",
    "d": "D",
    "eps_sur": "eps_sur",
    "epss": "eps_sur",
}

INFINITY_STRINGS = ["inf", "infinity"]


def print_to_logger(message, log_file, print_to_screen: bool = False):
    """Print observable useful info to log file and to screen if `print_to_screen` is `True`.

    Parameters
    ----------
    message : str
        Message to append to log and screen.

    log_file: str
        Path to log file.

    print_to_screen : bool
        Flag for printing to screen. Default = `False`.

    """
    with open(log_file, "a+") as f_log:
        print(message, file=f_log)

    if print_to_screen:
        print(message)


def parse_scheme_parameters(input_dict: dict) -> dict:
    """
    Translate the content of a `Scheme` block into the parameter bundle of :func:`create_scheme`.

    Parameters
    ----------
    input_dict : dict
        Content of the `Scheme` block, without the `type` key.

    Returns
    -------
    params : dict
        Parameters with case-insensitive keys and aliases replaced by their bundle name and `inf` strings replaced by `numpy.inf`.

    """
    params = {}
    for key, value in input_dict.items():
        key = PARAMETER_ALIASES.get(key.lower(), key)

        if isinstance(value, str) and value.lower() in INFINITY_STRINGS:
            value = inf

        params[key] = value

    return params


def read_scheme(filename: str):
    """
    Parse a scheme from a YAML file.

    The file must contain a `Scheme` block with the tag of the scheme and its parameters, e.g.

    .. code-block:: yaml

        Scheme:
            type: poisson
            cutoff: 29.0
            C: 3
            D: 3
            debyelength: inf

    Parameters
    ----------
    filename: str
        Input YAML file.

    Returns
    -------
    scheme : :class:`electrosplit.schemes.core.SchemeBase`
        The scheme built by :func:`electrosplit.schemes.core.create_scheme`.

    Raises
    ------
    KeyError
        If the file has no `Scheme` block or the block has no `type`.

    """
    from ..schemes.core import create_scheme

    with open(filename, "r") as stream:
        dics = yaml.load(stream, Loader=yaml.FullLoader)

    block = dict(dics["Scheme"])
    scheme_type = block.pop("type")
    # Informative keys written by write_scheme
    block.pop("name", None)
    block.pop("doi", None)

    return create_scheme(scheme_type, **parse_scheme_parameters(block))


def write_scheme(scheme, filename: str):
    """
    Save the information needed to rebuild a scheme into a YAML file.

    Parameters
    ----------
    scheme : :class:`electrosplit.schemes.core.SchemeBase`
        Scheme to save.

    filename: str
        Output YAML file.

    """
    block = {}
    for key, value in scheme.to_dict().items():
        # numpy scalars are not dumped as plain numbers
        if hasattr(value, "item"):
            value = value.item()
        block[key] = value

    with open(filename, "w") as stream:
        yaml.dump({"Scheme": block}, stream, default_flow_style=False, sort_keys=False)
