"""
Module handling the scheme base class and the creation of schemes from their tags.
"""
from abc import ABC, abstractmethod
from numpy import inf, isinf, ndarray
from warnings import warn

from ..utilities.exceptions import AlgorithmWarning, InvalidParameterError

SCHEME_TYPES = ["plain", "ewald", "wolf", "poisson_simple", "poisson", "qpotential", "fanourgakis"]

SCHEME_ALIASES = {
    "poissonsimple": "poisson_simple",
    "q-potential": "qpotential",
    "qpot": "qpotential",
}

# Parameters each scheme accepts from the parameter bundle.
SCHEME_PARAMETERS = {
    "plain": ["debye_length"],
    "ewald": ["cutoff", "alpha", "eps_sur", "debye_length"],
    "wolf": ["cutoff", "alpha"],
    "poisson_simple": ["cutoff", "C", "D"],
    "poisson": ["cutoff", "C", "D", "debye_length"],
    "qpotential": ["cutoff", "order"],
    "fanourgakis": ["cutoff"],
}

PARAMETER_BUNDLE = ["cutoff", "debye_length", "alpha", "order", "C", "D", "eps_sur"]


class SchemeBase(ABC):
    r"""
    Public interface of every truncation scheme.

    Attributes
    ----------
    scheme_type : str
        Tag of the scheme. One of :data:`SCHEME_TYPES`.

    name : str
        Descriptive name.

    doi : str
        DOI or citation of the original reference.

    cutoff : float
        Cut-off distance. `numpy.inf` for an unbounded scheme.

    debye_length : float
        Debye length. `None` when there is no screening.

    kappa : float
        Inverse Debye length. Zero when there is no screening.

    self_energy_prefactor : numpy.ndarray
        Prefactors of the self-energy. Index 0 for monopoles, 1 for dipoles.

    T0 : float
        Spatial Fourier transformed modified interaction tensor, used to calculate the dielectric constant.

    """

    scheme_type: str = None
    name: str = ""
    doi: str = ""
    cutoff: float = inf
    debye_length: float = None
    kappa: float = 0.0
    self_energy_prefactor: ndarray = None
    T0: float = 0.0

    def __repr__(self):
        disp = f"{type(self).__name__}( \n"
        for key, value in self.to_dict().items():
            disp += "\t{} : {}\n".format(key, value)
        disp += ")"
        return disp

    def dielectric_constant(self, M2V):
        r"""
        Calculate the dielectric constant from the dipole fluctuations of the system.

        Parameters
        ----------
        M2V : float
            The aggregate

            .. math::
                M2V = \frac{\langle M^2\rangle}{ 3\varepsilon_0Vk_BT }

            where :math:`\langle M^2\rangle` is the mean value of the system dipole moment squared,
            :math:`\varepsilon_0` the vacuum permittivity, :math:`V` the volume of the system,
            :math:`k_B` the Boltzmann constant, and :math:`T` the temperature.

        Returns
        -------
        _ : float
            Dielectric constant

            .. math::
                \varepsilon_r = \frac{M2V T_0 + 2 M2V + 1}{M2V T_0 - M2V + 1}

        """
        return (M2V * self.T0 + 2.0 * M2V + 1.0) / (M2V * self.T0 - M2V + 1.0)

    calc_dielectric = dielectric_constant

    def shape_parameters(self) -> dict:
        """Scheme specific parameters needed to rebuild the scheme. Overridden by schemes that have any."""
        return {}

    def to_dict(self) -> dict:
        """
        Collect the information needed to persist and rebuild the scheme.

        Returns
        -------
        out : dict
            Scheme tag, name, DOI, finite cutoff, finite Debye length, and the scheme specific parameters.

        """
        out = {"type": self.scheme_type, "name": self.name}
        if self.doi:
            out["doi"] = self.doi
        if not isinf(self.cutoff):
            out["cutoff"] = self.cutoff
        if self.debye_length is not None:
            out["debye_length"] = self.debye_length
        out.update(self.shape_parameters())

        return out

    def pretty_print(self):
        """Print scheme information in a user-friendly way."""

        msg = f"\nSCHEME: {self.name} ({self.scheme_type})\n"
        if self.doi:
            msg += f"Reference: {self.doi}\n"
        msg += f"Cut-off radius: rc = {self.cutoff:.6e}\n"
        if self.debye_length is not None:
            msg += f"Debye length = {self.debye_length:.6e}, kappa = {self.kappa:.6e}\n"
        for key, value in self.shape_parameters().items():
            msg += f"{key} = {value}\n"
        msg += (
            f"Self-energy prefactors: {self.self_energy_prefactor[0]:.6e}, {self.self_energy_prefactor[1]:.6e}\n"
            f"T0 = {self.T0:.6e}"
        )
        print(msg)

    @abstractmethod
    def ion_potential(self, z, r):
        """Potential from a charge `z` at distance `r`."""

    @abstractmethod
    def dipole_potential(self, mu, r_vec):
        """Potential from a dipole `mu` at distance-vector `r_vec`."""

    @abstractmethod
    def ion_field(self, z, r_vec):
        """Field from a charge `z` at distance-vector `r_vec`."""

    @abstractmethod
    def dipole_field(self, mu, r_vec):
        """Field from a dipole `mu` at distance-vector `r_vec`."""

    @abstractmethod
    def ion_ion_energy(self, zA, zB, r):
        """Interaction energy between two charges."""

    @abstractmethod
    def ion_dipole_energy(self, z, mu, r_vec):
        """Interaction energy between a charge and a dipole."""

    @abstractmethod
    def dipole_dipole_energy(self, muA, muB, r_vec):
        """Interaction energy between two dipoles."""

    @abstractmethod
    def ion_ion_force(self, zA, zB, r_vec):
        """Force between two charges."""

    @abstractmethod
    def ion_dipole_force(self, z, mu, r_vec):
        """Force between a charge and a dipole."""

    @abstractmethod
    def dipole_dipole_force(self, muA, muB, r_vec):
        """Force between two dipoles."""

    @abstractmethod
    def dipole_torque(self, mu, E):
        """Torque exerted on a dipole by a field."""

    @abstractmethod
    def self_energy(self, moments):
        """Self-energy from the squared moments."""


def create_scheme(scheme_type: str, **params) -> SchemeBase:
    """
    Create a scheme from its tag and a bundle of parameters.

    Parameters
    ----------
    scheme_type : str
        Tag of the scheme. One of :data:`SCHEME_TYPES`, case insensitive.

    **params :
        Parameter bundle. Allowed keys: `cutoff`, `debye_length`, `alpha`, `order`, `C`, `D`, `eps_sur`.
        Keys that the chosen scheme does not use are ignored with an :class:`AlgorithmWarning`.

    Returns
    -------
    scheme : :class:`SchemeBase`
        The constructed scheme.

    Raises
    ------
    InvalidParameterError
        If the tag is unknown or a parameter is outside the bundle.

    Examples
    --------
    >>> pot = create_scheme("poisson", cutoff=29.0, C=3, D=3, debye_length=23.0)
    >>> round(float(pot.ion_potential(2.0, 23.0)), 10)
    0.0033442193

    """
    # Enforce consistency
    scheme_type = scheme_type.lower()
    scheme_type = SCHEME_ALIASES.get(scheme_type, scheme_type)

    if scheme_type not in SCHEME_TYPES:
        raise InvalidParameterError(f"Unknown scheme '{scheme_type}'. Choices are {SCHEME_TYPES}.")

    unknown = [key for key in params if key not in PARAMETER_BUNDLE]
    if unknown:
        raise InvalidParameterError(f"Unknown parameters {unknown}. Allowed parameters are {PARAMETER_BUNDLE}.")

    unused = [key for key in params if key not in SCHEME_PARAMETERS[scheme_type]]
    if unused:
        warn(f"\nParameters {unused} are not used by the '{scheme_type}' scheme.", category=AlgorithmWarning)
    kwargs = {key: value for key, value in params.items() if key in SCHEME_PARAMETERS[scheme_type]}

    if scheme_type == "plain":
        from .plain import Plain

        scheme = Plain(**kwargs)

    elif scheme_type == "ewald":
        from .ewald import Ewald

        scheme = Ewald(**kwargs)

    elif scheme_type == "wolf":
        from .wolf import Wolf

        scheme = Wolf(**kwargs)

    elif scheme_type == "poisson_simple":
        from .poisson import PoissonSimple

        scheme = PoissonSimple(**kwargs)

    elif scheme_type == "poisson":
        from .poisson import Poisson

        scheme = Poisson(**kwargs)

    elif scheme_type == "qpotential":
        from .qpotential import QPotential

        scheme = QPotential(**kwargs)

    elif scheme_type == "fanourgakis":
        from .fanourgakis import Fanourgakis

        scheme = Fanourgakis(**kwargs)

    return scheme


def scheme_from_dict(input_dict: dict) -> SchemeBase:
    """
    Rebuild a scheme from the output of :meth:`SchemeBase.to_dict`.

    Parameters
    ----------
    input_dict : dict
        Dictionary with the key `type` and the parameter bundle. The keys `name` and `doi` are ignored.

    Returns
    -------
    scheme : :class:`SchemeBase`

    """
    params = {key: value for key, value in input_dict.items() if key not in ["type", "name", "doi"]}

    return create_scheme(input_dict["type"], **params)
