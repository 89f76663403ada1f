"""Ephemeris adapters/providers (optional).

This package provides thin wrappers around external ephemeris libraries,
used to cross-check the analytical solar series.
Install with:
  pip install "sunlight[ephemeris]"
"""

from ..core.errors import EphemerisUnavailableError

DEFAULT_KERNEL = "de421.bsp"


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "sunlight[ephemeris]"') from e


def load_ephemeris(directory: str = ".", kernel: str = DEFAULT_KERNEL):
    """
    Return (timescale, ephemeris) from skyfield, downloading `kernel`
    into `directory` on first use.
    """
    require_ephemeris()
    from skyfield.api import Loader

    load = Loader(directory)
    return load.timescale(), load(kernel)
