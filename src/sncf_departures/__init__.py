"""Live SNCF departures countdown for the terminal."""

__version__ = "0.1.0"
