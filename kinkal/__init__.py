"""Kinematic Kalman fit building blocks: units, time ranges, chi-squared, fit data, particle states and magnetic field maps."""

__version__ = "0.1.0"