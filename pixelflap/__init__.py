"""A single-screen flap-through-the-pipes arcade game built on pygame."""

__version__ = "0.1.0"
