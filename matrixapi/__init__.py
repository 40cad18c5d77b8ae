"""
Matrix Synapse Admin API client

A command-line client for the admin endpoints of Matrix/Synapse servers.
Reads server profiles from a TOML config file and fetches access tokens
from the `pass` password store.
"""

__version__ = "0.1.0"
__author__ = "matrixapi developers"
