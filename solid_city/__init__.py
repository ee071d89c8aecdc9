"""Solid City - Root Package.

A catalog of teaching examples for three object-oriented design principles.
Each example group keeps the anti-pattern and the recommended design side by
side so the contrast can be read, run and tested.

Key Components:
    - domain: the example groups and their capability interfaces
    - application: the example catalog and the service that runs it
    - infrastructure: console adapters and structured logging
    - config: typed configuration
    - cli: command-line entry points

Usage:
    >>> solid-city list
    >>> solid-city run substitution
    >>> solid-city run ocp --counter-example
    >>> solid-city-srp
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
