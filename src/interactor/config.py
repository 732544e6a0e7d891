"""Configuration constants for INTERACTOR.

The library itself needs no configuration; these are the defaults and
environment variable names the command-line interface reads.
"""

import logging

ENV_PREFIX = "INTERACTOR"

LOGGER_LEVEL_ENVVAR = f"{ENV_PREFIX}_LOGGER_LEVEL"

# Applied before any -L overrides; keeps chatty libraries quiet by default.
DEFAULT_LOGGER_LEVELS = {"click_extra": logging.WARNING}
