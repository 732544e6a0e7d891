"""The ``interactor`` command-line interface."""
