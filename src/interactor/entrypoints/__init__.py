"""Entrypoints (inbound adapters) for INTERACTOR.

Expose the library to the outside world. Currently the only entrypoint is the
``interactor`` command-line interface, which loads an interactor or organizer
by reference, runs it with user-supplied data, and presents the outcome.
"""
