import logging

from fingerprint_dashboard.utils.logger import resolve_level


def test_known_level_names():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert resolve_level("VERBOSE") == logging.INFO
    assert resolve_level("") == logging.INFO
