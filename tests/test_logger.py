import logging

from yamlview.utils.logger import resolve_level

def test_known_levels():
    assert resolve_level('DEBUG') == logging.DEBUG
    assert resolve_level('WARNING') == logging.WARNING

def test_unknown_level_falls_back_to_info():
    assert resolve_level('VERBOSE') == logging.INFO
    assert resolve_level('') == logging.INFO
