"""Tests for logger naming."""

import logging

from zonetree.log import ROOT_LOGGER, get_logger


def test_package_loggers_keep_their_name():
    assert get_logger("zonetree.core.tree.mutation").name == "zonetree.core.tree.mutation"


def test_foreign_names_nest_under_package():
    assert get_logger("host_app").name == f"{ROOT_LOGGER}.host_app"


def test_default_is_package_logger():
    assert get_logger() is logging.getLogger(ROOT_LOGGER)


def test_noop_mutations_log_at_debug(caplog, nested_doc):
    from zonetree import remove_components

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER):
        remove_components(nested_doc, {"missing"})
    assert "none of 1 ids found" in caplog.text
