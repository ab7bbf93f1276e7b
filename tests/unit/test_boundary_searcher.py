"""
Unit tests for BoundarySearcher.

Tests that the configured searcher returns the same results as the plain
functions and honours the sortedness check and search tracing settings.
"""

import logging
import pytest

from bsearch.models.config import BsearchConfig, SearchConfig, LoggingConfig, PACKAGE_LOGGER
from bsearch.models.ordering import by_key
from bsearch.tools.boundary import BoundarySearcher, UnsortedSequenceError


DATA = [10, 20, 30, 40, 50]


class TestBoundarySearcher:
    """Test cases for the BoundarySearcher class."""

    def test_default_config(self):
        """Test that a searcher built without config uses defaults."""
        searcher = BoundarySearcher()
        assert searcher.config.check_sorted is False
        assert searcher.config.trace_searches is False

    def test_scenarios(self):
        """Test the documented scenarios through the searcher."""
        searcher = BoundarySearcher()

        assert searcher.search_ge(DATA, 30) == 2
        assert searcher.search_ge(DATA, 35) == 3
        assert searcher.search_ge(DATA, 5) == 0
        assert searcher.search_ge(DATA, 100) is None

        assert searcher.search_le(DATA, 30) == 2
        assert searcher.search_le(DATA, 35) == 2
        assert searcher.search_le(DATA, 100) == 4
        assert searcher.search_le(DATA, 5) is None

        assert searcher.search_eq(DATA, 30) == 2
        assert searcher.search_eq(DATA, 35) is None

    def test_empty_sequence(self):
        """Test that every search on an empty sequence returns None."""
        searcher = BoundarySearcher(SearchConfig(check_sorted=True))

        assert searcher.search_ge([], 1) is None
        assert searcher.search_le([], 1) is None
        assert searcher.search_eq([], 1) is None

    def test_custom_comparator(self):
        """Test passing a comparator through the searcher."""
        searcher = BoundarySearcher()
        words = ["a", "bb", "ccc", "dddd"]

        assert searcher.search_eq(words, 3, by_key(len)) == 2

    def test_check_sorted_rejects_unsorted(self):
        """Test that enabling check_sorted raises on unsorted input."""
        searcher = BoundarySearcher(SearchConfig(check_sorted=True))

        with pytest.raises(UnsortedSequenceError) as exc_info:
            searcher.search_ge([1, 2, 5, 4], 3)

        assert exc_info.value.index == 2

    def test_check_sorted_accepts_sorted(self):
        """Test that enabling check_sorted does not change results on sorted input."""
        searcher = BoundarySearcher(SearchConfig(check_sorted=True))

        assert searcher.search_ge(DATA, 25) == 2
        assert searcher.search_le(DATA, 25) == 1
        assert searcher.search_eq(DATA, 50) == 4

    def test_unsorted_input_without_check(self):
        """Test that unsorted input is not detected unless check_sorted is on."""
        searcher = BoundarySearcher()
        result = searcher.search_ge([1, 2, 5, 4], 3)
        assert result is None or 0 <= result < 4

    def test_trace_searches_logs(self, caplog):
        """Test that tracing emits one DEBUG record per search."""
        caplog.set_level(logging.DEBUG, logger="bsearch")
        searcher = BoundarySearcher(SearchConfig(trace_searches=True))

        searcher.search_ge(DATA, 35)
        searcher.search_eq(DATA, 35)

        messages = [record.getMessage() for record in caplog.records]
        assert "search_ge over 5 elements for 35 -> 3" in messages
        assert "search_eq over 5 elements for 35 -> None" in messages
        assert all(record.levelno == logging.DEBUG for record in caplog.records)

    def test_no_logging_without_trace(self, caplog):
        """Test that searches are silent when tracing is off."""
        caplog.set_level(logging.DEBUG, logger="bsearch")
        searcher = BoundarySearcher()

        searcher.search_le(DATA, 35)

        assert caplog.records == []

    def test_logger_name(self):
        """Test that the searcher logs under the package logger hierarchy."""
        searcher = BoundarySearcher()
        assert searcher.logger.name == "bsearch.tools.boundary.BoundarySearcher"

    def test_check_sorted_with_key_comparator(self):
        """Test that sortedness checking works with a by_key comparator."""
        searcher = BoundarySearcher(SearchConfig(check_sorted=True))
        records = [(10, 'a'), (20, 'b'), (30, 'c')]
        by_first = by_key(lambda record: record[0])

        assert searcher.search_ge(records, 20, by_first) == 1
        assert searcher.search_le(records, 25, by_first) == 1
        assert searcher.search_eq(records, 30, by_first) == 2

    def test_check_sorted_with_key_comparator_rejects_unsorted(self):
        """Test that out-of-order keys are still detected through by_key."""
        searcher = BoundarySearcher(SearchConfig(check_sorted=True))
        records = [(10, 'a'), (30, 'b'), (20, 'c')]

        with pytest.raises(UnsortedSequenceError) as exc_info:
            searcher.search_ge(records, 20, by_key(lambda record: record[0]))

        assert exc_info.value.index == 1


class TestFromConfig:
    """Test cases for building a searcher from a full configuration."""

    def test_uses_search_section(self):
        """Test that the search section becomes the searcher's config."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        previous = package_logger.level
        config = BsearchConfig(search=SearchConfig(check_sorted=True, trace_searches=True))

        try:
            searcher = BoundarySearcher.from_config(config)
            assert searcher.config == config.search
        finally:
            package_logger.setLevel(previous)

    def test_applies_logging_section(self, caplog):
        """Test that the logging level is applied so tracing reaches handlers."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        previous = package_logger.level
        caplog.set_level(logging.DEBUG)

        try:
            config = BsearchConfig(
                search=SearchConfig(trace_searches=True),
                logging=LoggingConfig(level="DEBUG")
            )
            package_logger.setLevel(logging.WARNING)

            searcher = BoundarySearcher.from_config(config)
            assert package_logger.level == logging.DEBUG

            searcher.search_ge(DATA, 35)
            assert "search_ge over 5 elements for 35 -> 3" in [r.getMessage() for r in caplog.records]
        finally:
            package_logger.setLevel(previous)
