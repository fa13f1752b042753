"""
Tests for progress reporting abstraction.
"""

from groundshade.progress import ProgressReporter, get_progress_iterator


class TestProgressReporter:
    """Test the ProgressReporter class."""

    def test_progress_reporter_basic_usage(self):
        """Test basic ProgressReporter usage."""
        reporter = ProgressReporter(total=10, desc="Test", disable=True)

        for _ in range(10):
            reporter.update(1)

        reporter.close()

        assert reporter.current == 10

    def test_progress_reporter_update_increments(self):
        """Test that update() increments current count."""
        reporter = ProgressReporter(total=100, disable=True)

        reporter.update(5)
        assert reporter.current == 5

        reporter.update(10)
        assert reporter.current == 15

        reporter.close()

    def test_progress_reporter_with_tqdm(self):
        """Test ProgressReporter with tqdm backend."""
        reporter = ProgressReporter(total=10, desc="Test with tqdm")

        assert reporter._tqdm_bar is not None

        reporter.update(5)
        reporter.close()

        assert reporter.current == 5

    def test_progress_reporter_callback(self):
        """Test that a callback replaces the tqdm bar."""
        calls = []
        reporter = ProgressReporter(total=4, callback=lambda current, total: calls.append((current, total)))

        assert reporter._tqdm_bar is None

        reporter.update(1)
        reporter.update(3)
        reporter.close()

        assert calls == [(1, 4), (4, 4)]

    def test_progress_reporter_disabled_skips_callback(self):
        """Test that disabled mode never calls the callback."""
        calls = []
        reporter = ProgressReporter(total=4, callback=lambda current, total: calls.append(current), disable=True)

        reporter.update(2)
        reporter.close()

        assert calls == []
        assert reporter.current == 2

    def test_progress_reporter_close_idempotent(self):
        """Test that close() can be called multiple times."""
        reporter = ProgressReporter(total=10, disable=True)

        reporter.close()
        reporter.close()

    def test_progress_reporter_update_after_close_ignored(self):
        """Test that updates after close() are ignored."""
        reporter = ProgressReporter(total=10, disable=True)
        reporter.update(3)
        reporter.close()
        reporter.update(3)

        assert reporter.current == 3


class TestProgressIterator:
    """Test the get_progress_iterator() wrapper."""

    def test_iterates_all_items(self):
        items = list(get_progress_iterator(range(5), desc="Test", disable=True))

        assert items == [0, 1, 2, 3, 4]

    def test_reports_each_item(self):
        calls = []
        for _ in get_progress_iterator(["a", "b", "c"], callback=lambda current, total: calls.append((current, total))):
            pass

        assert calls == [(1, 3), (2, 3), (3, 3)]

    def test_generator_without_len(self):
        calls = []
        gen = (i for i in range(3))

        items = list(get_progress_iterator(gen, callback=lambda current, total: calls.append((current, total))))

        assert items == [0, 1, 2]
        assert calls == [(1, 0), (2, 0), (3, 0)]
