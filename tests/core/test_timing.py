"""
Tests for the sectioned Timer.
"""

import pytest

from pymatrix.core.timing import Timer


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('routine'):
            pass
        with timer.section('routine'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'routine'}
        assert result['routine'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_section_recorded_on_exception(self):
        timer = Timer()
        with pytest.raises(ValueError):
            with timer.section('convert'):
                raise ValueError("boom")
        timer.start()
        timer.stop()
        assert 'convert' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

