"""Tests for envelope-based onset detection."""

import numpy as np
import pytest

from pitchscribe.analysis import OnsetDetector

W = 1600


def blocks(levels):
    """Constant-amplitude blocks, one onset frame each."""
    return np.repeat(np.asarray(levels, dtype=float), W)


class TestOnsetDetector:

    @pytest.fixture
    def detector(self):
        return OnsetDetector(frame_width=W, threshold=0.125)

    def test_envelope_centers_and_values(self, detector):
        samples = blocks([0.0, -0.5, 1.0])
        centers, values = detector.envelope(samples)
        assert centers.tolist() == [800, 2400, 4000]
        assert values.tolist() == [0.0, 0.5, 1.0]

    def test_trailing_partial_frame_ignored(self, detector):
        samples = np.concatenate([blocks([0.0, 0.0]), np.ones(W - 1)])
        centers, _ = detector.envelope(samples)
        assert len(centers) == 2
        assert detector.detect(samples) == []

    def test_envelope_difference(self):
        diff = OnsetDetector.envelope_difference(np.array([0.0, 0.5, 0.25]))
        assert diff.tolist() == [0.0, 0.5, -0.25]
        assert len(OnsetDetector.envelope_difference(np.array([]))) == 0

    def test_single_rise(self, detector):
        assert detector.detect(blocks([0, 0, 1, 1, 1, 1])) == [2 * W + W // 2]

    def test_first_frame_never_an_onset(self, detector):
        # The first envelope difference is defined as zero
        assert detector.detect(blocks([1, 1, 1])) == []

    def test_small_rise_ignored(self, detector):
        assert detector.detect(blocks([0.5, 0.6, 0.7, 0.8])) == []

    def test_frame_after_onset_is_suppressed(self, detector):
        onsets = detector.detect(blocks([0.0, 0.3, 0.6, 0.9, 0.9]))
        assert onsets == [W + W // 2, 3 * W + W // 2]

    def test_rise_after_decay(self, detector):
        onsets = detector.detect(blocks([0.0, 1.0, 1.0, 0.0, 0.0, 1.0]))
        assert onsets == [W + W // 2, 5 * W + W // 2]

    def test_onsets_ascending(self, detector):
        onsets = detector.detect(blocks([0, 1, 0, 1, 0, 1, 0, 1]))
        assert onsets == sorted(onsets)
        assert len(set(onsets)) == len(onsets)

    def test_custom_frame_width(self):
        detector = OnsetDetector(frame_width=100, threshold=0.125)
        samples = np.concatenate([np.zeros(300), np.ones(300)])
        assert detector.detect(samples) == [350]
