import numpy as np
import pytest

from application.ports.audio_trimmer_port import ISilenceTrimmer
from infrastructure.audio.numpy_audio_trimmer import RmsSilenceTrimmer
from trimmer.silence import rms, db_to_rms_threshold, trim_samples
from trimmer.utils import FULL_SCALE, WINDOW_SIZE


# Helpers


def make_burst(
    silence: int, loud: int, value: int = 1000, tail: int = -1
) -> np.ndarray:
    """Leading silence + constant loud block + trailing silence."""
    tail = silence if tail < 0 else tail
    return np.concatenate([
        np.zeros(silence, dtype=np.int16),
        np.full(loud, value, dtype=np.int16),
        np.zeros(tail, dtype=np.int16),
    ])


class TestRms:
    """Tests for the windowed energy estimate."""

    def test_silence_is_zero(self) -> None:
        assert rms(np.zeros(10, dtype=np.int16)) == 0.0

    def test_empty_chunk_is_zero(self) -> None:
        assert rms(np.array([], dtype=np.int16)) == 0.0

    def test_empty_list_is_zero(self) -> None:
        assert rms([]) == 0.0

    def test_full_scale_positive(self) -> None:
        chunk: np.ndarray = np.full(10, 32767, dtype=np.int16)
        assert rms(chunk) == pytest.approx(32767.0, abs=1e-6)

    def test_full_scale_negative_does_not_overflow(self) -> None:
        chunk: np.ndarray = np.full(800, -32768, dtype=np.int16)
        assert rms(chunk) == pytest.approx(32768.0, abs=1e-6)

    @pytest.mark.parametrize("value", [1, -1, 250, -4096, 12345])
    def test_constant_chunk_equals_magnitude(self, value: int) -> None:
        chunk: np.ndarray = np.full(37, value, dtype=np.int16)
        assert rms(chunk) == pytest.approx(abs(value), abs=1e-6)

    def test_alternating_sign(self) -> None:
        chunk: np.ndarray = np.array([3, -3, 3, -3], dtype=np.int16)
        assert rms(chunk) == pytest.approx(3.0)

    def test_mixed_values(self) -> None:
        chunk: np.ndarray = np.array([3, 4], dtype=np.int16)
        # sqrt((9 + 16) / 2)
        assert rms(chunk) == pytest.approx(np.sqrt(12.5))

    def test_returns_python_float(self) -> None:
        assert isinstance(rms(np.ones(4, dtype=np.int16)), float)


class TestDbToRmsThreshold:
    """Tests for the dBFS → linear RMS conversion."""

    def test_zero_db_is_full_scale(self) -> None:
        assert db_to_rms_threshold(0.0) == pytest.approx(FULL_SCALE)

    def test_minus_20_db_is_tenth(self) -> None:
        assert db_to_rms_threshold(-20.0) == pytest.approx(3276.8)

    def test_minus_40_db(self) -> None:
        assert db_to_rms_threshold(-40.0) == pytest.approx(327.68)

    def test_higher_threshold_raises_bar(self) -> None:
        assert db_to_rms_threshold(-35.0) > db_to_rms_threshold(-50.0)


class TestTrimSamples:
    """Tests for leading/trailing silence boundary detection."""

    def test_empty_input_returns_empty(self) -> None:
        result: np.ndarray = trim_samples(np.array([], dtype=np.int16), -50.0, 100)
        assert len(result) == 0
        assert result.dtype == np.int16

    @pytest.mark.parametrize("length", [1, 99, 100, 1000, 4321])
    def test_all_silence_returns_empty(self, length: int) -> None:
        samples: np.ndarray = np.zeros(length, dtype=np.int16)
        assert len(trim_samples(samples, -50.0, 100)) == 0

    def test_leading_trailing_silence_removed(self) -> None:
        samples: np.ndarray = make_burst(silence=800, loud=400)
        trimmed: np.ndarray = trim_samples(samples, -40.0, 200)
        np.testing.assert_array_equal(trimmed, np.full(400, 1000, dtype=np.int16))

    def test_default_window_on_aligned_burst(self) -> None:
        samples: np.ndarray = make_burst(silence=1600, loud=3200, value=8000)
        trimmed: np.ndarray = trim_samples(samples, -50.0, WINDOW_SIZE)
        assert len(trimmed) == 3200
        assert np.all(trimmed == 8000)

    def test_asymmetric_silence(self) -> None:
        samples: np.ndarray = make_burst(silence=300, loud=600, tail=900)
        trimmed: np.ndarray = trim_samples(samples, -40.0, 300)
        assert len(trimmed) == 600

    def test_no_silence_is_identity(self) -> None:
        samples: np.ndarray = np.full(1000, 1000, dtype=np.int16)
        trimmed: np.ndarray = trim_samples(samples, -60.0, 100)
        np.testing.assert_array_equal(trimmed, samples)

    def test_no_silence_with_partial_last_window(self) -> None:
        samples: np.ndarray = np.full(1050, -2000, dtype=np.int16)
        trimmed: np.ndarray = trim_samples(samples, -60.0, 100)
        np.testing.assert_array_equal(trimmed, samples)

    def test_idempotent(self) -> None:
        samples: np.ndarray = make_burst(silence=800, loud=1600)
        once: np.ndarray = trim_samples(samples, -40.0, 200)
        twice: np.ndarray = trim_samples(once, -40.0, 200)
        np.testing.assert_array_equal(once, twice)

    def test_quiet_signal_below_threshold_is_silence(self) -> None:
        # RMS 100 < 327.68 (-40 dBFS)
        samples: np.ndarray = make_burst(silence=200, loud=400, value=100)
        assert len(trim_samples(samples, -40.0, 100)) == 0

    def test_higher_threshold_trims_more(self) -> None:
        samples: np.ndarray = make_burst(silence=200, loud=400, value=1000)
        assert len(trim_samples(samples, -40.0, 100)) == 400
        # 1000 < 10^(-25/20) * 32768 ≈ 1842
        assert len(trim_samples(samples, -25.0, 100)) == 0

    def test_threshold_is_strict(self) -> None:
        # constant 3277 vs threshold 3276.8 passes, 3276 does not
        loud: np.ndarray = np.full(100, 3277, dtype=np.int16)
        quiet: np.ndarray = np.full(100, 3276, dtype=np.int16)
        assert len(trim_samples(loud, -20.0, 50)) == 100
        assert len(trim_samples(quiet, -20.0, 50)) == 0

    def test_window_larger_than_sequence_loud(self) -> None:
        samples: np.ndarray = make_burst(silence=10, loud=80)
        trimmed: np.ndarray = trim_samples(samples, -40.0, 1000)
        # Whole sequence is one window for both scans
        np.testing.assert_array_equal(trimmed, samples)

    def test_window_larger_than_sequence_quiet(self) -> None:
        samples: np.ndarray = make_burst(silence=100, loud=1, value=1000)
        assert len(trim_samples(samples, -40.0, 1000)) == 0

    def test_window_granularity_keeps_partial_silence(self) -> None:
        # Loud block not aligned to the window grid: boundary windows keep
        # some silence around it
        samples: np.ndarray = make_burst(silence=150, loud=200)
        trimmed: np.ndarray = trim_samples(samples, -40.0, 100)
        assert len(trimmed) == 300
        assert trimmed[0] == 0 and trimmed[-1] == 0

    def test_backward_grid_anchored_at_end(self) -> None:
        # len 250, w 100: right boundaries 250, 150, 50
        samples: np.ndarray = np.concatenate([
            np.full(100, 5000, dtype=np.int16),
            np.zeros(150, dtype=np.int16),
        ])
        trimmed: np.ndarray = trim_samples(samples, -40.0, 100)
        # window [50, 150) has RMS 5000 / sqrt(2) → end at 150
        assert len(trimmed) == 150

    def test_single_spike_averaged_out(self) -> None:
        samples: np.ndarray = np.zeros(800, dtype=np.int16)
        samples[400] = 3000
        # RMS of the window ≈ 106, below -40 dBFS (327.68)
        assert len(trim_samples(samples, -40.0, 800)) == 0

    def test_input_not_mutated(self) -> None:
        samples: np.ndarray = make_burst(silence=200, loud=200)
        original: np.ndarray = samples.copy()
        trim_samples(samples, -40.0, 100)
        np.testing.assert_array_equal(samples, original)

    def test_result_is_a_copy(self) -> None:
        samples: np.ndarray = np.full(200, 1000, dtype=np.int16)
        trimmed: np.ndarray = trim_samples(samples, -40.0, 100)
        trimmed[0] = 0
        assert samples[0] == 1000

    def test_accepts_python_list(self) -> None:
        trimmed: np.ndarray = trim_samples([0, 0, 5000, 5000, 0, 0], -40.0, 2)
        assert trimmed.tolist() == [5000, 5000]

    def test_zero_window_is_unchecked_precondition(self) -> None:
        with pytest.raises(ValueError):
            trim_samples(np.ones(10, dtype=np.int16), -50.0, 0)


class TestRmsSilenceTrimmer:
    """Tests for the ISilenceTrimmer adapter."""

    def test_implements_port(self) -> None:
        assert isinstance(RmsSilenceTrimmer(), ISilenceTrimmer)

    def test_matches_trim_samples(self) -> None:
        samples: np.ndarray = make_burst(silence=800, loud=400)
        expected: np.ndarray = trim_samples(samples, -40.0, 200)
        result: np.ndarray = RmsSilenceTrimmer().trim(samples, -40.0, 200)
        np.testing.assert_array_equal(result, expected)
