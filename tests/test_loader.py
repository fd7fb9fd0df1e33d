"""Tests for WAV decoding and the audio loader."""

import numpy as np
import pytest
import soundfile as sf

from pitchscribe.core import UnsupportedBitDepth, UnsupportedChannelCount, WavFileError
from pitchscribe.input import AudioData, AudioLoader, decode_wav

from generate_test_audio import SR, generate_sine_wave


def write_wav(path, data, subtype, sr=SR):
    sf.write(str(path), data, sr, subtype=subtype, format="WAV")
    return path


@pytest.fixture
def half_scale():
    return np.full(1000, 0.5)


class TestDecodeWav:
    """Tests for decode_wav."""

    @pytest.mark.parametrize("subtype", ["PCM_16", "PCM_24", "PCM_32", "FLOAT"])
    def test_bit_depths_are_normalized(self, tmp_path, half_scale, subtype):
        path = write_wav(tmp_path / f"{subtype}.wav", half_scale, subtype)

        audio = decode_wav(path)

        assert audio.samples.dtype == np.float64
        np.testing.assert_allclose(audio.samples, 0.5, atol=1e-3)

    def test_sample_rate_and_duration(self, tmp_path):
        path = write_wav(tmp_path / "sine.wav", generate_sine_wave(660.0, 0.5, 22050), "PCM_16", sr=22050)

        audio = decode_wav(path)

        assert audio.sample_rate == 22050
        assert audio.duration == 11025
        assert len(audio.samples) == audio.duration
        assert audio.duration_seconds == pytest.approx(0.5)

    def test_stereo_keeps_left_channel(self, tmp_path):
        stereo = np.column_stack([np.full(500, 0.5), np.full(500, -0.25)])
        path = write_wav(tmp_path / "stereo.wav", stereo, "PCM_16")

        audio = decode_wav(path)

        assert audio.duration == 500
        np.testing.assert_allclose(audio.samples, 0.5, atol=1e-3)

    def test_unsupported_channel_count(self, tmp_path):
        path = write_wav(tmp_path / "three.wav", np.zeros((100, 3)), "PCM_16")

        with pytest.raises(UnsupportedChannelCount) as excinfo:
            decode_wav(path)
        assert excinfo.value.channels == 3

    @pytest.mark.parametrize("subtype, bit_depth", [("PCM_U8", 8), ("DOUBLE", 64)])
    def test_unsupported_bit_depth(self, tmp_path, subtype, bit_depth):
        path = write_wav(tmp_path / "odd.wav", np.zeros(100), subtype)

        with pytest.raises(UnsupportedBitDepth) as excinfo:
            decode_wav(path)
        assert excinfo.value.bit_depth == bit_depth
        assert isinstance(excinfo.value, WavFileError)

    def test_read_wav_file(self, tmp_path, half_scale):
        path = write_wav(tmp_path / "a.wav", half_scale, "PCM_16")
        assert isinstance(AudioData.read_wav_file(path), AudioData)


class TestAudioLoader:
    """Tests for AudioLoader."""

    def test_load(self, tmp_path, half_scale):
        path = write_wav(tmp_path / "a.wav", half_scale, "PCM_16")
        loader = AudioLoader()

        audio = loader.load(str(path))

        assert audio.sample_rate == SR
        assert loader.get_duration(audio) == pytest.approx(1000 / SR)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AudioLoader().load(tmp_path / "missing.wav")

    def test_unsupported_format(self, tmp_path):
        dummy_file = tmp_path / "test.xyz"
        dummy_file.write_text("dummy content")

        with pytest.raises(ValueError, match="Unsupported format"):
            AudioLoader().load(str(dummy_file))
