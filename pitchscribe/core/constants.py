"""Global constants for Pitchscribe."""

# Pitch classes in note-number order (note number 0 = A)
NOTE_NAMES = ["A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#"]

# Reference pitch for note naming
A4_FREQUENCY = 440.0

# McLeod Pitch Method
DEFAULT_MPM_THRESHOLD = 0.7

# Transcription pipeline
MAX_FRAME_WIDTH = 8192  # Caps autocorrelation cost per frame
SILENCE_RMS_RATIO = 0.2  # Fraction of whole-buffer RMS a frame must reach

# Onset detection
ONSET_FRAME_WIDTH = 1600
ONSET_THRESHOLD = 0.125

# Fixed-width pitch tracking
DEFAULT_FRAME_WIDTH = 4096
DEFAULT_STEP_SIZE = 1024

# Maximum integer sample value per PCM bit depth
MAX_16BIT = 32767
MAX_24BIT = 8388607
MAX_32BIT = 2147483647
MAX_SAMPLE_VALUES = {16: MAX_16BIT, 24: MAX_24BIT, 32: MAX_32BIT}
