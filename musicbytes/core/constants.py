"""Global constants for musicbytes."""

# Bitstream record format
MIN_FILE_SIZE = 15  # bytes
TEMPO_BITS = 8
PITCH_BITS = 3
DURATION_BITS = 4
VOLUME_BITS = 8
BITS_PER_NOTE = 18  # record stride; only 15 bits carry payload

# Tempo derivation: bpm = raw % TEMPO_MODULUS + TEMPO_OFFSET
TEMPO_MODULUS = 120
TEMPO_OFFSET = 120

# Tuning (pitch 69 = 400 Hz, not concert A)
BASE_PITCH = 69
BASE_FREQUENCY = 400.0

# Audio output
SAMPLE_RATE = 44100
CHANNELS = 1
PCM_SUBTYPE = "PCM_16"
MAX_AMPLITUDE = 32767

# Embedded export
FREQUENCY_CAP = 100
