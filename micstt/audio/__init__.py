from .accumulator import AudioAccumulator
from .wave import WaveHeader, encode_wav, read_wav_header

__all__ = ["AudioAccumulator", "WaveHeader", "encode_wav", "read_wav_header"]
