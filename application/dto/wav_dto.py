# application/dto/wav_dto.py
# Format descriptor read from (and written back to) a WAV header.

from dataclasses import dataclass


# libsndfile subtype → (bits per sample, sample encoding)
SUBTYPE_LAYOUT: dict[str, tuple[int, str]] = {
    "PCM_S8": (8, "int"),
    "PCM_U8": (8, "int"),
    "PCM_16": (16, "int"),
    "PCM_24": (24, "int"),
    "PCM_32": (32, "int"),
    "FLOAT":  (32, "float"),
    "DOUBLE": (64, "float"),
}


@dataclass(frozen=True)
class WavFormat:
    """Channel count, rate, bit depth and encoding of a WAV file."""
    channels: int
    sample_rate: int
    bits_per_sample: int
    encoding: str                # int | float | ulaw | alaw | ...
    container: str = "WAV"       # WAV | WAVEX
    subtype: str = "PCM_16"

    @classmethod
    def from_subtype(
        cls,
        channels: int,
        sample_rate: int,
        subtype: str,
        container: str = "WAV",
    ) -> "WavFormat":
        """Build a descriptor from the fields libsndfile reports."""
        bits: int
        encoding: str
        bits, encoding = SUBTYPE_LAYOUT.get(subtype, (0, subtype.lower()))
        return cls(
            channels=channels,
            sample_rate=sample_rate,
            bits_per_sample=bits,
            encoding=encoding,
            container=container,
            subtype=subtype,
        )

    def describe(self) -> str:
        return (
            f"{self.channels} ch, {self.sample_rate} Hz, "
            f"{self.bits_per_sample}-bit {self.encoding}"
        )
