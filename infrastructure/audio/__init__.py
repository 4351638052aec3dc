# infrastructure/audio/__init__.py
from .numpy_audio_trimmer import RmsSilenceTrimmer
from .soundfile_wav_store import SoundfileWavStore

__all__ = [
    "RmsSilenceTrimmer",
    "SoundfileWavStore",
]
