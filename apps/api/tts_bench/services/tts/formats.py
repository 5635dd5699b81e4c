"""Canonical audio formats and normalization of provider output."""

from __future__ import annotations

import struct
from enum import Enum

from tts_bench.services.tts.base import SynthesisResult


class AudioFormat(str, Enum):
    """Canonical format tags stored alongside cached audio."""

    MP3 = "mp3"
    WAV = "wav"
    OGG = "ogg"
    FLAC = "flac"
    ALAW = "alaw"
    MULAW = "mulaw"


DEFAULT_FORMAT = AudioFormat.MP3

# Raw little-endian 16-bit samples with no container
PCM_ENCODING = "PCM"

ENCODING_FORMATS: dict[str, AudioFormat] = {
    "MP3": AudioFormat.MP3,
    "WAV": AudioFormat.WAV,
    "LINEAR16": AudioFormat.WAV,
    "OGG_OPUS": AudioFormat.OGG,
    "FLAC": AudioFormat.FLAC,
    "ALAW": AudioFormat.ALAW,
    "MULAW": AudioFormat.MULAW,
}

CONTENT_TYPES: dict[AudioFormat, str] = {
    AudioFormat.MP3: "audio/mpeg",
    AudioFormat.WAV: "audio/wav",
    AudioFormat.OGG: "audio/ogg",
    AudioFormat.FLAC: "audio/flac",
    AudioFormat.ALAW: "audio/basic",
    AudioFormat.MULAW: "audio/basic",
}

WAV_HEADER_SIZE = 44
_WAV_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
_PCM_FORMAT_CODE = 1


def resolve_format(encoding: str | None) -> AudioFormat:
    """Map a provider encoding name to a canonical tag; unknown names map to mp3."""
    if not encoding:
        return DEFAULT_FORMAT
    return ENCODING_FORMATS.get(encoding.strip().upper(), DEFAULT_FORMAT)


def pcm_to_wav(
    pcm: bytes,
    sample_rate: int,
    channels: int = 1,
    bits_per_sample: int = 16,
) -> bytes:
    """
    Wrap raw PCM samples in a canonical 44-byte RIFF/WAVE header.

    Args:
        pcm: Raw sample bytes.
        sample_rate: Samples per second.
        channels: Channel count.
        bits_per_sample: Sample width in bits.

    Returns:
        A complete WAV file.
    """
    byte_rate = sample_rate * channels * bits_per_sample // 8
    block_align = channels * bits_per_sample // 8
    data_size = len(pcm)

    header = _WAV_HEADER.pack(
        b"RIFF",
        36 + data_size,
        b"WAVE",
        b"fmt ",
        16,  # fmt sub-chunk size for PCM
        _PCM_FORMAT_CODE,
        channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        b"data",
        data_size,
    )
    return header + pcm


def normalize_audio(result: SynthesisResult) -> tuple[bytes, AudioFormat]:
    """Return directly playable bytes and their canonical format tag."""
    if result.raw_pcm:
        if not result.sample_rate:
            raise ValueError("PCM audio requires a sample rate")
        return pcm_to_wav(result.audio_data, result.sample_rate), AudioFormat.WAV

    return result.audio_data, resolve_format(result.encoding)


def content_type_for(audio_format: str) -> str:
    """HTTP content type for a stored format tag."""
    try:
        return CONTENT_TYPES[AudioFormat(audio_format)]
    except ValueError:
        return CONTENT_TYPES[DEFAULT_FORMAT]
