"""
Configuration settings for the O5M reader
"""

from dataclasses import dataclass, field

STRICT = "strict"
SKIP_FRAMED = "skip_framed"

MEMORY = "memory"
STREAM = "stream"


@dataclass
class DecoderConfig:
    """Codec behaviour switches"""
    # What to do with record markers other than reset/boundary/node/way/eof:
    # "strict" stops the decode, "skip_framed" skips length-prefixed records
    unknown_marker_policy: str = STRICT

    # A raw delta of 0 returns 0 without touching the running value
    zero_delta_passthrough: bool = False

    # A raw timestamp of 0 ends the header (no changeset, no author)
    author_requires_timestamp: bool = False

    # 10 bytes cover unsigned 64-bit and signed +/-2^62 values
    max_varint_bytes: int = 10


@dataclass
class ReaderConfig:
    """File access settings"""
    # "memory" reads the whole file first, "stream" decodes from a buffered reader
    mode: str = MEMORY
    buffer_size: int = 65536


@dataclass
class O5MConfig:
    """Top-level configuration"""
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    reader: ReaderConfig = field(default_factory=ReaderConfig)


# Global config instance
config = O5MConfig()


def get_config() -> O5MConfig:
    """Get global configuration"""
    return config


def validate_config(config: O5MConfig) -> None:
    """
    Validate that all configuration values are usable.
    Raises ValueError listing every problem found.
    """
    errors = []

    if config.decoder is None:
        errors.append("decoder configuration is required but not set")
    else:
        if config.decoder.unknown_marker_policy not in (STRICT, SKIP_FRAMED):
            errors.append(
                f"decoder.unknown_marker_policy must be '{STRICT}' or '{SKIP_FRAMED}', "
                f"got {config.decoder.unknown_marker_policy!r}"
            )
        if config.decoder.max_varint_bytes < 1:
            errors.append(
                f"decoder.max_varint_bytes must be positive, got {config.decoder.max_varint_bytes}"
            )

    if config.reader is None:
        errors.append("reader configuration is required but not set")
    else:
        if config.reader.mode not in (MEMORY, STREAM):
            errors.append(
                f"reader.mode must be '{MEMORY}' or '{STREAM}', got {config.reader.mode!r}"
            )
        if config.reader.buffer_size <= 0:
            errors.append(f"reader.buffer_size must be positive, got {config.reader.buffer_size}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
