import re
from enum import Enum


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MASK = (1 << 64) - 1

SEGMENT_SEPARATOR = "."


class ConversionError(ValueError):
    message = "Conversion failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidInput(ConversionError):
    message = "Invalid input"


class InvalidOutputBase(ConversionError):
    message = "Invalid output type"


class Base(Enum):
    BINARY = "binary"
    HEXADECIMAL = "hexadecimal"
    DECIMAL = "decimal"

    @property
    def radix(self) -> int:
        return RADIX[self]

    def __str__(self) -> str:
        return self.value


RADIX = {
    Base.BINARY: 2,
    Base.HEXADECIMAL: 16,
    Base.DECIMAL: 10,
}

# digits per byte-aligned chunk
CHUNK_WIDTH = {
    Base.BINARY: 8,
    Base.HEXADECIMAL: 2,
}

SEGMENT_PATTERNS = {
    Base.BINARY: re.compile(r"[+-]?[01]+"),
    Base.HEXADECIMAL: re.compile(r"[+-]?[0-9a-fA-F]+"),
    Base.DECIMAL: re.compile(r"[+-]?[0-9]+"),
}


def to_base(value: Base | str, error: type[ConversionError]) -> Base:
    if isinstance(value, Base):
        return value
    try:
        return Base(str(value).lower())
    except ValueError:
        raise error(f"Unsupported base: {value!r}")


def wrap64(value: int) -> int:
    value &= UINT64_MASK
    return value - (1 << 64) if value > INT64_MAX else value


def parse_segment(segment: str, base: Base) -> int:
    if not SEGMENT_PATTERNS[base].fullmatch(segment):
        raise InvalidInput()

    value = int(segment, base.radix)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidInput()
    return value


def parse_segments(text: str, base: Base) -> int:
    """Fold dot-separated segments into one big-endian 64-bit value.

    Each segment is shifted in as one byte. Segment values above 255 are
    not rejected and spill into the neighbouring byte positions.
    """
    result = 0
    for segment in text.split(SEGMENT_SEPARATOR):
        result = wrap64((result << 8) | parse_segment(segment, base))
    return result


def split_chunks(digits: str, width: int) -> list[str]:
    if not digits:
        return ["0" * width]
    return [digits[i:i + width] for i in range(0, len(digits), width)]


def format_value(value: int, base: Base) -> str:
    if base is Base.DECIMAL:
        return str(value)

    width = CHUNK_WIDTH[base]
    digits = format(value & UINT64_MASK, "b" if base is Base.BINARY else "x")
    padded = digits.zfill(-(-len(digits) // width) * width)
    return SEGMENT_SEPARATOR.join(split_chunks(padded, width))


def convert(text: str, source: Base | str, dest: Base | str) -> str:
    source = to_base(source, InvalidInput)
    dest = to_base(dest, InvalidOutputBase)
    return format_value(parse_segments(text, source), dest)
