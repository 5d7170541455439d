import enum
import typing as t
from dataclasses import dataclass

from .constants import CLOSE_MARKER, OPEN_MARKER
from .errors import UnterminatedBlock
from .utils import KeyMaterial, decrypt_block, encrypt_block


class Kind(enum.Enum):
    PLAIN = "plain"
    PROTECTED = "protected"


class Mode(enum.Enum):
    ENCRYPT = "clean"
    DECRYPT = "smudge"
    REDACT_FOR_DIFF = "diff"


@dataclass
class Segment:
    kind: Kind
    index: int  # line position where content is emitted
    content: str  # a single line, or the "\n"-joined interior of a block


def scan(lines: t.Sequence[str]) -> t.List[Segment]:
    """Split lines into Plain and Protected segments.

    Marker lines themselves are Plain. A block without interior lines yields
    no Protected segment.
    """
    segments: t.List[Segment] = []
    opened_at: t.Optional[int] = None
    raw: t.List[str] = []

    for i, line in enumerate(lines):
        if opened_at is None:
            segments.append(Segment(Kind.PLAIN, i, line))
            if line.endswith(OPEN_MARKER):
                opened_at = i
                raw = []
        elif line.endswith(OPEN_MARKER):
            # nested openers are content, even when they also look like a closer
            raw.append(line)
        elif line.startswith(CLOSE_MARKER):
            if raw:
                segments.append(Segment(Kind.PROTECTED, opened_at + 1, "\n".join(raw)))
            segments.append(Segment(Kind.PLAIN, i, line))
            opened_at = None
        else:
            raw.append(line)

    if opened_at is not None:
        raise UnterminatedBlock(opened_at + 1)
    return segments


def transform(
    segments: t.Iterable[Segment], mode: Mode, key: t.Optional[KeyMaterial]
) -> t.List[str]:
    """Apply mode to every Protected segment and return the output lines."""
    if mode is Mode.ENCRYPT:
        fn = encrypt_block
    elif mode is Mode.DECRYPT:
        fn = decrypt_block
    elif mode is Mode.REDACT_FOR_DIFF:
        fn = None
    else:
        raise ValueError(f"Unknown mode: {mode!r}")
    if fn is not None and key is None:
        raise ValueError(f"{mode.value} needs a key")

    out: t.List[str] = []
    for seg in sorted(segments, key=lambda s: s.index):
        if seg.kind is Kind.PROTECTED and fn is not None:
            out.append(fn(seg.content, key))
        else:
            out.append(seg.content)
    return out


# ---------- Stream boundary ----------
def read_lines(data: bytes) -> t.List[str]:
    text = data.decode("utf-8")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def write_lines(lines: t.Iterable[str]) -> bytes:
    return "".join(line + "\n" for line in lines).encode("utf-8")


def privatize(data: bytes, mode: Mode, key: t.Optional[KeyMaterial]) -> bytes:
    """Run the full filter over a file's bytes."""
    return write_lines(transform(scan(read_lines(data)), mode, key))


def privatize_stream(
    mode: Mode,
    key: t.Optional[KeyMaterial],
    in_stream: t.BinaryIO,
    out_stream: t.BinaryIO,
):
    # Nothing is written until the whole input is scanned and transformed cleanly.
    out = privatize(in_stream.read(), mode, key)
    out_stream.write(out)
    out_stream.flush()
