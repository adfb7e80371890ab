"""Reverse zsh's metafication of non-ASCII bytes.

zsh writes any byte that clashes with its internal tokens as a META byte
(0x83) followed by the original byte with bit 5 flipped.
"""

META = 0x83
_META_MASK = 0b0010_0000


def decode(data: bytes) -> str:
    """Unmetafy *data* and decode it as UTF-8, replacing invalid sequences."""
    out = bytearray()
    armed = False

    for byte in data:
        if byte == META:
            armed = True
        elif armed:
            out.append(byte ^ _META_MASK)
            armed = False
        else:
            out.append(byte)

    # a trailing META has nothing to unescape and is dropped
    return out.decode("utf-8", errors="replace")
