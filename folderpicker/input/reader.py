"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key labels.
Handles ESC-sequence timing, function keys, and multi-byte UTF-8 characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x01": "CTRL_A",
    b"\x03": "CTRL_C",
    b"\x0e": "CTRL_N",
    b"\t": "TAB",
    b"\x7f": "BACKSPACE",
    b"\x08": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}

_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"11": "F1",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_text(fd: int, first: bytes) -> str:
    """Collect continuation bytes for a UTF-8 lead byte and decode the character."""
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    text = data.decode("utf-8", errors="replace")
    if "\ufffd" in text:
        return "UNKNOWN"
    return text


def _read_csi(fd: int) -> str:
    """Decode the tail of an ``ESC [`` sequence."""
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if part in _CSI_FINAL_KEYS and not params:
            return _CSI_FINAL_KEYS[part]
        if part == b"[" and not params:
            # Linux console function keys: ESC [ [ A is F1.
            final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            return "F1" if final == b"A" else "UNKNOWN"
        if part == b"~":
            return _CSI_TILDE_KEYS.get(params, "UNKNOWN")
        if 0x40 <= part[0] <= 0x7E:
            # Modified arrows such as ESC [ 1 ; 5 A still move the cursor.
            return _CSI_FINAL_KEYS.get(part, "UNKNOWN")
        params += part
        if len(params) > 16:
            return "UNKNOWN"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key from ``fd`` and return its label.

    Returns ``""`` when ``timeout_ms`` elapses without input or on EOF.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch != b"\x1b":
        if ch[0] < 0x20:
            return "UNKNOWN"
        return _decode_text(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in {b"\x7f", b"\x08"}:
        return "ALT_BACKSPACE"
    if seq == b"O":
        # SS3 function keys: ESC O P is F1.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        if final == b"P":
            return "F1"
        return _CSI_FINAL_KEYS.get(final, "UNKNOWN")
    if seq != b"[":
        if 0x20 <= seq[0] <= 0x7E:
            # Alt chords arrive as ESC followed by the key.
            return f"ALT_{seq.decode('ascii')}"
        _PENDING_BYTES.append(seq)
        return "ESC"
    return _read_csi(fd)
