#!python3
# atlus-codec 2026
#
# Charset tables: one grapheme per tab-separated cell, rows are only for
# readability.  A cell "\uXXXX" (1 to 8 hex digits) stands for that code
# point; any other cell is used as-is.

from pathlib import Path
import chardet
import re
import warnings

from .errors import MalformedCharsetFile, WideCellWarning

CHARSET_SUFFIX = ".tsv"

_escape_re = re.compile(r"[0-9A-Fa-f]{1,8}")

# lone CR, lone LF and CRLF all end a row
_row_break_re = re.compile(r"\r\n|\r|\n")

def utf16_length(s):
    return sum(2 if ord(c) > 0xFFFF else 1 for c in s)

def parse_cell(cell, *, source="<charset>", line_nr=None, stacklevel=2):
    if cell.startswith("\\u"):
        digits = cell[2:]
        if not _escape_re.fullmatch(digits):
            raise MalformedCharsetFile(source, f"bad unicode escape {cell!r}", line=line_nr)
        char_id = int(digits, 16)
        if char_id > 0x10FFFF:
            raise MalformedCharsetFile(source, f"unicode escape out of range {cell!r}", line=line_nr)
        return chr(char_id)
    if utf16_length(cell) > 1:
        warnings.warn(f"character in charset with more than 1 UTF-16 code unit at {source}:{line_nr}: {cell!r}", WideCellWarning, stacklevel=stacklevel)
    return cell

def parse_charset(lines, *, source="<charset>", stacklevel=2):
    char_table = []
    for line_nr, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        for cell in line.split("\t"):
            char_table.append(parse_cell(cell, source=source, line_nr=line_nr, stacklevel=stacklevel + 1))
    return char_table

def _decode_charset_bytes(path, raw):
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass
    detected = chardet.detect(raw)
    encoding = detected["encoding"]
    if encoding is None:
        raise MalformedCharsetFile(path, "unable to determine text encoding")
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise MalformedCharsetFile(path, f"not decodable as {encoding}") from exc

def read_charset_file(path):
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise MalformedCharsetFile(path, exc.strerror or str(exc)) from exc
    text = _decode_charset_bytes(path, raw)
    # splitlines() would also break on \x0b, \x1c and friends, which are valid cells
    lines = _row_break_re.split(text)
    if lines[-1] == "":
        lines.pop()
    return parse_charset(lines, source=path, stacklevel=3)

def charset_path(directory, name):
    return Path(directory) / f"{name}{CHARSET_SUFFIX}"
