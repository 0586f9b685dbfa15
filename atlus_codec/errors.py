#!python3
# atlus-codec 2026

class CharsetWarning(Warning):
    pass

class WideCellWarning(CharsetWarning):
    pass

class CharsetError(ValueError):
    pass

class MalformedCharsetFile(CharsetError):
    def __init__(self, path, message, *, line=None):
        self.path = path
        self.line = line
        where = f"{path}" if line is None else f"{path}:{line}"
        super().__init__(f"{where}: {message}")

class CharsetTooLarge(CharsetError):
    pass

class UnknownCharset(LookupError):
    def __init__(self, name, path):
        self.name = name
        self.path = path
        super().__init__(f"unknown encoding: {name} ({path})")

def escape_non_ascii(value):
    """Render every code unit above 0x7F as \\uXXXX.

    Supplementary characters are split into their UTF-16 surrogates first,
    so the output matches what a UTF-16 based tool would print.
    """
    result = []
    for c in value:
        n = ord(c)
        if n > 0xFFFF:
            n -= 0x10000
            result.append(f"\\u{0xD800 + (n >> 10):04x}\\u{0xDC00 + (n & 0x3FF):04x}")
        elif n > 127:
            result.append(f"\\u{n:04x}")
        else:
            result.append(c)
    return "".join(result)

class UnsupportedCharacter(UnicodeEncodeError):
    def __init__(self, codec_name, grapheme, position=None, text=None):
        self.codec_name = codec_name
        self.grapheme = grapheme
        self.position = position
        if text is None or position is None:
            text, start = grapheme, 0
        else:
            start = position
        super().__init__(codec_name, text, start, start + len(grapheme),
            f"Encoding {codec_name} does not support character: {grapheme} ({escape_non_ascii(grapheme)})")

class UndefinedCodePoint(UnicodeDecodeError):
    def __init__(self, codec_name, code_point, position, data=b"", *, truncated=None):
        self.codec_name = codec_name
        self.code_point = code_point
        self.position = position
        self.truncated = truncated
        if code_point is None:
            reason = f"truncated code point {truncated:02X}" if truncated is not None else "truncated code point"
            length = 1
        else:
            reason = f"no character for code point {code_point}"
            length = code_point.byte_length
        super().__init__(codec_name, bytes(data), position, position + length, reason)
