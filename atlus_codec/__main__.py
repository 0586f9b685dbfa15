#!/usr/bin/env python3
# atlus-codec 2026

from pathlib import Path
import argparse
import os
import sys

from .encodings import atlus
from .errors import CharsetError, UnknownCharset, UndefinedCodePoint, UnsupportedCharacter
from .languages import codec_for_language
from .registry import CodecRegistry, DEFAULT_CHARSET_DIRECTORY

def add_codec_arguments(p):
    p.add_argument('name', help='charset name (NAME.tsv in the charset directory), or a language code with --language')
    p.add_argument('-l', '--language', action='store_true',
        help='treat NAME as a game language code (en, ko, zh-hans, ...)')
    p.add_argument('--subtitle-dir', type=Path,
        help='with --language: use DIR/Charset.tsv instead when it exists')

def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="atlus-codec",
        description="Convert text to and from Atlus game text encodings.")
    parser.add_argument('--charsets', type=Path,
        default=Path(os.environ.get('ATLUS_CHARSETS', DEFAULT_CHARSET_DIRECTORY)),
        help='directory containing the NAME.tsv charset files (default: $ATLUS_CHARSETS or ./Charsets)')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('encode', help='encode TEXT, print the bytes as hex')
    add_codec_arguments(p)
    p.add_argument('text')

    p = sub.add_parser('decode', help='decode hex BYTES, print the text')
    add_codec_arguments(p)
    p.add_argument('hex', nargs='+')
    p.add_argument('--strict', action='store_true',
        help='fail on the first undefined code point instead of substituting U+FFFD')

    p = sub.add_parser('table', help='dump the character to code point table')
    add_codec_arguments(p)

    p = sub.add_parser('convert', help='convert a UTF-8 text file to the charset encoding, or back')
    p.add_argument('name')
    p.add_argument('infile', type=Path)
    p.add_argument('outfile', type=Path)
    p.add_argument('--to-utf8', action='store_true', help='decode INFILE instead of encoding it')

    sub.add_parser('list', help='list the charsets in the charset directory')

    args = parser.parse_args(argv)
    if args.command in ('encode', 'decode', 'table'):
        if args.subtitle_dir is not None and not args.language:
            parser.error(f"{args.command}: --subtitle-dir needs --language")
    return args, parser

def select_codec(registry, args):
    if args.language:
        return codec_for_language(registry, args.name, args.subtitle_dir)
    return registry.get_or_create(args.name)

def cmd_encode(registry, args):
    codec = select_codec(registry, args)
    print(codec.encode(args.text).hex(' ').upper())
    return 0

def cmd_decode(registry, args):
    codec = select_codec(registry, args)
    data = bytes.fromhex(''.join(args.hex))
    if args.strict:
        print(codec.decode(data, 'strict'))
        return 0
    text, all_defined = codec.try_decode(data)
    print(text)
    if not all_defined:
        print("warning: input contains undefined code points", file=sys.stderr)
        return 1
    return 0

def cmd_table(registry, args):
    codec = select_codec(registry, args)
    for grapheme, code_point in codec.forward.items():
        print(f"{str(code_point):6} {grapheme!r}")
    return 0

def cmd_convert(registry, args):
    if not registry.exists(args.name):
        raise UnknownCharset(args.name, registry.path_for(args.name))
    encoding = f"atlus-{args.name}"
    search_function = atlus.register(registry)
    try:
        if args.to_utf8:
            src, dst = encoding, 'utf-8'
        else:
            src, dst = 'utf-8', encoding
        with open(args.infile, 'r', encoding=src, newline='') as infile:
            text = infile.read()
        with open(args.outfile, 'w', encoding=dst, newline='') as outfile:
            outfile.write(text)
    finally:
        atlus.unregister(search_function)
    return 0

def cmd_list(registry, args):
    for name in registry.names():
        print(name)
    return 0

COMMANDS = {
    'encode': cmd_encode,
    'decode': cmd_decode,
    'table': cmd_table,
    'convert': cmd_convert,
    'list': cmd_list,
}

def main(argv=None):
    args, parser = parse_args(argv)
    registry = CodecRegistry(args.charsets)
    try:
        return COMMANDS[args.command](registry, args)
    except (UnsupportedCharacter, UndefinedCodePoint, UnknownCharset, CharsetError, KeyError) as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        # bytes.fromhex
        print(f"{parser.prog}: bad hex input: {exc}", file=sys.stderr)
        return 2

if __name__ == '__main__':
    sys.exit(main())
