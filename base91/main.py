#!/usr/bin/env python3
"""base91 - command-line base91 encoder/decoder.

Usage:
    base91 [global-options] <command> [options]

Examples:
    base91 encode logo.png -o logo.b91          # Encode a file
    cat logo.b91 | base91 decode - -o logo.png  # Decode from stdin
    base91 -a "$MY_ALPHABET" encode data.bin    # Use a custom alphabet
    base91 bounds 4096                          # Buffer sizes for 4096 bytes
"""

import sys
from pathlib import Path

import click
from click.core import ParameterSource

from .alphabet import ALPHABET_SIZE, STD_ALPHABET, Alphabet, InvalidAlphabetError
from .codec import Encoding


def _load_alphabet(ctx, alphabet, alphabet_file):
    """Resolve the --alphabet / --alphabet-file options to an Alphabet.

    An alphabet file overrides BASE91_ALPHABET but not an explicit --alphabet.
    """
    if alphabet_file is not None:
        if ctx.get_parameter_source('alphabet') == ParameterSource.COMMANDLINE:
            raise click.UsageError("Cannot use both --alphabet and --alphabet-file")
        definition = Path(alphabet_file).read_bytes().rstrip(b'\r\n')
        source = alphabet_file
    elif alphabet in (None, 'std'):
        return STD_ALPHABET
    else:
        definition = alphabet
        source = '--alphabet'

    try:
        return Alphabet(definition)
    except InvalidAlphabetError as e:
        raise click.UsageError(f"Invalid alphabet from {source}: {e}")


def _read_input(input_):
    if input_ == '-':
        return sys.stdin.buffer.read()
    return Path(input_).read_bytes()


def _write_output(ctx, output, data, text=False):
    """Write to a file, or to stdout when no output path is given."""
    if ctx.obj['dry_run']:
        click.echo(f"Would write {len(data)} bytes to {output or 'stdout'}")
        return

    if output:
        Path(output).write_bytes(data)
        click.echo(f"Saved to: {output} ({len(data)} bytes)", err=True)
    else:
        sys.stdout.buffer.write(data)
        if text:
            sys.stdout.buffer.write(b'\n')
        sys.stdout.flush()


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--dry-run', '-n', is_flag=True, help='Show what would be done')
@click.option('--alphabet', '-a', envvar='BASE91_ALPHABET', default='std', show_default=True,
              help=f'Alphabet: "std" or a literal {ALPHABET_SIZE}-symbol definition')
@click.option('--alphabet-file', type=click.Path(exists=True, dir_okay=False),
              help='Read the alphabet definition from a file')
@click.pass_context
def cli(ctx, verbose, dry_run, alphabet, alphabet_file):
    """base91 - encode binary data as compact printable text."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['dry_run'] = dry_run
    ctx.obj['encoding'] = Encoding(_load_alphabet(ctx, alphabet, alphabet_file))


@cli.command('encode')
@click.argument('input_', metavar='INPUT', default='-',
                type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output file (default: stdout)')
@click.pass_context
def cmd_encode(ctx, input_, output):
    """Encode a file (or stdin) to base91 text.

    Example:
        base91 encode image.png -o image.b91
        cat image.png | base91 encode
    """
    encoding = ctx.obj['encoding']
    data = _read_input(input_)
    encoded = encoding.encode_to_bytes(data)

    if ctx.obj['verbose']:
        bound = encoding.encoded_len(len(data))
        ratio = len(encoded) / len(data) if data else 0.0
        click.echo(f"Input:    {len(data)} bytes", err=True)
        click.echo(f"Encoded:  {len(encoded)} chars (bound {bound}, ratio {ratio:.3f})", err=True)

    _write_output(ctx, output, encoded, text=True)


@cli.command('decode')
@click.argument('input_', metavar='INPUT', default='-',
                type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output file (default: stdout)')
@click.option('--partial', '-p', is_flag=True,
              help='On corrupt input, still write the bytes decoded before the error')
@click.pass_context
def cmd_decode(ctx, input_, output, partial):
    """Decode base91 text from a file (or stdin).

    Trailing newlines are ignored; any other character outside the
    alphabet stops decoding.

    Example:
        base91 decode image.b91 -o image.png
        base91 decode damaged.b91 --partial -o recovered.bin
    """
    encoding = ctx.obj['encoding']
    content = _read_input(input_).rstrip(b'\r\n')

    buf = bytearray(encoding.decoded_len(len(content)))
    n, err = encoding.decode(buf, content)
    decoded = bytes(buf[:n])

    if ctx.obj['verbose']:
        click.echo(f"Input:    {len(content)} chars (base91)", err=True)
        click.echo(f"Decoded:  {len(decoded)} bytes", err=True)

    if err is not None and not partial:
        raise click.ClickException(f"Failed to decode payload: {err}")

    _write_output(ctx, output, decoded)

    if err is not None:
        raise click.ClickException(f"Partial output ({len(decoded)} bytes): {err}")


@cli.command('alphabet')
@click.pass_context
def cmd_alphabet(ctx):
    """Show the active alphabet."""
    alphabet = ctx.obj['encoding'].alphabet
    name = 'standard' if alphabet == STD_ALPHABET else 'custom'
    click.echo(f"Alphabet ({name}, {len(alphabet)} symbols):")
    click.echo(alphabet.symbols.decode('latin-1'))


@cli.command('bounds')
@click.argument('length', type=click.IntRange(min=0))
@click.pass_context
def cmd_bounds(ctx, length):
    """Show buffer size bounds for LENGTH bytes or symbols.

    Example:
        base91 bounds 1024
    """
    encoding = ctx.obj['encoding']
    click.echo(f"Encoded length of {length} bytes:   <= {encoding.encoded_len(length)}")
    click.echo(f"Decoded length of {length} symbols: <= {encoding.decoded_len(length)}")


@cli.command('help')
@click.argument('topic', required=False)
@click.pass_context
def cmd_help(ctx, topic):
    """Show help for a command.

    Examples:
        base91 help          # General help
        base91 help decode   # Help for 'decode' command
    """
    if topic is None:
        click.echo(ctx.parent.get_help())
        return

    if topic in cli.commands:
        cmd = cli.commands[topic]
        with click.Context(cmd, info_name=topic, parent=ctx.parent) as sub_ctx:
            click.echo(cmd.get_help(sub_ctx))
        return

    raise click.ClickException(f"Unknown topic: '{topic}'. Try 'help' to list commands.")


def main():
    """Entry point."""
    cli(obj={})


if __name__ == '__main__':
    main()
