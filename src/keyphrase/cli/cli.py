import sys
from textwrap import dedent, fill

import click
from twisted.python import log
from twisted.python.failure import Failure

from .. import __version__
from ..codec import DEFAULT_KEY_LENGTH
from ..errors import KeyphraseError


class Config(object):
    """
    Union of config options that we pass down to (sub) commands.
    """

    def __init__(self):
        # This only holds attributes which are *not* set by CLI arguments.
        # Everything else comes from Click decorators, so we can be sure
        # we're exercising the defaults.
        self.stdin = sys.stdin
        self.stdout = sys.stdout
        self.stderr = sys.stderr


def _compose(*decorators):
    def decorate(f):
        for d in reversed(decorators):
            f = d(f)
        return f

    return decorate


ALIASES = {
    "enc": "encode",
    "dec": "decode",
    "gen": "generate",
}


class AliasedGroup(click.Group):
    def get_command(self, ctx, cmd_name):
        cmd_name = ALIASES.get(cmd_name, cmd_name)
        return click.Group.get_command(self, ctx, cmd_name)


# top-level command ("keyphrase ...")
@click.group(cls=AliasedGroup)
@click.option(
    "--wordlist",
    default=None,
    envvar="KEYPHRASE_WORDLIST",
    metavar="FILE",
    type=click.Path(exists=True, dir_okay=False),
    help="word list to use instead of the built-in one (one word per line)",
)
@click.option(
    "--case-sensitive",
    is_flag=True,
    default=False,
    help="treat words that differ only in capitalization as different",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="log what is going on to stderr",
)
@click.version_option(
    message="keyphrase %(version)s",
    version=__version__,
)
@click.pass_context
def keyphrase(context, verbose, case_sensitive, wordlist):
    """
    Convert cryptographic keys to passphrases and back.

    Keys are written in hex. Passphrases are made of words from a
    dictionary, each word spelling the next few bits of the key, so they are
    easier to memorize or write down on paper.
    """
    context.obj = cfg = Config()
    cfg.wordlist = wordlist
    cfg.case_sensitive = case_sensitive
    cfg.verbose = verbose
    if verbose:
        log.startLogging(cfg.stderr, setStdout=False)


def _dispatch_command(cfg, command):
    """
    Internal helper. This calls the given command (a no-argument
    callable) with the Config instance in cfg and interprets any
    errors for the user.
    """
    try:
        command()
    except KeyphraseError as e:
        msg = fill("ERROR: " + dedent(e.__doc__).strip())
        print(msg, file=cfg.stderr)
        if str(e):
            print("", file=cfg.stderr)
            print(str(e), file=cfg.stderr)
        raise SystemExit(1)
    except Exception as e:
        Failure().printTraceback(file=cfg.stderr)
        print("ERROR:", str(e), file=cfg.stderr)
        raise SystemExit(1)


# this intermediate function can be mocked by tests that need to build a
# Config object
def go(f, cfg):
    return _dispatch_command(cfg, lambda: f(cfg))


KeyLengthArgs = _compose(
    click.option(
        "-l",
        "--key-length",
        default=DEFAULT_KEY_LENGTH,
        envvar="KEYPHRASE_KEY_LENGTH",
        type=click.IntRange(min=1),
        metavar="BYTES",
        help="length of the key, in bytes",
    ),
)


@keyphrase.command()
@click.pass_context
def help(context, **kwargs):
    print(context.find_root().get_help())


@keyphrase.command()
@click.argument("hexkey")
@click.pass_obj
def encode(cfg, hexkey):
    """
    Print the passphrase for a hex key ('-' reads the key from stdin)
    """
    cfg.hexkey = hexkey
    from . import cmd_convert
    return go(cmd_convert.encode, cfg)


@keyphrase.command()
@KeyLengthArgs
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def decode(cfg, words, **kwargs):
    """
    Print the hex key spelled by a passphrase
    """
    for name, value in kwargs.items():
        setattr(cfg, name, value)
    cfg.passphrase = " ".join(words)
    from . import cmd_convert
    return go(cmd_convert.decode, cfg)


@keyphrase.command()
@KeyLengthArgs
@click.option(
    "--require-secure",
    is_flag=True,
    default=False,
    help="fail rather than use a random source that is not secure",
)
@click.pass_obj
def generate(cfg, **kwargs):
    """
    Print a new random key and its passphrase
    """
    for name, value in kwargs.items():
        setattr(cfg, name, value)
    from . import cmd_convert
    return go(cmd_convert.generate, cfg)


@keyphrase.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def clean(cfg, words):
    """
    Print a passphrase with extra separators removed
    """
    cfg.passphrase = " ".join(words)
    from . import cmd_convert
    return go(cmd_convert.clean, cfg)
