import attr

from .. import codec, keygen
from ..dictionary import DEFAULT_DICTIONARY, Dictionary
from ..util import key_to_hex


def _dictionary(cfg):
    if cfg.wordlist:
        return Dictionary.from_file(cfg.wordlist,
                                    case_sensitive=cfg.case_sensitive)
    if cfg.case_sensitive:
        return attr.evolve(DEFAULT_DICTIONARY, case_sensitive=True)
    return DEFAULT_DICTIONARY


def encode(cfg):
    hexkey = cfg.hexkey
    if hexkey == "-":
        hexkey = cfg.stdin.read()
    passphrase = codec.from_hex_key(hexkey.strip(), _dictionary(cfg))
    print(passphrase, file=cfg.stdout)


def decode(cfg):
    hexkey = codec.to_hex_key(cfg.passphrase, cfg.key_length,
                              _dictionary(cfg))
    print(hexkey, file=cfg.stdout)


def generate(cfg):
    key = keygen.random_key(cfg.key_length,
                            secure_required=cfg.require_secure)
    print(key_to_hex(key), file=cfg.stdout)
    print(codec.encode(key, _dictionary(cfg)), file=cfg.stdout)


def clean(cfg):
    print(codec.clean(cfg.passphrase, _dictionary(cfg)), file=cfg.stdout)
