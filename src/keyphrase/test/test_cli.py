from click.testing import CliRunner

from keyphrase import __version__
from keyphrase.cli import cli


def invoke(args, **kwargs):
    runner = CliRunner()
    return runner.invoke(cli.keyphrase, args, **kwargs)


def test_version():
    result = invoke(["--version"])
    assert result.exit_code == 0
    assert result.output == "keyphrase %s\n" % __version__


def test_help():
    result = invoke(["help"])
    assert result.exit_code == 0
    assert "Convert cryptographic keys to passphrases" in result.output


def test_encode():
    result = invoke(["encode", "0001"])
    assert result.exit_code == 0, result.output
    assert result.output == "a cafe\n"


def test_encode_alias():
    result = invoke(["enc", "0000"])
    assert result.exit_code == 0, result.output
    assert result.output == "a a\n"


def test_encode_stdin():
    result = invoke(["encode", "-"], input="8000\n")
    assert result.exit_code == 0, result.output
    assert result.output == "livable a\n"


def test_encode_bad_hex():
    result = invoke(["encode", "xyz"])
    assert result.exit_code == 1
    assert "ERROR: The key must be written as hexadecimal" in result.output
    assert "'x' is not a hex digit" in result.output


def test_decode():
    result = invoke(["decode", "-l", "2", "a", "cafe"])
    assert result.exit_code == 0, result.output
    assert result.output == "0001\n"


def test_decode_key_length_from_env():
    result = invoke(["decode", "livable a"],
                    env={"KEYPHRASE_KEY_LENGTH": "2"})
    assert result.exit_code == 0, result.output
    assert result.output == "8000\n"


def test_decode_default_length_needs_more_words():
    result = invoke(["decode", "a", "a", "a"])
    assert result.exit_code == 1
    assert "ERROR: The passphrase does not have enough words" in result.output


def test_decode_unknown_word():
    result = invoke(["decode", "-l", "2", "zzz", "not-a-word"])
    assert result.exit_code == 1
    assert "not in the dictionary" in result.output
    assert "unknown word: 'zzz'" in result.output


def test_decode_bad_length():
    result = invoke(["decode", "-l", "0", "a", "a"])
    assert result.exit_code == 2


def test_generate():
    result = invoke(["generate", "-l", "16"])
    assert result.exit_code == 0, result.output
    hexkey, passphrase = result.output.splitlines()
    assert len(hexkey) == 32
    assert len(passphrase.split(" ")) == 10
    again = invoke(["decode", "-l", "16", passphrase])
    assert again.output == hexkey + "\n"


def test_clean():
    result = invoke(["clean", " Able,,", "ABLY "])
    assert result.exit_code == 0, result.output
    assert result.output == "able ably\n"


def test_wordlist(tmp_path):
    fn = tmp_path / "words.txt"
    fn.write_text("apple\nbanana\ncherry\ndate\n")
    result = invoke(["--wordlist", str(fn), "encode", "1b"])
    assert result.exit_code == 0, result.output
    assert result.output == "apple banana cherry date\n"

    result = invoke(["decode", "-l", "1", "date", "date", "date", "date"],
                    env={"KEYPHRASE_WORDLIST": str(fn)})
    assert result.exit_code == 0, result.output
    assert result.output == "ff\n"


def test_bad_wordlist(tmp_path):
    fn = tmp_path / "words.txt"
    fn.write_text("apple\n")
    result = invoke(["--wordlist", str(fn), "encode", "00"])
    assert result.exit_code == 1
    assert "ERROR: The dictionary can not be used" in result.output


def test_case_sensitive():
    result = invoke(["--case-sensitive", "decode", "-l", "2", "A", "a"])
    assert result.exit_code == 1
    assert "unknown word: 'A'" in result.output
