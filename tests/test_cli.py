import structlog

from strictb32.cli import main
from strictb32.core.encoding import decode
from strictb32.selfcheck import codec_self_check


def test_self_check_passes():
    assert codec_self_check(structlog.get_logger()) is True


def test_check_command(capsys):
    assert main(["check"]) == 0
    assert "self-check passed" in capsys.readouterr().out


def test_encode_hex(capsys):
    assert main(["encode", "--pad", "--hex", "666f6f626172"]) == 0
    assert capsys.readouterr().out.strip() == "MZXW6YTBOI======"


def test_encode_text(capsys):
    assert main(["encode", "--text", "fo"]) == 0
    assert capsys.readouterr().out.strip() == "MZXQ"


def test_encode_bad_hex(capsys):
    assert main(["encode", "--hex", "zz"]) == 2


def test_decode_hex(capsys):
    assert main(["decode", "--strict-padding", "--hex", "MZXW6YTBOI======"]) == 0
    assert capsys.readouterr().out.strip() == "666f6f626172"


def test_decode_malformed(capsys):
    assert main(["decode", "MZ======"]) == 3
    assert "Malformed base32" in capsys.readouterr().err


def test_gen_secret(capsys):
    assert main(["gen-secret", "--bytes", "20"]) == 0
    text = capsys.readouterr().out.strip()
    assert len(text) == 32
    assert len(decode(text)) == 20


def test_gen_secret_rejects_zero(capsys):
    assert main(["gen-secret", "--bytes", "0"]) == 2
