import base64
import json

from mxterm.cli import APC_INSERT, apc_params, image_sequence, main

PREFIX = "\x1b_insert;image;"
SUFFIX = "\x1b\\"


def _payload(sequence):
    assert sequence.startswith(PREFIX)
    assert sequence.endswith(SUFFIX)
    return json.loads(sequence[len(PREFIX):-len(SUFFIX)])


def test_apc_params_round_trip_and_sorted():
    params = {"zeta": 1, "alpha": "x"}
    text = apc_params(params)
    assert json.loads(text) == params
    assert text.index("alpha") < text.index("zeta")
    assert " " not in text


def test_apc_params_escapes_html_characters():
    text = apc_params({"filename": "<a&b>"})
    assert "<" not in text and ">" not in text and "&" not in text
    assert json.loads(text) == {"filename": "<a&b>"}


def test_image_sequence_local_uses_filename(tmp_path):
    path = str(tmp_path / "pic.png")
    assert _payload(image_sequence(path, env={})) == {"filename": path}


def test_image_sequence_over_ssh_embeds_file(tmp_path):
    path = tmp_path / "pic.png"
    content = b"\x89PNG fake image data"
    path.write_bytes(content)
    payload = _payload(image_sequence(str(path), env={"SSH_TTY": "/dev/pts/1"}))
    assert base64.b64decode(payload["base64"]) == content


def test_image_sequence_matches_insert_format(tmp_path):
    path = str(tmp_path / "x.png")
    expected = APC_INSERT.format("image", apc_params({"filename": path}))
    assert image_sequence(path, env={}) == expected


def test_main_prints_sequence(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("SSH_TTY", raising=False)
    path = str(tmp_path / "img.png")
    assert main(["-image", path]) == 0
    assert _payload(capsys.readouterr().out) == {"filename": path}


def test_main_missing_file_over_ssh(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("SSH_TTY", "/dev/pts/1")
    assert main(["--image", str(tmp_path / "missing.png")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip()


def test_main_without_image_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""