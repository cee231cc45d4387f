import pytest

from apps.cli.run import main
from wordle_entropy.datasets import write_lines


def test_bad_word_list_exits_with_message(tmp_path, capsys):
    g, s = tmp_path / "g.txt", tmp_path / "s.txt"
    g.write_bytes(b"crane\ncr\xffne\nslate\n")
    write_lines(["crane"], s)
    with pytest.raises(SystemExit) as ei:
        main(["--guesses", str(g), "--solutions", str(s), "--outdir", str(tmp_path / "out")])
    assert "not valid UTF-8" in str(ei.value.code)
    assert "FAIL" in capsys.readouterr().out


def test_small_run_writes_reports(tmp_path):
    g, s = tmp_path / "g.txt", tmp_path / "s.txt"
    write_lines(["crane", "slate", "trace", "crate"], g)
    write_lines(["crane", "slate", "trace"], s)
    main(["--guesses", str(g), "--solutions", str(s), "--outdir", str(tmp_path / "out"),
          "--progress", "off"])
    assert len(list((tmp_path / "out").glob("run_*.csv"))) == 1
    assert len(list((tmp_path / "out").glob("run_*_manifest.json"))) == 1
