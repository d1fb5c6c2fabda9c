from algos.cli import main
from algos.windows import all_substrings, find_all_unique_substrings


def _run(capsys, argv):
    code = main(argv)
    return code, capsys.readouterr().out.splitlines()


def test_default_text_lists_all_substrings(capsys):
    code, lines = _run(capsys, [])
    assert code == 0
    listed = [line.removeprefix("all substrings: ") for line in lines[:-1]]
    assert listed == list(all_substrings("AABC"))


def test_custom_text_unique_line(capsys):
    code, lines = _run(capsys, ["abca"])
    assert code == 0
    assert lines[-1] == "unique substrings: " + ", ".join(find_all_unique_substrings("abca"))


def test_line_count_matches_substring_count(capsys):
    text = "xyzzy"
    _, lines = _run(capsys, [text])
    assert len(lines) == len(list(all_substrings(text))) + 1
    assert all(line.startswith("all substrings: ") for line in lines[:-1])