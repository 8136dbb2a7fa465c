from bstmap.demo import WORDS, lower_than_string, main


def test_lower_than_string():
    assert lower_than_string("casa", "case")
    assert not lower_than_string("case", "casa")
    assert not lower_than_string("saco", "saco")


def test_main_prints_sorted_words(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "casa", "case", "cesa", "cese", "cosa", "cose", "saca", "saco", "seco",
    ]


def test_main_prints_every_word_once(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == sorted(WORDS)
    assert len(lines) == len(set(lines))