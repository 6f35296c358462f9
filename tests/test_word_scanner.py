import io

from frequency_table import FrequencyTable
from word_scanner import tokenize, tokenize_file, write_tokens


def test_lowercases_and_splits_on_non_letters():
	assert tokenize("Hear the Sledges-with THE bells42silver") == [
		"hear", "the", "sledges", "with", "the", "bells", "silver",
	]


def test_apostrophes_inside_words_only():
	text = "Camp's DON'T stop--rock'n'roll 'quoted' it's' x''y"
	assert tokenize(text) == ["camp's", "don't", "stop", "rock'n'roll", "quoted", "it's", "x", "y"]


def test_non_ascii_letters_are_separators():
	assert tokenize("café naïve") == ["caf", "na", "ve"]


def test_empty_and_separator_only_input():
	assert tokenize("") == []
	assert tokenize(" \n\t1234 -- !!") == []


def test_tokenize_file(tmp_path):
	path = tmp_path / "bells.txt"
	path.write_bytes(b"Silver bells!\nGolden bells\xff ok")
	assert tokenize_file(path) == ["silver", "bells", "golden", "bells", "ok"]


def test_write_tokens():
	out = io.StringIO()
	write_tokens(["a", "b", "a"], out)
	assert out.getvalue() == "a\nb\na\n"


def test_frequency_table_pairs_sorted_by_word():
	table = FrequencyTable(["the", "bells", "the", "of", "the", "bells"])
	table.add("zinc")
	assert table.size == 4
	assert len(table) == 4
	assert table.sorted_pairs() == [("bells", 2), ("of", 1), ("the", 3), ("zinc", 1)]
	assert table.by_frequency() == [("the", 3), ("bells", 2), ("of", 1), ("zinc", 1)]
	assert table.contains("of")
	assert not table.contains("gold")
	assert table.count_of("the") == 3
	assert table.count_of("gold") is None
	assert table.min_frequency() == 1
	assert table.max_frequency() == 3


def test_frequency_table_empty():
	table = FrequencyTable()
	assert table.size == 0
	assert table.sorted_pairs() == []
	assert table.min_frequency() is None
	assert table.max_frequency() is None


def test_write_frequencies_format():
	table = FrequencyTable(["b", "a", "b"])
	out = io.StringIO()
	table.write_frequencies(out)
	assert out.getvalue() == "         2 b\n         1 a\n"
