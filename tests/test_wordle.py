import itertools

import pytest
from wordle_art.wordle import _ABSENT, _PARTIAL, _PRESENT, WordleResult, goal_result, matches, score

_SYMBOLS = {_PRESENT: "+", _PARTIAL: "?", _ABSENT: "_"}

def render_ascii(result: list[int]) -> str:
	return "".join(_SYMBOLS[state] for state in result)

T, F = True, False

@pytest.mark.parametrize(
	"answer,guess,expected",
	[
		("abcde", "abcde", "+++++"),
		("aaaab", "aaabc", "+++?_"),
		("words", "sword", "?????"),
		("leech", "peace", "_+_+?"),
		("skill", "lills", "??_+?"),
		("abbey", "opens", "__?__"),
		("abbey", "babes", "??++_"),
		("abbey", "kebab", "_?+??"),
		("abbey", "abyss", "++?__"),
		("ABBEY", "Abyss", "++?__"),
	],
)
def test_score(answer, guess, expected):
	assert render_ascii(score(guess, answer)) == expected

def test_score_length_mismatch():
	with pytest.raises(ValueError):
		score("abc", "abcde")

@pytest.mark.parametrize(
	"candidate,solution,goal_row,expected",
	[
		("about", "about", [T, T, T, T, T], True),
		("about", "about", [T, T, T, T, F], False),
		("which", "about", [F, F, F, F, F], True),
		# green demanded but missing
		("which", "about", [T, F, F, F, F], False),
		# yellow where nothing is allowed
		("sixty", "about", [F, F, F, F, F], False),
		("sixty", "speed", [T, F, F, F, F], True),
		("speed", "speed", [T, F, F, F, F], False),
		("sneer", "speed", [T, F, F, F, F], False),
		# both e's are used up by greens, so n and r are free
		("sneer", "speed", [T, F, T, T, F], True),
		# one e in the solution is consumed by the green, second e stays grey
		("oxeye", "spend", [F, F, T, F, F], True),
		# two e's in the solution: the second e would turn yellow
		("oxeye", "speed", [F, F, T, F, F], False),
		("alpha", "about", [T, F, F, F, F], True),
		("aroma", "about", [T, F, F, F, F], False),
	],
)
def test_matches(candidate, solution, goal_row, expected):
	assert matches(candidate, solution, goal_row) is expected

def test_any_green_mismatch_rejects():
	solution = "crane"
	for goal_row in itertools.product([T, F], repeat=5):
		goal_row = list(goal_row)
		for candidate in ("crane", "crate", "brine", "cynic"):
			greens = [c == s for c, s in zip(candidate, solution)]
			if greens != goal_row:
				assert not matches(candidate, solution, goal_row)

WORDS = [
	"about", "alpha", "speed", "spend", "sneer", "oxeye", "eerie", "geese",
	"sixty", "llama", "label", "allot", "atoll", "total", "abbey", "kebab",
]

def test_matches_agrees_with_score():
	rows = [list(r) for r in itertools.product([T, F], repeat=5)]
	for solution in ("speed", "abbey", "total", "eerie"):
		for candidate in WORDS:
			feedback = score(candidate, solution)
			for goal_row in rows:
				assert matches(candidate, solution, goal_row) == (feedback == goal_result(goal_row))

def test_goal_result():
	assert goal_result([T, F, F, T, F]) == [_PRESENT, _ABSENT, _ABSENT, _PRESENT, _ABSENT]

def test_result_str_colours_tiles():
	text = str(WordleResult("Crane", [_PRESENT, _ABSENT, _PARTIAL, _ABSENT, _ABSENT]))
	assert "\x1b[42m" in text
	assert "\x1b[43m" in text
	assert "C" in text and "c" not in text
