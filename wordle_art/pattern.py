import re

from wordle_art.wordle import WORD_LENGTH, GUESS_COUNT

ROW_SEPARATOR = "/"

_ROW_SPLIT = re.compile(r"\r?\n|" + re.escape(ROW_SEPARATOR))

def pattern_for_line(line: str) -> list[bool]:
	line = line[:WORD_LENGTH].ljust(WORD_LENGTH)
	return [ch != " " for ch in line]

def pattern_from_string(text: str) -> list[list[bool]]:
	"""
	Build the goal shape from art text. Rows are separated by `/` or line
	breaks; any non-space character marks a green tile. The result always
	has GUESS_COUNT rows of WORD_LENGTH cells.
	"""
	rows = [pattern_for_line(line) for line in _ROW_SPLIT.split(text)]
	while len(rows) < GUESS_COUNT:
		rows.append([False] * WORD_LENGTH)
	return rows[:GUESS_COUNT]

def pattern_from_file(path: str) -> list[list[bool]]:
	with open(path, 'r', encoding='utf8') as file:
		contents = file.read()
	return pattern_from_string(contents)

def render_pattern(shape: list[list[bool]]) -> str:
	return "\n".join("".join("#" if cell else "." for cell in row) for row in shape)
