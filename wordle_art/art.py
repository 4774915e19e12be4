import argparse
import logging
import os
import random
import sys
import time
from typing import NoReturn
from concurrent.futures import ProcessPoolExecutor
from wordle_art.wordle import WORD_LENGTH, WordleResult, matches, score
from wordle_art.pattern import pattern_from_file, pattern_from_string, render_pattern

WORD_LIST_PATH = os.path.join(os.path.dirname(__file__), 'dict.txt')

NO_SOLUTION = "[no solution]"

FORMATS = ("example", "full", "tiles")

log = logging.getLogger(__name__)

def load_word_list(path: str = WORD_LIST_PATH) -> list[str]:
	"""Load the word list from the specified file, keeping its order."""
	with open(path, 'r', encoding='utf8') as file:
		words = [line.strip().lower() for line in file if line.strip()]
	return [w for w in words if len(w) == WORD_LENGTH and w.isalpha()]

def validate_solution(solution: str) -> str:
	word = solution.lower()
	# lowercasing may change the length, e.g. "İ" -> "i̇"
	if len(word) != WORD_LENGTH or not word.isalpha():
		raise ValueError(f"Solution should be {WORD_LENGTH} letters, got {solution!r}.")
	return word

def find_matches(words: list[str], solution: str, goal_row: list[bool]) -> list[str]:
	solution = solution.lower()
	return [w for w in words if matches(w, solution, goal_row)]

def _find_matches_single_arg(args: tuple[list[str], str, list[bool]]) -> list[str]:
	return find_matches(*args)

def find_all_matches(
	words: list[str],
	solution: str,
	goal_shape: list[list[bool]],
	jobs: int = 1
) -> list[list[str]]:
	start = time.perf_counter()
	if jobs > 1:
		arglist = [(words, solution, goal_row) for goal_row in goal_shape]
		# map() yields in submission order, so rows stay aligned
		with ProcessPoolExecutor(jobs) as executor:
			answer = list(executor.map(_find_matches_single_arg, arglist))
	else:
		answer = [find_matches(words, solution, goal_row) for goal_row in goal_shape]

	for i, row in enumerate(answer):
		log.debug(f"Row {i + 1}: {len(row)} candidates")
	log.debug(f"Search over {len(words)} words took {time.perf_counter() - start:.3f} s")
	return answer

def _weights(n: int) -> list[int]:
	return [w * w for w in range(n, 0, -1)]

def pick_words(answer: list[list[str]], rng: random.Random = None) -> list[str | None]:
	"""
	One weighted-random word per row. Words picked for earlier rows are
	avoided unless a row has nothing else; earlier dictionary words weigh more.
	"""
	rng = rng or random.Random()
	used: set[str] = set()
	picks = []

	for all_row_answers in answer:
		unused_row_answers = [w for w in all_row_answers if w not in used]
		row_answers = unused_row_answers or all_row_answers
		if not row_answers:
			picks.append(None)
			continue
		word = rng.choices(row_answers, weights=_weights(len(row_answers)))[0]
		used.add(word)
		picks.append(word)

	return picks

def format_example(answer: list[list[str]], rng: random.Random = None) -> str:
	return "\n".join(
		NO_SOLUTION if word is None else word.upper()
		for word in pick_words(answer, rng)
	)

def format_tiles(answer: list[list[str]], solution: str, rng: random.Random = None) -> str:
	lines = []
	for word in pick_words(answer, rng):
		if word is None:
			lines.append(NO_SOLUTION)
		else:
			lines.append(str(WordleResult(word, score(word, solution))))
	return "\n".join(lines)

def format_full(answer: list[list[str]]) -> str:
	return "\n".join(" ".join(w.upper() for w in row) for row in answer)

def parse_args(argv: list[str] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Find Wordle guesses that draw a picture")
	parser.add_argument("solution", help="the solution to today's Wordle puzzle")
	source = parser.add_mutually_exclusive_group(required=True)
	source.add_argument("-p", "--pattern", help="the target pattern (lines may be separated by / or newlines)")
	source.add_argument("-f", "--artfile", help="path to artfile containing the target pattern")
	parser.add_argument("--format", choices=FORMATS, default="example", help="the output format")
	parser.add_argument("--dict", default=WORD_LIST_PATH, help="path to the word list")
	parser.add_argument("--seed", type=int, help="seed for the random word picks")
	parser.add_argument("-j", "--jobs", type=int, default=1, help="worker processes for the search")
	parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
	return parser.parse_args(argv)

def _fail(msg: str) -> NoReturn:
	print(f"Error: {msg}", file=sys.stderr)
	raise SystemExit(1)

def main(argv: list[str] = None) -> None:
	args = parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(asctime)s %(name)s %(levelname)s: %(message)s",
	)

	try:
		solution = validate_solution(args.solution)
	except ValueError as e:
		_fail(str(e))

	try:
		words = load_word_list(args.dict)
	except OSError as e:
		_fail(f"Could not read word list '{args.dict}': {e}")
	if not words:
		_fail(f"Word list '{args.dict}' has no {WORD_LENGTH}-letter words.")
	log.debug(f"Loaded {len(words)} words from {args.dict}")

	if args.pattern is not None:
		goal_shape = pattern_from_string(args.pattern)
	else:
		try:
			goal_shape = pattern_from_file(args.artfile)
		except OSError as e:
			_fail(f"Could not read artfile '{args.artfile}': {e}")
	log.debug(f"Goal shape:\n{render_pattern(goal_shape)}")

	answer = find_all_matches(words, solution, goal_shape, jobs=args.jobs)

	rng = random.Random(args.seed)
	if args.format == "full":
		print(format_full(answer))
	elif args.format == "tiles":
		print(format_tiles(answer, solution, rng))
	else:
		print(format_example(answer, rng))

if __name__ == "__main__":
	main()
