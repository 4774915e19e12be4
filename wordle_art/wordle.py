WORD_LENGTH = 5
GUESS_COUNT = 6

_ABSENT = 0b00
_PARTIAL = 0b01
_PRESENT = 0b10

# ANSI styles
_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_FG_BLACK = "\x1b[30m"
_FG_BRIGHT_BLACK = "\x1b[90m"
_BG_GREEN = "\x1b[42m"
_BG_YELLOW = "\x1b[43m"

class WordleResult:
	def __init__(self, guess: str, result: list[int]):
		self.guess = guess.lower()
		self.result = result

	def __str__(self):
		parts = []
		for ch, state in zip(self.guess.upper(), self.result):
			if state == _PRESENT:
				style = _BG_GREEN + _FG_BLACK + _BOLD
			elif state == _PARTIAL:
				style = _BG_YELLOW + _FG_BLACK + _BOLD
			else:
				style = _FG_BRIGHT_BLACK + _BOLD
			parts.append(f"{style}{ch}{_RESET}")
		return " ".join(parts)

def _letter_counts(word: str) -> dict[str, int]:
	counts: dict[str, int] = {}
	for ch in word:
		counts[ch] = counts.get(ch, 0) + 1
	return counts

def score(guess: str, target: str) -> list[int]:
	"""
	Wordle feedback for one guess: greens first, then yellows by remaining counts.
	"""
	if len(guess) != len(target):
		raise ValueError("Guess and target must have the same length.")
	guess = guess.lower()
	target = target.lower()

	result = [_ABSENT] * len(guess)
	remaining: dict[str, int] = {}

	for i in range(len(guess)):
		if guess[i] == target[i]:
			result[i] = _PRESENT
		else:
			ch = target[i]
			remaining[ch] = remaining.get(ch, 0) + 1

	for i in range(len(guess)):
		if result[i] != _PRESENT:
			ch = guess[i]
			if remaining.get(ch, 0) > 0:
				result[i] = _PARTIAL
				remaining[ch] -= 1

	return result

def goal_result(goal_row: list[bool]) -> list[int]:
	"""The only feedback a candidate may produce to draw `goal_row`."""
	return [_PRESENT if marked else _ABSENT for marked in goal_row]

def matches(candidate: str, solution: str, goal_row: list[bool]) -> bool:
	"""
	True when guessing `candidate` against `solution` lights up green exactly
	at the marked positions of `goal_row` and nothing (not even yellow)
	anywhere else. Both words are expected in the same case.
	"""
	unused = _letter_counts(solution)

	for test_ch, solution_ch, should_match in zip(candidate, solution, goal_row):
		is_green = test_ch == solution_ch
		if is_green != should_match:
			return False
		if is_green:
			unused[test_ch] -= 1

	# Unmarked letters must not be available for a yellow either.
	return all(
		marked or unused.get(ch, 0) == 0
		for ch, marked in zip(candidate, goal_row)
	)
