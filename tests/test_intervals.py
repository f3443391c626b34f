import random
import typing

import pytest

import tenor.intervals
import tenor.pitch
import tenor.scales


class ScriptedRandom (random.Random):

	"""A Random whose ``random()`` replays a fixed script."""

	def __init__ (self, values: typing.List[float]) -> None:

		super().__init__(0)
		self._values = list(values)


	def random (self) -> float:

		return self._values.pop(0)


# --- move table ---


def test_move_weights_sum_to_one () -> None:

	assert sum(rule.weight for rule in tenor.intervals.MOVES.values()) == pytest.approx(1.0)


def test_every_move_has_a_rule () -> None:

	assert set(tenor.intervals.MOVES) == set(tenor.intervals.Move)


def test_step_and_octave_moves () -> None:

	rng = random.Random(0)
	moves = tenor.intervals.MOVES

	assert moves[tenor.intervals.Move.STEP_UP].transform(3, rng) == 4
	assert moves[tenor.intervals.Move.STEP_DOWN].transform(3, rng) == 2
	assert moves[tenor.intervals.Move.OCTAVE_UP].transform(1, rng) == 8
	assert moves[tenor.intervals.Move.OCTAVE_DOWN].transform(8, rng) == 1


def test_leaps_move_two_to_five_degrees () -> None:

	"""Leaps go the way their name says, by 2–5 degrees."""

	rng = random.Random(1)
	moves = tenor.intervals.MOVES

	for _ in range(100):
		assert moves[tenor.intervals.Move.LEAP_UP].transform(4, rng) in (6, 7, 8, 9)
		assert moves[tenor.intervals.Move.LEAP_DOWN].transform(7, rng) in (2, 3, 4, 5)


# --- make_move ---


def test_make_move_legal_step () -> None:

	"""A first draw inside the scale is taken as is (0.1 → step up)."""

	assert tenor.intervals.make_move(8, 3, ScriptedRandom([0.1])) == 4


def test_make_move_retries_from_rejected_candidate () -> None:

	"""A rejected candidate becomes the pivot for the next draw.

	From degree 1, 0.5 draws a step down (to 0, rejected); 0.1 then draws a
	step up from 0, landing on 1. Retrying from the old degree would give 2.
	"""

	assert tenor.intervals.make_move(8, 1, ScriptedRandom([0.5, 0.1])) == 1


def test_make_move_stays_in_scale () -> None:

	rng = random.Random(13)
	degree = 1

	for _ in range(2000):
		degree = tenor.intervals.make_move(5, degree, rng)
		assert 1 <= degree <= 5


@pytest.mark.parametrize("scale_length", [0, 1])
def test_make_move_degenerate_scale (scale_length: int) -> None:

	with pytest.raises(tenor.intervals.DegenerateScaleError):
		tenor.intervals.make_move(scale_length, 1, random.Random(0))


def test_make_move_gives_up_after_max_attempts () -> None:

	"""Exhausting the attempt budget raises instead of looping on.

	0.999 draws an octave down every time, which never lands in the scale.
	"""

	with pytest.raises(tenor.intervals.DegenerateScaleError):
		tenor.intervals.make_move(8, 1, ScriptedRandom([0.999] * 5), max_attempts=5)


# --- build_sequence ---


def test_build_sequence_properties (c_major: tenor.scales.Scale) -> None:

	"""Opens on the tonic, closes on tonic or octave, never leaves the scale."""

	rng = random.Random(21)

	for count in range(1, 40):
		for _ in range(10):
			sequence = tenor.intervals.build_sequence(c_major, count, rng)

			assert len(sequence) == count
			assert sequence[0] == 1
			assert all(1 <= degree <= len(c_major) for degree in sequence)

			if count >= 2:
				assert sequence[-1] in (1, len(c_major))


def test_build_sequence_closing_uses_both_bookends (c_major: tenor.scales.Scale) -> None:

	rng = random.Random(2)
	closings = {tenor.intervals.build_sequence(c_major, 4, rng)[-1] for _ in range(100)}

	assert closings == {1, 8}


@pytest.mark.parametrize("count", [0, -3])
def test_build_sequence_empty (c_major: tenor.scales.Scale, count: int) -> None:

	assert tenor.intervals.build_sequence(c_major, count, random.Random(0)) == []


def test_build_sequence_short_counts_take_no_steps (c_major: tenor.scales.Scale) -> None:

	assert tenor.intervals.build_sequence(c_major, 1, random.Random(0)) == [1]
	assert tenor.intervals.build_sequence(c_major, 2, random.Random(0))[0] == 1


def test_build_sequence_single_degree_scale () -> None:

	"""A one-note scale can hold the bookends but not a walk."""

	scale = [tenor.pitch.parse("C4")]

	assert tenor.intervals.build_sequence(scale, 2, random.Random(0)) == [1, 1]

	with pytest.raises(tenor.intervals.DegenerateScaleError):
		tenor.intervals.build_sequence(scale, 3, random.Random(0))


def test_build_sequence_is_deterministic (c_major: tenor.scales.Scale) -> None:

	a = tenor.intervals.build_sequence(c_major, 32, random.Random(77))
	b = tenor.intervals.build_sequence(c_major, 32, random.Random(77))

	assert a == b


def test_walk_prefers_steps (c_major: tenor.scales.Scale) -> None:

	"""Most consecutive degrees in the walk are a single step apart."""

	sequence = tenor.intervals.construct_intervals(c_major, 3000, random.Random(5))
	steps = sum(1 for a, b in zip(sequence, sequence[1:]) if abs(a - b) == 1)

	assert steps / (len(sequence) - 1) > 0.5


# --- intervals_to_notes ---


def test_intervals_to_notes (c_major: tenor.scales.Scale) -> None:

	notes = tenor.intervals.intervals_to_notes([1, 3, 5, 8], c_major)

	assert [str(n) for n in notes] == ["C4", "E4", "G4", "C5"]
