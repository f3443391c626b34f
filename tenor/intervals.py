"""Melodic interval generation by a weighted walk over scale degrees.

Each step draws one of six moves by weight and applies it to the current
degree. A candidate outside ``[1, len(scale)]`` is not discarded: it becomes
the pivot for the next draw, so the line re-enters the scale from wherever
the rejected move left it. The pivot never drifts more than an octave
(seven degrees) beyond either end of the scale.

Down moves subtract their magnitude from the degree (``leap_down`` from 6 by
3 gives 3), mirroring the up moves.
"""

import dataclasses
import enum
import logging
import random
import typing

import tenor.constants
import tenor.pitch
import tenor.sequence_utils


logger = logging.getLogger(__name__)


OCTAVE = 7
LEAP_SIZES = (2, 3, 4, 5)


class DegenerateScaleError (RuntimeError):

	"""Raised when the walk cannot find a legal degree in the scale."""


class Move (enum.Enum):

	STEP_UP = "step_up"
	STEP_DOWN = "step_down"
	LEAP_UP = "leap_up"
	LEAP_DOWN = "leap_down"
	OCTAVE_UP = "octave_up"
	OCTAVE_DOWN = "octave_down"


@dataclasses.dataclass(frozen=True)
class MoveRule:

	"""
	How a move changes a degree, and how likely it is to be drawn.
	"""

	transform: typing.Callable[[int, random.Random], int]
	weight: float


MOVES: typing.Dict[Move, MoveRule] = {
	Move.STEP_UP: MoveRule(lambda degree, rng: degree + 1, 0.38),
	Move.STEP_DOWN: MoveRule(lambda degree, rng: degree - 1, 0.38),
	Move.LEAP_UP: MoveRule(lambda degree, rng: degree + rng.choice(LEAP_SIZES), 0.08),
	Move.LEAP_DOWN: MoveRule(lambda degree, rng: degree - rng.choice(LEAP_SIZES), 0.08),
	Move.OCTAVE_UP: MoveRule(lambda degree, rng: degree + OCTAVE, 0.04),
	Move.OCTAVE_DOWN: MoveRule(lambda degree, rng: degree - OCTAVE, 0.04),
}

MOVE_WEIGHTS: typing.List[typing.Tuple[Move, float]] = [(move, rule.weight) for move, rule in MOVES.items()]


def make_move (scale_length: int, degree: int, rng: random.Random, max_attempts: int = tenor.constants.MAX_WALK_ATTEMPTS) -> int:

	"""Draw moves from ``degree`` until one lands inside the scale.

	Parameters:
		scale_length: Number of degrees in the scale
		degree: Current degree (the starting pivot)
		rng: Random number generator instance
		max_attempts: Rejected candidates tolerated before giving up

	Raises:
		DegenerateScaleError: If no legal degree is found within ``max_attempts``
			draws, or the scale has fewer than two degrees.
	"""

	if scale_length < 2:
		raise DegenerateScaleError(f"A scale of {scale_length} degree(s) leaves the walk no legal move")

	low = 1 - OCTAVE
	high = scale_length + OCTAVE
	pivot = degree

	for attempt in range(max_attempts):

		move = tenor.sequence_utils.weighted_choice(MOVE_WEIGHTS, rng)
		candidate = MOVES[move].transform(pivot, rng)

		if 1 <= candidate <= scale_length:
			if attempt:
				logger.debug(f"Walk re-entered the scale at degree {candidate} after {attempt} rejected candidate(s)")
			return candidate

		pivot = max(low, min(high, candidate))

	logger.warning(f"No legal degree in {max_attempts} attempts from degree {degree} (scale length {scale_length})")

	raise DegenerateScaleError(
		f"No legal move found from degree {degree} in a scale of {scale_length} degrees after {max_attempts} attempts"
	)


def construct_intervals (scale: typing.Sized, count: int, rng: random.Random, degree: int = 1) -> typing.List[int]:

	"""Walk ``count`` moves through the scale starting from ``degree``."""

	intervals: typing.List[int] = []

	for _ in range(count):
		degree = make_move(len(scale), degree, rng)
		intervals.append(degree)

	return intervals


def build_sequence (scale: typing.Sized, count: int, rng: random.Random) -> typing.List[int]:

	"""Generate ``count`` scale degrees bookended by the tonic.

	The sequence opens on degree 1, wanders for ``count - 2`` moves, and
	closes on either the tonic or the top of the scale (its octave), chosen
	at random.

	Example:
		```python
		build_sequence(scale, 6, random.Random(3))  # e.g. [1, 2, 3, 2, 1, 8]
		```
	"""

	if count <= 0:
		return []

	if count == 1:
		return [1]

	scale_length = len(scale)

	if scale_length < 1:
		raise DegenerateScaleError("Cannot build intervals over an empty scale")

	middle = construct_intervals(scale, count - 2, rng)
	closing = rng.choice([1, scale_length])

	return [1] + middle + [closing]


def intervals_to_notes (intervals: typing.Iterable[int], scale: typing.Sequence[tenor.pitch.Pitch]) -> typing.List[tenor.pitch.Pitch]:

	"""Look up the pitch for each 1-indexed degree."""

	return [scale[degree - 1] for degree in intervals]
