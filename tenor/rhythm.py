"""Rhythm decomposition: time signatures, beats, measures and pieces.

Positions are counted in sixteenth-note slots starting at 1. A beat of
``n`` notes of value ``v`` spans ``n * 16 // v`` slots, and the first slot
of every beat is always an onset so no beat is ever silent.
"""

import logging
import random
import typing

import tenor.constants


logger = logging.getLogger(__name__)


def _validate_note_value (note_value: int) -> None:

	if note_value not in tenor.constants.NOTE_VALUES:
		raise ValueError(
			f"note_value must be one of {tenor.constants.NOTE_VALUES}, got {note_value}"
		)


def sixteenths_per_note (note_value: int) -> int:

	"""Number of sixteenth slots in one note of the given value (16 → 1, 4 → 4)."""

	_validate_note_value(note_value)

	return tenor.constants.SIXTEENTH // note_value


def generate_time_signature (note_count: int, rng: random.Random) -> typing.List[int]:

	"""Decompose a measure into randomly sized beats.

	Beats of 2, 3 or 4 notes are drawn uniformly while more than three notes
	remain; the last one to three notes form the final beat. A drawn beat
	never uses up the whole remainder, so a non-empty signature always ends
	on that final beat. The beats always sum to ``note_count``.

	Example:
		```python
		generate_time_signature(7, random.Random(1))  # e.g. [4, 3] or [2, 2, 3]
		```
	"""

	signature: typing.List[int] = []
	remaining = note_count

	while remaining > tenor.constants.MAX_FINAL_BEAT:
		beat = rng.choice([size for size in tenor.constants.BEAT_SIZES if size < remaining])
		signature.append(beat)
		remaining -= beat

	if remaining > 0:
		signature.append(remaining)

	logger.debug(f"Time signature for {note_count} notes: {signature}")

	return signature


def segment_beat (beat_note_count: int, note_value: int, rng: random.Random, sparseness: int = 1) -> typing.List[int]:

	"""Break a beat into sixteenth slots and decide which of them sound.

	Slot 1 is always kept. Every other slot is kept when a draw from one
	``True`` and ``sparseness`` ``False`` values comes up ``True``, so higher
	sparseness means more rests and ``sparseness=0`` keeps every slot.

	Parameters:
		beat_note_count: Notes in the beat
		note_value: Note value of the time signature (1, 2, 4, 8 or 16)
		rng: Random number generator instance
		sparseness: Rest bias, 0 or greater

	Returns:
		Ascending 1-based slot indices that carry an onset.
	"""

	if sparseness < 0:
		raise ValueError(f"sparseness cannot be negative, got {sparseness}")

	resolution = sixteenths_per_note(note_value) * beat_note_count

	if resolution <= 0:
		return []

	distribution = [True] + [False] * sparseness

	return [slot for slot in range(1, resolution + 1) if slot == 1 or rng.choice(distribution)]


def assemble_measure (time_signature: typing.Sequence[int], note_value: int, rng: random.Random, sparseness: int = 1) -> typing.List[int]:

	"""Segment every beat of a time signature into one measure of onsets.

	Each beat's onsets are shifted by the slots taken up by the beats before
	it, so the result is ascending and relative to the start of the measure.
	"""

	slots_per_note = sixteenths_per_note(note_value)

	onsets: typing.List[int] = []
	running_count = 0

	for beat in time_signature:
		onsets.extend(running_count + slot for slot in segment_beat(beat, note_value, rng, sparseness=sparseness))
		running_count += beat * slots_per_note

	return onsets


def assemble_piece (measure_onsets: typing.Sequence[int], measure_count: int, note_count_per_measure: int) -> typing.List[int]:

	"""String repeated measures together into a single timeline.

	Repetition ``k`` (from 0) is offset by ``k * note_count_per_measure``.

	Example:
		```python
		assemble_piece([1, 3], 2, 4)  # → [1, 3, 5, 7]
		```
	"""

	piece: typing.List[int] = []

	for k in range(max(0, measure_count)):
		offset = k * note_count_per_measure
		piece.extend(onset + offset for onset in measure_onsets)

	return piece
