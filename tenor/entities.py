"""Note events: pairing onsets with pitches, and thinning them into chords."""

import dataclasses
import logging
import random
import typing

import tenor.constants
import tenor.pitch
import tenor.sequence_utils


logger = logging.getLogger(__name__)


class LengthMismatchError (ValueError):

	"""Raised when onsets and notes cannot be paired one-to-one."""


@dataclasses.dataclass(frozen=True)
class NoteEvent:

	"""
	A pitch starting at a sixteenth-note position.
	"""

	position: int
	note: tenor.pitch.Pitch


def map_entities (onsets: typing.Sequence[int], notes: typing.Sequence[tenor.pitch.Pitch]) -> typing.List[NoteEvent]:

	"""Pair onset positions with notes, in order.

	Raises:
		LengthMismatchError: If the sequences differ in length. Nothing is
			truncated or padded.

	Example:
		```python
		map_entities([1, 5], [parse("C4"), parse("E4")])
		# → [NoteEvent(1, C4), NoteEvent(5, E4)]
		```
	"""

	if len(onsets) != len(notes):
		raise LengthMismatchError(f"Cannot pair {len(onsets)} onsets with {len(notes)} notes")

	return [NoteEvent(position=position, note=note) for position, note in zip(onsets, notes)]


def chordify (events: typing.Sequence[NoteEvent], rng: random.Random, keep_probability: float = tenor.constants.DEFAULT_KEEP_PROBABILITY) -> typing.List[NoteEvent]:

	"""Keep each event independently with ``keep_probability``.

	Order is preserved. There is no minimum: an empty result is possible.
	"""

	if not 0.0 <= keep_probability <= 1.0:
		raise ValueError(f"keep_probability must be between 0.0 and 1.0, got {keep_probability}")

	kept = [event for event in events if tenor.sequence_utils.weighted_coin(keep_probability, rng)]

	logger.debug(f"Chordify kept {len(kept)} of {len(events)} events")

	return kept
