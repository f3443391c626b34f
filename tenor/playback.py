"""Turn note events into scheduled playback data.

Nothing here waits on a clock. :func:`construct_piece` returns plain
:class:`ScheduledNote` records - when, on what, which note - for an external
scheduler to fire. An event at position ``p`` plays at
``pivot_time + p * base_time``.

:class:`MidiInstrument` adapts any mido output port to the :class:`Instrument`
capability the scheduler calls.
"""

import dataclasses
import heapq
import logging
import time
import typing

import mido

import tenor.entities
import tenor.pitch


logger = logging.getLogger(__name__)


@typing.runtime_checkable
class Instrument (typing.Protocol):

	"""
	Anything that can sound a pitch when told to.
	"""

	def play (self, note: tenor.pitch.Pitch) -> typing.Any:

		"""
		Sound ``note`` now.
		"""

		...


@dataclasses.dataclass(order=True)
class ScheduledNote:

	"""
	A note to trigger on an instrument at an absolute time (seconds).
	"""

	time: float
	instrument: Instrument = dataclasses.field(compare=False)
	note: tenor.pitch.Pitch = dataclasses.field(compare=False)


	def fire (self) -> typing.Any:

		"""Play the note on its instrument."""

		return self.instrument.play(self.note)


def construct_note (time: float, instrument: Instrument, note: tenor.pitch.Pitch) -> ScheduledNote:

	"""Schedule one note on an instrument."""

	return ScheduledNote(time=time, instrument=instrument, note=note)


def construct_piece (
	events: typing.Iterable[tenor.entities.NoteEvent],
	base_time: float,
	instrument: Instrument,
	pivot_time: typing.Optional[float] = None,
) -> typing.List[ScheduledNote]:

	"""Schedule every event of a voice on one instrument.

	Parameters:
		events: Note events in position order
		base_time: Seconds per sixteenth-note position
		instrument: Target instrument
		pivot_time: Start time in seconds (default: now)

	Example:
		```python
		schedule = construct_piece(voice.events, 0.125, synth, pivot_time=0.0)
		```
	"""

	if base_time <= 0:
		raise ValueError(f"base_time must be positive, got {base_time}")

	if pivot_time is None:
		pivot_time = time.time()

	return [construct_note(pivot_time + event.position * base_time, instrument, event.note) for event in events]


def merge_schedules (schedules: typing.Iterable[typing.Sequence[ScheduledNote]]) -> typing.List[ScheduledNote]:

	"""Merge per-voice schedules into one list ordered by time.

	Each schedule must already be in time order. Ties keep voice order.
	"""

	return list(heapq.merge(*schedules))


class MidiInstrument:

	"""
	Plays pitches as MIDI note-on messages on a mido output port.
	"""

	def __init__ (self, port: typing.Any, channel: int = 0, velocity: int = 100) -> None:

		"""
		Parameters:
			port: An open mido output port (anything with ``send``)
			channel: MIDI channel, 0–15
			velocity: Note-on velocity, 1–127
		"""

		if not 0 <= channel <= 15:
			raise ValueError(f"MIDI channel must be 0-15, got {channel}")

		if not 1 <= velocity <= 127:
			raise ValueError(f"MIDI velocity must be 1-127, got {velocity}")

		self.port = port
		self.channel = channel
		self.velocity = velocity


	def play (self, note: tenor.pitch.Pitch) -> mido.Message:

		"""Send a note-on for ``note`` and return the message sent.

		Raises:
			ValueError: If the pitch lies above MIDI note 127 (e.g. ``A9``).
		"""

		message = mido.Message("note_on", channel=self.channel, note=note.midi, velocity=self.velocity)
		self.port.send(message)

		logger.debug(f"Sent {message}")

		return message
