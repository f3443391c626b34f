"""Full generation pipeline: rhythm track, melody track, and voices.

The rhythm track comes from a random time signature segmented into a
measure and repeated across the piece. The melody track is an interval walk
over a scale, one degree per onset. The two are zipped into note events and
optionally thinned by :func:`~tenor.entities.chordify`.

Every function takes its random source explicitly. :func:`generate_voices`
hands each voice its own generator, derived from one seed, so voices can run
side by side and still reproduce exactly.
"""

import asyncio
import dataclasses
import logging
import random
import typing

import tenor.constants
import tenor.entities
import tenor.intervals
import tenor.pitch
import tenor.rhythm
import tenor.scales
import tenor.sequence_utils


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class VoiceSettings:

	"""
	Parameters for one independently generated voice.
	"""

	measure_count: int
	note_count: int
	note_value: int = tenor.constants.DEFAULT_NOTE_VALUE
	sparseness: int = tenor.constants.DEFAULT_SPARSENESS
	scale: typing.Optional[str] = None
	root: typing.Optional[str] = None
	chordify: bool = False
	keep_probability: float = tenor.constants.DEFAULT_KEEP_PROBABILITY


	@classmethod
	def from_dict (cls, data: typing.Dict[str, typing.Any]) -> "VoiceSettings":

		"""Build settings from a configuration mapping (e.g. one YAML list entry).

		Raises:
			ValueError: On unknown keys or missing ``measure_count``/``note_count``.

		Example:
			```python
			VoiceSettings.from_dict({"measure_count": 4, "note_count": 8, "scale": "dorian"})
			```
		"""

		known = {field.name for field in dataclasses.fields(cls)}
		unknown = set(data) - known

		if unknown:
			raise ValueError(f"Unknown voice settings: {sorted(unknown)}. Expected: {sorted(known)}")

		try:
			return cls(**data)

		except TypeError as exc:
			raise ValueError(f"Invalid voice settings {data!r}: {exc}") from exc


@dataclasses.dataclass
class Voice:

	"""
	One generated voice: its settings, the scale it used, and its events.
	"""

	settings: VoiceSettings
	scale: tenor.scales.Scale
	events: typing.List[tenor.entities.NoteEvent]


def generate_piece (measure_count: int, note_count: int, note_value: int, sparseness: int, rng: random.Random) -> typing.List[int]:

	"""Generate the onsets of a piece of ``measure_count`` identical measures.

	Each measure holds ``note_count`` notes of ``note_value`` under one random
	time signature. Onsets are sixteenth-note positions from the start of the
	piece.
	"""

	time_signature = tenor.rhythm.generate_time_signature(note_count, rng)
	measure = tenor.rhythm.assemble_measure(time_signature, note_value, rng, sparseness=sparseness)
	measure_length = note_count * tenor.rhythm.sixteenths_per_note(note_value)

	return tenor.rhythm.assemble_piece(measure, measure_count, measure_length)


def generate_entity_map (
	measure_count: int,
	note_count: int,
	rng: random.Random,
	note_value: int = tenor.constants.DEFAULT_NOTE_VALUE,
	sparseness: int = tenor.constants.DEFAULT_SPARSENESS,
	scale: typing.Optional[tenor.scales.Scale] = None,
) -> typing.List[tenor.entities.NoteEvent]:

	"""Generate a piece and give every onset a note from an interval walk.

	Parameters:
		measure_count: Number of measures
		note_count: Notes per measure
		rng: Random number generator instance
		note_value: Note value of the time signature (default: sixteenths)
		sparseness: Rest bias passed to beat segmentation
		scale: Scale to walk; a random one is drawn from ``rng`` when omitted

	Example:
		```python
		events = generate_entity_map(2, 8, random.Random(7))
		```
	"""

	if scale is None:
		scale = tenor.scales.generate_random_scale(rng)

	piece = generate_piece(measure_count, note_count, note_value, sparseness, rng)
	intervals = tenor.intervals.build_sequence(scale, len(piece), rng)
	notes = tenor.intervals.intervals_to_notes(intervals, scale)

	return tenor.entities.map_entities(piece, notes)


def _resolve_scale (settings: VoiceSettings, rng: random.Random) -> tenor.scales.Scale:

	"""Build the scale a voice asks for, filling in whatever it leaves open at random."""

	if settings.scale is None and settings.root is None:
		return tenor.scales.generate_random_scale(rng)

	if settings.root is not None:
		root = tenor.pitch.parse(settings.root)
	else:
		root = tenor.pitch.Pitch.from_midi(rng.randint(tenor.scales.LOWEST_ROOT_MIDI, tenor.scales.HIGHEST_ROOT_MIDI))

	name = settings.scale if settings.scale is not None else rng.choice(sorted(tenor.scales.SCALE_DEFINITIONS))

	return tenor.scales.make_scale(root, name)


def generate_voice (settings: VoiceSettings, rng: random.Random) -> Voice:

	"""Run the whole pipeline for one voice."""

	scale = _resolve_scale(settings, rng)

	events = generate_entity_map(
		settings.measure_count,
		settings.note_count,
		rng,
		note_value = settings.note_value,
		sparseness = settings.sparseness,
		scale = scale,
	)

	if settings.chordify:
		events = tenor.entities.chordify(events, rng, keep_probability=settings.keep_probability)

	logger.debug(f"Voice in {scale}: {len(events)} events over {settings.measure_count} measure(s)")

	return Voice(settings=settings, scale=scale, events=events)


async def generate_voices (settings: typing.Sequence[VoiceSettings], seed: typing.Optional[int] = None) -> typing.List[Voice]:

	"""Generate several voices as independent tasks.

	Each voice gets its own random generator (derived from ``seed`` when
	given) and runs in the default executor. Results come back in the order
	the settings were given, not the order the tasks finish.

	Example:
		```python
		voices = asyncio.run(generate_voices([
			VoiceSettings(measure_count=4, note_count=8),
			VoiceSettings(measure_count=4, note_count=8, chordify=True),
		], seed=42))
		```
	"""

	rngs = tenor.sequence_utils.derive_rngs(len(settings), seed)
	loop = asyncio.get_running_loop()

	tasks = [
		loop.run_in_executor(None, generate_voice, voice_settings, rng)
		for voice_settings, rng in zip(settings, rngs)
	]

	voices = await asyncio.gather(*tasks)

	logger.info(f"Generated {len(voices)} voice(s)" + (f" from seed {seed}" if seed is not None else ""))

	return list(voices)
