"""Scale catalog and random scale selection.

A :class:`Scale` is an ordered run of :class:`~tenor.pitch.Pitch` tokens from
a root up to and including the octave above it, so a seven-note mode has
eight degrees and the top degree doubles the root. Degrees are 1-indexed.

Scale shapes live in ``SCALE_DEFINITIONS`` as semitone offsets from the root.
Add your own with :func:`register_scale`.
"""

import dataclasses
import logging
import random
import typing

import tenor.pitch


logger = logging.getLogger(__name__)


SCALE_DEFINITIONS: typing.Dict[str, typing.List[int]] = {
	"aeolian": [0, 2, 3, 5, 7, 8, 10],
	"blues": [0, 3, 5, 6, 7, 10],
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
	"diminished": [0, 2, 3, 5, 6, 8, 9, 11],
	"dorian": [0, 2, 3, 5, 7, 9, 10],
	"double_harmonic": [0, 1, 4, 5, 7, 8, 11],
	"egyptian": [0, 2, 5, 7, 10],
	"enigmatic": [0, 1, 4, 6, 8, 10, 11],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"hirajoshi": [0, 2, 3, 7, 8],
	"hungarian_minor": [0, 2, 3, 6, 7, 8, 11],
	"ionian": [0, 2, 4, 5, 7, 9, 11],
	"iwato": [0, 1, 5, 6, 10],
	"locrian": [0, 1, 3, 5, 6, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"lydian_dominant": [0, 2, 4, 6, 7, 9, 10],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"melodic_minor": [0, 2, 3, 5, 7, 9, 11],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"neapolitan_major": [0, 1, 3, 5, 7, 9, 11],
	"neapolitan_minor": [0, 1, 3, 5, 7, 8, 11],
	"phrygian": [0, 1, 3, 5, 7, 8, 10],
	"phrygian_dominant": [0, 1, 4, 5, 7, 8, 10],
	"super_locrian": [0, 1, 3, 4, 6, 8, 10],
	"whole_tone": [0, 2, 4, 6, 8, 10],
}

# Roots are drawn from C1..B8 so the octave above any root is still a Pitch.
LOWEST_ROOT_MIDI = 24
HIGHEST_ROOT_MIDI = 119


@dataclasses.dataclass(frozen=True)
class Scale:

	"""
	An ordered, 1-indexed sequence of pitches built from a root and a shape.
	"""

	root: tenor.pitch.Pitch
	name: str
	pitches: typing.Tuple[tenor.pitch.Pitch, ...]


	def __len__ (self) -> int:

		return len(self.pitches)


	def __getitem__ (self, index: int) -> tenor.pitch.Pitch:

		return self.pitches[index]


	def __iter__ (self) -> typing.Iterator[tenor.pitch.Pitch]:

		return iter(self.pitches)


	def degree (self, number: int) -> tenor.pitch.Pitch:

		"""Return the pitch at a 1-indexed scale degree."""

		if not 1 <= number <= len(self.pitches):
			raise ValueError(f"Degree {number} is outside 1-{len(self.pitches)} for {self}")

		return self.pitches[number - 1]


	def __str__ (self) -> str:

		return f"{self.root} {self.name}"


def register_scale (name: str, offsets: typing.List[int]) -> None:

	"""Add a custom scale shape to the catalog.

	Parameters:
		name: Catalog key, e.g. ``"raga_bhairav"``.
		offsets: Ascending semitone offsets from the root, starting at 0,
			all below 12. The octave is appended automatically.

	Example:
		```python
		tenor.scales.register_scale("raga_bhairav", [0, 1, 4, 5, 7, 8, 11])
		```
	"""

	if not offsets or offsets[0] != 0:
		raise ValueError("Scale offsets must start at 0")

	if any(b <= a for a, b in zip(offsets, offsets[1:])):
		raise ValueError(f"Scale offsets must be strictly ascending: {offsets}")

	if offsets[-1] > 11:
		raise ValueError(f"Scale offsets must stay within one octave (0-11): {offsets}")

	SCALE_DEFINITIONS[name] = list(offsets)


def make_scale (root: tenor.pitch.Pitch, name: str) -> Scale:

	"""Materialise the pitches of a named scale on a root, octave included.

	Example:
		```python
		make_scale(tenor.pitch.parse("C4"), "ionian")
		# → C4 D4 E4 F4 G4 A4 B4 C5
		```
	"""

	if name not in SCALE_DEFINITIONS:
		raise ValueError(f"Unknown scale: {name!r}. Available: {sorted(SCALE_DEFINITIONS)}")

	offsets = SCALE_DEFINITIONS[name] + [12]
	pitches = tuple(tenor.pitch.Pitch.from_midi(root.midi + offset) for offset in offsets)

	return Scale(root=root, name=name, pitches=pitches)


def generate_random_scale (rng: random.Random) -> Scale:

	"""Pick a random scale shape and root (e.g. ``E3 dorian``).

	Both the shape and the root are drawn uniformly; the root spans C1..B8.
	"""

	name = rng.choice(sorted(SCALE_DEFINITIONS))
	root = tenor.pitch.Pitch.from_midi(rng.randint(LOWEST_ROOT_MIDI, HIGHEST_ROOT_MIDI))

	scale = make_scale(root, name)

	logger.debug(f"Random scale: {scale}")

	return scale
