"""Pitch tokens and note-name parsing.

A :class:`Pitch` is a letter (A–G), an optional accidental (``#`` or ``b``)
and a single-digit octave (1–9). Notation is strict: ``"C#4"`` and ``"Bb2"``
are valid, ``"c4"``, ``"H4"`` and ``"C10"`` are not.

MIDI numbering follows the usual convention of **C4 = 60**.
"""

import dataclasses
import logging
import re
import typing


logger = logging.getLogger(__name__)


NOTATION_PATTERN = re.compile(r"([A-G])([#b]?)([1-9])")

LETTER_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"D": 2,
	"E": 4,
	"F": 5,
	"G": 7,
	"A": 9,
	"B": 11,
}

ACCIDENTAL_OFFSET: typing.Dict[str, int] = {
	"": 0,
	"#": 1,
	"b": -1,
}

# Sharp spellings, indexed by pitch class.
PC_TO_SPELLING: typing.List[typing.Tuple[str, str]] = [
	("C", ""),
	("C", "#"),
	("D", ""),
	("D", "#"),
	("E", ""),
	("F", ""),
	("F", "#"),
	("G", ""),
	("G", "#"),
	("A", ""),
	("A", "#"),
	("B", ""),
]

MIN_OCTAVE = 1
MAX_OCTAVE = 9


class InvalidNotationError (ValueError):

	"""Raised when a string is not a valid letter/accidental/octave notation."""

	def __init__ (self, notation: typing.Any) -> None:

		self.notation = notation
		super().__init__(f"Invalid notation: {notation!r}. Expected e.g. 'C4', 'F#3', 'Bb5'.")


@dataclasses.dataclass(frozen=True)
class Pitch:

	"""
	An immutable, validated pitch token.
	"""

	letter: str
	accidental: str = ""
	octave: int = 4


	def __post_init__ (self) -> None:

		"""
		Reject any field outside the notation's alphabet.
		"""

		if (
			self.letter not in LETTER_TO_PC
			or self.accidental not in ACCIDENTAL_OFFSET
			or not isinstance(self.octave, int)
			or not MIN_OCTAVE <= self.octave <= MAX_OCTAVE
		):
			raise InvalidNotationError(f"{self.letter}{self.accidental}{self.octave}")


	def __str__ (self) -> str:

		return f"{self.letter}{self.accidental}{self.octave}"


	@property
	def pitch_class (self) -> int:

		"""Pitch class (0–11) of this pitch."""

		return (LETTER_TO_PC[self.letter] + ACCIDENTAL_OFFSET[self.accidental]) % 12


	@property
	def midi (self) -> int:

		"""
		MIDI note number of this pitch.

		Accidentals are applied before the octave, so ``Cb4`` is 59 and
		``B#4`` is 72, matching how the enharmonic spellings sound.
		"""

		return (self.octave + 1) * 12 + LETTER_TO_PC[self.letter] + ACCIDENTAL_OFFSET[self.accidental]


	@classmethod
	def from_midi (cls, midi_note: int) -> "Pitch":

		"""Build a sharp-spelled pitch from a MIDI note number.

		Raises:
			ValueError: If the note falls outside octaves 1–9 (MIDI 24–131).

		Example:
			```python
			Pitch.from_midi(61)  # → C#4
			```
		"""

		octave = midi_note // 12 - 1

		if not MIN_OCTAVE <= octave <= MAX_OCTAVE:
			raise ValueError(
				f"MIDI note {midi_note} is outside the representable range "
				f"(octaves {MIN_OCTAVE}-{MAX_OCTAVE})"
			)

		letter, accidental = PC_TO_SPELLING[midi_note % 12]

		return cls(letter=letter, accidental=accidental, octave=octave)


def parse (notation: str) -> Pitch:

	"""Parse pitch-letter + octave notation into a :class:`Pitch`.

	Parameters:
		notation: One letter ``A``–``G``, an optional ``#`` or ``b`` and a
			single octave digit ``1``–``9``. Nothing else is accepted.

	Raises:
		InvalidNotationError: If the string does not match.

	Example:
		```python
		parse("C#4")  # → Pitch(letter='C', accidental='#', octave=4)
		parse("c4")   # raises InvalidNotationError
		```
	"""

	if not isinstance(notation, str):
		raise InvalidNotationError(notation)

	match = NOTATION_PATTERN.fullmatch(notation)

	if match is None:
		logger.debug(f"Rejected notation {notation!r}")
		raise InvalidNotationError(notation)

	letter, accidental, octave = match.groups()

	return Pitch(letter=letter, accidental=accidental, octave=int(octave))
