import typing

import mido
import pytest

import tenor.pitch
import tenor.scales


class FakeMidiOut:

	"""Minimal MIDI output stub that remembers what it was sent."""

	def __init__ (self) -> None:

		self.sent: typing.List[mido.Message] = []


	def send (self, message: mido.Message) -> None:

		"""Record outgoing MIDI messages."""

		self.sent.append(message)


	def close (self) -> None:

		"""No-op close for the fake device."""

		return None


@pytest.fixture
def midi_out () -> FakeMidiOut:

	"""A fresh fake MIDI output port."""

	return FakeMidiOut()


@pytest.fixture
def c_major () -> tenor.scales.Scale:

	"""C4 ionian: eight degrees from C4 up to C5."""

	return tenor.scales.make_scale(tenor.pitch.parse("C4"), "ionian")
