import random

import pytest

import tenor.rhythm


# --- generate_time_signature ---


def test_time_signature_sums_to_note_count () -> None:

	"""Beats always add back up to the requested note count."""

	rng = random.Random(1)

	for note_count in range(1, 60):
		for _ in range(20):
			assert sum(tenor.rhythm.generate_time_signature(note_count, rng)) == note_count


def test_time_signature_beat_sizes () -> None:

	"""Every beat but the last is 2, 3 or 4; the last is 1, 2 or 3."""

	rng = random.Random(2)

	for note_count in range(1, 60):
		for _ in range(20):
			signature = tenor.rhythm.generate_time_signature(note_count, rng)

			assert all(beat in (2, 3, 4) for beat in signature[:-1])
			assert 0 < signature[-1] <= 3


def test_time_signature_small_counts () -> None:

	"""Up to three notes form a single beat."""

	rng = random.Random(0)

	assert tenor.rhythm.generate_time_signature(1, rng) == [1]
	assert tenor.rhythm.generate_time_signature(2, rng) == [2]
	assert tenor.rhythm.generate_time_signature(3, rng) == [3]


@pytest.mark.parametrize("note_count", [0, -1, -8])
def test_time_signature_empty (note_count: int) -> None:

	assert tenor.rhythm.generate_time_signature(note_count, random.Random(0)) == []


def test_time_signature_uses_all_sizes () -> None:

	rng = random.Random(4)
	seen = set()

	for _ in range(200):
		seen.update(tenor.rhythm.generate_time_signature(16, rng)[:-1])

	assert seen == {2, 3, 4}


def test_time_signature_is_deterministic () -> None:

	a = tenor.rhythm.generate_time_signature(32, random.Random(9))
	b = tenor.rhythm.generate_time_signature(32, random.Random(9))

	assert a == b


# --- segment_beat ---


@pytest.mark.parametrize("beat, note_value, expected", [(4, 16, 4), (3, 8, 6), (2, 4, 8), (1, 1, 16)])
def test_segment_beat_no_sparseness_keeps_every_slot (beat: int, note_value: int, expected: int) -> None:

	"""With sparseness 0 the beat is a full run of slots, whatever the seed."""

	for seed in range(10):
		onsets = tenor.rhythm.segment_beat(beat, note_value, random.Random(seed), sparseness=0)
		assert onsets == list(range(1, expected + 1))


def test_segment_beat_always_starts_on_one () -> None:

	rng = random.Random(6)

	for sparseness in (1, 2, 5, 50):
		for _ in range(50):
			onsets = tenor.rhythm.segment_beat(4, 16, rng, sparseness=sparseness)

			assert onsets[0] == 1
			assert onsets == sorted(set(onsets))
			assert all(1 <= slot <= 4 for slot in onsets)


def test_segment_beat_density_follows_sparseness () -> None:

	"""Non-mandatory slots survive roughly 1 / (1 + sparseness) of the time."""

	rng = random.Random(8)
	trials = 2000

	kept = sum(len(tenor.rhythm.segment_beat(2, 16, rng, sparseness=3)) - 1 for _ in range(trials))

	assert kept / trials == pytest.approx(0.25, abs=0.05)


def test_segment_beat_rejects_bad_arguments () -> None:

	rng = random.Random(0)

	with pytest.raises(ValueError):
		tenor.rhythm.segment_beat(4, 3, rng)

	with pytest.raises(ValueError):
		tenor.rhythm.segment_beat(4, 16, rng, sparseness=-1)


def test_segment_beat_empty_beat () -> None:

	assert tenor.rhythm.segment_beat(0, 16, random.Random(0)) == []


# --- assemble_measure ---


def test_assemble_measure_offsets_each_beat () -> None:

	"""With no rests the measure is one continuous run of slots."""

	onsets = tenor.rhythm.assemble_measure([4, 3], 16, random.Random(0), sparseness=0)

	assert onsets == [1, 2, 3, 4, 5, 6, 7]


def test_assemble_measure_offsets_in_sixteenths () -> None:

	"""Beat offsets are counted in sixteenth slots, not in notes."""

	onsets = tenor.rhythm.assemble_measure([2, 2], 8, random.Random(0), sparseness=0)

	assert onsets == [1, 2, 3, 4, 5, 6, 7, 8]


def test_assemble_measure_beats_start_with_onsets () -> None:

	rng = random.Random(12)

	onsets = tenor.rhythm.assemble_measure([3, 2, 4], 16, rng, sparseness=10)

	assert 1 in onsets
	assert 4 in onsets
	assert 6 in onsets


def test_assemble_measure_matches_beat_segments () -> None:

	"""The measure is exactly its beats' segments, in order."""

	time_signature = [4, 2, 3, 3]

	for seed in range(20):
		onsets = tenor.rhythm.assemble_measure(time_signature, 16, random.Random(seed), sparseness=2)

		rng = random.Random(seed)
		segments = [tenor.rhythm.segment_beat(beat, 16, rng, sparseness=2) for beat in time_signature]

		assert len(onsets) == sum(len(segment) for segment in segments)
		assert all(a < b for a, b in zip(onsets, onsets[1:]))


def test_assemble_measure_empty () -> None:

	assert tenor.rhythm.assemble_measure([], 16, random.Random(0)) == []


# --- assemble_piece ---


def test_assemble_piece_example () -> None:

	assert tenor.rhythm.assemble_piece([1, 3], 2, 4) == [1, 3, 5, 7]


def test_assemble_piece_offsets_each_repetition () -> None:

	onsets = [1, 2, 5]
	piece = tenor.rhythm.assemble_piece(onsets, 3, 8)

	assert len(piece) == 9

	for k in range(3):
		for i, onset in enumerate(onsets):
			assert piece[k * len(onsets) + i] == onset + k * 8


@pytest.mark.parametrize("measure_count", [0, -2])
def test_assemble_piece_no_measures (measure_count: int) -> None:

	assert tenor.rhythm.assemble_piece([1, 3], measure_count, 4) == []
