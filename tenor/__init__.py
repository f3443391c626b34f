"""
Tenor - procedural note sequences from random rhythms and melodic walks.

Tenor builds a piece in two tracks and zips them together:

- **Rhythm.** A measure's note count is split into a random time signature
  of 2-, 3- and 4-note beats. Each beat is cut into sixteenth-note slots and
  a sparseness-controlled coin decides which slots sound (the first slot of
  a beat always does). Measures repeat end to end to form the piece.
- **Melody.** A random scale is walked degree by degree with weighted steps,
  leaps and octave jumps, opening on the tonic and closing on the tonic or
  its octave.
- **Chords.** ``chordify()`` thins a voice into a sparser accent layer.

Every generator takes an explicit ``random.Random``, so a seed reproduces a
piece exactly and parallel voices never share random state.

Minimal example:

    ```python
    import random
    import tenor

    rng = random.Random(42)
    events = tenor.generate_entity_map(measure_count=4, note_count=8, rng=rng)
    accents = tenor.chordify(events, rng)

    schedule = tenor.construct_piece(events, base_time=0.125, instrument=synth, pivot_time=0.0)
    ```

Package-level exports: ``parse``, ``Pitch``, ``Scale``, ``NoteEvent``,
``generate_random_scale``, ``generate_piece``, ``generate_entity_map``,
``chordify``, ``VoiceSettings``, ``generate_voices``, ``construct_piece``,
and the errors ``InvalidNotationError``, ``LengthMismatchError``,
``DegenerateScaleError``.
"""

import tenor.entities
import tenor.intervals
import tenor.piece
import tenor.pitch
import tenor.playback
import tenor.scales


parse = tenor.pitch.parse
Pitch = tenor.pitch.Pitch
Scale = tenor.scales.Scale
NoteEvent = tenor.entities.NoteEvent

generate_random_scale = tenor.scales.generate_random_scale
generate_piece = tenor.piece.generate_piece
generate_entity_map = tenor.piece.generate_entity_map
chordify = tenor.entities.chordify
VoiceSettings = tenor.piece.VoiceSettings
generate_voices = tenor.piece.generate_voices
construct_piece = tenor.playback.construct_piece

InvalidNotationError = tenor.pitch.InvalidNotationError
LengthMismatchError = tenor.entities.LengthMismatchError
DegenerateScaleError = tenor.intervals.DegenerateScaleError
