import argparse
import asyncio
import logging
import os
import typing

import yaml

import tenor.constants
import tenor.piece
import tenor.playback


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DEFAULT_VOICES: typing.List[typing.Dict[str, typing.Any]] = [
	{"measure_count": 4, "note_count": 8},
	{"measure_count": 4, "note_count": 8, "sparseness": 0, "chordify": True},
]


class ConsoleInstrument:

	"""
	Instrument that logs the notes it is asked to play.
	"""

	def __init__ (self, name: str) -> None:

		self.name = name


	def play (self, note: typing.Any) -> None:

		logger.info(f"{self.name}: {note}")


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point: generate the configured voices and log their schedule.
	"""

	parser = argparse.ArgumentParser(prog="tenor", description="Generate note sequences from random rhythms and melodic walks.")
	parser.add_argument("--config", default="config.yaml", help="YAML configuration file")
	parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output (overrides the config)")
	args = parser.parse_args(argv)

	config = load_config(args.config)

	seed = args.seed if args.seed is not None else config.get('seed')
	base_time = config.get('playback', {}).get('base_time', tenor.constants.DEFAULT_BASE_TIME)
	voice_settings = [tenor.piece.VoiceSettings.from_dict(entry) for entry in config.get('voices', DEFAULT_VOICES)]

	logger.info(f"Tenor generating {len(voice_settings)} voice(s)...")

	voices = asyncio.run(tenor.piece.generate_voices(voice_settings, seed=seed))

	schedules = []

	for index, voice in enumerate(voices, 1):
		instrument = ConsoleInstrument(f"voice {index}")
		logger.info(f"{instrument.name}: {voice.scale}, {len(voice.events)} events")
		schedules.append(tenor.playback.construct_piece(voice.events, base_time, instrument, pivot_time=0.0))

	for entry in tenor.playback.merge_schedules(schedules):
		logger.info(f"{entry.time:8.3f}s  {entry.instrument.name:<8}  {entry.note}")


if __name__ == "__main__":
	main()
