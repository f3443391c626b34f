import random
import typing

T = typing.TypeVar("T")


def weighted_choice (options: typing.Sequence[typing.Tuple[T, float]], rng: random.Random) -> T:

	"""Pick one item from a list of (value, weight) pairs.

	Weights are relative - they don't need to sum to 1.0. Higher weight means
	higher probability of selection.

	Parameters:
		options: List of `(value, weight)` tuples
		rng: Random number generator instance

	Example:
		```python
		move = tenor.sequence_utils.weighted_choice([
			("step", 0.76),
			("leap", 0.16),
			("octave", 0.08),
		], rng)
		```
	"""

	if not options:
		raise ValueError("Options list cannot be empty")

	total = sum(weight for _, weight in options)

	if total <= 0:
		raise ValueError("Total weight must be positive")

	threshold = rng.random() * total
	cumulative = 0.0

	for value, weight in options:
		cumulative += weight
		if cumulative >= threshold:
			return value

	return options[-1][0]


def weighted_coin (probability: float, rng: random.Random) -> bool:

	"""Return True with the given probability (0.0–1.0)."""

	if not 0.0 <= probability <= 1.0:
		raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

	return rng.random() < probability


def derive_rngs (count: int, seed: typing.Optional[int] = None) -> typing.List[random.Random]:

	"""Create ``count`` independent random streams.

	With a seed, a master generator hands each child its own seed so the
	whole set is repeatable. Without one, every child is seeded from the OS.

	Example:
		```python
		rngs = tenor.sequence_utils.derive_rngs(3, seed=42)
		```
	"""

	if count <= 0:
		return []

	if seed is None:
		return [random.Random() for _ in range(count)]

	master = random.Random(seed)

	return [random.Random(master.randint(0, 2 ** 63)) for _ in range(count)]
