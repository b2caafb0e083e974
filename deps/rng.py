import random

from generator import RandomSource


def get_rng() -> RandomSource:
    """
    Random source handed to the generator.
    Tests swap it through app.dependency_overrides for a fixed sequence.
    """
    return random.Random()
