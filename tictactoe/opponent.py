import random


class RandomPolicy:
    """
    naive computer opponent: any empty cell, uniformly at random
    """
    def __init__(self, seed=None, rng=None):
        # pass rng to share a generator, seed for a reproducible one
        self.rng = rng or random.Random(seed)

    def choose_move(self, board):
        available = [i for i, cell in enumerate(board) if cell is None]
        if not available:
            raise ValueError("no empty cell to move to")
        return self.rng.choice(available)

    def __repr__(self):
        return "RandomPolicy()"


class LowestIndexPolicy:
    """
    deterministic opponent, always the first empty cell
    """
    def choose_move(self, board):
        for i, cell in enumerate(board):
            if cell is None:
                return i
        raise ValueError("no empty cell to move to")

    def __repr__(self):
        return "LowestIndexPolicy()"


POLICIES = {
    "random": RandomPolicy,
    "lowest": LowestIndexPolicy,
}
