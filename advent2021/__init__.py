"""Solutions to 2021 puzzles: bit packets, snailfish numbers, beacon scanners, amphipods and an ALU."""

__version__ = "0.1.0"
__all__ = ["alu", "day16", "day18", "day19", "day23", "day24"]