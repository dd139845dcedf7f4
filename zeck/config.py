"""Central configuration for the Zeckendorf codec."""

from dataclasses import dataclass

FIBONACCI_STRATEGIES = ("fast_doubling", "iterative", "recursive")


@dataclass
class ZeckConfig:
    """Tunable defaults in one place."""

    # --- Fibonacci engine ---
    fibonacci_strategy: str = "fast_doubling"  # 'fast_doubling', 'iterative', 'recursive'
    recursive_max_index: int = 93  # F(94) no longer fits a u64 accumulator

    # --- Files ---
    file_extension: str = ".zeck"
    decompressed_extension: str = ".out"  # used when the input lacks file_extension

    # --- Limits ---
    large_input_warning_bytes: int = 10_000  # compression gets slow and memory hungry past this

    def __post_init__(self):
        if self.fibonacci_strategy not in FIBONACCI_STRATEGIES:
            raise ValueError(
                f"Unknown Fibonacci strategy: {self.fibonacci_strategy!r}. "
                f"Choose from: {list(FIBONACCI_STRATEGIES)}"
            )


DEFAULT_CONFIG = ZeckConfig()
