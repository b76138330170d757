# config.py
# Project-wide constants for the substring search toolkit.

# === RENDERING ===
DEFAULT_CONTEXT_WIDTH = 5   # characters shown on each side of a hit
ELLIPSIS = "..."

# === RABIN-KARP ===
HASH_RADIX = 257                # larger than the byte alphabet
HASH_MODULUS = 2305843009213693951  # 2**61 - 1, a Mersenne prime

# === DEMO DRIVER ===
# (base, pattern) pairs used when no input is given on the command line
SAMPLE_CASES = [
    ("Sampletestsampletestingsample.", "amp"),
    ("Sampletestsampletestingsample.", "ample"),
    ("Sampletextsamplestringsample.", "ampl"),
    ("aaaaa", "aa"),
]

# === PERFORMANCE CHART ===
CHART_FIGSIZE = (6, 4)
CHART_DPI = 100
