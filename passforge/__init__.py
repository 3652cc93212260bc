"""
passforge - Secure password and passphrase generation with strength estimates.

Secrets are drawn from the operating system CSPRNG. Strength reports are
computed from the generation settings, not from the generated string.
"""

__version__ = "1.0.0"

from passforge.core.random_source import (
    RandomSource,
    SecureRandomSource,
    SeededRandomSource,
    RandomSourceError,
    ContractViolation,
)

from passforge.core.charsets import CharacterPool, build_pool, CHARSETS

from passforge.core.settings import (
    Mode,
    PasswordSettings,
    GeneratedSecret,
    NO_CHARACTERS,
    WORDLIST_UNAVAILABLE,
)

from passforge.core.generator import (
    generate,
    generate_password,
    generate_passphrase,
)

from passforge.core.strength import (
    EntropyReport,
    build_report,
    estimate_entropy,
    classify_strength,
    estimate_crack_time,
)

from passforge.core.analyzer import analyze_password

from passforge.core.wordlist import DEFAULT_WORDLIST, load_wordlist

__all__ = [
    # Version
    "__version__",
    # Random source
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "RandomSourceError",
    "ContractViolation",
    # Pool
    "CharacterPool",
    "build_pool",
    "CHARSETS",
    # Generator
    "Mode",
    "PasswordSettings",
    "GeneratedSecret",
    "NO_CHARACTERS",
    "WORDLIST_UNAVAILABLE",
    "generate",
    "generate_password",
    "generate_passphrase",
    # Strength
    "EntropyReport",
    "build_report",
    "estimate_entropy",
    "classify_strength",
    "estimate_crack_time",
    "analyze_password",
    # Wordlist
    "DEFAULT_WORDLIST",
    "load_wordlist",
]
