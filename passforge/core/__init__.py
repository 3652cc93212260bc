"""
passforge Core - Random source, password/passphrase generation and strength.
"""

from passforge.core.random_source import (
    RandomSource,
    SecureRandomSource,
    SeededRandomSource,
    RandomSourceError,
    ContractViolation,
    default_source,
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
    generate_secret,
)

from passforge.core.strength import (
    EntropyReport,
    build_report,
    estimate_entropy,
    classify_strength,
    estimate_crack_time,
    strength_color,
)

from passforge.core.analyzer import PasswordAnalysis, analyze_password

from passforge.core.wordlist import DEFAULT_WORDLIST, load_wordlist

from passforge.core.selftest import RandomSourceTests

from passforge.core.security import secure_zero

__all__ = [
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "RandomSourceError",
    "ContractViolation",
    "default_source",
    "CharacterPool",
    "build_pool",
    "CHARSETS",
    "Mode",
    "PasswordSettings",
    "GeneratedSecret",
    "NO_CHARACTERS",
    "WORDLIST_UNAVAILABLE",
    "generate",
    "generate_password",
    "generate_passphrase",
    "generate_secret",
    "EntropyReport",
    "build_report",
    "estimate_entropy",
    "classify_strength",
    "estimate_crack_time",
    "strength_color",
    "PasswordAnalysis",
    "analyze_password",
    "DEFAULT_WORDLIST",
    "load_wordlist",
    "RandomSourceTests",
    "secure_zero",
]
